import io
import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from makertags import (
    IfdId,
    InvalidTagError,
    TypeId,
    UnsupportedDirectoryError,
    Value,
    composite_directory,
    exif_key,
    expand_composite,
    format_tag,
    ifd_id_from_group,
    print_tag,
    registry_for,
    tag_info,
    tag_info_by_name,
    tag_list,
)
from makertags.registry import REGISTRIES

ALL_TAGS = [
    (ifd_id, info)
    for ifd_id in REGISTRIES
    for info in tag_list(ifd_id)
    if not info.is_unknown
]


@pytest.mark.parametrize("ifd_id, info", ALL_TAGS, ids=lambda p: getattr(p, 'name', None))
def test_resolve_returns_the_listed_descriptor(ifd_id, info):
    resolved = tag_info(info.tag, ifd_id)

    assert resolved is info
    assert resolved.print_fct is info.print_fct


@pytest.mark.parametrize("ifd_id, tag", [
    (IfdId.SAMSUNG2, 0x0002),
    (IfdId.SAMSUNG2, 0xa0ff),
    (IfdId.SAMSUNG_PW, 0x0005),
    (IfdId.SAMSUNG_PW, 0x0021),
])
def test_absent_tag_resolves_to_unknown(ifd_id, tag):
    info = tag_info(tag, ifd_id)

    assert info.is_unknown
    assert info is tag_list(ifd_id)[-1]


def test_unknown_tag_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="makertags.registry")

    tag_info(0x1234, IfdId.SAMSUNG2)

    assert "0x1234" in caplog.text


@pytest.mark.parametrize("ifd_id", [IfdId.IFD0, IfdId.GPS_IFD, 999])
def test_unsupported_directory(ifd_id):
    with pytest.raises(UnsupportedDirectoryError):
        registry_for(ifd_id)
    with pytest.raises(UnsupportedDirectoryError):
        format_tag(0x0001, ifd_id, Value(TypeId.SHORT, [1]))


def test_registry_for_accepts_plain_ints():
    assert registry_for(int(IfdId.SAMSUNG2)) is registry_for(IfdId.SAMSUNG2)


@pytest.mark.parametrize("ifd_id", list(REGISTRIES))
def test_tag_list_is_stable(ifd_id):
    first = tag_list(ifd_id)
    second = tag_list(ifd_id)

    assert first == second
    assert len(first) == len(second)
    for info in first:
        assert tag_info(info.tag, ifd_id) is info


def test_format_tag():
    assert format_tag(0xa01a, IfdId.SAMSUNG2, Value(TypeId.LONG, [550])) == "55.0 mm"
    assert format_tag(0xa011, IfdId.SAMSUNG2, Value(TypeId.SHORT, [1])) == "Adobe RGB"
    assert format_tag(0x0001, IfdId.SAMSUNG2, Value(TypeId.UNDEFINED, b"0100")) == "1.00"
    assert format_tag(0xa031, IfdId.SAMSUNG2, Value(TypeId.SLONG, [1, -2])) == "1 -2"


def test_format_tag_wrong_count_matches_unformatted_value():
    value = Value(TypeId.SHORT, [1, 2])

    assert format_tag(0xa003, IfdId.SAMSUNG2, value) == str(value)


def test_format_unknown_tag_prints_raw():
    value = Value(TypeId.UNDEFINED, b"\x01\x02")

    assert format_tag(0x9999, IfdId.SAMSUNG2, value) == "1 2"


def test_format_tag_is_idempotent():
    value = Value(TypeId.SRATIONAL, [(355, 10)])
    outputs = {format_tag(0x0043, IfdId.SAMSUNG2, value) for _ in range(5)}

    assert outputs == {"35.5 C"}


def test_format_tag_from_many_threads():
    value = Value(TypeId.SHORT, [7])
    with ThreadPoolExecutor(max_workers=4) as pool:
        outputs = set(pool.map(lambda _: format_tag(0xa003, IfdId.SAMSUNG2, value), range(100)))

    assert outputs == {"Samsung NX 60mm F2.8 Macro ED OIS SSA"}


def test_print_tag_writes_to_sink():
    out = io.StringIO()

    result = print_tag(out, 0x0001, IfdId.SAMSUNG_PW, Value(TypeId.SHORT, [65535]))
    print_tag(out, 0x0002, IfdId.SAMSUNG_PW, Value(TypeId.SHORT, [6]))

    assert result is out
    assert out.getvalue() == "Neutral2"


def test_expand_picture_wizard():
    value = Value(TypeId.SHORT, [1, 65535, 6, 4, 5])

    fields = expand_composite(IfdId.SAMSUNG2, 0x0021, value)

    assert [info.name for info, _ in fields] == ["Mode", "Color", "Saturation", "Sharpness", "Contrast"]
    assert all(info.ifd_id == IfdId.SAMSUNG_PW for info, _ in fields)
    assert [info.print_fct(element) for info, element in fields] == ["Vivid", "Neutral", "2", "0", "1"]


def test_expand_picture_wizard_extra_elements():
    fields = expand_composite(IfdId.SAMSUNG2, 0x0021, Value(TypeId.SHORT, [0, 0, 4, 4, 4, 9]))

    assert len(fields) == 6
    assert fields[5][0].is_unknown
    assert fields[5][0].print_fct(fields[5][1]) == "9"


def test_expand_non_composite():
    assert composite_directory(IfdId.SAMSUNG2, 0xa003) is None
    assert expand_composite(IfdId.SAMSUNG2, 0xa003, Value(TypeId.SHORT, [1])) == []


def test_composite_directory():
    assert composite_directory(IfdId.SAMSUNG2, 0x0021) == IfdId.SAMSUNG_PW


def test_group_names_and_keys():
    assert ifd_id_from_group("samsung2") == IfdId.SAMSUNG2
    assert ifd_id_from_group("SamsungPictureWizard") == IfdId.SAMSUNG_PW
    assert exif_key(tag_info(0xa003, IfdId.SAMSUNG2)) == "Exif.Samsung2.LensType"
    assert exif_key(tag_info(0x0004, IfdId.SAMSUNG_PW)) == "Exif.SamsungPictureWizard.Contrast"

    with pytest.raises(UnsupportedDirectoryError):
        ifd_id_from_group("Nikon3")


def test_tag_info_by_name():
    assert tag_info_by_name("FNumber", IfdId.SAMSUNG2).tag == 0xa019

    with pytest.raises(InvalidTagError):
        tag_info_by_name("NoSuchTag", IfdId.SAMSUNG2)
