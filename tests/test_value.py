import struct

import pytest

from makertags.exceptions import ValueDecodeError
from makertags.value import TypeId, Value


def test_from_bytes_honours_byte_order():
    little = Value.from_bytes(TypeId.SHORT, b'\x26\x02', endian='<')
    big = Value.from_bytes(TypeId.SHORT, b'\x02\x26', endian='>')

    assert little.count == 1
    assert little.to_int() == 550
    assert big == little


def test_from_bytes_rational_pairs():
    data = struct.pack('<iiii', 355, 10, -1, 3)
    value = Value.from_bytes(TypeId.SRATIONAL, data)

    assert value.count == 2
    assert value.size == 16
    assert value.to_rational(0) == (355, 10)
    assert value.to_rational(1) == (-1, 3)
    assert value.to_float() == 35.5
    assert str(value) == "355/10 -1/3"


def test_from_bytes_rejects_partial_elements():
    with pytest.raises(ValueDecodeError):
        Value.from_bytes(TypeId.LONG, b'\x01\x02\x03')


def test_unknown_type_id():
    with pytest.raises(ValueDecodeError):
        Value(13, [1])
    with pytest.raises(ValueDecodeError):
        Value.from_string("QUAD", "1")


def test_ascii_stops_at_nul():
    value = Value.from_bytes(TypeId.ASCII, b'NX300\x00\x00')

    assert value.count == 7
    assert str(value) == "NX300"


def test_undefined_prints_byte_values():
    value = Value(TypeId.UNDEFINED, b'0100')

    assert value.size == 4
    assert str(value) == "48 49 48 48"


def test_to_int_truncates_rationals():
    value = Value(TypeId.RATIONAL, [(7, 2), (1, 0)])

    assert value.to_int(0) == 3
    assert value.to_int(1) == 0
    assert value.to_float(1) == 0.0


def test_to_rational_of_integers_and_floats():
    assert Value(TypeId.LONG, [42]).to_rational() == (42, 1)
    assert Value(TypeId.DOUBLE, [0.25]).to_rational() == (1, 4)
    assert str(Value(TypeId.FLOAT, [1.5, 2.0])) == "1.5 2"


def test_from_string():
    assert Value.from_string("SHORT", "0x10 7").elements == (16, 7)
    assert Value.from_string("rational", "1/3 2").elements == ((1, 3), (2, 1))
    assert Value.from_string(TypeId.SRATIONAL, "-2/6").to_rational() == (-2, 6)
    assert Value.from_string(TypeId.ASCII, "Seoul").elements == b"Seoul"
    assert Value.from_string(TypeId.UNDEFINED, "48 49 48 48").elements == b"0100"


@pytest.mark.parametrize("type_name, text", [
    ("SHORT", "70000"),
    ("SHORT", "-1"),
    ("BYTE", "abc"),
    ("RATIONAL", "-1/3"),
    ("UNDEFINED", "300"),
])
def test_from_string_rejects_bad_elements(type_name, text):
    with pytest.raises(ValueDecodeError):
        Value.from_string(type_name, text)


def test_split_keeps_type():
    parts = list(Value(TypeId.SHORT, [1, 2, 3]).split())

    assert parts == [Value(TypeId.SHORT, [1]), Value(TypeId.SHORT, [2]), Value(TypeId.SHORT, [3])]
    assert all(part.count == 1 for part in parts)


def test_values_are_hashable():
    assert len({Value(TypeId.SHORT, [1]), Value(TypeId.SHORT, [1]), Value(TypeId.LONG, [1])}) == 2
