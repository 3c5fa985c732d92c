# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Samsung Type 2 MakerNote tag definitions

Tag tables for the Samsung2 maker note IFD (NX series and later compacts)
and for the PictureWizard record stored in tag 0x0021.

Copyright 2025 DNAi inc.
"""

from functools import partial

from makertags.formatters import (
    Context,
    PrintTag,
    print_exif_version,
    print_exposure_bias,
    print_exposure_time,
    print_fnumber,
    print_value,
)
from makertags.lookup import LookupTable
from makertags.tags import UNKNOWN_TAG, IfdId, SectionId, TagInfo, TagRegistry
from makertags.value import TypeId, Value

# ============================================================
# Lookup tables
# ============================================================

# LensType, tag 0xa003
SAMSUNG2_LENS_TYPE = LookupTable('Samsung2LensType', [
    (0, "Built-in"),
    (1, "Samsung NX 30mm F2 Pancake"),
    (2, "Samsung NX 18-55mm F3.5-5.6 OIS"),
    (3, "Samsung NX 50-200mm F4-5.6 ED OIS"),
    (4, "Samsung NX 20-50mm F3.5-5.6 ED"),
    (5, "Samsung NX 20mm F2.8 Pancake"),
    (6, "Samsung NX 18-200mm F3.5-6.3 ED OIS"),
    (7, "Samsung NX 60mm F2.8 Macro ED OIS SSA"),
    (8, "Samsung NX 16mm F2.4 Pancake"),
    (9, "Samsung NX 85mm F1.4 ED SSA"),
    (10, "Samsung NX 45mm F1.8"),
    (11, "Samsung NX 45mm F1.8 2D/3D"),
    (12, "Samsung NX 12-24mm F4-5.6 ED"),
    (13, "Samsung NX 16-50mm F2-2.8 S ED OIS"),
    (14, "Samsung NX 10mm F3.5 Fisheye"),
    (15, "Samsung NX 16-50mm F3.5-5.6 Power Zoom ED OIS"),
    (20, "Samsung NX 50-150mm F2.8 S ED OIS"),
    (21, "Samsung NX 300mm F2.8 ED OIS"),
])

# ColorSpace, tag 0xa011
SAMSUNG2_COLOR_SPACE = LookupTable('Samsung2ColorSpace', [
    (0, "sRGB"),
    (1, "Adobe RGB"),
])

# SmartRange, tag 0xa012
SAMSUNG2_SMART_RANGE = LookupTable('Samsung2SmartRange', [
    (0, "Off"),
    (1, "On"),
])

# PictureWizard Mode, tag 0x0000 of the PictureWizard record
SAMSUNG_PW_MODE = LookupTable('SamsungPwMode', [
    (0, "Standard"),
    (1, "Vivid"),
    (2, "Portrait"),
    (3, "Landscape"),
    (4, "Forest"),
    (5, "Retro"),
    (6, "Cool"),
    (7, "Calm"),
    (8, "Classic"),
    (9, "Custom1"),
    (10, "Custom2"),
    (11, "Custom3"),
])

# ============================================================
# Tag-specific formatters
# ============================================================


def print_camera_temperature(value: Value, context: Context = None) -> str:
    """Camera temperature in degrees Celsius."""
    if value.count != 1 or value.type_id != TypeId.SRATIONAL:
        return str(value)
    return f"{value.to_float():g} C"


def print_focal_length_35(value: Value, context: Context = None) -> str:
    """35mm equivalent focal length, stored in tenths of a millimetre."""
    if value.count != 1 or value.type_id != TypeId.LONG:
        return str(value)
    length = value.to_int()
    if length == 0:
        return "Unknown"
    return f"{length / 10.0:.1f} mm"


def print_pw_color(value: Value, context: Context = None) -> str:
    """PictureWizard color adjustment."""
    if value.count != 1 or value.type_id != TypeId.SHORT:
        return str(value)
    # 65535: no color modification
    if value.to_int() == 65535:
        return "Neutral"
    # Seems to be the hue in degrees
    return str(value.to_int())


def print_value_minus_4(value: Value, context: Context = None) -> str:
    """PictureWizard saturation/sharpness/contrast, stored with an offset of 4."""
    if value.count != 1 or value.type_id != TypeId.SHORT:
        return str(value)
    return str(value.to_int() - 4)


# ============================================================
# Samsung2 MakerNote tags
# ============================================================

_samsung2 = partial(TagInfo, ifd_id=IfdId.SAMSUNG2, section_id=SectionId.MAKER_TAGS)

SAMSUNG2_TAGS = (
    _samsung2(0x0001, "Version", "Version", "Makernote version",
              type_id=TypeId.UNDEFINED, count=-1, print_fct=print_exif_version),
    _samsung2(0x0021, "PictureWizard", "Picture Wizard", "Picture wizard composite tag",
              type_id=TypeId.SHORT, count=-1),
    _samsung2(0x0030, "LocalLocationName", "Local Location Name", "Local location name",
              type_id=TypeId.ASCII, count=-1),
    _samsung2(0x0031, "LocationName", "Location Name", "Location name",
              type_id=TypeId.ASCII, count=-1),
    _samsung2(0x0035, "Preview", "Pointer to a preview image", "Offset to an IFD containing a preview image",
              type_id=TypeId.LONG, count=-1),
    _samsung2(0x0043, "CameraTemperature", "Camera Temperature", "Camera temperature",
              type_id=TypeId.SRATIONAL, count=-1, print_fct=print_camera_temperature),
    _samsung2(0xa001, "FirmwareName", "Firmware Name", "Firmware name",
              type_id=TypeId.ASCII, count=-1),
    _samsung2(0xa003, "LensType", "Lens Type", "Lens type",
              type_id=TypeId.SHORT, count=-1, print_fct=PrintTag(SAMSUNG2_LENS_TYPE)),
    _samsung2(0xa004, "LensFirmware", "Lens Firmware", "Lens firmware",
              type_id=TypeId.ASCII, count=-1),
    _samsung2(0xa010, "SensorAreas", "Sensor Areas", "Sensor areas",
              type_id=TypeId.LONG, count=-1),
    _samsung2(0xa011, "ColorSpace", "Color Space", "Color space",
              type_id=TypeId.SHORT, count=-1, print_fct=PrintTag(SAMSUNG2_COLOR_SPACE)),
    _samsung2(0xa012, "SmartRange", "Smart Range", "Smart range",
              type_id=TypeId.SHORT, count=-1, print_fct=PrintTag(SAMSUNG2_SMART_RANGE)),
    _samsung2(0xa013, "ExposureBiasValue", "Exposure Bias Value", "Exposure bias value",
              type_id=TypeId.SRATIONAL, count=-1, print_fct=print_exposure_bias),
    _samsung2(0xa014, "ISO", "ISO", "ISO",
              type_id=TypeId.LONG, count=-1),
    _samsung2(0xa018, "ExposureTime", "Exposure Time", "Exposure time",
              type_id=TypeId.RATIONAL, count=-1, print_fct=print_exposure_time),
    _samsung2(0xa019, "FNumber", "FNumber", "The F number.",
              type_id=TypeId.RATIONAL, count=-1, print_fct=print_fnumber),
    _samsung2(0xa01a, "FocalLengthIn35mmFormat", "Focal Length In 35mm Format", "Focal length in 35mm format",
              type_id=TypeId.LONG, count=-1, print_fct=print_focal_length_35),
    _samsung2(0xa020, "EncryptionKey", "Encryption Key", "Encryption key",
              type_id=TypeId.LONG, count=-1),
    _samsung2(0xa021, "WB_RGGBLevelsUncorrected", "WB RGGB Levels Uncorrected",
              "WB RGGB levels not corrected for WB_RGGBLevelsBlack",
              type_id=TypeId.LONG, count=-1),
    _samsung2(0xa022, "WB_RGGBLevelsAuto", "WB RGGB Levels Auto", "WB RGGB levels auto",
              type_id=TypeId.LONG, count=-1),
    _samsung2(0xa023, "WB_RGGBLevelsIlluminator1", "WB RGGB Levels Illuminator1", "WB RGGB levels illuminator1",
              type_id=TypeId.LONG, count=-1),
    _samsung2(0xa024, "WB_RGGBLevelsIlluminator2", "WB RGGB Levels Illuminator2", "WB RGGB levels illuminator2",
              type_id=TypeId.LONG, count=-1),
    _samsung2(0xa028, "WB_RGGBLevelsBlack", "WB RGGB Levels Black", "WB RGGB levels black",
              type_id=TypeId.SLONG, count=-1),
    _samsung2(0xa030, "ColorMatrix", "Color Matrix", "Color matrix",
              type_id=TypeId.SLONG, count=-1),
    _samsung2(0xa031, "ColorMatrixSRGB", "Color Matrix sRGB", "Color matrix sRGB",
              type_id=TypeId.SLONG, count=-1),
    _samsung2(0xa032, "ColorMatrixAdobeRGB", "Color Matrix Adobe RGB", "Color matrix Adobe RGB",
              type_id=TypeId.SLONG, count=-1),
    _samsung2(0xa040, "ToneCurve1", "Tone Curve 1", "Tone curve 1",
              type_id=TypeId.LONG, count=-1),
    _samsung2(0xa041, "ToneCurve2", "Tone Curve 2", "Tone curve 2",
              type_id=TypeId.LONG, count=-1),
    _samsung2(0xa042, "ToneCurve3", "Tone Curve 3", "Tone curve 3",
              type_id=TypeId.LONG, count=-1),
    _samsung2(0xa043, "ToneCurve4", "Tone Curve 4", "Tone curve 4",
              type_id=TypeId.LONG, count=-1),
)

SAMSUNG2_UNKNOWN = _samsung2(
    UNKNOWN_TAG, "(UnknownSamsung2MakerNoteTag)", "(UnknownSamsung2MakerNoteTag)",
    "Unknown Samsung2MakerNote tag", type_id=TypeId.UNDEFINED, count=-1, print_fct=print_value,
)

SAMSUNG2_REGISTRY = TagRegistry(IfdId.SAMSUNG2, "Samsung2", SAMSUNG2_TAGS, SAMSUNG2_UNKNOWN)

# ============================================================
# PictureWizard tags (elements of the 0x0021 SHORT array)
# ============================================================

_samsung_pw = partial(TagInfo, ifd_id=IfdId.SAMSUNG_PW, section_id=SectionId.MAKER_TAGS,
                      type_id=TypeId.SHORT, count=1)

SAMSUNG_PW_TAGS = (
    _samsung_pw(0x0000, "Mode", "Mode", "Mode", print_fct=PrintTag(SAMSUNG_PW_MODE)),
    _samsung_pw(0x0001, "Color", "Color", "Color", print_fct=print_pw_color),
    _samsung_pw(0x0002, "Saturation", "Saturation", "Saturation", print_fct=print_value_minus_4),
    _samsung_pw(0x0003, "Sharpness", "Sharpness", "Sharpness", print_fct=print_value_minus_4),
    _samsung_pw(0x0004, "Contrast", "Contrast", "Contrast", print_fct=print_value_minus_4),
)

SAMSUNG_PW_UNKNOWN = _samsung_pw(
    UNKNOWN_TAG, "(UnknownSamsungPictureWizardTag)", "(UnknownSamsungPictureWizardTag)",
    "Unknown SamsungPictureWizard tag", print_fct=print_value,
)

SAMSUNG_PW_REGISTRY = TagRegistry(IfdId.SAMSUNG_PW, "SamsungPictureWizard", SAMSUNG_PW_TAGS, SAMSUNG_PW_UNKNOWN)

# Composite tags of this maker note: (ifd, tag) -> nested directory
SAMSUNG_COMPOSITE_TAGS = {
    (IfdId.SAMSUNG2, 0x0021): IfdId.SAMSUNG_PW,
}
