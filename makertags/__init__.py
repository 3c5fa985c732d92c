# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
makertags - MakerNote tag registry and value formatting

Tag tables and human-readable value formatting for vendor MakerNote
directories (currently Samsung Type 2 and its PictureWizard record).
Locating and decoding IFD entries is left to the caller; this package
takes a directory id, a tag id and a decoded Value and returns text.

Copyright 2025 DNAi inc.
"""

__version__ = "0.1.0"
__author__ = "DNAi inc."

from makertags.exceptions import (
    MakerTagsError,
    UnsupportedDirectoryError,
    InvalidTagError,
    ValueDecodeError,
)
from makertags.value import TypeId, Value
from makertags.lookup import LookupTable
from makertags.tags import UNKNOWN_TAG, IfdId, SectionId, TagInfo, TagRegistry
from makertags.registry import (
    registry_for,
    ifd_id_from_group,
    tag_list,
    tag_info,
    tag_info_by_name,
    exif_key,
    format_tag,
    print_tag,
    composite_directory,
    expand_composite,
)

__all__ = [
    "MakerTagsError",
    "UnsupportedDirectoryError",
    "InvalidTagError",
    "ValueDecodeError",
    "TypeId",
    "Value",
    "LookupTable",
    "UNKNOWN_TAG",
    "IfdId",
    "SectionId",
    "TagInfo",
    "TagRegistry",
    "registry_for",
    "ifd_id_from_group",
    "tag_list",
    "tag_info",
    "tag_info_by_name",
    "exif_key",
    "format_tag",
    "print_tag",
    "composite_directory",
    "expand_composite",
]
