# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Directory dispatch

Maps IFD ids to their tag registries and prints tag values through the
matching descriptor. This is the entry point used by the IFD walker once
it has decoded an entry:

    >>> from makertags import IfdId, Value, format_tag
    >>> format_tag(0xa01a, IfdId.SAMSUNG2, Value('LONG', [550]))
    '55.0 mm'

Copyright 2025 DNAi inc.
"""

import logging
from typing import Dict, List, Optional, TextIO, Tuple, Union

from makertags.exceptions import InvalidTagError, UnsupportedDirectoryError
from makertags.formatters import Context
from makertags.samsung import SAMSUNG2_REGISTRY, SAMSUNG_COMPOSITE_TAGS, SAMSUNG_PW_REGISTRY
from makertags.tags import IfdId, TagInfo, TagRegistry
from makertags.value import Value

logger = logging.getLogger(__name__)

REGISTRIES: Dict[IfdId, TagRegistry] = {
    IfdId.SAMSUNG2: SAMSUNG2_REGISTRY,
    IfdId.SAMSUNG_PW: SAMSUNG_PW_REGISTRY,
}

# (ifd, tag) of a composite tag -> directory of its nested record
COMPOSITE_TAGS: Dict[Tuple[IfdId, int], IfdId] = {}
COMPOSITE_TAGS.update(SAMSUNG_COMPOSITE_TAGS)


def registry_for(ifd_id: Union[IfdId, int]) -> TagRegistry:
    """
    Return the tag registry of a directory.

    Raises:
        UnsupportedDirectoryError: If no registry exists for ifd_id
    """
    try:
        return REGISTRIES[IfdId(ifd_id)]
    except (KeyError, ValueError):
        raise UnsupportedDirectoryError(f"No tag registry for directory {ifd_id!r}")


def ifd_id_from_group(group: str) -> IfdId:
    """
    Resolve a group name (e.g. "Samsung2") to its IFD id, ignoring case.

    Raises:
        UnsupportedDirectoryError: If no registry uses that group name
    """
    for ifd_id, registry in REGISTRIES.items():
        if registry.group.lower() == group.lower():
            return ifd_id
    raise UnsupportedDirectoryError(f"Unknown group: {group}")


def tag_list(ifd_id: Union[IfdId, int]) -> Tuple[TagInfo, ...]:
    """All descriptors of a directory, the unknown-tag descriptor last."""
    return registry_for(ifd_id).tag_list()


def tag_info(tag: int, ifd_id: Union[IfdId, int]) -> TagInfo:
    """Descriptor for tag, or the directory's unknown-tag descriptor."""
    info = registry_for(ifd_id).resolve(tag)
    if info.is_unknown:
        logger.debug("tag 0x%04x not in %s, using unknown-tag descriptor", tag, info.ifd_id.name)
    return info


def tag_info_by_name(name: str, ifd_id: Union[IfdId, int]) -> TagInfo:
    """
    Descriptor for a tag short name.

    Raises:
        InvalidTagError: If the directory has no tag with that name
    """
    registry = registry_for(ifd_id)
    info = registry.find(name)
    if info is None:
        raise InvalidTagError(f"{registry.group} has no tag named {name}")
    return info


def exif_key(info: TagInfo) -> str:
    """Dotted key of a descriptor, e.g. "Exif.Samsung2.LensType"."""
    return f"Exif.{registry_for(info.ifd_id).group}.{info.name}"


def format_tag(tag: int, ifd_id: Union[IfdId, int], value: Value, context: Context = None) -> str:
    """Return the human-readable text of a decoded tag value."""
    info = tag_info(tag, ifd_id)
    return info.print_fct(value, context)


def print_tag(out: TextIO, tag: int, ifd_id: Union[IfdId, int], value: Value, context: Context = None) -> TextIO:
    """Write the human-readable text of a decoded tag value to out."""
    out.write(format_tag(tag, ifd_id, value, context))
    return out


def composite_directory(ifd_id: Union[IfdId, int], tag: int) -> Optional[IfdId]:
    """Nested directory of a composite tag, or None for an ordinary tag."""
    return COMPOSITE_TAGS.get((registry_for(ifd_id).ifd_id, tag))


def expand_composite(ifd_id: Union[IfdId, int], tag: int, value: Value) -> List[Tuple[TagInfo, Value]]:
    """
    Split a composite tag's value into the fields of its nested record.

    Element i of the array is tag i of the nested directory. Returns an
    empty list when the tag is not a composite.
    """
    nested = composite_directory(ifd_id, tag)
    if nested is None:
        return []
    registry = registry_for(nested)
    fields = [(registry.resolve(index), element) for index, element in enumerate(value.split())]
    logger.debug("expanded tag 0x%04x into %d %s fields", tag, len(fields), registry.group)
    return fields
