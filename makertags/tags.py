# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Tag descriptors and per-directory tag registries

Each maker note directory owns an ordered tuple of TagInfo records plus one
fallback record with the reserved id 0xffff. Resolving an id that is not in
the table returns the fallback record, so tags added by newer firmware are
still printed (raw) instead of being dropped.

Copyright 2025 DNAi inc.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Iterable, Optional, Tuple

from makertags.formatters import Formatter, print_value
from makertags.value import TypeId

# Reserved id of the unknown-tag descriptor; never a real tag
UNKNOWN_TAG = 0xffff


class IfdId(IntEnum):
    """
    IFD (directory) identifiers.

    The enumeration is shared with the IFD walker; only some members have
    a tag registry in this package.
    """
    IFD0 = 1
    EXIF_IFD = 2
    GPS_IFD = 3
    IOP_IFD = 4
    SAMSUNG2 = 100
    SAMSUNG_PW = 101


class SectionId(IntEnum):
    """Documentation sections tags are grouped under."""
    NOT_SET = 0
    IMG_STRUCT = 1
    CAPTURE_COND = 2
    OTHER_TAGS = 3
    MAKER_TAGS = 4


@dataclass(frozen=True)
class TagInfo:
    """Static description of one tag in one directory."""
    tag: int
    name: str
    title: str
    description: str
    ifd_id: IfdId
    section_id: SectionId
    type_id: TypeId
    count: int
    print_fct: Formatter = field(default=print_value, compare=False)

    @property
    def is_unknown(self) -> bool:
        return self.tag == UNKNOWN_TAG


class TagRegistry:
    """
    Ordered, immutable tag table for one directory.

    Args:
        ifd_id: Directory the table belongs to
        group: Group name used in keys (e.g. "Samsung2")
        tags: Known tag descriptors, in documentation order
        unknown: Fallback descriptor with tag id UNKNOWN_TAG

    Raises:
        ValueError: If the table is inconsistent (duplicate ids, a real tag
            using the reserved id, or a descriptor from another directory)
    """

    def __init__(self, ifd_id: IfdId, group: str, tags: Iterable[TagInfo], unknown: TagInfo):
        tags = tuple(tags)
        if unknown.tag != UNKNOWN_TAG:
            raise ValueError(f"{group}: unknown-tag descriptor must use id 0x{UNKNOWN_TAG:04x}")
        seen: Dict[int, str] = {}
        for info in tags + (unknown,):
            if info.ifd_id != ifd_id:
                raise ValueError(f"{group}: {info.name} belongs to {info.ifd_id.name}")
        for info in tags:
            if info.tag == UNKNOWN_TAG:
                raise ValueError(f"{group}: {info.name} uses the reserved id 0x{UNKNOWN_TAG:04x}")
            if info.tag in seen:
                raise ValueError(f"{group}: {info.name} duplicates tag 0x{info.tag:04x} ({seen[info.tag]})")
            seen[info.tag] = info.name

        self.ifd_id = ifd_id
        self.group = group
        self._tags = tags
        self._unknown = unknown

    @property
    def unknown(self) -> TagInfo:
        return self._unknown

    def resolve(self, tag: int) -> TagInfo:
        """Return the descriptor for tag, or the unknown-tag descriptor."""
        for info in self._tags:
            if info.tag == tag:
                return info
        return self._unknown

    def find(self, name: str) -> Optional[TagInfo]:
        """Return the descriptor with the given short name, if any."""
        for info in self._tags:
            if info.name == name:
                return info
        return None

    def tag_list(self) -> Tuple[TagInfo, ...]:
        """All descriptors in table order, the unknown-tag descriptor last."""
        return self._tags + (self._unknown,)

    def __contains__(self, tag: object) -> bool:
        return any(info.tag == tag for info in self._tags)

    def __len__(self) -> int:
        return len(self._tags) + 1

    def __repr__(self) -> str:
        return f"TagRegistry({self.group}, {len(self._tags)} tags)"
