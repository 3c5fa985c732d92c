# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Code-to-label lookup tables for enumerated maker note values.

Copyright 2025 DNAi inc.
"""

from typing import Iterable, Iterator, Optional, Tuple


class LookupTable:
    """
    Immutable ordered (code, label) pairs.

    Codes must be unique. Tables are small, so lookups scan in order.
    """

    __slots__ = ('name', '_entries')

    def __init__(self, name: str, entries: Iterable[Tuple[int, str]]):
        entries = tuple((int(code), str(label)) for code, label in entries)
        codes = [code for code, _ in entries]
        if len(codes) != len(set(codes)):
            raise ValueError(f"Duplicate codes in lookup table {name}")
        self.name = name
        self._entries = entries

    def find(self, code: int) -> Optional[str]:
        """Return the label for code, or None if the table has no such code."""
        for entry_code, label in self._entries:
            if entry_code == code:
                return label
        return None

    def __contains__(self, code: object) -> bool:
        return any(entry_code == code for entry_code, _ in self._entries)

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"LookupTable({self.name!r}, {len(self._entries)} entries)"
