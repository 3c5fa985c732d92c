# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Decoded tag values

A Value is the in-memory form of one IFD entry after the upstream parser
has located its bytes: a TIFF type id plus the decoded elements. Tag
formatters only read it, through count/type_id and the to_* accessors.

Copyright 2025 DNAi inc.
"""

import struct
from enum import IntEnum
from fractions import Fraction
from typing import Any, Iterable, Tuple, Union

from makertags.exceptions import ValueDecodeError


class TypeId(IntEnum):
    """TIFF/EXIF tag data types"""
    BYTE = 1
    ASCII = 2
    SHORT = 3
    LONG = 4
    RATIONAL = 5
    SBYTE = 6
    UNDEFINED = 7
    SSHORT = 8
    SLONG = 9
    SRATIONAL = 10
    FLOAT = 11
    DOUBLE = 12


# Element sizes in bytes
TYPE_SIZES = {
    TypeId.BYTE: 1,
    TypeId.ASCII: 1,
    TypeId.SHORT: 2,
    TypeId.LONG: 4,
    TypeId.RATIONAL: 8,
    TypeId.SBYTE: 1,
    TypeId.UNDEFINED: 1,
    TypeId.SSHORT: 2,
    TypeId.SLONG: 4,
    TypeId.SRATIONAL: 8,
    TypeId.FLOAT: 4,
    TypeId.DOUBLE: 8,
}

# struct codes for one element (rationals use two)
_STRUCT_CODES = {
    TypeId.BYTE: 'B',
    TypeId.SHORT: 'H',
    TypeId.LONG: 'I',
    TypeId.RATIONAL: 'II',
    TypeId.SBYTE: 'b',
    TypeId.SSHORT: 'h',
    TypeId.SLONG: 'i',
    TypeId.SRATIONAL: 'ii',
    TypeId.FLOAT: 'f',
    TypeId.DOUBLE: 'd',
}

INTEGER_TYPES = frozenset({
    TypeId.BYTE, TypeId.SHORT, TypeId.LONG,
    TypeId.SBYTE, TypeId.SSHORT, TypeId.SLONG,
})
RATIONAL_TYPES = frozenset({TypeId.RATIONAL, TypeId.SRATIONAL})
FLOAT_TYPES = frozenset({TypeId.FLOAT, TypeId.DOUBLE})
BYTES_TYPES = frozenset({TypeId.ASCII, TypeId.UNDEFINED})

Rational = Tuple[int, int]


def _type_id(type_id: Union[int, str, TypeId]) -> TypeId:
    """Coerce a type code or type name (e.g. 3, "SHORT") to a TypeId."""
    try:
        if isinstance(type_id, str):
            return TypeId[type_id.strip().upper()]
        return TypeId(type_id)
    except (KeyError, ValueError):
        raise ValueDecodeError(f"Unknown TIFF type: {type_id!r}")


class Value:
    """
    A typed, counted tag value.

    Elements are stored as:
    - integer types: tuple of int
    - rational types: tuple of (numerator, denominator) pairs
    - float types: tuple of float
    - ASCII / UNDEFINED: bytes

    Instances are immutable and compare equal when type and elements match.
    """

    __slots__ = ('_type_id', '_elements')

    def __init__(self, type_id: Union[int, str, TypeId], elements: Any = ()):
        type_id = _type_id(type_id)
        if type_id in BYTES_TYPES:
            if isinstance(elements, str):
                elements = elements.encode('ascii', errors='replace')
            elements = bytes(elements)
        elif type_id in RATIONAL_TYPES:
            elements = tuple((int(num), int(den)) for num, den in elements)
        elif type_id in FLOAT_TYPES:
            elements = tuple(float(v) for v in elements)
        else:
            elements = tuple(int(v) for v in elements)
        self._type_id = type_id
        self._elements = elements

    @classmethod
    def from_bytes(cls, type_id: Union[int, str, TypeId], data: bytes, endian: str = '<') -> 'Value':
        """
        Decode raw entry bytes.

        Args:
            type_id: TIFF type of the entry
            data: Exactly the entry's value bytes
            endian: Byte order ('<' for little-endian, '>' for big-endian)

        Returns:
            Decoded Value

        Raises:
            ValueDecodeError: If the length does not fit the element size
        """
        type_id = _type_id(type_id)
        if type_id in BYTES_TYPES:
            return cls(type_id, data)

        size = TYPE_SIZES[type_id]
        if len(data) % size != 0:
            raise ValueDecodeError(
                f"{len(data)} bytes is not a whole number of {type_id.name} elements"
            )
        count = len(data) // size
        code = _STRUCT_CODES[type_id]
        try:
            raw = struct.unpack(f'{endian}{count * code}', data)
        except struct.error as e:
            raise ValueDecodeError(f"Failed to decode {type_id.name} value: {str(e)}")

        if type_id in RATIONAL_TYPES:
            return cls(type_id, zip(raw[0::2], raw[1::2]))
        return cls(type_id, raw)

    @classmethod
    def from_string(cls, type_id: Union[int, str, TypeId], text: str) -> 'Value':
        """
        Parse a value from its textual form.

        Integers and floats are whitespace separated, rationals are written
        as num/den (a bare integer n reads as n/1), ASCII takes the text
        verbatim and UNDEFINED takes space-separated byte values.

        Raises:
            ValueDecodeError: If an element is malformed or out of range
        """
        type_id = _type_id(type_id)
        if type_id == TypeId.ASCII:
            try:
                return cls(type_id, text.encode('ascii'))
            except UnicodeEncodeError:
                raise ValueDecodeError(f"Not an ASCII string: {text!r}")

        parts = text.split()
        try:
            if type_id == TypeId.UNDEFINED:
                return cls(type_id, bytes(_parse_int(p) for p in parts))
            if type_id in FLOAT_TYPES:
                return cls(type_id, [float(p) for p in parts])
            if type_id in RATIONAL_TYPES:
                elements = [_parse_rational(p) for p in parts]
            else:
                elements = [_parse_int(p) for p in parts]
        except ValueError as e:
            raise ValueDecodeError(f"Cannot read {text!r} as {type_id.name}: {str(e)}")

        # Range check by packing with the element's struct code
        code = _STRUCT_CODES[type_id]
        for element in elements:
            try:
                struct.pack(f'<{code}', *(element if type_id in RATIONAL_TYPES else (element,)))
            except struct.error:
                raise ValueDecodeError(f"{element!r} is out of range for {type_id.name}")
        return cls(type_id, elements)

    @property
    def type_id(self) -> TypeId:
        return self._type_id

    @property
    def count(self) -> int:
        """Number of elements (bytes, for ASCII and UNDEFINED)."""
        return len(self._elements)

    @property
    def size(self) -> int:
        """Size of the value in bytes."""
        return self.count * TYPE_SIZES[self._type_id]

    @property
    def elements(self) -> Union[bytes, Tuple[Any, ...]]:
        return self._elements

    def to_int(self, n: int = 0) -> int:
        """Return element n as an integer (rationals are truncated, x/0 is 0)."""
        element = self._elements[n]
        if self._type_id in RATIONAL_TYPES:
            num, den = element
            return int(num / den) if den else 0
        return int(element)

    def to_float(self, n: int = 0) -> float:
        """Return element n as a float (x/0 is 0.0)."""
        element = self._elements[n]
        if self._type_id in RATIONAL_TYPES:
            num, den = element
            return num / den if den else 0.0
        return float(element)

    def to_rational(self, n: int = 0) -> Rational:
        """Return element n as a (numerator, denominator) pair."""
        element = self._elements[n]
        if self._type_id in RATIONAL_TYPES:
            return element
        if self._type_id in FLOAT_TYPES:
            fraction = Fraction(element).limit_denominator(1000000)
            return fraction.numerator, fraction.denominator
        return int(element), 1

    def split(self) -> Iterable['Value']:
        """Yield one count-1 Value per element, keeping the type."""
        for i in range(self.count):
            yield Value(self._type_id, self._elements[i:i + 1])

    def __str__(self) -> str:
        if self._type_id == TypeId.ASCII:
            end = self._elements.find(b'\x00')
            if end != -1:
                return self._elements[:end].decode('ascii', errors='replace')
            return self._elements.decode('ascii', errors='replace')
        if self._type_id in RATIONAL_TYPES:
            return ' '.join(f"{num}/{den}" for num, den in self._elements)
        if self._type_id in FLOAT_TYPES:
            return ' '.join(f"{v:g}" for v in self._elements)
        return ' '.join(str(v) for v in self._elements)

    def __repr__(self) -> str:
        return f"Value({self._type_id.name}, {str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._type_id == other._type_id and self._elements == other._elements

    def __hash__(self) -> int:
        return hash((self._type_id, self._elements))


def _parse_rational(text: str) -> Rational:
    if '/' in text:
        num, den = text.split('/', 1)
        return _parse_int(num), _parse_int(den)
    return _parse_int(text), 1


def _parse_int(text: str) -> int:
    if text.lower().lstrip("+-").startswith("0x"):
        return int(text, 16)
    return int(text)
