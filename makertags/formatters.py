# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Value formatters for converting decoded tag values to human-readable strings.

A formatter is any callable ``(value, context=None) -> str``. ``context`` is
an optional mapping of sibling tag values from the same file; formatters may
consult it but must not depend on it being present.

Every formatter checks the value's type and count before interpreting it.
When they do not match, it returns ``str(value)`` so that a single
off-spec entry from camera firmware never stops the rest of a file from
being printed.

Copyright 2025 DNAi inc.
"""

from math import gcd
from typing import Any, Callable, Mapping, Optional

from makertags.lookup import LookupTable
from makertags.value import TypeId, Value

Context = Optional[Mapping[str, Any]]
Formatter = Callable[..., str]


def print_value(value: Value, context: Context = None) -> str:
    """Default formatter: the value's raw textual representation."""
    return str(value)


class PrintTag:
    """
    Generic formatter that maps an enumerated integer to a label.

    Args:
        table: Lookup table to search
        type_id: Type the value must have to be looked up (default SHORT)
    """

    __slots__ = ('table', 'type_id')

    def __init__(self, table: LookupTable, type_id: TypeId = TypeId.SHORT):
        self.table = table
        self.type_id = type_id

    def __call__(self, value: Value, context: Context = None) -> str:
        if value.count != 1 or value.type_id != self.type_id:
            return str(value)
        code = value.to_int()
        label = self.table.find(code)
        if label is None:
            return str(code)
        return label

    def __repr__(self) -> str:
        return f"PrintTag({self.table.name})"


def print_exif_version(value: Value, context: Context = None) -> str:
    """
    Format a 4-byte version field such as "0100" as "1.00".

    A leading zero is dropped and a dot is placed after the major digit.
    """
    if value.size != 4 or value.type_id != TypeId.UNDEFINED:
        return f"({value})"
    version = value.elements.decode('ascii', errors='replace')
    major = version[1] if version[0] == '0' else version[:2]
    return f"{major}.{version[2:]}"


def print_exposure_time(value: Value, context: Context = None) -> str:
    """Format an exposure time in seconds, as a 1/x fraction where exact."""
    if value.count != 1 or value.type_id != TypeId.RATIONAL:
        return str(value)
    num, den = value.to_rational()
    if num == 0 or den == 0:
        return f"({num}/{den})"
    if num == den:
        return "1 s"
    if den % num == 0:
        return f"1/{den // num} s"
    return f"{num / den:g} s"


def print_fnumber(value: Value, context: Context = None) -> str:
    """Format an F number, e.g. 28/10 as "F2.8"."""
    if value.count != 1 or value.type_id != TypeId.RATIONAL:
        return str(value)
    num, den = value.to_rational()
    if den == 0:
        return f"({value})"
    return f"F{num / den:.2g}"


def print_exposure_bias(value: Value, context: Context = None) -> str:
    """Format an exposure bias as a reduced signed fraction of EV."""
    if value.count != 1 or value.type_id != TypeId.SRATIONAL:
        return str(value)
    num, den = value.to_rational()
    if num == 0:
        return "0 EV"
    if den <= 0:
        return f"({num}/{den})"
    divisor = gcd(num, den)
    sign = '-' if num < 0 else '+'
    text = f"{sign}{abs(num) // divisor}"
    if den // divisor != 1:
        text += f"/{den // divisor}"
    return f"{text} EV"
