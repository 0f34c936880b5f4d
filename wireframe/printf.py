"""A small formatter for the conversions c, s, p, d, i, u, x, X and %.

There are no flags, widths or precisions. A ``%`` followed by any other
character writes nothing and takes no argument, and a ``%`` at the very end
of the format writes nothing. Integers are read as 32-bit values: ``d`` and
``i`` as signed, ``u``, ``x`` and ``X`` as unsigned. Pointers (``p``) are
64-bit.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable

_INT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_CONVERSIONS = "cspdiuxX"


def _int32(value: int) -> int:
    value &= _INT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string or None, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    address = 0 if value is None else operator.index(value) & _POINTER_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def _convert(spec: str, take: Callable[[str], Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in _CONVERSIONS:
        return ""
    value = take(spec)
    if spec == "c":
        return _char(value)
    if spec == "s":
        return _string(value)
    if spec == "p":
        return _pointer(value)
    number = operator.index(value)
    if spec in "di":
        return str(_int32(number))
    if spec == "u":
        return str(number & _INT_MASK)
    if spec == "x":
        return format(number & _INT_MASK, "x")
    return format(number & _INT_MASK, "X")


def sprintf(fmt: str, *args: Any) -> str:
    """The text ``fmt`` produces with ``args``.

    Raises TypeError when the format asks for more arguments than given.
    """
    remaining = iter(args)

    def take(spec: str) -> Any:
        try:
            return next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None

    pieces = []
    i = 0
    while i < len(fmt):
        ch = fmt[i]
        if ch != "%":
            pieces.append(ch)
            i += 1
            continue
        spec = fmt[i + 1:i + 2]
        i += 2
        if spec:
            pieces.append(_convert(spec, take))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)