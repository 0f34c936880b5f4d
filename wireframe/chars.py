"""ASCII character classification and case conversion.

Every function takes either a one-character string or an integer code point.
The case converters give back a value of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return c


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    n = _code(c)
    return ord("A") <= n <= ord("Z") or ord("a") <= n <= ord("z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    n = _code(c)
    return ord("0") <= n <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space to tilde."""
    return 32 <= _code(c) <= 126


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII capital; anything else comes back unchanged."""
    n = _code(c)
    if ord("A") <= n <= ord("Z"):
        n += 32
    return _same_kind(c, n)


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII small letter; anything else comes back unchanged."""
    n = _code(c)
    if ord("a") <= n <= ord("z"):
        n -= 32
    return _same_kind(c, n)