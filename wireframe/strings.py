"""String helpers with C-library semantics expressed on Python strings.

Positions are returned as indices (or None where nothing is found), and
functions that fill a fixed-size destination return the resulting text
together with the length the full operation would have needed.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple

_SPACE = " \t\n\v\f\r"


def _check_char(ch: str) -> None:
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, then one optional sign, then as many
    digits as follow. Anything after the digits is ignored; text with no
    digits gives 0.
    """
    i = 0
    while i < len(text) and text[i] in _SPACE:
        i += 1
    negative = False
    if i < len(text) and text[i] in "+-":
        negative = text[i] == "-"
        i += 1
    start = i
    while i < len(text) and "0" <= text[i] <= "9":
        i += 1
    value = int(text[start:i]) if i > start else 0
    return -value if negative else value


def itoa(n: int) -> str:
    """Decimal representation of ``n``."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty fields."""
    _check_char(sep)
    return [field for field in text.split(sep) if field]


def str_chr(text: str, ch: str) -> Optional[int]:
    """Index of the first ``ch`` in ``text``, or None.

    Searching for the NUL character finds the end of the text.
    """
    _check_char(ch)
    index = text.find(ch)
    if index >= 0:
        return index
    return len(text) if ch == "\0" else None


def str_rchr(text: str, ch: str) -> Optional[int]:
    """Index of the last ``ch`` in ``text``, or None.

    Searching for the NUL character finds the end of the text.
    """
    _check_char(ch)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return index if index >= 0 else None


def str_lcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the text that fits (at most ``size - 1`` characters) and the
    length of ``src``. A size of 0 copies nothing.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def str_lcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    need. When ``size`` is no larger than ``dest``, ``dest`` is left as is and
    the length reported is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size <= len(dest):
        return dest, size + len(src)
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def str_ncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns 0 when they agree, otherwise the difference of the code points
    of the first differing characters (the end of a string counts as 0).
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    for i in range(min(n, max(len(first), len(second)) + 1)):
        a = ord(first[i]) if i < len(first) else 0
        b = ord(second[i]) if i < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def str_nstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``n`` characters, or None.

    An empty needle is found at index 0.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return index if index >= 0 else None


def str_trim(text: str, chars: str) -> str:
    """Remove every character in ``chars`` from both ends of ``text``."""
    return text.strip(chars) if chars else text


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` starting at ``start``.

    A start at or past the end gives the empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def str_mapi(text: str, func: Callable[[int, str], str]) -> str:
    """New text made of ``func(index, char)`` for every character."""
    return "".join(func(i, c) for i, c in enumerate(text))


def str_iteri(
    buffer: MutableSequence[str],
    func: Callable[[int, str], Optional[str]],
) -> MutableSequence[str]:
    """Call ``func(index, char)`` on each element of ``buffer`` in place.

    A value returned by ``func`` replaces the element; None leaves it as it is.
    The same buffer is returned.
    """
    for i, c in enumerate(buffer):
        replacement = func(i, c)
        if replacement is not None:
            buffer[i] = replacement
    return buffer