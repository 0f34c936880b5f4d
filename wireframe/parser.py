"""Reading height maps: rows of ``z`` or ``z,0xCOLOR`` fields separated by spaces."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from wireframe.chars import is_digit
from wireframe.linereader import read_lines
from wireframe.strings import atoi, split

NO_COLOR = -1

Point = Tuple[int, int]


class MapError(Exception):
    """Raised when a map cannot be read or is malformed."""


@dataclass
class MapData:
    """A parsed map: ``points[y][x]`` is ``(z, color)``, color -1 when absent."""

    width: int = 0
    height: int = 0
    points: List[List[Point]] = field(default_factory=list)
    z_min: int = 0
    z_max: int = 0


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def hex_to_int(text: str) -> int:
    """Value of the leading hexadecimal digits of ``text``.

    An optional ``0x`` or ``0X`` prefix is skipped and reading stops at the
    first character that is not a hex digit. The result wraps to a signed
    32-bit integer.
    """
    if text[:2] in ("0x", "0X"):
        text = text[2:]
    result = 0
    for ch in text:
        if is_digit(ch):
            value = ord(ch) - ord("0")
        elif "a" <= ch <= "f":
            value = ord(ch) - ord("a") + 10
        elif "A" <= ch <= "F":
            value = ord(ch) - ord("A") + 10
        else:
            break
        result = ((result << 4) | value) & 0xFFFFFFFF
    return _to_int32(result)


def count_width(line: str) -> int:
    """Number of space-separated fields in ``line``.

    A trailing newline that follows a space counts as a field of its own.
    """
    if not line:
        raise MapError("invalid map (empty)")
    return sum(
        1
        for ch, following in zip(line, line[1:] + "\0")
        if ch != " " and following in (" ", "\0")
    )


def parse_row(line: str, width: int) -> List[Point]:
    """The ``(z, color)`` points of one row, which must hold exactly ``width`` fields."""
    fields = split(line, " ") if line else []
    if len(fields) != width:
        raise MapError("error: fdf file in incorrect")
    row = []
    for text in fields:
        _, comma, color_text = text.partition(",")
        color = hex_to_int(color_text) if comma else NO_COLOR
        row.append((atoi(text), color))
    return row


def parse_lines(lines: Iterable[str]) -> MapData:
    """Build a map from its lines; the first line fixes the width."""
    rows = list(lines)
    if not rows:
        raise MapError("invalid map (empty)")
    width = count_width(rows[0])
    points = [parse_row(line, width) for line in rows]
    heights = [z for row in points for z, _ in row]
    return MapData(
        width=width,
        height=len(points),
        points=points,
        z_min=min(heights, default=0),
        z_max=max(heights, default=0),
    )


def parse_map(path: Union[str, Path]) -> MapData:
    """Read and parse the map file at ``path``."""
    try:
        lines = list(read_lines(path))
    except OSError as exc:
        raise MapError(f"open error: {exc}") from exc
    return parse_lines(lines)