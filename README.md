# wireframe

`wireframe` reads a height-map file, a grid of integers, and draws it as a
grid of lines into an in-memory 32-bit image.

## Map files

Each line of a map file is one row. Fields are separated by spaces (only
spaces; tabs are not separators). Each field is one point: an integer height,
optionally followed by a comma and a hexadecimal colour:

```
0 0 0 0
0 10 10 0
0 10,0xFF0000 10 0
0 0 0 0
```

A point is stored as the pair `(z, color)`; the colour is `-1` when the field
has none. The first line fixes the number of points per row, and every row
must have exactly that many. An empty file, or a row with the wrong number of
points, raises `MapError`; a file that cannot be opened also raises `MapError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Command line

```
wireframe path/to/map.fdf
```

It takes exactly one argument, the map file. It parses the map and renders
it into a 1920x1080 image. With no argument or more than one it prints a usage
message to standard error and exits with status 1; a map that cannot be read
or is malformed prints the error and also exits with status 1.

## Library use

```python
from wireframe.parser import parse_lines
from wireframe.app import render

map_data = parse_lines(["0 0\n", "0 0\n"])
image = render(map_data)
assert image.pixel(100, 99) == 0xFF0000
```

The modules:

- `wireframe.parser`: `parse_map(path)`, `parse_lines(lines)`,
  `parse_row(line, width)`, `count_width(line)`, `hex_to_int(text)`, the
  `MapData` dataclass (`width`, `height`, `points`, `z_min`, `z_max`) and
  `MapError`.
- `wireframe.draw`: `line_points(p1, p2)` gives the pixels of a line by the
  DDA algorithm, both ends included; `draw_line(image, p1, p2, color)` draws
  it shifted by 100 pixels on both axes, skipping pixels outside the image;
  `draw_map(map_data, image)` joins every point to its right and lower
  neighbours. Each point's two stored values, `(z, color)`, are used as its
  `x` and `y` coordinates. Both drawing functions return the number of pixels
  set. Lines are drawn in `0xFF0000`.
- `wireframe.image`: `Image(width, height)` with `put_pixel`, `pixel`,
  `contains`, `clear` and `paste`; pixels are little-endian 32-bit values in
  the `data` bytearray.
- `wireframe.events`: `Window` with per-event hooks (`set_hook`, `key_hook`,
  `mouse_hook`, `expose_hook`, `event_mask`, `dispatch`), `Event`,
  `EventType`, and `EventLoop` (`add_window`, `remove_window`, `loop_hook`,
  `run`, `end`), which delivers a given sequence of events to its windows.
- `wireframe.app`: `render(map_data)`, `Viewer` (`show`, `close`, `on_key`;
  Escape, keysym `0xFF1B`, or a window-close request ends it) and `main`.

Smaller helpers live in `wireframe.strings`, `wireframe.chars`,
`wireframe.memory`, `wireframe.linkedlist`, `wireframe.linereader`,
`wireframe.fdio` and `wireframe.printf`.

## What it does not do

There is no on-screen display. The command and `Viewer` render the map into
an `Image` in memory and run the event loop over events passed in by the
caller; nothing is shown on a screen and no events come from a keyboard or
mouse. There is no projection of the map into 3D: points are drawn from
their stored values as they are. Named colours and picture files cannot be
loaded.