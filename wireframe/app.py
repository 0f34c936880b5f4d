"""The wireframe viewer: load a height map, draw it and react to window events."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from wireframe.draw import draw_map
from wireframe.events import (
    KEY_PRESS_MASK,
    NO_EVENT_MASK,
    EventLoop,
    EventType,
    Window,
)
from wireframe.image import HEIGHT, WIDTH, Image
from wireframe.parser import MapData, MapError, parse_map

ESCAPE_KEYSYM = 0xFF1B


def render(map_data: MapData) -> Image:
    """A full-size image with the map's grid drawn into it."""
    image = Image(WIDTH, HEIGHT)
    draw_map(map_data, image)
    return image


class Viewer:
    """Shows one map in a window; Escape or closing the window ends it."""

    def __init__(self, map_data: MapData, title: str = "wireframe") -> None:
        self.map_data = map_data
        self.image: Optional[Image] = None
        self.window = Window(WIDTH, HEIGHT, title)
        self.loop = EventLoop()
        self.loop.add_window(self.window)
        self.closed = False
        self.window.set_hook(EventType.KEY_PRESS, KEY_PRESS_MASK, self.on_key)
        self.window.set_hook(EventType.DESTROY_NOTIFY, NO_EVENT_MASK, self.close)

    def show(self) -> Image:
        """Draw the map and keep the image as the window's contents."""
        self.image = render(self.map_data)
        return self.image

    def close(self) -> None:
        """Release the image and window and stop the event loop."""
        if self.closed:
            return
        self.closed = True
        self.image = None
        self.loop.remove_window(self.window)
        self.loop.end()

    def on_key(self, keysym: int) -> bool:
        """Close on Escape; returns True when the key closed the viewer."""
        if keysym == ESCAPE_KEYSYM:
            self.close()
            return True
        return False


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the map named on the command line and show it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: wireframe <filename>", file=sys.stderr)
        return 1
    try:
        map_data = parse_map(args[0])
    except MapError as exc:
        print(exc, file=sys.stderr)
        return 1
    viewer = Viewer(map_data, f"wireframe - {args[0]}")
    viewer.show()
    viewer.loop.run(())
    return 0


if __name__ == "__main__":
    sys.exit(main())