"""Window event hooks and an event loop that dispatches events to them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from functools import reduce
from typing import Callable, Dict, Iterable, List, Optional, Tuple

MAX_EVENT = 36

NO_EVENT_MASK = 0
KEY_PRESS_MASK = 1 << 0
KEY_RELEASE_MASK = 1 << 1
BUTTON_PRESS_MASK = 1 << 2
BUTTON_RELEASE_MASK = 1 << 3
POINTER_MOTION_MASK = 1 << 6
EXPOSURE_MASK = 1 << 15
STRUCTURE_NOTIFY_MASK = 1 << 17


class EventType(IntEnum):
    """Window-system event codes."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    KEYMAP_NOTIFY = 11
    EXPOSE = 12
    GRAPHICS_EXPOSE = 13
    NO_EXPOSE = 14
    VISIBILITY_NOTIFY = 15
    CREATE_NOTIFY = 16
    DESTROY_NOTIFY = 17
    UNMAP_NOTIFY = 18
    MAP_NOTIFY = 19
    MAP_REQUEST = 20
    REPARENT_NOTIFY = 21
    CONFIGURE_NOTIFY = 22
    CONFIGURE_REQUEST = 23
    GRAVITY_NOTIFY = 24
    RESIZE_REQUEST = 25
    CIRCULATE_NOTIFY = 26
    CIRCULATE_REQUEST = 27
    PROPERTY_NOTIFY = 28
    SELECTION_CLEAR = 29
    SELECTION_REQUEST = 30
    SELECTION_NOTIFY = 31
    COLORMAP_NOTIFY = 32
    CLIENT_MESSAGE = 33
    MAPPING_NOTIFY = 34
    GENERIC_EVENT = 35


@dataclass
class Event:
    """One event addressed to ``window``.

    ``delete_request`` marks a client message asking to close the window.
    """

    type: int
    window: Optional["Window"] = None
    keysym: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0
    delete_request: bool = False


Hook = Callable[..., object]


class Window:
    """A window with one hook per event type."""

    def __init__(self, width: int = 0, height: int = 0, title: str = "") -> None:
        self.width = width
        self.height = height
        self.title = title
        self._hooks: Dict[int, Tuple[int, Hook]] = {}

    def __repr__(self) -> str:
        return f"Window({self.width}, {self.height}, {self.title!r})"

    def set_hook(self, event_type: int, mask: int, callback: Optional[Hook]) -> None:
        """Call ``callback`` for events of ``event_type``, selecting them with ``mask``.

        A callback of None removes the hook.
        """
        code = int(event_type)
        if not 0 <= code < MAX_EVENT:
            raise ValueError(f"event type out of range: {code}")
        if callback is None:
            self._hooks.pop(code, None)
        else:
            self._hooks[code] = (mask, callback)

    def key_hook(self, callback: Hook) -> None:
        """Call ``callback(keysym)`` when a key is released."""
        self.set_hook(EventType.KEY_RELEASE, KEY_RELEASE_MASK, callback)

    def mouse_hook(self, callback: Hook) -> None:
        """Call ``callback(button, x, y)`` when a mouse button is pressed."""
        self.set_hook(EventType.BUTTON_PRESS, BUTTON_PRESS_MASK, callback)

    def expose_hook(self, callback: Hook) -> None:
        """Call ``callback()`` when the window needs redrawing."""
        self.set_hook(EventType.EXPOSE, EXPOSURE_MASK, callback)

    def event_mask(self) -> int:
        """The union of the masks of all hooks."""
        return reduce(lambda acc, entry: acc | entry[0], self._hooks.values(), 0)

    def _callback(self, event_type: int) -> Optional[Hook]:
        entry = self._hooks.get(int(event_type))
        return entry[1] if entry else None

    def dispatch(self, event: Event) -> bool:
        """Pass ``event`` to its hook with the arguments its type carries.

        Returns True when a hook was called.
        """
        kind = int(event.type)
        callback = self._callback(kind)
        if callback is None or kind < EventType.KEY_PRESS:
            return False
        if kind in (EventType.KEY_PRESS, EventType.KEY_RELEASE):
            callback(event.keysym)
        elif kind in (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE):
            callback(event.button, event.x, event.y)
        elif kind == EventType.MOTION_NOTIFY:
            callback(event.x, event.y)
        elif kind == EventType.EXPOSE:
            if event.count:
                return False
            callback()
        else:
            callback()
        return True


class EventLoop:
    """Delivers events to the windows it holds until none is left or it is ended."""

    def __init__(self) -> None:
        self.windows: List[Window] = []
        self.ended = False
        self._loop_hook: Optional[Callable[[], object]] = None

    def add_window(self, window: Window) -> Window:
        """Start delivering events to ``window``."""
        self.windows.insert(0, window)
        return window

    def remove_window(self, window: Window) -> None:
        """Stop delivering events to ``window``."""
        self.windows = [w for w in self.windows if w is not window]

    def loop_hook(self, callback: Optional[Callable[[], object]]) -> None:
        """Call ``callback()`` whenever the queue of events has been drained."""
        self._loop_hook = callback

    def end(self) -> bool:
        """Stop the loop before the next event."""
        self.ended = True
        return True

    def _find(self, window: Optional[Window]) -> Optional[Window]:
        return next((w for w in self.windows if w is window), None)

    def _running(self) -> bool:
        return bool(self.windows) and not self.ended

    def run(self, events: Iterable[Event]) -> int:
        """Deliver ``events`` in order; returns how many reached a window.

        Events for windows the loop does not hold are dropped. Once the events
        are exhausted the loop hook, if any, is called.
        """
        handled = 0
        for event in events:
            if not self._running():
                return handled
            window = self._find(event.window)
            if window is None:
                continue
            handled += 1
            if event.type == EventType.CLIENT_MESSAGE and event.delete_request:
                on_destroy = window._callback(EventType.DESTROY_NOTIFY)
                if on_destroy is not None:
                    on_destroy()
                if self._find(window) is None:
                    continue
            window.dispatch(event)
        if self._running() and self._loop_hook is not None:
            self._loop_hook()
        return handled