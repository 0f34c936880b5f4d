"""Height-map parsing, line drawing into in-memory images, and event dispatch."""

__version__ = "0.1.0"