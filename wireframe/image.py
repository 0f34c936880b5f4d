"""An off-screen 32-bit image that pixels are drawn into before display."""

from __future__ import annotations

WIDTH = 1920
HEIGHT = 1080

BITS_PER_PIXEL = 32
_BYTES_PER_PIXEL = BITS_PER_PIXEL // 8


class Image:
    """A ``width`` by ``height`` image of little-endian 32-bit pixels.

    ``data`` holds the rows one after another, each ``line_length`` bytes.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.bits_per_pixel = BITS_PER_PIXEL
        self.line_length = width * _BYTES_PER_PIXEL
        self.endian = 0
        self.data = bytearray(self.line_length * height)

    def __repr__(self) -> str:
        return f"Image({self.width}, {self.height})"

    def contains(self, x: int, y: int) -> bool:
        """True when ``(x, y)`` lies inside the image."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _offset(self, x: int, y: int) -> int:
        if not self.contains(x, y):
            raise IndexError(
                f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image"
            )
        return y * self.line_length + x * _BYTES_PER_PIXEL

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` (its low 32 bits) at ``(x, y)``."""
        offset = self._offset(x, y)
        self.data[offset:offset + _BYTES_PER_PIXEL] = (color & 0xFFFFFFFF).to_bytes(
            _BYTES_PER_PIXEL, "little"
        )

    def pixel(self, x: int, y: int) -> int:
        """The 32-bit value stored at ``(x, y)``."""
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + _BYTES_PER_PIXEL], "little")

    def clear(self) -> None:
        """Set every pixel to zero."""
        self.data[:] = bytes(len(self.data))

    def paste(self, other: "Image", x: int, y: int) -> "Image":
        """Copy ``other`` so that its top-left corner lands at ``(x, y)``.

        The parts that fall outside this image are dropped.
        """
        left, top = max(x, 0), max(y, 0)
        right = min(x + other.width, self.width)
        bottom = min(y + other.height, self.height)
        if left >= right or top >= bottom:
            return self
        span = (right - left) * _BYTES_PER_PIXEL
        src_col = (left - x) * _BYTES_PER_PIXEL
        source = bytes(other.data)
        for row in range(top, bottom):
            src = (row - y) * other.line_length + src_col
            dst = row * self.line_length + left * _BYTES_PER_PIXEL
            self.data[dst:dst + span] = source[src:src + span]
        return self