"""In-memory pixel buffers laid out like a 32-bit ZPixmap image."""

from __future__ import annotations

BYTES_PER_PIXEL = 4
# Rows are allocated with extra slack past the visible width, as the
# windowing layer does, so slightly out-of-range writes stay inside the buffer.
_ROW_SLACK = 32


class Image:
    """A 32 bits-per-pixel, little-endian pixel buffer.

    Each pixel is stored as four bytes, lowest byte first, so a colour
    ``0xAARRGGBB`` is laid out as ``BB GG RR AA``.
    """

    bits_per_pixel = BYTES_PER_PIXEL * 8
    endian = 0

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        self.width = width
        self.height = height
        self.size_line = width * BYTES_PER_PIXEL
        self.data = bytearray((width + _ROW_SLACK) * height * BYTES_PER_PIXEL)

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height})"

    def offset(self, x: int, y: int) -> int:
        """Return the byte offset of pixel (x, y) in ``data``."""
        return y * self.size_line + x * BYTES_PER_PIXEL

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} image"
            )

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` (truncated to 32 bits) at pixel (x, y)."""
        self._check_bounds(x, y)
        start = self.offset(x, y)
        self.data[start:start + BYTES_PER_PIXEL] = (color & 0xFFFFFFFF).to_bytes(
            BYTES_PER_PIXEL, "little"
        )

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned 32-bit colour stored at pixel (x, y)."""
        self._check_bounds(x, y)
        start = self.offset(x, y)
        return int.from_bytes(self.data[start:start + BYTES_PER_PIXEL], "little")