"""In-memory pixel images with a configurable pixel size and byte order."""

from __future__ import annotations

from dataclasses import dataclass, field

_BITMAP_PAD = 32


@dataclass
class Image:
    """A width x height pixel buffer; rows are padded to 32 bits."""

    width: int
    height: int
    bits_per_pixel: int = 32
    byte_order: int = 0
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        if self.bits_per_pixel not in (8, 16, 24, 32):
            raise ValueError(f"unsupported bits per pixel: {self.bits_per_pixel}")
        if self.byte_order not in (0, 1):
            raise ValueError(f"byte order must be 0 or 1, got {self.byte_order}")
        self.data = bytearray(self.size_line * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def size_line(self) -> int:
        """Number of bytes in one row, padded to the bitmap pad."""
        bits = self.width * self.bits_per_pixel
        return (bits + _BITMAP_PAD - 1) // _BITMAP_PAD * (_BITMAP_PAD // 8)

    @property
    def endian(self) -> int:
        return self.byte_order

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def _order(self) -> str:
        return "big" if self.byte_order else "little"

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at (x, y), truncated to the pixel size."""
        offset = self._offset(x, y)
        opp = self.bytes_per_pixel
        value = color & ((1 << (8 * opp)) - 1)
        self.data[offset:offset + opp] = value.to_bytes(opp, self._order())

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at (x, y)."""
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + self.bytes_per_pixel], self._order())

    def row(self, y: int) -> bytes:
        """Return the raw bytes of row ``y``."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} outside image of height {self.height}")
        start = y * self.size_line
        return bytes(self.data[start:start + self.size_line])


def color_map(width: int, height: int, x: int, y: int, variant: int = 1) -> int:
    """Return the gradient colour at (x, y) of a width x height test pattern.

    Variant 2 uses the row instead of the column for the blue channel.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid pattern size {width}x{height}")
    blue_source = y if variant == 2 else x
    return (
        (blue_source * 255) // width
        + ((((width - x) * 255) // width) << 16)
        + (((y * 255) // height) << 8)
    )