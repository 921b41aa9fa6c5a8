"""Conversion of 0xRRGGBB colours to pixel values for a visual's masks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChannelShifts:
    """Bit position and width of each colour channel inside a pixel."""

    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int


def _split_mask(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"channel mask must be a positive integer, got {mask!r}")
    shift = (mask & -mask).bit_length() - 1
    value = mask >> shift
    bits = (~value & (value + 1)).bit_length() - 1
    return shift, bits


def channel_shifts(red_mask: int, green_mask: int, blue_mask: int) -> ChannelShifts:
    """Derive channel shifts and widths from a visual's colour masks."""
    red_shift, red_bits = _split_mask(red_mask)
    green_shift, green_bits = _split_mask(green_mask)
    blue_shift, blue_bits = _split_mask(blue_mask)
    return ChannelShifts(red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits)


def good_color(color: int, depth: int, shifts: ChannelShifts) -> int:
    """Return the pixel value for ``color`` (0xRRGGBB) on a display of ``depth``.

    Depths of 24 bits or more take the colour as is.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts.red_bits)) << shifts.red_shift)
        + ((green >> (16 - shifts.green_bits)) << shifts.green_shift)
        + ((blue >> (16 - shifts.blue_bits)) << shifts.blue_shift)
    )