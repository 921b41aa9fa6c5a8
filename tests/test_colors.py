import pytest

from solong.colors import ChannelShifts, channel_shifts, good_color

TRUECOLOR_MASKS = (0xFF0000, 0x00FF00, 0x0000FF)
RGB565_MASKS = (0xF800, 0x07E0, 0x001F)


def test_truecolor_shifts():
    assert channel_shifts(*TRUECOLOR_MASKS) == ChannelShifts(16, 8, 8, 8, 0, 8)


def test_rgb565_shifts():
    assert channel_shifts(*RGB565_MASKS) == ChannelShifts(11, 5, 5, 6, 0, 5)


def test_zero_mask_rejected():
    with pytest.raises(ValueError):
        channel_shifts(0, 0x00FF00, 0x0000FF)


@pytest.mark.parametrize("color", [0x000000, 0xFF99FF, 0x00FFFF, 0x123456])
def test_deep_display_passes_color_through(color):
    shifts = channel_shifts(*RGB565_MASKS)
    assert good_color(color, 24, shifts) == color


@pytest.mark.parametrize("color", [0x000000, 0xFF99FF, 0x00FFFF, 0x123456])
def test_truecolor_masks_at_low_depth_preserve_color(color):
    shifts = channel_shifts(*TRUECOLOR_MASKS)
    assert good_color(color, 16, shifts) == color


def test_rgb565_white_fills_all_bits():
    shifts = channel_shifts(*RGB565_MASKS)
    assert good_color(0xFFFFFF, 16, shifts) == 0xFFFF


def test_rgb565_black_is_zero():
    shifts = channel_shifts(*RGB565_MASKS)
    assert good_color(0x000000, 16, shifts) == 0


def test_rgb565_result_fits_masks():
    shifts = channel_shifts(*RGB565_MASKS)
    pixel = good_color(0x123456, 16, shifts)
    all_masks = RGB565_MASKS[0] | RGB565_MASKS[1] | RGB565_MASKS[2]
    assert pixel & ~all_masks == 0