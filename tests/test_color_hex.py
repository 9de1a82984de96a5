import logging

import pytest

from asset_images.imaging.color_hex import FALLBACK_HEX, hex_representation
from asset_images.models.color import RGBColor
from asset_images.models.enums import ColorModel

def test_white_rgb():
    assert hex_representation(RGBColor.rgb(1, 1, 1)) == "FFFFFF"

def test_monochrome_repeats_single_channel():
    # 0.5 * 255 = 127.5 rounds away from zero
    assert hex_representation(RGBColor.gray(0.5)) == "808080"

def test_channels_in_rgb_order_and_rounded():
    assert hex_representation(RGBColor.rgb(0.5, 0.0, 0.002)) == "800001"

def test_from_string_uses_pillow_color_names():
    assert hex_representation(RGBColor.from_string("navy")) == "000080"
    assert hex_representation(RGBColor.from_string("#ff8800")) == "FF8800"

def test_from_rgba_ignores_alpha():
    assert hex_representation(RGBColor.from_rgba((0, 0, 0, 255))) == "000000"

def test_from_rgba_rejects_wrong_channel_count():
    with pytest.raises(ValueError):
        RGBColor.from_rgba((1, 2))

@pytest.mark.parametrize("color", [
    None,
    RGBColor(ColorModel.CMYK, (0.1, 0.2, 0.3, 0.4)),
    RGBColor(ColorModel.UNKNOWN, (1.0, 1.0, 1.0)),
    RGBColor(ColorModel.RGB, None),
    RGBColor(ColorModel.RGB, (0.2, 0.4)),
    RGBColor(ColorModel.RGB, ("red", "green", "blue")),
    RGBColor(ColorModel.RGB, (1.5, 0.0, 0.0)),
    RGBColor(ColorModel.MONOCHROME, (float("nan"),)),
])
def test_unreadable_colors_fall_back(color):
    assert hex_representation(color) == FALLBACK_HEX == "ffffff"

def test_fallback_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="asset-images.color"):
        hex_representation(RGBColor(ColorModel.LAB, (0.5, 0.5, 0.5)))
    assert "falling back to ffffff" in caplog.text
