from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from PIL import ImageColor

from .enums import ColorModel

@dataclass(frozen=True)
class RGBColor:
    """Portable colour value: a colour model plus channel values in [0, 1].

    Monochrome colours carry a single white channel (optionally followed by
    alpha); RGB colours carry red, green and blue (optionally alpha).
    """
    model: ColorModel
    components: Optional[Tuple[float, ...]]

    @classmethod
    def rgb(cls, red: float, green: float, blue: float, alpha: float = 1.0) -> "RGBColor":
        return cls(ColorModel.RGB, (red, green, blue, alpha))

    @classmethod
    def gray(cls, white: float, alpha: float = 1.0) -> "RGBColor":
        return cls(ColorModel.MONOCHROME, (white, alpha))

    @classmethod
    def from_rgba(cls, rgba: Tuple[int, ...]) -> "RGBColor":
        """Build from 0-255 integer channels, e.g. ``(0, 0, 0, 255)``."""
        if len(rgba) not in (3, 4):
            raise ValueError(f"Expected 3 or 4 channels, got {len(rgba)}")
        channels = tuple(c / 255 for c in rgba)
        if len(channels) == 3:
            channels += (1.0,)
        return cls(ColorModel.RGB, channels)

    @classmethod
    def from_string(cls, text: str) -> "RGBColor":
        """Parse a CSS colour name or hex string (``"#ff8800"``, ``"navy"``)."""
        return cls.from_rgba(ImageColor.getrgb(text))
