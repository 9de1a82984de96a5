from __future__ import annotations

import logging
import math
from typing import Optional, Tuple

from asset_images.models.color import RGBColor
from asset_images.models.enums import ColorModel

log = logging.getLogger("asset-images.color")

# Lowercase, unlike encoded colours.
FALLBACK_HEX = "ffffff"


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _channels(color: Optional[RGBColor]) -> Optional[Tuple[float, float, float]]:
    components = getattr(color, "components", None)
    model = getattr(color, "model", None)
    if not components:
        return None
    try:
        values = [float(c) for c in components]
    except (TypeError, ValueError):
        return None
    if model is ColorModel.MONOCHROME:
        r = g = b = values[0]
    elif model is ColorModel.RGB:
        if len(values) < 3:
            return None
        r, g, b = values[:3]
    else:
        return None
    if not all(0.0 <= v <= 1.0 for v in (r, g, b)):
        return None
    return r, g, b


def hex_representation(color: Optional[RGBColor]) -> str:
    """Six hex digits (no ``#``) for ``color``; ``"ffffff"`` when unreadable."""
    channels = _channels(color)
    if channels is None:
        log.warning("Unreadable color %r, falling back to %s", color, FALLBACK_HEX)
        return FALLBACK_HEX
    return "".join("%02X" % _round_half_away(v * 255) for v in channels)
