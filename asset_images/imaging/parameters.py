from __future__ import annotations
from typing import Dict

# Query keys understood by the image service. Changing any of these breaks
# every URL already handed out.
WIDTH = "w"
HEIGHT = "h"
RADIUS = "r"
FOCUS = "f"
BACKGROUND_COLOR = "bg"
FIT = "fit"
FORMAT = "fm"
QUALITY = "q"
PROGRESSIVE_JPG = "fl"

IMAGE_PARAMETERS: Dict[str, str] = {
    "width": WIDTH,
    "height": HEIGHT,
    "radius": RADIUS,
    "focus": FOCUS,
    "background_color": BACKGROUND_COLOR,
    "fit": FIT,
    "format": FORMAT,
    "quality": QUALITY,
    "progressive_jpg": PROGRESSIVE_JPG,
}

def query_key_for(concept: str) -> str:
    return IMAGE_PARAMETERS[concept]
