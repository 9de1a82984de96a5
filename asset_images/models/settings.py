from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class ImageApiSettings:
    max_dimension: int = 4000
    max_jpg_quality: int = 100
    scheme: str = "https"

DEFAULT_SETTINGS = ImageApiSettings()

def resolve(settings: Optional[ImageApiSettings]) -> ImageApiSettings:
    return DEFAULT_SETTINGS if settings is None else settings
