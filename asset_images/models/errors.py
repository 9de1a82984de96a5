from __future__ import annotations

from typing import Optional


class ImageUrlError(ValueError):
    """Base class for everything the URL builder raises."""


class InvalidImageParameters(ImageUrlError):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class InvalidURL(ImageUrlError):
    def __init__(self, url: Optional[str]):
        super().__init__(f"Unable to build a valid URL from: {url!r}")
        self.url = url
