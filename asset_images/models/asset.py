from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional

from asset_images.imaging.url_builder import build_url
from asset_images.models.errors import InvalidURL
from asset_images.models.options import ImageOption
from asset_images.models.settings import ImageApiSettings, resolve

@dataclass(frozen=True)
class Asset:
    """A resolved media asset.

    ``url_string`` is stored the way the content service returns it,
    usually protocol-relative (``//images.example.com/space/id/file.jpg``).
    """
    id: str
    url_string: Optional[str] = None
    title: Optional[str] = None
    content_type: Optional[str] = None

    def base_url(self, settings: Optional[ImageApiSettings] = None) -> str:
        if not self.url_string:
            raise InvalidURL(self.url_string)
        if self.url_string.startswith("//"):
            return f"{resolve(settings).scheme}:{self.url_string}"
        return self.url_string

    def url(self, options: Iterable[ImageOption] = (),
            settings: Optional[ImageApiSettings] = None) -> str:
        """URL of the underlying file with server-side image options applied."""
        return build_url(self.base_url(settings), options, settings)
