# asset_images/imaging/url_builder.py
# Purpose: turn a base asset URL plus image options into the service URL.
# - Rejects lists that repeat an option kind before encoding anything
# - Encodes options in caller order, first failure aborts
# - Replaces (never merges) the base URL's query string

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional
from urllib.parse import SplitResult, urlencode, urlsplit, urlunsplit

from asset_images.imaging.query_items import url_query_items
from asset_images.models.enums import OptionKind
from asset_images.models.errors import InvalidImageParameters, InvalidURL
from asset_images.models.options import ImageOption, QueryItem
from asset_images.models.settings import ImageApiSettings

log = logging.getLogger("asset-images.url")

# RFC 3986 unreserved + reserved characters, plus percent escapes.
_URL_CHARS = re.compile(r"^[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]*\Z")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def validate_options(options: Iterable[ImageOption]) -> List[ImageOption]:
    """Return ``options`` as a list, or raise if any kind appears twice.

    Only the option kind matters: ``[FormatAs(Png()), FormatAs(Webp())]``
    is rejected just like two identical entries.
    """
    options = list(options)
    kinds = set()
    for option in options:
        kind = getattr(option, "kind", None)
        if not isinstance(kind, OptionKind):
            raise TypeError(f"Unsupported image option: {option!r}")
        kinds.add(kind)
    if len(kinds) < len(options):
        log.info("Rejected duplicate option kinds: %s", [o.kind.value for o in options])
        raise InvalidImageParameters(
            "Cannot specify two instances of ImageOption of the same case, "
            "i.e. `[FormatAs(Png()), FormatAs(Jpg())]` is invalid."
        )
    return options


def _split(base_url: str) -> SplitResult:
    if not _URL_CHARS.match(base_url) or _BAD_ESCAPE.search(base_url):
        raise InvalidURL(base_url)
    try:
        parts = urlsplit(base_url)
        parts.port  # raises ValueError for out-of-range or non-numeric ports
    except ValueError as e:
        raise InvalidURL(base_url) from e
    if not parts.scheme:
        raise InvalidURL(base_url)
    return parts


def build_url(base_url: str, options: Iterable[ImageOption] = (),
              settings: Optional[ImageApiSettings] = None) -> str:
    """Build the image service URL for ``base_url`` with ``options`` applied.

    Raises InvalidImageParameters for duplicate or out-of-range options and
    InvalidURL when ``base_url`` cannot be split or rebuilt.
    """
    options = list(options)
    if not options:
        return base_url

    options = validate_options(options)
    parts = _split(base_url)

    items: List[QueryItem] = []
    for option in options:
        items.extend(url_query_items(option, settings))

    try:
        url = urlunsplit(parts._replace(query=urlencode(items)))
    except (ValueError, TypeError, UnicodeError) as e:
        raise InvalidURL(base_url) from e

    log.debug("Built %s with %d query items", url, len(items))
    return url
