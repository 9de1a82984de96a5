from __future__ import annotations

import logging
from typing import List, Optional, Protocol

from asset_images.imaging import parameters
from asset_images.models.errors import InvalidImageParameters
from asset_images.models.options import (
    CornerRadius, FitFor, FormatAs, ImageOption, QueryItem, SizedTo,
)
from asset_images.models.settings import ImageApiSettings, resolve

log = logging.getLogger("asset-images.query")


class QueryExtendable(Protocol):
    """Anything that renders as ``key=argument`` plus at most one extra item."""

    query_parameter: str

    def url_argument(self) -> str: ...

    def additional_query_item(self, settings: Optional[ImageApiSettings] = None) -> Optional[QueryItem]: ...


def extendable_query_items(extendable: QueryExtendable,
                           settings: Optional[ImageApiSettings] = None) -> List[QueryItem]:
    items = [QueryItem(extendable.query_parameter, extendable.url_argument())]
    extra = extendable.additional_query_item(settings)
    if extra is not None:
        items.append(extra)
    return items


def _size_items(option: SizedTo, settings: ImageApiSettings) -> List[QueryItem]:
    limit = settings.max_dimension
    if not (0 < option.width <= limit and 0 < option.height <= limit):
        log.info("Rejected size %sx%s (limit %s)", option.width, option.height, limit)
        raise InvalidImageParameters(
            f"The specified width and height are not within the acceptable range (0, {limit}]"
        )
    return [
        QueryItem(parameters.WIDTH, str(option.width)),
        QueryItem(parameters.HEIGHT, str(option.height)),
    ]


def url_query_items(option: ImageOption, settings: Optional[ImageApiSettings] = None) -> List[QueryItem]:
    """Encode a single option into its ordered query items."""
    settings = resolve(settings)
    if isinstance(option, SizedTo):
        return _size_items(option, settings)
    if isinstance(option, FormatAs):
        return extendable_query_items(option.format, settings)
    if isinstance(option, FitFor):
        return extendable_query_items(option.fit, settings)
    if isinstance(option, CornerRadius):
        # radius is passed through unchecked
        return [QueryItem(parameters.RADIUS, str(float(option.radius)))]
    raise TypeError(f"Unsupported image option: {option!r}")
