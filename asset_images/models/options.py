"""Image transformation options.

Each option is a small frozen dataclass. The union types at the bottom
(``JPGQuality``, ``Format``, ``Fit``, ``ImageOption``) list the closed set
of variants; ``kind`` is the variant tag used to reject lists that ask for
the same transformation twice.

Example::

    options = [
        SizedTo(width=400, height=300),
        FormatAs(Jpg(Percent(80))),
        FitFor(Thumb(Focus.FACE)),
    ]
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, NamedTuple, Optional, Union

from asset_images.imaging import parameters
from asset_images.imaging.color_hex import hex_representation
from asset_images.models.color import RGBColor
from asset_images.models.enums import Focus, OptionKind
from asset_images.models.errors import InvalidImageParameters
from asset_images.models.settings import ImageApiSettings, resolve


class QueryItem(NamedTuple):
    name: str
    value: str


# ---------------------------- jpg quality ----------------------------
@dataclass(frozen=True)
class Unspecified:
    def url_query_item(self, settings: Optional[ImageApiSettings] = None) -> Optional[QueryItem]:
        return None


@dataclass(frozen=True)
class Percent:
    """JPG quality as a percentage, 0-100 inclusive."""
    value: int

    def url_query_item(self, settings: Optional[ImageApiSettings] = None) -> Optional[QueryItem]:
        limit = resolve(settings).max_jpg_quality
        if self.value < 0 or self.value > limit:
            raise InvalidImageParameters(f"JPG quality must be between 0 and {limit} (inclusive).")
        return QueryItem(parameters.QUALITY, str(self.value))


@dataclass(frozen=True)
class Progressive:
    def url_query_item(self, settings: Optional[ImageApiSettings] = None) -> Optional[QueryItem]:
        return QueryItem(parameters.PROGRESSIVE_JPG, "progressive")


JPGQuality = Union[Unspecified, Percent, Progressive]


# ---------------------------- formats ----------------------------
class _FormatBase:
    query_parameter: ClassVar[str] = parameters.FORMAT
    argument: ClassVar[str]

    def url_argument(self) -> str:
        return self.argument

    def additional_query_item(self, settings: Optional[ImageApiSettings] = None) -> Optional[QueryItem]:
        return None


@dataclass(frozen=True)
class Jpg(_FormatBase):
    quality: JPGQuality = Unspecified()
    argument: ClassVar[str] = "jpg"

    def additional_query_item(self, settings: Optional[ImageApiSettings] = None) -> Optional[QueryItem]:
        return self.quality.url_query_item(settings)


@dataclass(frozen=True)
class Png(_FormatBase):
    argument: ClassVar[str] = "png"


@dataclass(frozen=True)
class Webp(_FormatBase):
    argument: ClassVar[str] = "webp"


Format = Union[Jpg, Png, Webp]


# ---------------------------- fit modes ----------------------------
class _FitBase:
    query_parameter: ClassVar[str] = parameters.FIT
    argument: ClassVar[str]

    def url_argument(self) -> str:
        return self.argument

    def additional_query_item(self, settings: Optional[ImageApiSettings] = None) -> Optional[QueryItem]:
        return None


class _FocusedFit(_FitBase):
    focus: Optional[Focus]

    def additional_query_item(self, settings: Optional[ImageApiSettings] = None) -> Optional[QueryItem]:
        if self.focus is None:
            return None
        return QueryItem(parameters.FOCUS, self.focus.value)


@dataclass(frozen=True)
class Pad(_FitBase):
    """Resize to fit, padding the remainder with ``background_color``."""
    background_color: Optional[RGBColor] = None
    argument: ClassVar[str] = "pad"

    def additional_query_item(self, settings: Optional[ImageApiSettings] = None) -> Optional[QueryItem]:
        if self.background_color is None:
            return None
        return QueryItem(parameters.BACKGROUND_COLOR, hex_representation(self.background_color))


@dataclass(frozen=True)
class Crop(_FocusedFit):
    focus: Optional[Focus] = None
    argument: ClassVar[str] = "crop"


@dataclass(frozen=True)
class Fill(_FocusedFit):
    focus: Optional[Focus] = None
    argument: ClassVar[str] = "fill"


@dataclass(frozen=True)
class Thumb(_FocusedFit):
    focus: Optional[Focus] = None
    argument: ClassVar[str] = "thumb"


@dataclass(frozen=True)
class Scale(_FitBase):
    argument: ClassVar[str] = "scale"


Fit = Union[Pad, Crop, Fill, Thumb, Scale]


# ---------------------------- options ----------------------------
@dataclass(frozen=True)
class SizedTo:
    """Size in pixels; width and height must each be in (0, 4000]."""
    width: int
    height: int
    kind: ClassVar[OptionKind] = OptionKind.SIZED_TO


@dataclass(frozen=True)
class FormatAs:
    format: Format
    kind: ClassVar[OptionKind] = OptionKind.FORMAT_AS


@dataclass(frozen=True)
class FitFor:
    fit: Fit
    kind: ClassVar[OptionKind] = OptionKind.FIT_FOR


@dataclass(frozen=True)
class CornerRadius:
    radius: float
    kind: ClassVar[OptionKind] = OptionKind.CORNER_RADIUS


ImageOption = Union[SizedTo, FormatAs, FitFor, CornerRadius]
