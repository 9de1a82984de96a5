from pathlib import Path
from asset_images.imaging.url_builder import build_url
from asset_images.models.asset import Asset
from asset_images.models.color import RGBColor
from asset_images.models.enums import Focus
from asset_images.models.options import (
    SizedTo, FormatAs, FitFor, CornerRadius, Jpg, Percent, Png, Pad, Thumb,
)
from asset_images.utils.logging_utils import build_logger, log_section

logger = build_logger(log_dir=Path("logs"))

with log_section("Asset image URLs", logger):
    asset = Asset(id="nyancat", url_string="//images.example.com/space/nyancat/cat.jpg")
    logger.info("Thumbnail: %s", asset.url([
        SizedTo(width=200, height=200),
        FitFor(Thumb(Focus.FACE)),
        FormatAs(Jpg(Percent(80))),
    ]))
    logger.info("Padded: %s", build_url("https://images.example.com/asset.png", [
        SizedTo(width=800, height=600),
        FitFor(Pad(RGBColor.from_string("navy"))),
        FormatAs(Png()),
        CornerRadius(12),
    ]))
