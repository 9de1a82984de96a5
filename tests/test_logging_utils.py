from pathlib import Path

from asset_images.utils.logging_utils import BANNER, build_logger, log_section

def test_build_logger_writes_file(tmp_path: Path):
    logger = build_logger("asset-images-test", log_dir=tmp_path / "logs")
    with log_section("Section title", logger):
        logger.info("hello")
    for h in logger.handlers:
        h.flush()
        h.close()
    text = (tmp_path / "logs" / "asset_images.log").read_text(encoding="utf-8")
    assert "| INFO | hello" in text
    assert BANNER in text and "Section title" in text

def test_rebuilding_logger_closes_previous_handlers(tmp_path: Path):
    logger = build_logger("asset-images-rebuild", log_dir=tmp_path)
    old_handlers = list(logger.handlers)
    logger = build_logger("asset-images-rebuild", log_dir=tmp_path)
    assert all(h not in logger.handlers for h in old_handlers)
    file_handler = next(h for h in old_handlers if hasattr(h, "baseFilename"))
    assert file_handler.stream is None
    for h in logger.handlers:
        h.close()
