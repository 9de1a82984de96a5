from asset_images.imaging import parameters
from asset_images.imaging.parameters import IMAGE_PARAMETERS, query_key_for

def test_query_keys_match_image_service():
    assert IMAGE_PARAMETERS == {
        "width": "w",
        "height": "h",
        "radius": "r",
        "focus": "f",
        "background_color": "bg",
        "fit": "fit",
        "format": "fm",
        "quality": "q",
        "progressive_jpg": "fl",
    }

def test_query_key_for():
    assert query_key_for("progressive_jpg") == parameters.PROGRESSIVE_JPG == "fl"
