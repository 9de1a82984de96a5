from enum import Enum

class OptionKind(Enum):
    SIZED_TO = "sized_to"
    FORMAT_AS = "format_as"
    FIT_FOR = "fit_for"
    CORNER_RADIUS = "corner_radius"

class Focus(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"
    FACE = "face"       # largest detected face
    FACES = "faces"     # all detected faces

class ColorModel(Enum):
    MONOCHROME = "monochrome"
    RGB = "rgb"
    CMYK = "cmyk"       # not encodable, hex falls back
    LAB = "lab"         # not encodable, hex falls back
    UNKNOWN = "unknown"
