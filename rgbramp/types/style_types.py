# No dependencies
from enum import Enum


class ContrastColor(str, Enum):
    BLACK = "black"
    WHITE = "white"

    def __str__(self) -> str:
        return self.value


class StyleProperty(str, Enum):
    BACKGROUND = "background-color"
    FOREGROUND = "color"

    def __str__(self) -> str:
        return self.value


# W3C AERT brightness weights for (r, g, b), summing to 1000
LUMINANCE_WEIGHTS = (299, 587, 114)
LUMINANCE_SCALE = 1000
BRIGHTNESS_THRESHOLD = 125

default_style_properties = {
    "background": StyleProperty.BACKGROUND,
    "foreground": StyleProperty.FOREGROUND,
}
