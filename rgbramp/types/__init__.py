from .color_types import (
    Scalar,
    ChannelTuple,
    CHANNEL_MIN,
    CHANNEL_MAX,
    NUM_CHANNELS,
    channels_to_array,
)
from .style_types import (
    ContrastColor,
    StyleProperty,
    LUMINANCE_WEIGHTS,
    LUMINANCE_SCALE,
    BRIGHTNESS_THRESHOLD,
)

__all__ = [
    "Scalar",
    "ChannelTuple",
    "CHANNEL_MIN",
    "CHANNEL_MAX",
    "NUM_CHANNELS",
    "channels_to_array",
    "ContrastColor",
    "StyleProperty",
    "LUMINANCE_WEIGHTS",
    "LUMINANCE_SCALE",
    "BRIGHTNESS_THRESHOLD",
]
