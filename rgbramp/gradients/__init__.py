from .segment import Segment, interpolate_linear
from .ramp import Ramp, build_ramp, ramp_from_hex_stops
from .render import ramp_to_array, ramp_image, example

__all__ = [
    "Segment",
    "interpolate_linear",
    "Ramp",
    "build_ramp",
    "ramp_from_hex_stops",
    "ramp_to_array",
    "ramp_image",
    "example",
]
