"""rgbramp: multi-stop RGB color ramps mapped onto data-bearing elements."""

from .colors.rgb import Color
from .gradients import (
    Segment,
    Ramp,
    build_ramp,
    ramp_from_hex_stops,
    interpolate_linear,
    ramp_to_array,
    ramp_image,
)
from .mapping import (
    MappingResult,
    RangeContext,
    map_by_index,
    map_by_range,
)
from .styling import (
    ElementStore,
    Element,
    InMemoryElementStore,
    MarkupElementStore,
    apply_colors_by_index,
    apply_colors_by_range,
    style_for,
)
from .types import ContrastColor, StyleProperty
from .errors import (
    RampError,
    MalformedColorInput,
    InvalidSegment,
    EmptyRamp,
    EmptyElementSet,
    IndexOutOfRange,
    InvalidMarkerValue,
    ElementSkippedWarning,
)

__version__ = "1.0.0"

__all__ = [
    # colors
    "Color",
    "ContrastColor",
    # ramps
    "Segment",
    "Ramp",
    "build_ramp",
    "ramp_from_hex_stops",
    "interpolate_linear",
    "ramp_to_array",
    "ramp_image",
    # mapping
    "MappingResult",
    "RangeContext",
    "map_by_index",
    "map_by_range",
    # styling
    "ElementStore",
    "Element",
    "InMemoryElementStore",
    "MarkupElementStore",
    "StyleProperty",
    "apply_colors_by_index",
    "apply_colors_by_range",
    "style_for",
    # errors
    "RampError",
    "MalformedColorInput",
    "InvalidSegment",
    "EmptyRamp",
    "EmptyElementSet",
    "IndexOutOfRange",
    "InvalidMarkerValue",
    "ElementSkippedWarning",
    "__version__",
]
