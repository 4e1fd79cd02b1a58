import math
from typing import Optional, Sequence

from ..errors import EmptyRamp, InvalidMarkerValue
from ..utils.num_utils import is_real_number


def parse_marker_value(raw: Optional[object]) -> float:
    """
    Read a marker attribute as a finite float.

    Attribute values normally arrive as strings; numbers are accepted as is.

    Raises:
        InvalidMarkerValue: if the value is missing, blank, not a number, NaN or infinite.
    """
    if raw is None:
        raise InvalidMarkerValue(raw, "attribute is missing")
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            raise InvalidMarkerValue(raw, "attribute is empty")
        try:
            value = float(text)
        except ValueError:
            raise InvalidMarkerValue(raw, "not a number") from None
        if not math.isfinite(value):
            raise InvalidMarkerValue(raw, "not a finite number")
        return value
    if not is_real_number(raw):
        raise InvalidMarkerValue(raw, "not a finite number")
    return float(raw)


def require_ramp(ramp: Sequence) -> int:
    """Return the ramp length, refusing empty ramps."""
    if len(ramp) == 0:
        raise EmptyRamp("cannot map values onto an empty ramp")
    return len(ramp)
