from __future__ import annotations
from typing import Iterable, List, Optional, Sequence

from ..colors.rgb import Color
from ..errors import IndexOutOfRange, InvalidMarkerValue, RampError
from .result import MappingResult
from .values import parse_marker_value, require_ramp


def index_for_value(raw: Optional[object], ramp_length: int) -> int:
    """
    Resolve a marker value to a 0-based ramp index.

    Raises:
        InvalidMarkerValue: if the value is not a whole number.
        IndexOutOfRange: if the index falls outside ``[0, ramp_length)``.
    """
    value = parse_marker_value(raw)
    if not value.is_integer():
        raise InvalidMarkerValue(raw, "index must be a whole number")
    index = int(value)
    if not 0 <= index < ramp_length:
        raise IndexOutOfRange(index, ramp_length)
    return index


def map_by_index(values: Iterable[Optional[object]], ramp: Sequence[Color]) -> List[MappingResult]:
    """
    Look up each marker value directly as an index into ``ramp``.

    A bad value does not stop the others: its result carries the error
    instead of a color.
    """
    ramp_length = require_ramp(ramp)
    results = []
    for raw in values:
        try:
            index = index_for_value(raw, ramp_length)
        except RampError as err:
            results.append(MappingResult.failure(err))
        else:
            results.append(MappingResult.success(index, ramp[index]))
    return results
