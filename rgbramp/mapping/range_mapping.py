from __future__ import annotations
import math
from typing import Iterable, List, NamedTuple, Optional, Sequence

import numpy as np
from boundednumbers.np_functions import clamp

from ..colors.rgb import Color
from ..errors import EmptyElementSet
from .result import MappingResult
from .values import parse_marker_value, require_ramp


class RangeContext(NamedTuple):
    """
    Binning parameters for one range-mapping pass.

    ``step`` is the width of one band in data units; it is 0.0 when every
    value falls in the first band (single-color ramp, or min == max).
    """

    minimum: float
    maximum: float
    step: float
    ramp_length: int

    @classmethod
    def from_values(cls, values: Sequence[float], ramp_length: int) -> RangeContext:
        if len(values) == 0:
            raise EmptyElementSet()
        arr = np.asarray(values, dtype=float)
        minimum = float(arr.min())
        maximum = float(arr.max())
        if ramp_length > 1:
            span = maximum - minimum
            if math.isfinite(span):
                step = span / (ramp_length - 1)
            else:
                # span overflows; scale each bound first
                step = maximum / (ramp_length - 1) - minimum / (ramp_length - 1)
        else:
            step = 0.0
        return cls(minimum, maximum, step, ramp_length)

    def indices_for(self, values: Sequence[float]) -> np.ndarray:
        """Bin values into ramp indices, clamped to the ramp's bounds."""
        arr = np.asarray(values, dtype=float)
        if self.step == 0.0:
            return np.zeros(arr.shape, dtype=np.int64)
        last = self.ramp_length - 1
        if math.isfinite(self.maximum - self.minimum):
            offsets = (arr - self.minimum) / self.step
        else:
            offsets = arr / self.step - self.minimum / self.step
        raw = np.floor(offsets)
        # the division can land one ULP either side of the last band for max
        raw = np.where(arr >= self.maximum, last, raw)
        return clamp(raw, 0, last).astype(np.int64)

    def index_for(self, value: float) -> int:
        return int(self.indices_for([value])[0])


def map_by_range(
    values: Iterable[Optional[object]],
    ramp: Sequence[Color],
    marker: Optional[str] = None,
) -> List[MappingResult]:
    """
    Spread the ramp linearly over the observed [min, max] of ``values``.

    All values are parsed before anything is binned, so a single bad value
    fails the whole pass.

    Raises:
        EmptyRamp: if the ramp has no colors.
        EmptyElementSet: if there are no values to take min and max from.
        InvalidMarkerValue: if any value is missing or not numeric.
    """
    ramp_length = require_ramp(ramp)
    parsed = [parse_marker_value(raw) for raw in values]
    if not parsed:
        raise EmptyElementSet(marker)
    context = RangeContext.from_values(parsed, ramp_length)
    return [
        MappingResult.success(int(index), ramp[int(index)])
        for index in context.indices_for(parsed)
    ]
