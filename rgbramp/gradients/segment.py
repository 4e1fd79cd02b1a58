from __future__ import annotations
from numbers import Integral
from typing import List

import numpy as np

from ..colors.rgb import Color
from ..errors import InvalidSegment
from ..types.color_types import Scalar


def interpolate_linear(start: Scalar, end: Scalar, num: int) -> np.ndarray:
    """
    Return ``num`` integers evenly distributed between ``start`` and ``end``.

    The increment is added to ``start`` one step at a time and each running
    value is rounded half away from zero, so the first entry is exactly
    ``start`` and the last lands on ``end`` up to one unit of float error.

    Args:
        start: Channel value of the first band
        end: Channel value of the last band
        num: Total number of values, including both ends (>= 2)

    Returns:
        1D int64 array of length ``num``

    Raises:
        ValueError: if ``num`` is below 2.
    """
    if num < 2:
        raise ValueError(f"interpolate_linear needs at least 2 values, got {num}")
    increment = (end - start) / (num - 1)
    steps = np.full(num, increment, dtype=float)
    steps[0] = start
    running = np.add.accumulate(steps)
    # abs() also folds the -0.0 produced when ramping down to zero
    return np.floor(np.abs(running) + 0.5).astype(np.int64)


class Segment:
    """
    One leg of a ramp: ``band_count`` colors blending from ``start_color``
    to ``end_color``, both ends included.

    A segment with a single band yields only its start color, which is the
    way to inject one fixed color between two blended legs.
    """

    __slots__ = ('_start_color', '_end_color', '_band_count')

    def __init__(self, start_color: Color, end_color: Color, band_count: int) -> None:
        if not isinstance(start_color, Color) or not isinstance(end_color, Color):
            raise InvalidSegment(
                f"segment endpoints must be Color instances, got "
                f"{type(start_color).__name__} and {type(end_color).__name__}"
            )
        if isinstance(band_count, bool) or not isinstance(band_count, Integral):
            raise InvalidSegment(f"band_count must be an integer, got {band_count!r}")
        if band_count < 1:
            raise InvalidSegment(f"band_count must be at least 1, got {band_count}")
        self._start_color = start_color
        self._end_color = end_color
        self._band_count = int(band_count)

    @property
    def start_color(self) -> Color:
        return self._start_color

    @property
    def end_color(self) -> Color:
        return self._end_color

    @property
    def band_count(self) -> int:
        return self._band_count

    def compute_bands(self) -> List[Color]:
        """Interpolate the bands of this segment. Recomputed on every call."""
        if self._band_count == 1:
            return [self._start_color]

        channels = [
            interpolate_linear(start, end, self._band_count)
            for start, end in zip(self._start_color, self._end_color)
        ]
        return [Color(int(r), int(g), int(b)) for r, g, b in zip(*channels)]

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self._start_color!r}, "
            f"{self._end_color!r}, {self._band_count})"
        )
