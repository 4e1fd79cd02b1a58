import math
from numbers import Real

import numpy as np


def is_real_number(value: object) -> bool:
    """
    True for finite ints, floats and numpy scalars.

    Bools, NaN, infinities and ints too large to convert to a float are rejected.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def np_round_half_away(values: np.ndarray) -> np.ndarray:
    """Vectorized :func:`round_half_away`, returned as float."""
    return np.sign(values) * np.floor(np.abs(values) + 0.5)
