from __future__ import annotations
from typing import List, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ChannelTuple = Tuple[Scalar, Scalar, Scalar]

CHANNEL_MIN = 0
CHANNEL_MAX = 255
NUM_CHANNELS = 3

# offsets of RR, GG, BB in "#RRGGBB"
HEX_CHANNEL_OFFSETS = (1, 3, 5)


def channels_to_array(channels: Union[ChannelTuple, List[ChannelTuple], ndarray]) -> np.ndarray:
    """
    Convert one or more channel tuples to a float numpy array.

    Args:
        channels: A single (r, g, b) tuple, a list of them, or an ndarray

    Returns:
        numpy array whose last dimension holds the three channels
    """
    if isinstance(channels, ndarray):
        return channels.astype(float)
    return np.array(channels, dtype=float)
