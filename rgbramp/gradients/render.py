from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from ..colors.rgb import Color
from ..errors import EmptyRamp
from ..types.color_types import CHANNEL_MIN, CHANNEL_MAX, NUM_CHANNELS, channels_to_array
from ..utils.num_utils import np_round_half_away


def ramp_to_array(ramp: Sequence[Color]) -> np.ndarray:
    """Stack a ramp into an ``(N, 3)`` uint8 array, clamping each channel."""
    if len(ramp) == 0:
        return np.empty((0, NUM_CHANNELS), dtype=np.uint8)
    arr = channels_to_array([color.value for color in ramp])
    arr = np_round_half_away(np.clip(arr, CHANNEL_MIN, CHANNEL_MAX))
    return arr.astype(np.uint8)


def ramp_image(
    ramp: Sequence[Color],
    band_width: int = 32,
    height: int = 32,
    output_path=None,
):
    """
    Render a ramp as a horizontal swatch strip, one block per band.

    Args:
        ramp: Colors to draw, left to right
        band_width: Width in pixels of each band
        height: Height of the strip in pixels
        output_path: Optional path the image is saved to

    Returns:
        PIL.Image.Image in RGB mode
    """
    from PIL import Image

    if len(ramp) == 0:
        raise EmptyRamp("cannot render an empty ramp")
    if band_width < 1 or height < 1:
        raise ValueError(f"band_width and height must be positive, got {band_width}x{height}")

    row = np.repeat(ramp_to_array(ramp), band_width, axis=0)
    pixels = np.ascontiguousarray(np.broadcast_to(row, (height,) + row.shape))
    img = Image.fromarray(pixels)
    if output_path:
        img.save(output_path)
    return img


def example(output_path: Optional[str] = None):
    """Three-stop heat ramp (navy to gold to crimson) rendered as a swatch."""
    from .ramp import ramp_from_hex_stops

    ramp = ramp_from_hex_stops(["#0b2e4e", "#f5c518", "#a52a2a"], bands_per_segment=6)
    return ramp_image(ramp, band_width=48, height=48, output_path=output_path)
