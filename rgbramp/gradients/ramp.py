"""
Module for composing segments into a single ramp.
"""
from __future__ import annotations
from numbers import Integral
from typing import List, Sequence, Union

from ..colors.rgb import Color
from .segment import Segment

Ramp = List[Color]


def build_ramp(*segments: Segment) -> Ramp:
    """
    Concatenate the bands of each segment, in order, into one flat ramp.

    Boundary colors shared by adjacent segments are kept twice; no
    continuity check is made between one segment's end and the next
    segment's start.
    """
    colors: Ramp = []
    for segment in segments:
        colors.extend(segment.compute_bands())
    return colors


def ramp_from_hex_stops(
    stops: Sequence[str],
    bands_per_segment: Union[int, Sequence[int]],
) -> Ramp:
    """
    Build a ramp from consecutive hex color stops.

    Each adjacent pair of stops becomes one :class:`Segment`.

    Args:
        stops: At least two ``#RRGGBB`` strings
        bands_per_segment: One band count for every segment, or one per segment

    Returns:
        The composed ramp
    """
    if len(stops) < 2:
        raise ValueError(f"need at least two color stops, got {len(stops)}")

    colors = [Color.from_hex(stop) for stop in stops]
    num_segments = len(colors) - 1

    if isinstance(bands_per_segment, Integral):
        band_counts = [bands_per_segment] * num_segments
    else:
        band_counts = list(bands_per_segment)
        if len(band_counts) != num_segments:
            raise ValueError(
                f"expected {num_segments} band counts for {len(stops)} stops, got {len(band_counts)}"
            )

    segments = [
        Segment(start, end, count)
        for start, end, count in zip(colors[:-1], colors[1:], band_counts)
    ]
    return build_ramp(*segments)
