"""
Value-to-index mappers.

Two strategies resolve which ramp color applies to an element:

- ``map_by_index``: the marker value is the 0-based ramp index itself
- ``map_by_range``: marker values are binned linearly between their
  observed minimum and maximum
"""
from .result import MappingResult
from .values import parse_marker_value
from .index_mapping import index_for_value, map_by_index
from .range_mapping import RangeContext, map_by_range

__all__ = [
    "MappingResult",
    "parse_marker_value",
    "index_for_value",
    "map_by_index",
    "RangeContext",
    "map_by_range",
]
