from __future__ import annotations
from typing import NamedTuple, Optional

from ..colors.rgb import Color
from ..errors import RampError


class MappingResult(NamedTuple):
    """Outcome of resolving one element's marker value against a ramp."""

    index: Optional[int]
    color: Optional[Color]
    error: Optional[RampError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, index: int, color: Color) -> MappingResult:
        return cls(index, color)

    @classmethod
    def failure(cls, error: RampError) -> MappingResult:
        return cls(None, None, error)
