"""Exception and warning types raised by rgbramp.

Every error derives from :class:`RampError` and from the builtin exception
it most resembles, so callers can catch either the package base class or
the usual ``ValueError`` / ``IndexError`` / ``LookupError``.
"""
from __future__ import annotations

from typing import Optional


class RampError(Exception):
    """Base class for all rgbramp errors."""


class MalformedColorInput(RampError, ValueError):
    """A color could not be built from the given hex string or channels."""


class InvalidSegment(RampError, ValueError):
    """A segment was given a band count below one or non-color endpoints."""


class EmptyRamp(RampError, ValueError):
    """A mapping was requested against a ramp with no colors."""


class EmptyElementSet(RampError, LookupError):
    """Range mapping found no elements to sample a minimum and maximum from."""

    def __init__(self, marker: Optional[str] = None) -> None:
        self.marker = marker
        if marker is None:
            message = "could not determine min and max data values: no elements to sample"
        else:
            message = f"could not determine min and max data values: no elements carry {marker!r}"
        super().__init__(message)


class IndexOutOfRange(RampError, IndexError):
    """An element's marker value resolved to an index outside the ramp."""

    def __init__(self, index: int, ramp_length: int) -> None:
        self.index = index
        self.ramp_length = ramp_length
        super().__init__(f"index {index} is outside the ramp [0, {ramp_length})")


class InvalidMarkerValue(RampError, ValueError):
    """A marker attribute was missing or not usable as a number."""

    def __init__(self, raw: object, reason: str) -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(f"invalid marker value {raw!r}: {reason}")


class ElementSkippedWarning(UserWarning):
    """Emitted when an element is left unstyled because its mapping failed."""
