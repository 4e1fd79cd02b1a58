from __future__ import annotations
import re
from typing import Any, Iterator, Tuple

from boundednumbers.functions import clamp

from ..errors import MalformedColorInput
from ..types.color_types import (
    ChannelTuple,
    Scalar,
    CHANNEL_MIN,
    CHANNEL_MAX,
    HEX_CHANNEL_OFFSETS,
)
from ..types.style_types import (
    ContrastColor,
    LUMINANCE_WEIGHTS,
    LUMINANCE_SCALE,
    BRIGHTNESS_THRESHOLD,
)
from ..utils.num_utils import is_real_number, round_half_away

_HEX_PATTERN = re.compile(r"#[0-9a-fA-F]{6}")


def decimal_to_hex(value: Scalar) -> str:
    """Render one channel as two lowercase hex digits, clamped to [0, 255]."""
    clamped = clamp(value, CHANNEL_MIN, CHANNEL_MAX)
    return format(round_half_away(clamped), "02x")


class Color:
    """
    Immutable RGB color.

    Channels are stored exactly as given; clamping to [0, 255] only happens
    when the color is rendered to a hex string. Build instances with
    ``Color(r, g, b)`` / :meth:`from_rgb` or parse them with :meth:`from_hex`.
    """

    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, r: Scalar, g: Scalar, b: Scalar) -> None:
        for name, channel in zip("rgb", (r, g, b)):
            if not is_real_number(channel):
                raise MalformedColorInput(
                    f"channel {name} must be a finite number, got {channel!r}"
                )
        self._value = (r, g, b)
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_rgb(cls, r: Scalar, g: Scalar, b: Scalar) -> Color:
        return cls(r, g, b)

    @classmethod
    def from_hex(cls, hex_value: str) -> Color:
        """
        Parse an HTML color code such as ``"#ff0000"`` (case-insensitive).

        Raises:
            MalformedColorInput: if the text is not exactly ``#RRGGBB``.
        """
        if not isinstance(hex_value, str):
            raise MalformedColorInput(
                f"hex color must be a string, got {type(hex_value).__name__}"
            )
        if _HEX_PATTERN.fullmatch(hex_value) is None:
            raise MalformedColorInput(f"expected a '#RRGGBB' hex color, got {hex_value!r}")
        r, g, b = (int(hex_value[i:i + 2], 16) for i in HEX_CHANNEL_OFFSETS)
        return cls(r, g, b)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ChannelTuple:
        return self._value

    @property
    def r(self) -> Scalar:
        return self._value[0]

    @property
    def g(self) -> Scalar:
        return self._value[1]

    @property
    def b(self) -> Scalar:
        return self._value[2]

    @property
    def brightness(self) -> float:
        """Perceived brightness in [0, 255] per the W3C AERT formula."""
        return sum(w * c for w, c in zip(LUMINANCE_WEIGHTS, self._value)) / LUMINANCE_SCALE

    # ------------------ RENDERING ------------------
    def html_color(self) -> str:
        """The HTML color code for this color, e.g. ``"#112233"``."""
        return "#" + "".join(decimal_to_hex(c) for c in self._value)

    def html_color_contrasting(self) -> ContrastColor:
        """
        Black or white, whichever reads better as text or an icon drawn on
        top of this color.
        """
        if self.brightness > BRIGHTNESS_THRESHOLD:
            return ContrastColor.BLACK
        return ContrastColor.WHITE

    to_hex_string = html_color
    contrasting_foreground = html_color_contrasting

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __len__(self) -> int:
        return 3

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        r, g, b = self._value
        return f"{self.__class__.__name__}({r!r}, {g!r}, {b!r})"

    def __getstate__(self) -> Tuple[Scalar, ...]:
        return self._value

    def __setstate__(self, state: Tuple[Scalar, ...]) -> None:
        super().__setattr__('_value', tuple(state))
        super().__setattr__('_is_frozen', True)
