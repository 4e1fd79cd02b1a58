from __future__ import annotations
import warnings
from typing import Any, Dict, Optional, Sequence

from ..colors.rgb import Color
from ..errors import ElementSkippedWarning
from ..mapping import map_by_index, map_by_range
from ..types.style_types import StyleProperty, default_style_properties
from .store import ElementStore


def _style_property(prop: Optional[str], role: str) -> str:
    """The caller's property name, or the default one for ``role``."""
    return str(prop if prop is not None else default_style_properties[role])


def style_for(
    color: Color,
    background: Optional[str] = None,
    foreground: Optional[str] = None,
) -> Dict[str, str]:
    """The two style declarations applied for ``color``: its hex code and a contrasting text color."""
    background = _style_property(background, "background")
    foreground = _style_property(foreground, "foreground")
    return {
        background: color.html_color(),
        foreground: str(color.html_color_contrasting()),
    }


def _write_color(
    store: ElementStore,
    handle: Any,
    color: Color,
    background: Optional[str],
    foreground: Optional[str],
) -> None:
    for prop, value in style_for(color, background, foreground).items():
        store.write_style(handle, prop, value)


def apply_colors_by_index(
    store: ElementStore,
    marker: str,
    ramp: Sequence[Color],
    *,
    background: Optional[str | StyleProperty] = None,
    foreground: Optional[str | StyleProperty] = None,
) -> None:
    """
    Color every element carrying ``marker`` with ``ramp[int(marker value)]``.

    Elements whose value is not a valid index are left untouched and reported
    with an :class:`~rgbramp.errors.ElementSkippedWarning`; the remaining
    elements are still styled.

    Args:
        store: Element store to query and write to
        marker: Attribute that selects the elements and holds their index
        ramp: Colors to index into
        background: Style property for the fill color (default ``background-color``)
        foreground: Style property for the text color (default ``color``)
    """
    handles = list(store.query_elements(marker))
    values = [store.read_attribute(handle, marker) for handle in handles]

    for handle, result in zip(handles, map_by_index(values, ramp)):
        if not result.ok:
            warnings.warn(
                f"skipping element {handle!r} for {marker!r}: {result.error}",
                ElementSkippedWarning,
                stacklevel=2,
            )
            continue
        _write_color(store, handle, result.color, background, foreground)


def apply_colors_by_range(
    store: ElementStore,
    marker: str,
    ramp: Sequence[Color],
    *,
    background: Optional[str | StyleProperty] = None,
    foreground: Optional[str | StyleProperty] = None,
) -> None:
    """
    Spread ``ramp`` over the numeric range of the ``marker`` values and color
    each element with the band its value falls in.

    Nothing is written unless every element can be mapped.

    Raises:
        EmptyElementSet: if no element carries ``marker``.
        InvalidMarkerValue: if any element's value is not numeric.
        EmptyRamp: if ``ramp`` has no colors.
    """
    handles = list(store.query_elements(marker))
    values = [store.read_attribute(handle, marker) for handle in handles]
    results = map_by_range(values, ramp, marker)

    for handle, result in zip(handles, results):
        _write_color(store, handle, result.color, background, foreground)
