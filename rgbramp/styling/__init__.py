from .store import (
    ElementStore,
    Element,
    InMemoryElementStore,
    MarkupElementStore,
    parse_style,
    format_style,
)
from .applicator import apply_colors_by_index, apply_colors_by_range, style_for

__all__ = [
    "ElementStore",
    "Element",
    "InMemoryElementStore",
    "MarkupElementStore",
    "parse_style",
    "format_style",
    "apply_colors_by_index",
    "apply_colors_by_range",
    "style_for",
]
