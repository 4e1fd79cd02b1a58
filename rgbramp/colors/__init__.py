"""
rgbramp Color Model
===================

Immutable RGB colors that render to HTML hex codes and pick a black or
white foreground for legible text on top of them.

Usage
-----
>>> from rgbramp.colors import Color
>>>
>>> red = Color(255, 0, 0)
>>> red.html_color()
'#ff0000'
>>> Color.from_hex("#FFCC00").value
(255, 204, 0)
>>> Color(0, 0, 0).html_color_contrasting() == "white"
True

Notes
-----
- Channels are stored as given and clamped to [0, 255] only when rendered
- ``from_hex`` rejects anything that is not exactly ``#RRGGBB``
- Brightness uses the W3C AERT weights (299, 587, 114) / 1000
"""

from .rgb import Color, decimal_to_hex

__all__ = ['Color', 'decimal_to_hex']
