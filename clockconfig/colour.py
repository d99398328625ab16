# clockconfig/colour.py
"""
RGB triple <-> "#RRGGBB".
Malformed input never raises; it maps to white.
"""
from __future__ import annotations
from numbers import Real
from typing import Any, List

DEFAULT_HTML_COLOUR = "#FFFFFF"
DEFAULT_TRIPLE = (255, 255, 255)


def zero_pad(value: Any, digits: int) -> str:
    """Left-pad with zeros; longer values keep their rightmost `digits` chars."""
    v = str(value)
    if len(v) < digits:
        v = "0" * (digits - len(v)) + v
    return v[-digits:] if len(v) > digits else v


def _is_channel(v: Any) -> bool:
    return isinstance(v, Real) and not isinstance(v, bool)


def triple_to_html(triple: Any) -> str:
    if not isinstance(triple, (list, tuple)) or len(triple) != 3:
        return DEFAULT_HTML_COLOUR
    if not all(_is_channel(c) for c in triple):
        return DEFAULT_HTML_COLOUR
    r, g, b = (zero_pad(format(int(c), "X"), 2) for c in triple)
    return f"#{r}{g}{b}"


def html_to_triple(colour: Any) -> List[int]:
    if not isinstance(colour, str) or len(colour) != 7:
        return list(DEFAULT_TRIPLE)
    try:
        return [int(colour[i : i + 2], 16) for i in (1, 3, 5)]
    except ValueError:
        return list(DEFAULT_TRIPLE)
