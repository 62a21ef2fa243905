"""Contrast utilities for validating palette accessibility.

Implements WCAG 2.x relative luminance and contrast ratio calculations.

Public API:
- normalize_hex(color: str) -> str
- relative_luminance(color: str | Color) -> float
- contrast_ratio(a: str | Color, b: str | Color) -> float
- luminance_for_family(family: ColorFamily) -> list[float]

The ratio is symmetric and always falls in [1, 21].
"""

from __future__ import annotations

from typing import List, Union

from .palette import Color, ColorFamily

_HEX_ERR = "Color must be a #RGB or #RRGGBB hex string: {value}"

ColorLike = Union[str, Color]


def normalize_hex(color: str) -> str:
    """Return ``color`` as lowercase ``#rrggbb``; expands ``#rgb`` shorthand."""
    if not isinstance(color, str):
        raise ValueError(_HEX_ERR.format(value=color))
    c = color.strip().lower()
    if not c.startswith("#") or len(c) not in (4, 7):
        raise ValueError(_HEX_ERR.format(value=color))
    if len(c) == 4:
        c = "#" + "".join(ch * 2 for ch in c[1:])
    try:
        int(c[1:], 16)
    except ValueError:
        raise ValueError(_HEX_ERR.format(value=color)) from None
    return c


def _parse_hex(color: ColorLike) -> tuple[int, int, int]:
    value = color.value if isinstance(color, Color) else color
    c = normalize_hex(value)
    return int(c[1:3], 16), int(c[3:5], 16), int(c[5:7], 16)


def _linear_channel(c: float) -> float:
    c = c / 255.0
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: ColorLike) -> float:
    r, g, b = _parse_hex(color)
    # Rec. 709 coefficients used by WCAG
    return 0.2126 * _linear_channel(r) + 0.7152 * _linear_channel(g) + 0.0722 * _linear_channel(b)


def contrast_ratio(a: ColorLike, b: ColorLike) -> float:
    l1 = relative_luminance(a)
    l2 = relative_luminance(b)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def luminance_for_family(family: ColorFamily) -> List[float]:
    """Luminance of every color in ``family``, in token order."""
    return [relative_luminance(color) for color in family]


__all__ = [
    "contrast_ratio",
    "luminance_for_family",
    "normalize_hex",
    "relative_luminance",
]
