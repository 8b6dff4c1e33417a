"""CSS serialization, export formats and color string parsing."""
from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, Dict, Optional

from .color import HSLColor, LABColor, OKLCHColor, RGBColor
from .config import ChromaticityError
from .spaces import ColorSpace, resolve_space

if TYPE_CHECKING:
    from .selection import ColorSelection

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_RGB_FUNC_RE = re.compile(r"^rgb\((.*)\)$", re.IGNORECASE)

# CSS color() identifiers for wide-gamut spaces
_CSS_COLOR_IDENT = {
    ColorSpace.P3: "display-p3",
    ColorSpace.REC2020: "rec2020",
}


def _round_half_up(value: float) -> int:
    """Round halves upward (2.5 -> 3), unlike round()."""
    return int(math.floor(value + 0.5))


def _clamp_channel(value: float) -> int:
    return _round_half_up(max(0.0, min(255.0, value)))


def generate_css_color(
    rgb: RGBColor, space: Optional[ColorSpace] = ColorSpace.SRGB
) -> str:
    """Format a color as a CSS color expression for the given space.

    Channels are clamped to [0, 255] and rounded first. sRGB (and any
    space without a CSS identifier) uses ``rgb(r, g, b)``; P3 and Rec2020
    use ``color(<ident> r g b)`` with channels scaled to [0, 1] at four
    decimals.

    Args:
        rgb: Display color, possibly out of range.
        space: Target color space.

    Returns:
        CSS color string.
    """
    r = _clamp_channel(rgb.r)
    g = _clamp_channel(rgb.g)
    b = _clamp_channel(rgb.b)

    ident = _CSS_COLOR_IDENT.get(resolve_space(space))
    if ident is None:
        return f"rgb({r}, {g}, {b})"
    return f"color({ident} {r / 255:.4f} {g / 255:.4f} {b / 255:.4f})"


def format_rgb(rgb: RGBColor) -> str:
    return generate_css_color(rgb, ColorSpace.SRGB)


def format_hex(rgb: RGBColor) -> str:
    """Format a color as ``#rrggbb`` (clamped and rounded)."""
    r = _clamp_channel(rgb.r)
    g = _clamp_channel(rgb.g)
    b = _clamp_channel(rgb.b)
    return f"#{r:02x}{g:02x}{b:02x}"


def format_hsl(hsl: HSLColor) -> str:
    h = _round_half_up(hsl.h)
    s = _round_half_up(hsl.s)
    l = _round_half_up(hsl.l)
    return f"hsl({h}, {s}%, {l}%)"


def format_lab(lab: LABColor) -> str:
    # + 0.0 turns -0.0 into 0.0
    return f"lab({lab.l + 0.0:.1f}% {lab.a + 0.0:.1f} {lab.b + 0.0:.1f})"


def format_oklch(oklch: OKLCHColor) -> str:
    return f"oklch({oklch.l + 0.0:.3f} {oklch.c + 0.0:.3f} {oklch.h + 0.0:.1f})"


def export_formats(selection: "ColorSelection") -> Dict[str, str]:
    """Build every export string for a selection.

    Args:
        selection: Derived color selection.

    Returns:
        Ordered mapping of format label to text.
    """
    return {
        "RGB": format_rgb(selection.rgb),
        "HSL": format_hsl(selection.hsl),
        "Modern CSS": selection.css,
        "LAB": format_lab(selection.lab),
        "OKLCH": format_oklch(selection.oklch),
        "HEX": format_hex(selection.rgb),
    }


def parse_color(text: str) -> RGBColor:
    """Parse a user-supplied color string.

    Accepts ``#rgb``, ``#rrggbb`` (leading ``#`` optional),
    ``rgb(r, g, b)`` and ``r,g,b``.

    Args:
        text: Color string.

    Returns:
        Parsed RGBColor.

    Raises:
        ChromaticityError: If the string cannot be parsed.
    """
    value = text.strip()

    match = _HEX_RE.match(value)
    if match:
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return RGBColor(
            float(int(digits[0:2], 16)),
            float(int(digits[2:4], 16)),
            float(int(digits[4:6], 16)),
        )

    func = _RGB_FUNC_RE.match(value)
    if func:
        value = func.group(1)

    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 3:
        raise ChromaticityError(f"Invalid color: '{text}'")
    try:
        channels = [float(p) for p in parts]
    except ValueError:
        raise ChromaticityError(f"Invalid color: '{text}'")
    if not all(math.isfinite(c) for c in channels):
        raise ChromaticityError(f"Invalid color: '{text}'")
    return RGBColor(*channels)
