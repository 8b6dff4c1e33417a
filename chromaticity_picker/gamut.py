"""Gamut boundaries, in-gamut testing and color temperature."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from .color import RGBColor
from .spaces import ColorSpace, resolve_space


@dataclass(frozen=True)
class ChromaticityPoint:
    """A vertex of a boundary polygon in xy chromaticity space."""

    x: float
    y: float


Polygon = Tuple[ChromaticityPoint, ...]

# Simplified spectral locus; closed, last point repeats the first
CHROMATICITY_BOUNDARY: Polygon = (
    ChromaticityPoint(0.7347, 0.2653),  # 700nm
    ChromaticityPoint(0.2738, 0.7174),  # 546nm
    ChromaticityPoint(0.1666, 0.0089),  # 435nm
    ChromaticityPoint(0.7347, 0.2653),
)

SRGB_GAMUT: Polygon = (
    ChromaticityPoint(0.64, 0.33),
    ChromaticityPoint(0.30, 0.60),
    ChromaticityPoint(0.15, 0.06),
    ChromaticityPoint(0.64, 0.33),
)

P3_GAMUT: Polygon = (
    ChromaticityPoint(0.68, 0.32),
    ChromaticityPoint(0.265, 0.69),
    ChromaticityPoint(0.15, 0.06),
    ChromaticityPoint(0.68, 0.32),
)

REC2020_GAMUT: Polygon = (
    ChromaticityPoint(0.708, 0.292),
    ChromaticityPoint(0.170, 0.797),
    ChromaticityPoint(0.131, 0.046),
    ChromaticityPoint(0.708, 0.292),
)

# Overlay order and stroke colors used by the diagram renderer
GAMUT_OVERLAYS: Tuple[Tuple[ColorSpace, Polygon, str], ...] = (
    (ColorSpace.SRGB, SRGB_GAMUT, "#ef4444"),
    (ColorSpace.P3, P3_GAMUT, "#10b981"),
    (ColorSpace.REC2020, REC2020_GAMUT, "#8b5cf6"),
)

_GAMUTS = {space: polygon for space, polygon, _ in GAMUT_OVERLAYS}


def gamut_polygon(space: Optional[ColorSpace] = ColorSpace.SRGB) -> Polygon:
    """Return the gamut triangle of a color space (sRGB for unknown tags)."""
    return _GAMUTS.get(resolve_space(space), SRGB_GAMUT)


def is_in_gamut(rgb: RGBColor) -> bool:
    """Check that every channel lies in [0, 255].

    This is a range check on display values only; it does not depend on
    the color space. Call it on the unclamped value.
    """
    return (
        0 <= rgb.r <= 255
        and 0 <= rgb.g <= 255
        and 0 <= rgb.b <= 255
    )


def get_color_temperature(x: float, y: float) -> float:
    """Estimate correlated color temperature with McCamy's cubic.

    n = (x - 0.3320) / (0.1858 - y)
    CCT = 449 n^3 + 3525 n^2 + 6823.3 n + 5520.33

    There is no guard at y = 0.1858: the division follows IEEE rules and
    the result may be huge, infinite or NaN.

    Args:
        x: Chromaticity x.
        y: Chromaticity y.

    Returns:
        Temperature in Kelvin.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        n = np.float64(x - 0.3320) / np.float64(0.1858 - y)
        cct = 449.0 * n ** 3 + 3525.0 * n ** 2 + 6823.3 * n + 5520.33
    return float(cct)


def contains_chromaticity(
    polygon: Sequence[ChromaticityPoint], x: float, y: float
) -> bool:
    """Even-odd test of whether (x, y) lies inside a closed polygon.

    Args:
        polygon: Vertices; a repeated closing vertex is allowed.
        x: Chromaticity x.
        y: Chromaticity y.

    Returns:
        True if the point is inside.
    """
    inside = False
    count = len(polygon)
    for i in range(count):
        a = polygon[i]
        b = polygon[(i + 1) % count]
        if (a.y > y) != (b.y > y):
            cross_x = a.x + (y - a.y) * (b.x - a.x) / (b.y - a.y)
            if x < cross_x:
                inside = not inside
    return inside
