"""Color space registry: working-space matrices and the D65 white point.

Matrices are stored as read-only numpy arrays, built once at import and
shared by every conversion call. Each space owns a pair:

    xyz_to_rgb: XYZ -> linear RGB (four-decimal working-space table)
    rgb_to_xyz: linear RGB -> XYZ (inverse of the table above)

The inverse is derived rather than tabulated. Independently rounded
four-decimal inverses drift by up to 0.06 per channel on a 0-255 round
trip in P3; the derived inverse agrees with them to about 1e-4.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Sequence, Tuple

import numpy as np

from .config import ChromaticityError


class ColorSpace(Enum):
    """Color space tag selecting matrices and CSS serialization."""

    SRGB = "sRGB"
    P3 = "P3"
    REC2020 = "Rec2020"
    # Reserved; never select a matrix
    XYZ = "XYZ"
    LAB = "LAB"
    OKLCH = "OKLCH"

    @classmethod
    def parse(cls, name: str) -> "ColorSpace":
        """Resolve a user-supplied color space name.

        Args:
            name: Space name, case-insensitive ("srgb", "p3", "display-p3",
                "rec2020", ...).

        Returns:
            Matching ColorSpace member.

        Raises:
            ChromaticityError: If the name is not recognized.
        """
        key = name.strip().lower()
        if key in _ALIASES:
            return _ALIASES[key]
        for member in cls:
            if member.value.lower() == key:
                return member
        choices = ", ".join(m.value for m in MATRIX_SPACES)
        raise ChromaticityError(
            f"Unknown color space: {name}. Available spaces: {choices}"
        )


_ALIASES: Dict[str, ColorSpace] = {
    "display-p3": ColorSpace.P3,
    "rec-2020": ColorSpace.REC2020,
    "bt2020": ColorSpace.REC2020,
}

MATRIX_SPACES: Tuple[ColorSpace, ...] = (
    ColorSpace.SRGB,
    ColorSpace.P3,
    ColorSpace.REC2020,
)

# D65 white point chromaticity
D65_CHROMATICITY: Tuple[float, float] = (0.3127, 0.3290)

# D65 reference white, normalized to Y = 1
D65_REFERENCE_WHITE: Tuple[float, float, float] = (0.95047, 1.0, 1.08883)


def _frozen(matrix: np.ndarray) -> np.ndarray:
    matrix = np.array(matrix, dtype=np.float64)
    matrix.flags.writeable = False
    return matrix


def _matrix_pair(rows: Sequence[Sequence[float]]) -> Tuple[np.ndarray, np.ndarray]:
    forward = _frozen(rows)
    return forward, _frozen(np.linalg.inv(forward))


SRGB_XYZ_TO_RGB, SRGB_RGB_TO_XYZ = _matrix_pair([
    [3.2406, -1.5372, -0.4986],
    [-0.9689, 1.8758, 0.0415],
    [0.0557, -0.2040, 1.0570],
])

P3_XYZ_TO_RGB, P3_RGB_TO_XYZ = _matrix_pair([
    [2.4934, -0.9313, -0.4027],
    [-0.8295, 1.7627, 0.0236],
    [0.0358, -0.0761, 0.9569],
])

REC2020_XYZ_TO_RGB, REC2020_RGB_TO_XYZ = _matrix_pair([
    [1.7167, -0.3557, -0.2534],
    [-0.6667, 1.6165, 0.0158],
    [0.0176, -0.0428, 0.9421],
])

_MATRICES: Dict[ColorSpace, Tuple[np.ndarray, np.ndarray]] = {
    ColorSpace.SRGB: (SRGB_XYZ_TO_RGB, SRGB_RGB_TO_XYZ),
    ColorSpace.P3: (P3_XYZ_TO_RGB, P3_RGB_TO_XYZ),
    ColorSpace.REC2020: (REC2020_XYZ_TO_RGB, REC2020_RGB_TO_XYZ),
}


def resolve_space(space) -> ColorSpace:
    """Coerce a tag or space name to a ColorSpace, defaulting to sRGB.

    Unlike ColorSpace.parse this never raises; it is the lenient lookup
    used by the conversion and formatting functions.
    """
    if isinstance(space, ColorSpace):
        return space
    if isinstance(space, str):
        try:
            return ColorSpace.parse(space)
        except ChromaticityError:
            return ColorSpace.SRGB
    return ColorSpace.SRGB


def get_matrices(
    space: Optional[ColorSpace] = ColorSpace.SRGB,
) -> Tuple[np.ndarray, np.ndarray]:
    """Return the matrix pair for a color space.

    Reserved tags, unknown values and None fall back to sRGB.

    Args:
        space: Color space tag or name.

    Returns:
        Tuple of (xyz_to_rgb, rgb_to_xyz) read-only 3x3 arrays.
    """
    return _MATRICES.get(resolve_space(space), _MATRICES[ColorSpace.SRGB])
