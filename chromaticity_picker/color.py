"""Color records and conversions between RGB, XYZ, xyY, HSL, LAB and OKLCH.

All conversions are pure functions of their inputs. None of them clamp or
gamma-correct; out-of-gamut values pass through untouched so callers can
test them before the final display step.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .spaces import (
    D65_CHROMATICITY,
    D65_REFERENCE_WHITE,
    ColorSpace,
    get_matrices,
)


@dataclass(frozen=True)
class RGBColor:
    """RGB channels, conventionally in [0, 255] but not bounded."""

    r: float
    g: float
    b: float


@dataclass(frozen=True)
class XYZColor:
    """CIE tristimulus values. ``z`` is tristimulus Z."""

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class XyYColor:
    """Chromaticity x, y plus tristimulus luminance Y."""

    x: float
    y: float
    Y: float


@dataclass(frozen=True)
class LABColor:
    """CIE 1976 L*a*b*."""

    l: float
    a: float
    b: float


@dataclass(frozen=True)
class OKLCHColor:
    """Lightness in [0, 1], chroma and hue in degrees."""

    l: float
    c: float
    h: float


@dataclass(frozen=True)
class HSLColor:
    """Hue in degrees, saturation and lightness in percent."""

    h: float
    s: float
    l: float


D65_WHITE_POINT = XyYColor(D65_CHROMATICITY[0], D65_CHROMATICITY[1], 1.0)

# CIE 1976 linear segment near black
LAB_EPSILON = 0.008856
LAB_SLOPE = 7.787


def rgb_to_xyz(
    rgb: RGBColor, space: Optional[ColorSpace] = ColorSpace.SRGB
) -> XYZColor:
    """Convert RGB to XYZ with the space's RGB -> XYZ matrix.

    Channels are used as-is: no inverse gamma is applied, so the caller
    decides which domain the values live in.

    Args:
        rgb: Input color.
        space: Working space; unknown tags fall back to sRGB.

    Returns:
        XYZ tristimulus values.
    """
    _, to_xyz = get_matrices(space)
    x, y, z = to_xyz @ np.array([rgb.r, rgb.g, rgb.b], dtype=np.float64)
    return XYZColor(float(x), float(y), float(z))


def xyz_to_rgb(
    xyz: XYZColor, space: Optional[ColorSpace] = ColorSpace.SRGB
) -> RGBColor:
    """Convert XYZ to linear RGB with the space's XYZ -> RGB matrix.

    The result may fall outside the displayable range; it is neither
    clamped nor gamma-encoded.

    Args:
        xyz: Tristimulus values.
        space: Working space; unknown tags fall back to sRGB.

    Returns:
        Linear RGB color.
    """
    to_rgb, _ = get_matrices(space)
    r, g, b = to_rgb @ np.array([xyz.x, xyz.y, xyz.z], dtype=np.float64)
    return RGBColor(float(r), float(g), float(b))


def xyz_to_xyy(xyz: XYZColor) -> XyYColor:
    """Project XYZ onto chromaticity coordinates.

    A zero tristimulus sum yields XyYColor(0, 0, 0).
    """
    total = xyz.x + xyz.y + xyz.z
    if total == 0:
        return XyYColor(0.0, 0.0, 0.0)
    return XyYColor(xyz.x / total, xyz.y / total, xyz.y)


def xyy_to_xyz(xyy: XyYColor) -> XYZColor:
    """Expand chromaticity plus luminance back to XYZ.

    y = 0 yields XYZColor(0, 0, 0).
    """
    if xyy.y == 0:
        return XYZColor(0.0, 0.0, 0.0)
    big_y = xyy.Y
    x = (xyy.x * big_y) / xyy.y
    z = ((1.0 - xyy.x - xyy.y) * big_y) / xyy.y
    return XYZColor(x, big_y, z)


def rgb_to_hsl(rgb: RGBColor) -> HSLColor:
    """Convert 0-255 RGB to HSL.

    Hue comes from the channel holding the maximum; ties resolve in
    R, G, B order.

    Args:
        rgb: Input color.

    Returns:
        HSL with h in [0, 360), s and l in percent.
    """
    r = rgb.r / 255.0
    g = rgb.g / 255.0
    b = rgb.b / 255.0

    high = max(r, g, b)
    low = min(r, g, b)
    diff = high - low

    h = 0.0
    s = 0.0
    l = (high + low) / 2.0

    if diff != 0:
        s = diff / (2.0 - high - low) if l > 0.5 else diff / (high + low)
        if high == r:
            h = (g - b) / diff + (6.0 if g < b else 0.0)
        elif high == g:
            h = (b - r) / diff + 2.0
        else:
            h = (r - g) / diff + 4.0
        h /= 6.0

    return HSLColor(h * 360.0, s * 100.0, l * 100.0)


def _lab_f(t: float) -> float:
    if t > LAB_EPSILON:
        return t ** (1.0 / 3.0)
    return LAB_SLOPE * t + 16.0 / 116.0


def xyz_to_lab(xyz: XYZColor) -> LABColor:
    """Convert XYZ to CIE L*a*b* relative to the D65 reference white."""
    xn, yn, zn = D65_REFERENCE_WHITE
    fx = _lab_f(xyz.x / xn)
    fy = _lab_f(xyz.y / yn)
    fz = _lab_f(xyz.z / zn)

    return LABColor(
        116.0 * fy - 16.0,
        500.0 * (fx - fy),
        200.0 * (fy - fz),
    )


def lab_to_oklch(lab: LABColor) -> OKLCHColor:
    """Polar form of LAB reported under OKLCH field names.

    This is CIE LCh(ab) rescaled (l = L/100, c = chroma/100), not the
    OKLab-derived OKLCH. Values are comparable only with other outputs of
    this function.

    Args:
        lab: CIE LAB color.

    Returns:
        OKLCHColor with h normalized to [0, 360).
    """
    l = lab.l / 100.0
    c = math.hypot(lab.a, lab.b) / 100.0
    h = math.degrees(math.atan2(lab.b, lab.a))
    return OKLCHColor(l, c, h + 360.0 if h < 0 else h)


def xyy_to_rgb_array(
    x: np.ndarray,
    y: np.ndarray,
    luminance: float,
    space: Optional[ColorSpace] = ColorSpace.SRGB,
) -> np.ndarray:
    """Vectorized xyY -> XYZ -> linear RGB for chromaticity grids.

    Points with y = 0 map to black, matching xyy_to_xyz.

    Args:
        x: Array of chromaticity x values.
        y: Array of chromaticity y values, same shape as x.
        luminance: Shared tristimulus Y.
        space: Working space; unknown tags fall back to sRGB.

    Returns:
        Array of shape x.shape + (3,) with linear RGB values, unclamped.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    valid = y != 0
    safe_y = np.where(valid, y, 1.0)

    big_x = np.where(valid, x * luminance / safe_y, 0.0)
    big_y = np.where(valid, luminance, 0.0)
    big_z = np.where(valid, (1.0 - x - y) * luminance / safe_y, 0.0)

    to_rgb, _ = get_matrices(space)
    xyz = np.stack([big_x, big_y, big_z], axis=-1)
    return xyz @ to_rgb.T
