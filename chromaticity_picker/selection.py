"""Selected-color snapshots and the chromaticity pick pipeline.

A ColorSelection is derived in one pass from an RGB color and a color
space; an interaction replaces the whole snapshot instead of updating
fields one at a time.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .color import (
    HSLColor,
    LABColor,
    OKLCHColor,
    RGBColor,
    XyYColor,
    lab_to_oklch,
    rgb_to_hsl,
    rgb_to_xyz,
    xyy_to_xyz,
    xyz_to_lab,
    xyz_to_rgb,
    xyz_to_xyy,
)
from .config import validate_luminance
from .css import generate_css_color
from .gamma import gamma_correct
from .gamut import get_color_temperature, is_in_gamut
from .spaces import ColorSpace, resolve_space

logger = logging.getLogger("chromaticity_picker")


@dataclass(frozen=True)
class ColorSelection:
    """Every representation of the currently selected color."""

    rgb: RGBColor
    color_space: ColorSpace
    xy: XyYColor
    hsl: HSLColor
    lab: LABColor
    oklch: OKLCHColor
    css: str
    in_gamut: bool
    temperature: float


@dataclass(frozen=True)
class PickResult:
    """Outcome of mapping a chromaticity to a display color."""

    xy: XyYColor
    unclamped: RGBColor
    rgb: RGBColor
    in_gamut: bool


@dataclass(frozen=True)
class DiagramLayout:
    """Placement of the unit chromaticity square on the canvas."""

    canvas_width: int = 400
    canvas_height: int = 400
    diagram_size: int = 350
    offset_x: int = 25
    offset_y: int = 25

    def to_pixel(self, x: float, y: float) -> Tuple[float, float]:
        """Map chromaticity to canvas pixels (y grows downward)."""
        px = self.offset_x + x * self.diagram_size
        py = self.offset_y + (1.0 - y) * self.diagram_size
        return px, py

    def to_chromaticity(self, px: float, py: float) -> Tuple[float, float]:
        """Map canvas pixels to chromaticity, clamped to [0, 1]."""
        x = (px - self.offset_x) / self.diagram_size
        y = 1.0 - (py - self.offset_y) / self.diagram_size
        return _clamp01(x), _clamp01(y)


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def derive_selection(
    rgb: RGBColor,
    space: Optional[ColorSpace] = ColorSpace.SRGB,
    xy: Optional[XyYColor] = None,
) -> ColorSelection:
    """Derive the full selection bundle from an RGB color.

    The 0-255 channels go straight through the space's matrix, so xy and
    LAB describe the color the picker displays, not a colorimetrically
    linearized one.

    Args:
        rgb: Selected color.
        space: Working color space.
        xy: Chromaticity to keep on the snapshot instead of the one
            derived from rgb (used after a diagram pick).

    Returns:
        Immutable ColorSelection.
    """
    space = resolve_space(space)
    xyz = rgb_to_xyz(rgb, space)
    derived_xy = xyz_to_xyy(xyz)
    lab = xyz_to_lab(xyz)
    chroma = xy if xy is not None else derived_xy

    return ColorSelection(
        rgb=rgb,
        color_space=space,
        xy=chroma,
        hsl=rgb_to_hsl(rgb),
        lab=lab,
        oklch=lab_to_oklch(lab),
        css=generate_css_color(rgb, space),
        in_gamut=is_in_gamut(rgb),
        temperature=get_color_temperature(chroma.x, chroma.y),
    )


def to_display_rgb(linear: RGBColor) -> Tuple[RGBColor, RGBColor]:
    """Gamma-encode linear RGB and scale it to 0-255.

    Args:
        linear: Linear RGB, nominally in [0, 1].

    Returns:
        Tuple of (unclamped, clamped) display colors. Gamut checks belong
        on the first element; clamping discards that signal.
    """
    unclamped = RGBColor(
        gamma_correct(linear.r) * 255.0,
        gamma_correct(linear.g) * 255.0,
        gamma_correct(linear.b) * 255.0,
    )
    clamped = RGBColor(
        max(0.0, min(255.0, unclamped.r)),
        max(0.0, min(255.0, unclamped.g)),
        max(0.0, min(255.0, unclamped.b)),
    )
    return unclamped, clamped


def pick_chromaticity(
    x: float,
    y: float,
    luminance: float = 0.5,
    space: Optional[ColorSpace] = ColorSpace.SRGB,
) -> PickResult:
    """Turn a chromaticity pick into a displayable color.

    Runs xyY -> XYZ -> linear RGB -> gamma -> 0-255, tests the gamut on
    the unclamped value, then clamps.

    Args:
        x: Chromaticity x (clamped to [0, 1]).
        y: Chromaticity y (clamped to [0, 1]).
        luminance: Tristimulus Y in [0, 1].
        space: Working color space.

    Returns:
        PickResult with both unclamped and clamped colors.

    Raises:
        ChromaticityError: If luminance is outside [0, 1].
    """
    validate_luminance(luminance)
    xy = XyYColor(_clamp01(x), _clamp01(y), luminance)
    linear = xyz_to_rgb(xyy_to_xyz(xy), space)
    unclamped, rgb = to_display_rgb(linear)
    in_gamut = is_in_gamut(unclamped)

    logger.debug(
        f"Pick xy=({xy.x:.4f}, {xy.y:.4f}) Y={luminance:.3f}: "
        f"unclamped=({unclamped.r:.2f}, {unclamped.g:.2f}, {unclamped.b:.2f}) "
        f"in_gamut={in_gamut}"
    )
    return PickResult(xy=xy, unclamped=unclamped, rgb=rgb, in_gamut=in_gamut)


def select_chromaticity(
    x: float,
    y: float,
    luminance: float = 0.5,
    space: Optional[ColorSpace] = ColorSpace.SRGB,
) -> ColorSelection:
    """Pick a chromaticity and derive the selection for the result.

    The picked xy stays on the snapshot and in_gamut reflects the value
    before clamping.
    """
    pick = pick_chromaticity(x, y, luminance, space)
    selection = derive_selection(pick.rgb, space, xy=pick.xy)
    return replace(selection, in_gamut=pick.in_gamut)


def select_pixel(
    px: float,
    py: float,
    luminance: float = 0.5,
    space: Optional[ColorSpace] = ColorSpace.SRGB,
    layout: Optional[DiagramLayout] = None,
) -> ColorSelection:
    """Select the color under a diagram pixel."""
    layout = layout or DiagramLayout()
    x, y = layout.to_chromaticity(px, py)
    return select_chromaticity(x, y, luminance, space)

