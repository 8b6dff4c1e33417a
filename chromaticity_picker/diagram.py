"""Off-screen rendering of the CIE 1931 chromaticity diagram."""
from __future__ import annotations

import io
import logging
import math
from typing import List, Optional, Sequence, Tuple

import numpy as np
from PIL import Image, ImageColor, ImageDraw, ImageFont

from .color import D65_WHITE_POINT, xyy_to_rgb_array
from .config import validate_diagram_dimensions
from .gamma import gamma_correct_array
from .gamut import CHROMATICITY_BOUNDARY, GAMUT_OVERLAYS, ChromaticityPoint
from .selection import ColorSelection, DiagramLayout
from .spaces import ColorSpace

logger = logging.getLogger("chromaticity_picker")

RGBA = Tuple[int, int, int, int]
Point = Tuple[float, float]

BACKGROUND_START = "#f8fafc"
BACKGROUND_END = "#e2e8f0"
BOUNDARY_COLOR = "#334155"
BOUNDARY_FILL: RGBA = (59, 130, 246, 13)
GRID_COLOR = "#cbd5e1"
LABEL_COLOR = "#475569"
WHITE_POINT_OUTLINE = "#64748b"
GAMUT_FILL_ALPHA = 0x20


def _rgba(color: str, alpha: int = 255) -> RGBA:
    r, g, b = ImageColor.getrgb(color)[:3]
    return (r, g, b, alpha)


def _background(width: int, height: int) -> Image.Image:
    """Diagonal linear gradient from the top-left to the bottom-right corner."""
    start = np.array(_rgba(BACKGROUND_START), dtype=np.float64)
    end = np.array(_rgba(BACKGROUND_END), dtype=np.float64)

    ys, xs = np.mgrid[0:height, 0:width].astype(np.float64)
    t = (xs * width + ys * height) / float(width * width + height * height)
    t = np.clip(t, 0.0, 1.0)[..., None]

    arr = np.round(start + (end - start) * t).astype(np.uint8)
    return Image.fromarray(arr, "RGBA")


def _polygon_pixels(
    polygon: Sequence[ChromaticityPoint], layout: DiagramLayout
) -> List[Point]:
    return [layout.to_pixel(p.x, p.y) for p in polygon]


def _blend_polygon(
    img: Image.Image, points: Sequence[Point], fill: RGBA
) -> Image.Image:
    """Composite a translucent polygon over an RGBA image.

    Drawing a translucent fill straight onto an RGBA image replaces the
    pixels (alpha included) instead of blending, so the fill goes on its
    own transparent layer first.
    """
    layer = Image.new("RGBA", img.size, (0, 0, 0, 0))
    ImageDraw.Draw(layer).polygon(points, fill=fill)
    return Image.alpha_composite(img, layer)


def draw_dashed_polyline(
    draw: ImageDraw.ImageDraw,
    points: Sequence[Point],
    fill,
    width: int = 1,
    dash: Tuple[float, float] = (5.0, 5.0),
) -> None:
    """Draw a dashed polyline, keeping the dash phase across segments.

    Args:
        draw: Target drawing context.
        points: Polyline vertices in pixels.
        fill: Stroke color.
        width: Stroke width.
        dash: (on, off) lengths in pixels.
    """
    on, off = dash
    period = on + off
    phase = 0.0
    for (x0, y0), (x1, y1) in zip(points[:-1], points[1:]):
        length = math.hypot(x1 - x0, y1 - y0)
        if length == 0:
            continue
        ux = (x1 - x0) / length
        uy = (y1 - y0) / length
        pos = 0.0
        while pos < length:
            in_dash = phase < on
            remaining = (on - phase) if in_dash else (period - phase)
            step = min(remaining, length - pos)
            if in_dash:
                draw.line(
                    [
                        (x0 + ux * pos, y0 + uy * pos),
                        (x0 + ux * (pos + step), y0 + uy * (pos + step)),
                    ],
                    fill=fill,
                    width=width,
                )
            pos += step
            phase = (phase + step) % period


def _fill_locus(img: Image.Image, layout: DiagramLayout) -> Image.Image:
    """Paint each pixel inside the spectral locus with its own chromaticity."""
    size = layout.diagram_size
    centers = (np.arange(size, dtype=np.float64) + 0.5) / size
    x = np.tile(centers, (size, 1))
    y = np.tile(1.0 - centers[:, None], (1, size))

    linear = xyy_to_rgb_array(x, y, 1.0, ColorSpace.SRGB)
    linear = np.clip(linear, 0.0, None)
    peak = linear.max(axis=-1, keepdims=True)
    # Normalize brightness so every chromaticity shows at full intensity
    linear = np.divide(linear, peak, out=np.zeros_like(linear), where=peak > 0)
    encoded = np.clip(gamma_correct_array(linear), 0.0, 1.0)

    rgba = np.empty((size, size, 4), dtype=np.uint8)
    rgba[..., :3] = np.round(encoded * 255.0).astype(np.uint8)
    rgba[..., 3] = 255
    tile = Image.fromarray(rgba, "RGBA")

    mask = Image.new("L", (size, size), 0)
    local = [
        (p.x * size, (1.0 - p.y) * size) for p in CHROMATICITY_BOUNDARY
    ]
    ImageDraw.Draw(mask).polygon(local, fill=255)

    result = img.copy()
    result.paste(tile, (layout.offset_x, layout.offset_y), mask)
    return result


def _draw_label(
    draw: ImageDraw.ImageDraw, text: str, center: Point, font
) -> None:
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    x = center[0] - (right - left) / 2.0
    y = center[1] - (bottom - top) / 2.0
    draw.text((x, y), text, fill=LABEL_COLOR, font=font)


def _draw_marker(
    draw: ImageDraw.ImageDraw,
    center: Point,
    radius: float,
    fill,
    outline,
    width: int,
) -> None:
    cx, cy = center
    draw.ellipse(
        [cx - radius, cy - radius, cx + radius, cy + radius],
        fill=fill,
        outline=outline,
        width=width,
    )


def render_diagram(
    selection: Optional[ColorSelection] = None,
    layout: Optional[DiagramLayout] = None,
    show_gamuts: bool = True,
    fill_locus: bool = False,
) -> Image.Image:
    """Render the chromaticity diagram.

    Layers, bottom to top: background gradient, optional locus color
    fill, spectral boundary, gamut triangles, grid, axis labels, selected
    point and the D65 white point.

    Args:
        selection: Current selection; no marker is drawn when None.
        layout: Canvas geometry. Uses DiagramLayout() if None.
        show_gamuts: Draw the sRGB, P3 and Rec2020 triangles.
        fill_locus: Paint the inside of the locus with chromaticity colors.

    Returns:
        RGBA image of layout.canvas_width x layout.canvas_height.

    Raises:
        ChromaticityError: If the layout geometry is invalid.
    """
    layout = layout or DiagramLayout()
    validate_diagram_dimensions(
        layout.canvas_width, layout.diagram_size, layout.offset_x
    )
    validate_diagram_dimensions(
        layout.canvas_height, layout.diagram_size, layout.offset_y
    )
    logger.debug(
        f"Rendering diagram {layout.canvas_width}x{layout.canvas_height}, "
        f"gamuts={show_gamuts}, fill={fill_locus}"
    )

    img = _background(layout.canvas_width, layout.canvas_height)
    if fill_locus:
        img = _fill_locus(img, layout)

    boundary = _polygon_pixels(CHROMATICITY_BOUNDARY, layout)
    img = _blend_polygon(img, boundary, BOUNDARY_FILL)

    gamuts = []
    if show_gamuts:
        for space, polygon, color in GAMUT_OVERLAYS:
            points = _polygon_pixels(polygon, layout)
            img = _blend_polygon(img, points, _rgba(color, GAMUT_FILL_ALPHA))
            gamuts.append((space, points, color))

    # Strokes and markers below are opaque, so drawing in place is safe
    draw = ImageDraw.Draw(img, "RGBA")
    draw.line(boundary, fill=_rgba(BOUNDARY_COLOR), width=2)
    for space, points, color in gamuts:
        draw_dashed_polyline(draw, points, _rgba(color), width=2)
        logger.debug(f"Drew {space.value} gamut overlay")

    top = layout.offset_y
    bottom = layout.offset_y + layout.diagram_size
    left = layout.offset_x
    right = layout.offset_x + layout.diagram_size
    for i in range(11):
        step = i / 10.0 * layout.diagram_size
        draw_dashed_polyline(
            draw, [(left + step, top), (left + step, bottom)],
            _rgba(GRID_COLOR), dash=(2.0, 2.0),
        )
        draw_dashed_polyline(
            draw, [(left, top + step), (right, top + step)],
            _rgba(GRID_COLOR), dash=(2.0, 2.0),
        )

    font = ImageFont.load_default()
    _draw_label(
        draw, "x", ((left + right) / 2.0, layout.canvas_height - 10), font
    )
    _draw_label(draw, "y", (10, (top + bottom) / 2.0), font)

    if selection is not None:
        center = layout.to_pixel(selection.xy.x, selection.xy.y)
        rgb = selection.rgb
        dot = tuple(
            int(round(max(0.0, min(255.0, c)))) for c in (rgb.r, rgb.g, rgb.b)
        ) + (255,)
        _draw_marker(draw, center, 12, (255, 255, 255, 255), _rgba(BOUNDARY_COLOR), 2)
        _draw_marker(draw, center, 8, dot, (255, 255, 255, 255), 1)

    white = layout.to_pixel(D65_WHITE_POINT.x, D65_WHITE_POINT.y)
    _draw_marker(
        draw, white, 4, (255, 255, 255, 255), _rgba(WHITE_POINT_OUTLINE), 1
    )
    return img


def render_diagram_bytes(
    selection: Optional[ColorSelection] = None,
    layout: Optional[DiagramLayout] = None,
    show_gamuts: bool = True,
    fill_locus: bool = False,
) -> bytes:
    """Render the diagram and encode it as PNG bytes."""
    img = render_diagram(selection, layout, show_gamuts, fill_locus)
    out_buf = io.BytesIO()
    img.save(out_buf, format="PNG")
    return out_buf.getvalue()
