"""Configuration and validation for the chromaticity picker."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple


class ChromaticityError(Exception):
    """Base exception for chromaticity picker errors."""

    pass


# Initial color of the picker (255, 100, 100)
DEFAULT_COLOR = "#ff6464"
MAX_CANVAS_SIZE = 4096


@dataclass
class Config:
    """Configuration for a single picker run."""

    color: str = DEFAULT_COLOR
    xy: Optional[Tuple[float, float]] = None
    luminance: float = 0.5
    color_space: str = "sRGB"
    diagram_path: Optional[str] = None
    show_gamuts: bool = True
    fill_locus: bool = False
    preview: bool = False
    debug: bool = False

    # Diagram geometry (pixels)
    canvas_size: int = 400
    diagram_size: int = 350
    diagram_offset: int = 25


def validate_luminance(luminance: float) -> None:
    """Validate a luminance (tristimulus Y) value for a chromaticity pick.

    Args:
        luminance: Luminance value.

    Raises:
        ChromaticityError: If luminance is not a finite number in [0, 1].
    """
    if not math.isfinite(luminance):
        raise ChromaticityError("Luminance must be a finite number")
    if luminance < 0.0 or luminance > 1.0:
        raise ChromaticityError(
            f"Luminance must be between 0 and 1, got {luminance}"
        )


def validate_diagram_dimensions(
    canvas_size: int, diagram_size: int, offset: int
) -> None:
    """Validate diagram geometry.

    Args:
        canvas_size: Canvas width and height in pixels.
        diagram_size: Side of the unit chromaticity square in pixels.
        offset: Distance from the canvas edge to the diagram in pixels.

    Raises:
        ChromaticityError: If dimensions are invalid.
    """
    if canvas_size <= 0 or diagram_size <= 0:
        raise ChromaticityError("Diagram dimensions must be positive")
    if offset < 0:
        raise ChromaticityError("Diagram offset cannot be negative")
    if canvas_size > MAX_CANVAS_SIZE:
        raise ChromaticityError(
            f"Canvas too large (max {MAX_CANVAS_SIZE}x{MAX_CANVAS_SIZE})"
        )
    if offset + diagram_size > canvas_size:
        raise ChromaticityError("Diagram does not fit inside the canvas")
