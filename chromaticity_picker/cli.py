"""Command-line interface for the chromaticity picker."""
from __future__ import annotations

import logging
import math
import sys
from typing import List, Optional, Sequence, Tuple

logger = logging.getLogger("chromaticity_picker")

from .config import ChromaticityError, Config, validate_diagram_dimensions
from .css import export_formats, parse_color
from .diagram import render_diagram
from .gamut import GAMUT_OVERLAYS, contains_chromaticity
from .selection import (
    ColorSelection,
    DiagramLayout,
    derive_selection,
    select_chromaticity,
)
from .spaces import ColorSpace


def build_selection(config: Config) -> ColorSelection:
    """Derive the selection described by a configuration.

    A chromaticity pick (config.xy) takes precedence over config.color.

    Args:
        config: Configuration options.

    Returns:
        Derived ColorSelection.

    Raises:
        ChromaticityError: If the color, space or luminance is invalid.
    """
    space = ColorSpace.parse(config.color_space)
    if config.xy is not None:
        x, y = config.xy
        logger.debug(f"Selecting chromaticity ({x}, {y}) in {space.value}")
        return select_chromaticity(x, y, config.luminance, space)

    rgb = parse_color(config.color)
    logger.debug(f"Selecting color {rgb} in {space.value}")
    return derive_selection(rgb, space)


def format_report(selection: ColorSelection) -> List[str]:
    """Format the selection as report lines.

    Args:
        selection: Derived selection.

    Returns:
        List of lines, one per value.
    """
    lines = [f"Color space: {selection.color_space.value}"]
    for label, text in export_formats(selection).items():
        lines.append(f"{label}: {text}")
    lines.append(
        f"Chromaticity: x={selection.xy.x:.4f} y={selection.xy.y:.4f}"
    )
    inside = [
        space.value
        for space, polygon, _ in GAMUT_OVERLAYS
        if contains_chromaticity(polygon, selection.xy.x, selection.xy.y)
    ]
    lines.append("Inside triangles: " + (", ".join(inside) if inside else "none"))
    if math.isfinite(selection.temperature):
        lines.append(f"Temperature: {math.floor(selection.temperature + 0.5)}K")
    else:
        lines.append("Temperature: undefined")
    lines.append(
        "Gamut: " + ("In Gamut" if selection.in_gamut else "Out of Gamut")
    )
    return lines


def layout_from_config(config: Config) -> DiagramLayout:
    """Build the diagram layout from configuration options."""
    validate_diagram_dimensions(
        config.canvas_size, config.diagram_size, config.diagram_offset
    )
    return DiagramLayout(
        canvas_width=config.canvas_size,
        canvas_height=config.canvas_size,
        diagram_size=config.diagram_size,
        offset_x=config.diagram_offset,
        offset_y=config.diagram_offset,
    )


def run_picker(config: Config) -> ColorSelection:
    """Print the report for a configuration and write the diagram if asked.

    Args:
        config: Configuration options.

    Returns:
        The derived selection.
    """
    selection = build_selection(config)
    for line in format_report(selection):
        print(line)

    if config.diagram_path or config.preview:
        img = render_diagram(
            selection,
            layout_from_config(config),
            show_gamuts=config.show_gamuts,
            fill_locus=config.fill_locus,
        )
        if config.diagram_path:
            img.save(config.diagram_path, format="PNG")
            print(f"Saved diagram to: {config.diagram_path}")
        if config.preview:
            img.show(title="Chromaticity Diagram")

    return selection


def _parse_float(value: str, name: str) -> float:
    try:
        result = float(value)
    except ValueError:
        raise ChromaticityError(f"Invalid {name} value: '{value}'")
    if not math.isfinite(result):
        raise ChromaticityError(f"Invalid {name} value: '{value}'")
    return result


def parse_args(argv: Sequence[str]) -> Config:
    """Parse command-line arguments.

    Args:
        argv: Command-line arguments (including program name).

    Returns:
        Configured Config instance.

    Raises:
        ChromaticityError: If arguments are invalid.
    """
    args = list(argv[1:])
    config = Config()
    xy: Optional[Tuple[float, float]] = None
    positional: List[str] = []

    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--xy":
            if i + 2 >= len(args):
                raise ChromaticityError(_usage_message())
            xy = (
                _parse_float(args[i + 1], "x"),
                _parse_float(args[i + 2], "y"),
            )
            i += 3
        elif arg == "--luminance":
            if i + 1 >= len(args):
                raise ChromaticityError(_usage_message())
            luminance = _parse_float(args[i + 1], "luminance")
            if 0.0 <= luminance <= 1.0:
                config.luminance = luminance
            else:
                print(
                    f"Warning: luminance '{args[i + 1]}' outside [0, 1], "
                    f"falling back to default ({config.luminance})"
                )
            i += 2
        elif arg == "--space":
            if i + 1 >= len(args):
                raise ChromaticityError(_usage_message())
            config.color_space = ColorSpace.parse(args[i + 1]).value
            i += 2
        elif arg == "--diagram":
            if i + 1 >= len(args):
                raise ChromaticityError(_usage_message())
            config.diagram_path = args[i + 1]
            i += 2
        elif arg == "--no-gamuts":
            config.show_gamuts = False
            i += 1
        elif arg == "--fill":
            config.fill_locus = True
            i += 1
        elif arg == "--preview":
            config.preview = True
            i += 1
        elif arg == "--debug":
            config.debug = True
            i += 1
        elif arg.startswith("--"):
            raise ChromaticityError(f"Unknown option: {arg}")
        else:
            positional.append(arg)
            i += 1

    if len(positional) > 1:
        raise ChromaticityError(_usage_message())
    if positional and xy is not None:
        raise ChromaticityError("Give either a color or --xy, not both")
    if positional:
        # Validate early so usage errors surface before any output
        parse_color(positional[0])
        config.color = positional[0]
    config.xy = xy

    # Enable debug logging if requested
    if config.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(message)s"
        )
        logging.getLogger("chromaticity_picker").setLevel(logging.DEBUG)

    return config


def _usage_message() -> str:
    """Return usage message string."""
    return (
        "Usage: python pick_color.py [COLOR] [--xy X Y] [--luminance Y] "
        "[--space sRGB|P3|Rec2020] [--diagram OUT.png] [--no-gamuts] "
        "[--fill] [--preview] [--debug]"
    )


def main(argv: Sequence[str]) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    try:
        config = parse_args(argv)
        run_picker(config)
        return 0
    except ChromaticityError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except Exception as exc:
        print(f"Processing error: {exc}", file=sys.stderr)
        return 1


def console_main() -> int:
    """Console-script entry point."""
    return main(sys.argv)
