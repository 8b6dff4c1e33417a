"""Chromaticity Picker - color conversions and a CIE 1931 diagram picker.

This package converts colors between RGB, XYZ, xyY, HSL, LAB and an
LCh-style OKLCH, and renders a chromaticity diagram for picking colors.

Example:
    from chromaticity_picker import ColorSpace, RGBColor, derive_selection

    selection = derive_selection(RGBColor(255, 100, 100), ColorSpace.P3)
    print(selection.css)  # color(display-p3 1.0000 0.3922 0.3922)

Picking a chromaticity on the diagram:

    from chromaticity_picker import select_chromaticity, render_diagram_bytes

    selection = select_chromaticity(0.3127, 0.3290, luminance=0.5)
    png = render_diagram_bytes(selection)

For debug logging, enable with:

    import logging
    logging.getLogger("chromaticity_picker").setLevel(logging.DEBUG)
    logging.basicConfig(level=logging.DEBUG)
"""
import logging

# Package logger - disabled by default, enable with logging.getLogger("chromaticity_picker").setLevel(logging.DEBUG)
logger = logging.getLogger("chromaticity_picker")
logger.addHandler(logging.NullHandler())
from .cli import main
from .color import (
    D65_WHITE_POINT,
    HSLColor,
    LABColor,
    OKLCHColor,
    RGBColor,
    XYZColor,
    XyYColor,
    lab_to_oklch,
    rgb_to_hsl,
    rgb_to_xyz,
    xyy_to_rgb_array,
    xyy_to_xyz,
    xyz_to_lab,
    xyz_to_rgb,
    xyz_to_xyy,
)
from .config import ChromaticityError, Config
from .css import (
    export_formats,
    format_hex,
    format_hsl,
    format_lab,
    format_oklch,
    format_rgb,
    generate_css_color,
    parse_color,
)
from .diagram import render_diagram, render_diagram_bytes
from .gamma import gamma_correct, gamma_uncorrect
from .gamut import (
    CHROMATICITY_BOUNDARY,
    P3_GAMUT,
    REC2020_GAMUT,
    SRGB_GAMUT,
    ChromaticityPoint,
    contains_chromaticity,
    gamut_polygon,
    get_color_temperature,
    is_in_gamut,
)
from .selection import (
    ColorSelection,
    DiagramLayout,
    PickResult,
    derive_selection,
    pick_chromaticity,
    select_chromaticity,
    select_pixel,
)
from .spaces import ColorSpace, get_matrices

__all__ = [
    "ChromaticityError",
    "Config",
    "main",
    # Records and tags
    "RGBColor",
    "XYZColor",
    "XyYColor",
    "LABColor",
    "OKLCHColor",
    "HSLColor",
    "ColorSpace",
    "ChromaticityPoint",
    # Conversions
    "get_matrices",
    "rgb_to_xyz",
    "xyz_to_rgb",
    "xyz_to_xyy",
    "xyy_to_xyz",
    "xyy_to_rgb_array",
    "rgb_to_hsl",
    "xyz_to_lab",
    "lab_to_oklch",
    "gamma_correct",
    "gamma_uncorrect",
    # Gamut and temperature
    "D65_WHITE_POINT",
    "CHROMATICITY_BOUNDARY",
    "SRGB_GAMUT",
    "P3_GAMUT",
    "REC2020_GAMUT",
    "gamut_polygon",
    "contains_chromaticity",
    "is_in_gamut",
    "get_color_temperature",
    # Formatting
    "generate_css_color",
    "format_rgb",
    "format_hsl",
    "format_lab",
    "format_oklch",
    "format_hex",
    "export_formats",
    "parse_color",
    # Selection and rendering
    "ColorSelection",
    "PickResult",
    "DiagramLayout",
    "derive_selection",
    "pick_chromaticity",
    "select_chromaticity",
    "select_pixel",
    "render_diagram",
    "render_diagram_bytes",
]

__version__ = "1.0.0"
