"""Pytest fixtures for chromaticity_picker tests."""
from __future__ import annotations

import pytest

from chromaticity_picker import (
    ColorSpace,
    Config,
    DiagramLayout,
    RGBColor,
    XYZColor,
    derive_selection,
)
from chromaticity_picker.selection import ColorSelection


@pytest.fixture
def default_config() -> Config:
    """Return a default Config instance."""
    return Config()


@pytest.fixture
def coral() -> RGBColor:
    """The picker's initial color, rgb(255, 100, 100)."""
    return RGBColor(255, 100, 100)


@pytest.fixture
def d65_xyz() -> XYZColor:
    """D65 reference white normalized to Y = 1."""
    return XYZColor(0.95047, 1.0, 1.08883)


@pytest.fixture
def default_layout() -> DiagramLayout:
    """Return the default 400x400 diagram layout."""
    return DiagramLayout()


@pytest.fixture
def coral_selection(coral: RGBColor) -> ColorSelection:
    """Selection derived from the initial color in sRGB."""
    return derive_selection(coral, ColorSpace.SRGB)


@pytest.fixture
def sample_colors() -> list:
    """A spread of RGB colors covering corners and mid tones."""
    return [
        RGBColor(0, 0, 0),
        RGBColor(255, 255, 255),
        RGBColor(255, 0, 0),
        RGBColor(0, 255, 0),
        RGBColor(0, 0, 255),
        RGBColor(255, 255, 0),
        RGBColor(0, 255, 255),
        RGBColor(255, 0, 255),
        RGBColor(128, 128, 128),
        RGBColor(255, 100, 100),
        RGBColor(12.5, 200.25, 77),
    ]
