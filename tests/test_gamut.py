"""Tests for gamut module."""
from __future__ import annotations

import math

import pytest

from chromaticity_picker.color import RGBColor
from chromaticity_picker.gamut import (
    CHROMATICITY_BOUNDARY,
    GAMUT_OVERLAYS,
    P3_GAMUT,
    REC2020_GAMUT,
    SRGB_GAMUT,
    ChromaticityPoint,
    contains_chromaticity,
    gamut_polygon,
    get_color_temperature,
    is_in_gamut,
)
from chromaticity_picker.spaces import ColorSpace


class TestIsInGamut:
    """Tests for is_in_gamut function."""

    def test_black(self) -> None:
        """Black should be in gamut."""
        assert is_in_gamut(RGBColor(0, 0, 0)) is True

    def test_white(self) -> None:
        """Full white should be in gamut (inclusive bounds)."""
        assert is_in_gamut(RGBColor(255, 255, 255)) is True

    def test_over_range(self) -> None:
        """Channels above 255 should be out of gamut."""
        assert is_in_gamut(RGBColor(300, 0, 0)) is False

    def test_negative(self) -> None:
        """Negative channels should be out of gamut."""
        assert is_in_gamut(RGBColor(10, -0.5, 10)) is False

    def test_each_channel_checked(self) -> None:
        """A single bad channel should fail the test."""
        assert is_in_gamut(RGBColor(0, 0, 255.01)) is False
        assert is_in_gamut(RGBColor(0, 256, 0)) is False


class TestColorTemperature:
    """Tests for get_color_temperature function."""

    def test_d65(self) -> None:
        """D65 should be about 6504 K."""
        assert get_color_temperature(0.3127, 0.3290) == pytest.approx(6505.1, abs=1.0)

    def test_illuminant_a(self) -> None:
        """Illuminant A (x=0.4476, y=0.4074) should be about 2856 K."""
        assert get_color_temperature(0.4476, 0.4074) == pytest.approx(2856, abs=5)

    def test_formula(self) -> None:
        """Should evaluate McCamy's cubic."""
        x, y = 0.35, 0.36
        n = (x - 0.3320) / (0.1858 - y)
        expected = 449 * n ** 3 + 3525 * n ** 2 + 6823.3 * n + 5520.33
        assert get_color_temperature(x, y) == pytest.approx(expected)

    def test_singularity_positive(self) -> None:
        """At y = 0.1858 with x > 0.332 the result should be +inf."""
        result = get_color_temperature(0.4, 0.1858)
        assert math.isinf(result) and result > 0

    def test_singularity_nan(self) -> None:
        """At y = 0.1858 with x < 0.332 the cubic terms cancel to NaN."""
        assert math.isnan(get_color_temperature(0.2, 0.1858))

    def test_near_singularity_is_large(self) -> None:
        """Close to the singularity the estimate should blow up."""
        assert abs(get_color_temperature(0.5, 0.1859)) > 1e9

    def test_returns_float(self) -> None:
        """Result should be a plain float."""
        assert type(get_color_temperature(0.3, 0.3)) is float


class TestBoundaries:
    """Tests for the boundary polygons."""

    @pytest.mark.parametrize(
        "polygon", [CHROMATICITY_BOUNDARY, SRGB_GAMUT, P3_GAMUT, REC2020_GAMUT]
    )
    def test_closed(self, polygon) -> None:
        """Each polygon should have four points with the last closing the loop."""
        assert len(polygon) == 4
        assert polygon[0] == polygon[-1]

    def test_srgb_primaries(self) -> None:
        """sRGB triangle should hold the Rec.709 primaries."""
        assert SRGB_GAMUT[0] == ChromaticityPoint(0.64, 0.33)
        assert SRGB_GAMUT[1] == ChromaticityPoint(0.30, 0.60)
        assert SRGB_GAMUT[2] == ChromaticityPoint(0.15, 0.06)

    def test_gamut_polygon_lookup(self) -> None:
        """Should return the matching triangle per space."""
        assert gamut_polygon(ColorSpace.P3) is P3_GAMUT
        assert gamut_polygon(ColorSpace.REC2020) is REC2020_GAMUT
        assert gamut_polygon(ColorSpace.LAB) is SRGB_GAMUT

    def test_overlay_order(self) -> None:
        """Overlays should draw sRGB, P3 then Rec2020."""
        spaces = [space for space, _, _ in GAMUT_OVERLAYS]
        assert spaces == [ColorSpace.SRGB, ColorSpace.P3, ColorSpace.REC2020]

    def test_immutable(self) -> None:
        """Boundary tables should be tuples."""
        assert isinstance(CHROMATICITY_BOUNDARY, tuple)
        assert isinstance(SRGB_GAMUT, tuple)


class TestContainsChromaticity:
    """Tests for contains_chromaticity function."""

    @pytest.mark.parametrize(
        "polygon", [CHROMATICITY_BOUNDARY, SRGB_GAMUT, P3_GAMUT, REC2020_GAMUT]
    )
    def test_white_point_inside(self, polygon) -> None:
        """D65 should lie inside every polygon."""
        assert contains_chromaticity(polygon, 0.3127, 0.3290) is True

    def test_outside(self) -> None:
        """Far corners should be outside."""
        assert contains_chromaticity(SRGB_GAMUT, 0.8, 0.2) is False
        assert contains_chromaticity(CHROMATICITY_BOUNDARY, 0.05, 0.9) is False

    def test_wider_gamut(self) -> None:
        """A saturated green should be inside Rec2020 but outside sRGB."""
        assert contains_chromaticity(REC2020_GAMUT, 0.25, 0.68) is True
        assert contains_chromaticity(SRGB_GAMUT, 0.25, 0.68) is False
