"""Tests for spaces module."""
from __future__ import annotations

import numpy as np
import pytest

from chromaticity_picker.config import ChromaticityError
from chromaticity_picker.spaces import (
    MATRIX_SPACES,
    P3_XYZ_TO_RGB,
    SRGB_RGB_TO_XYZ,
    SRGB_XYZ_TO_RGB,
    ColorSpace,
    get_matrices,
    resolve_space,
)


class TestGetMatrices:
    """Tests for get_matrices function."""

    def test_srgb_forward_coefficients(self) -> None:
        """sRGB forward matrix should hold the working-space table."""
        forward, _ = get_matrices(ColorSpace.SRGB)
        assert forward[0, 0] == 3.2406
        assert forward[1, 1] == 1.8758
        assert forward[2, 2] == 1.0570

    def test_p3_forward_coefficients(self) -> None:
        """P3 forward matrix should hold the P3 table."""
        forward, _ = get_matrices(ColorSpace.P3)
        assert forward[0, 0] == 2.4934
        assert forward[1, 0] == -0.8295

    def test_rec2020_forward_coefficients(self) -> None:
        """Rec2020 forward matrix should hold the Rec2020 table."""
        forward, _ = get_matrices(ColorSpace.REC2020)
        assert forward[0, 0] == 1.7167
        assert forward[2, 1] == -0.0428

    @pytest.mark.parametrize("space", MATRIX_SPACES)
    def test_pair_is_inverse(self, space: ColorSpace) -> None:
        """Forward times inverse should be the identity."""
        forward, inverse = get_matrices(space)
        np.testing.assert_allclose(forward @ inverse, np.eye(3), atol=1e-12)

    def test_inverse_close_to_published(self) -> None:
        """Derived sRGB inverse should match the four-decimal table."""
        published = np.array([
            [0.4124, 0.3576, 0.1805],
            [0.2126, 0.7152, 0.0722],
            [0.0193, 0.1192, 0.9505],
        ])
        np.testing.assert_allclose(SRGB_RGB_TO_XYZ, published, atol=5e-4)

    @pytest.mark.parametrize(
        "space", [ColorSpace.XYZ, ColorSpace.LAB, ColorSpace.OKLCH, None, 42]
    )
    def test_fallback_to_srgb(self, space) -> None:
        """Reserved and unknown tags should use the sRGB matrices."""
        forward, inverse = get_matrices(space)
        assert forward is SRGB_XYZ_TO_RGB
        assert inverse is SRGB_RGB_TO_XYZ

    def test_accepts_space_name(self) -> None:
        """String names should resolve to their matrices."""
        forward, _ = get_matrices("P3")
        assert forward is P3_XYZ_TO_RGB

    def test_matrices_read_only(self) -> None:
        """Matrices should reject in-place mutation."""
        forward, inverse = get_matrices(ColorSpace.SRGB)
        with pytest.raises(ValueError):
            forward[0, 0] = 1.0
        with pytest.raises(ValueError):
            inverse[0, 0] = 1.0


class TestColorSpaceParse:
    """Tests for ColorSpace.parse."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("sRGB", ColorSpace.SRGB),
            ("srgb", ColorSpace.SRGB),
            ("P3", ColorSpace.P3),
            ("display-p3", ColorSpace.P3),
            ("REC2020", ColorSpace.REC2020),
            (" rec2020 ", ColorSpace.REC2020),
            ("lab", ColorSpace.LAB),
        ],
    )
    def test_known_names(self, name: str, expected: ColorSpace) -> None:
        """Should resolve names case-insensitively."""
        assert ColorSpace.parse(name) is expected

    def test_unknown_name(self) -> None:
        """Should reject unknown names and list the choices."""
        with pytest.raises(ChromaticityError, match="Unknown color space"):
            ColorSpace.parse("adobe-rgb")


class TestResolveSpace:
    """Tests for resolve_space function."""

    def test_member_passthrough(self) -> None:
        """Members should pass through unchanged."""
        assert resolve_space(ColorSpace.REC2020) is ColorSpace.REC2020

    def test_unknown_name_defaults(self) -> None:
        """Unknown names should default to sRGB without raising."""
        assert resolve_space("nonsense") is ColorSpace.SRGB
