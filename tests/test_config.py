"""Tests for config module."""
from __future__ import annotations

import pytest

from chromaticity_picker.config import (
    ChromaticityError,
    Config,
    validate_diagram_dimensions,
    validate_luminance,
)


class TestConfig:
    """Tests for Config dataclass."""

    def test_default_values(self, default_config: Config) -> None:
        """Config should have sensible defaults."""
        assert default_config.color == "#ff6464"
        assert default_config.xy is None
        assert default_config.luminance == 0.5
        assert default_config.color_space == "sRGB"
        assert default_config.show_gamuts is True
        assert default_config.fill_locus is False
        assert default_config.diagram_path is None

    def test_geometry_defaults(self, default_config: Config) -> None:
        """Default geometry should be a 350px square on a 400px canvas."""
        assert default_config.canvas_size == 400
        assert default_config.diagram_size == 350
        assert default_config.diagram_offset == 25

    def test_custom_values(self) -> None:
        """Config should accept custom values."""
        config = Config(xy=(0.3, 0.4), luminance=0.9, color_space="P3")
        assert config.xy == (0.3, 0.4)
        assert config.luminance == 0.9
        assert config.color_space == "P3"


class TestValidateLuminance:
    """Tests for validate_luminance function."""

    @pytest.mark.parametrize("value", [0.0, 0.5, 1.0])
    def test_valid(self, value: float) -> None:
        """Should accept the closed unit interval."""
        validate_luminance(value)

    @pytest.mark.parametrize("value", [-0.01, 1.01, 100.0])
    def test_out_of_range(self, value: float) -> None:
        """Should reject values outside [0, 1]."""
        with pytest.raises(ChromaticityError, match="between 0 and 1"):
            validate_luminance(value)

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_not_finite(self, value: float) -> None:
        """Should reject NaN and infinity."""
        with pytest.raises(ChromaticityError, match="finite"):
            validate_luminance(value)


class TestValidateDiagramDimensions:
    """Tests for validate_diagram_dimensions function."""

    def test_valid_dimensions(self) -> None:
        """Should accept valid dimensions."""
        validate_diagram_dimensions(400, 350, 25)
        validate_diagram_dimensions(1, 1, 0)
        validate_diagram_dimensions(4096, 4096, 0)

    def test_zero_size(self) -> None:
        """Should reject zero sizes."""
        with pytest.raises(ChromaticityError, match="must be positive"):
            validate_diagram_dimensions(0, 350, 25)
        with pytest.raises(ChromaticityError, match="must be positive"):
            validate_diagram_dimensions(400, 0, 25)

    def test_negative_offset(self) -> None:
        """Should reject a negative offset."""
        with pytest.raises(ChromaticityError, match="cannot be negative"):
            validate_diagram_dimensions(400, 350, -1)

    def test_too_large(self) -> None:
        """Should reject canvases over 4096 pixels."""
        with pytest.raises(ChromaticityError, match="too large"):
            validate_diagram_dimensions(4097, 350, 25)

    def test_does_not_fit(self) -> None:
        """Should reject a diagram that overflows the canvas."""
        with pytest.raises(ChromaticityError, match="does not fit"):
            validate_diagram_dimensions(400, 380, 25)


class TestChromaticityError:
    """Tests for ChromaticityError exception."""

    def test_is_exception(self) -> None:
        """Should be a proper Exception subclass."""
        assert issubclass(ChromaticityError, Exception)

    def test_message(self) -> None:
        """Should preserve error message."""
        error = ChromaticityError("test message")
        assert str(error) == "test message"
