"""Tests for core data models."""

import pytest
from pydantic import ValidationError

from listing_photos.core.models import (
    BatchValidationResult,
    ImageMetadata,
    ValidationConfig,
    ValidationResult,
)


class TestValidationConfig:
    """Tests for ValidationConfig."""

    def test_default_values(self):
        """Test ValidationConfig default thresholds."""
        config = ValidationConfig()
        assert config.min_width == 400
        assert config.min_height == 300
        assert config.max_width == 10000
        assert config.max_height == 10000
        assert config.min_file_size == 10000
        assert config.max_file_size == 10485760
        assert config.min_aspect_ratio == 0.5
        assert config.max_aspect_ratio == 3.0
        assert config.square_tolerance == 0.1
        assert config.square_max_width == 800
        assert config.min_bytes_per_pixel == 0.5

    def test_unspecified_fields_fall_back_to_defaults(self):
        """Test that a partial config keeps defaults for the rest."""
        config = ValidationConfig(min_width=640)
        assert config.min_width == 640
        assert config.min_height == 300
        assert config.max_file_size == 10485760

    def test_accepts_camel_case_names(self):
        """Test the camelCase contract names are accepted."""
        config = ValidationConfig(minWidth=640, maxFileSize=2048000)
        assert config.min_width == 640
        assert config.max_file_size == 2048000

    @pytest.mark.parametrize(
        "overrides",
        [
            {"min_width": 500, "max_width": 400},
            {"min_height": 500, "max_height": 400},
            {"min_file_size": 20, "max_file_size": 10},
            {"min_aspect_ratio": 2.0, "max_aspect_ratio": 1.5},
        ],
    )
    def test_min_above_max_rejected(self, overrides):
        """Test that inverted ranges are rejected at construction."""
        with pytest.raises(ValidationError, match="must not exceed"):
            ValidationConfig(**overrides)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"min_width": 0},
            {"max_height": -1},
            {"min_file_size": 0},
            {"min_aspect_ratio": 0.0},
        ],
    )
    def test_non_positive_thresholds_rejected(self, overrides):
        """Test that thresholds must be positive."""
        with pytest.raises(ValidationError):
            ValidationConfig(**overrides)

    def test_equal_bounds_allowed(self):
        """Test that min == max is a valid range."""
        config = ValidationConfig(min_file_size=5000, max_file_size=5000)
        assert config.min_file_size == config.max_file_size

    def test_config_is_immutable(self):
        """Test that configs cannot be modified after construction."""
        config = ValidationConfig()
        with pytest.raises(ValidationError):
            config.min_width = 10


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_from_findings_valid_without_errors(self):
        """Test validity follows from an empty error list."""
        result = ValidationResult.from_findings(
            [], ["a warning"], ImageMetadata(size=10, format="jpeg")
        )
        assert result.valid is True
        assert result.warnings == ["a warning"]

    def test_from_findings_invalid_with_errors(self):
        """Test any error makes the result invalid."""
        result = ValidationResult.from_findings(
            ["an error"], [], ImageMetadata(size=10)
        )
        assert result.valid is False

    def test_inconsistent_validity_rejected(self):
        """Test that valid=True with errors cannot be constructed."""
        with pytest.raises(ValidationError):
            ValidationResult(
                valid=True, errors=["an error"], metadata=ImageMetadata(size=1)
            )

    def test_dump_uses_camel_case(self):
        """Test serialization uses the contract field names."""
        result = ValidationResult.from_findings(
            [],
            [],
            ImageMetadata(width=800, height=600, format="jpeg", size=50000, aspect_ratio="1.33"),
        )
        dumped = result.model_dump(by_alias=True)
        assert dumped["metadata"]["aspectRatio"] == "1.33"
        assert dumped["metadata"]["size"] == 50000


class TestImageMetadata:
    """Tests for ImageMetadata."""

    def test_defaults(self):
        metadata = ImageMetadata(size=0)
        assert metadata.width is None
        assert metadata.height is None
        assert metadata.format == "unknown"
        assert metadata.aspect_ratio is None

    def test_rejects_unknown_format_names(self):
        with pytest.raises(ValidationError):
            ImageMetadata(size=1, format="gif")


class TestBatchValidationResult:
    """Tests for BatchValidationResult."""

    def test_empty_batch_defaults(self):
        batch = BatchValidationResult()
        assert batch.valid is True
        assert batch.errors == []
        assert batch.warnings == []
        assert batch.results == []
