"""Shared data models for listing photo validation."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

ImageFormat = Literal["jpeg", "png", "webp", "unknown"]


class ContractModel(BaseModel):
    """Immutable model that also reads and writes camelCase field names."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ValidationConfig(ContractModel):
    """Thresholds applied to a single listing photo."""

    min_width: int = Field(default=400, gt=0, description="Minimum width in pixels")
    min_height: int = Field(default=300, gt=0, description="Minimum height in pixels")
    max_width: int = Field(default=10000, gt=0, description="Width above which a warning is raised")
    max_height: int = Field(default=10000, gt=0, description="Height above which a warning is raised")
    min_file_size: int = Field(default=10000, gt=0, description="Minimum buffer length in bytes")
    max_file_size: int = Field(
        default=10 * 1024 * 1024, gt=0, description="Maximum buffer length in bytes"
    )
    min_aspect_ratio: float = Field(default=0.5, gt=0, description="Lowest width/height ratio")
    max_aspect_ratio: float = Field(default=3.0, gt=0, description="Highest width/height ratio")
    square_tolerance: float = Field(
        default=0.1, ge=0, description="Distance from 1.0 under which a ratio counts as square"
    )
    square_max_width: int = Field(
        default=800, ge=0, description="Square photos narrower than this are flagged"
    )
    min_bytes_per_pixel: float = Field(
        default=0.5, ge=0, description="Byte density under which compression is flagged"
    )

    @model_validator(mode="after")
    def _check_ranges(self) -> "ValidationConfig":
        pairs = (
            ("min_width", "max_width"),
            ("min_height", "max_height"),
            ("min_file_size", "max_file_size"),
            ("min_aspect_ratio", "max_aspect_ratio"),
        )
        for low_name, high_name in pairs:
            low = getattr(self, low_name)
            high = getattr(self, high_name)
            if low > high:
                raise ValueError(
                    f"{low_name} ({low}) must not exceed {high_name} ({high})"
                )
        return self


class DecodedImage(ContractModel):
    """Header fields reported by a decoder. Any of them may be missing."""

    width: Optional[int] = None
    height: Optional[int] = None
    format: Optional[str] = None


class ImageMetadata(ContractModel):
    """Metadata derived while validating one buffer."""

    width: Optional[int] = None
    height: Optional[int] = None
    format: ImageFormat = "unknown"
    size: int = Field(ge=0)
    aspect_ratio: Optional[str] = None


class ValidationResult(ContractModel):
    """Verdict for a single buffer."""

    valid: bool
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    metadata: ImageMetadata

    @model_validator(mode="after")
    def _check_validity(self) -> "ValidationResult":
        if self.valid != (not self.errors):
            raise ValueError("valid must be True exactly when errors is empty")
        return self

    @classmethod
    def from_findings(
        cls, errors: List[str], warnings: List[str], metadata: ImageMetadata
    ) -> "ValidationResult":
        """Build a result whose validity follows from its errors."""
        return cls(
            valid=not errors,
            errors=list(errors),
            warnings=list(warnings),
            metadata=metadata,
        )


class BatchValidationResult(ContractModel):
    """Aggregated verdict for an ordered batch of buffers."""

    valid: bool = True
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    results: List[ValidationResult] = Field(default_factory=list)


class ScreeningDecision(ContractModel):
    """Outcome of screening a set of listing uploads."""

    accepted: bool
    checked: bool = True
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    message: str = ""
