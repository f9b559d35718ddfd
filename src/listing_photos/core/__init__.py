"""Core validation services and shared components for listing photos."""

from .logging_config import configure_logging, get_logger
from .exceptions import (
    ListingPhotosError,
    ConfigurationError,
    ImageDecodeError,
    DecoderUnavailableError,
    ImageReadError,
    with_error_handling,
)
from .models import (
    BatchValidationResult,
    DecodedImage,
    ImageMetadata,
    ScreeningDecision,
    ValidationConfig,
    ValidationResult,
)
from .decoders import NullDecoder, PillowDecoder, load_default_decoder
from .image_utils import sniff_format
from .services import BatchValidator, ImageQualityValidator, aggregate_results
from .config import Settings, load_settings
from .uploads import UPLOAD_VALIDATION_CONFIG, UploadScreeningService

__all__ = [
    "ValidationConfig",
    "DecodedImage",
    "ImageMetadata",
    "ValidationResult",
    "BatchValidationResult",
    "ScreeningDecision",
    "ImageQualityValidator",
    "BatchValidator",
    "aggregate_results",
    "PillowDecoder",
    "NullDecoder",
    "load_default_decoder",
    "sniff_format",
    "Settings",
    "load_settings",
    "UploadScreeningService",
    "UPLOAD_VALIDATION_CONFIG",
    "configure_logging",
    "get_logger",
    "ListingPhotosError",
    "ConfigurationError",
    "ImageDecodeError",
    "DecoderUnavailableError",
    "ImageReadError",
    "with_error_handling",
]
