"""Validation services for single listing photos and batches of them."""

import time
from typing import Any, List, Optional, Sequence

from .decoders import load_default_decoder
from .exceptions import ConfigurationError, DecoderUnavailableError
from .image_utils import (
    INVALID_FORMAT_MESSAGE,
    check_aspect_ratio,
    check_density,
    check_dimensions,
    check_file_size,
    check_format,
    format_ratio,
    normalize_format,
    sniff_format,
)
from .logging_config import get_logger
from .models import (
    BatchValidationResult,
    DecodedImage,
    ImageMetadata,
    ValidationConfig,
    ValidationResult,
)
from .protocols import (
    BatchStrategy,
    ImageBuffer,
    ImageDecoderProtocol,
    LoggerProtocol,
    ValidatorProtocol,
)

UNDETERMINED_DIMENSIONS_MESSAGE = (
    "Could not determine image dimensions. Image may be corrupted."
)


class ImageQualityValidator:
    """
    Validates one image buffer against size, dimension and format rules.

    The decoder is an optional capability. When it is missing, or fails on a
    particular buffer, validation continues on the basic path that only
    checks the byte length and the leading file signature.
    """

    def __init__(
        self,
        decoder: Optional[ImageDecoderProtocol] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        self._logger = logger or get_logger("validator")
        self._decoder = decoder if decoder is not None else load_default_decoder(self._logger)

    @property
    def decoder(self) -> ImageDecoderProtocol:
        return self._decoder

    def validate(
        self, buffer: ImageBuffer, config: Optional[ValidationConfig] = None
    ) -> ValidationResult:
        """
        Validate a buffer, never raising for malformed content.

        Args:
            buffer: Raw image bytes, only read
            config: Thresholds, defaults when omitted

        Returns:
            ValidationResult with errors, warnings and derived metadata
        """
        config = config or ValidationConfig()

        decoded = self._decode(buffer)
        if decoded is None:
            return self.validate_basic(buffer, config)

        return self._validate_with_metadata(buffer, decoded, config)

    def validate_basic(
        self, buffer: ImageBuffer, config: Optional[ValidationConfig] = None
    ) -> ValidationResult:
        """Validate using only the byte length and the file signature."""
        config = config or ValidationConfig()
        size = len(buffer)

        errors = check_file_size(size, config)

        image_format = sniff_format(buffer)
        if image_format == "unknown":
            errors.append(INVALID_FORMAT_MESSAGE)

        return ValidationResult.from_findings(
            errors=errors,
            warnings=[],
            metadata=ImageMetadata(size=size, format=image_format),
        )

    def _decode(self, buffer: ImageBuffer) -> Optional[DecodedImage]:
        # Only the decoder call is guarded
        try:
            return self._decoder.decode(buffer)
        except MemoryError:
            raise
        except DecoderUnavailableError as exc:
            self._logger.debug(f"Decoder unavailable, using basic validation: {exc}")
        except Exception as exc:  # noqa: BLE001
            self._logger.debug(f"Decoder failed, using basic validation: {exc}")
        return None

    def _validate_with_metadata(
        self, buffer: ImageBuffer, decoded: DecodedImage, config: ValidationConfig
    ) -> ValidationResult:
        size = len(buffer)
        width = decoded.width or None
        height = decoded.height or None

        errors = check_file_size(size, config)
        warnings: List[str] = []

        aspect_ratio = None
        if width is not None and height is not None and width > 0 and height > 0:
            dimension_errors, dimension_warnings = check_dimensions(width, height, config)
            errors.extend(dimension_errors)
            warnings.extend(dimension_warnings)
            warnings.extend(check_aspect_ratio(width, height, config))
            aspect_ratio = format_ratio(width / height)
        else:
            warnings.append(UNDETERMINED_DIMENSIONS_MESSAGE)

        errors.extend(check_format(decoded.format))

        if aspect_ratio is not None:
            warnings.extend(check_density(size, width, height, config))

        metadata = ImageMetadata(
            width=width,
            height=height,
            format=normalize_format(decoded.format),
            size=size,
            aspect_ratio=aspect_ratio,
        )
        return ValidationResult.from_findings(errors, warnings, metadata)


def aggregate_results(results: Sequence[ValidationResult]) -> BatchValidationResult:
    """
    Combine per-image results into a single batch verdict.

    Messages are prefixed with the 1-based position of the image they belong
    to, and each image contributes at most one error and one warning line.
    """
    all_errors: List[str] = []
    all_warnings: List[str] = []
    all_valid = True

    for index, result in enumerate(results):
        if not result.valid:
            all_valid = False
        if result.errors:
            all_errors.append(f"Image {index + 1}: {', '.join(result.errors)}")
        if result.warnings:
            all_warnings.append(f"Image {index + 1}: {', '.join(result.warnings)}")

    return BatchValidationResult(
        valid=all_valid,
        errors=all_errors,
        warnings=all_warnings,
        results=list(results),
    )


class BatchValidator:
    """Runs a validator over an ordered batch with a chosen concurrency strategy."""

    def __init__(
        self,
        validator: Optional[ValidatorProtocol] = None,
        processor: str = "serial",
        max_workers: Optional[int] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        if max_workers is not None and max_workers < 1:
            raise ConfigurationError(f"max_workers must be positive, got {max_workers}")

        self._logger = logger or get_logger("batch")
        self._validator = validator or ImageQualityValidator(logger=self._logger)
        self._processor = processor
        self._strategy = _resolve_strategy(processor)
        self._max_workers = max_workers

    @property
    def processor(self) -> str:
        return self._processor

    def validate_all(
        self,
        buffers: Sequence[ImageBuffer],
        config: Optional[ValidationConfig] = None,
    ) -> BatchValidationResult:
        """Validate every buffer and aggregate the results in input order."""
        config = config or ValidationConfig()
        items = list(buffers)

        if not items:
            return BatchValidationResult()

        start_time = time.time()
        results = self._strategy(items, config, self._validator, self._max_workers)
        batch = aggregate_results(results)

        self._logger.info(
            f"Validated {len(items)} image(s) with {self._processor} processor in "
            f"{time.time() - start_time:.3f}s: valid={batch.valid}, "
            f"errors={len(batch.errors)}, warnings={len(batch.warnings)}"
        )
        return batch


def _resolve_strategy(processor: str) -> BatchStrategy:
    # Imported here because the processors depend on this package
    from ..processors import BATCH_STRATEGIES

    strategy: Any = BATCH_STRATEGIES.get(processor)
    if strategy is None:
        raise ConfigurationError(
            f"Unknown processor '{processor}'. "
            f"Choose one of: {', '.join(sorted(BATCH_STRATEGIES))}"
        )
    return strategy
