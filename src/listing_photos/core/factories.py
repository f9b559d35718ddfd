"""Factory classes for creating configured service instances."""

import logging
from typing import Any, Optional

from .config import Settings
from .decoders import NullDecoder
from .logging_config import get_logger
from .models import ValidationConfig
from .protocols import ImageDecoderProtocol, LoggerProtocol
from .services import BatchValidator, ImageQualityValidator
from .uploads import UploadScreeningService


class LoggerAdapter:
    """Adapter to make standard logger compatible with LoggerProtocol."""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log debug message."""
        self._logger.debug(message)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log info message."""
        self._logger.info(message)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log warning message."""
        self._logger.warning(message)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log error message."""
        self._logger.error(message)


class LoggerFactory:
    """Factory for creating logger instances."""

    @staticmethod
    def create_logger(component: str, level: Optional[int] = None) -> LoggerProtocol:
        """Wrap the child logger for `component`, which inherits the package level."""
        logger = get_logger(component)
        if level is not None:
            logger.setLevel(level)
        return LoggerAdapter(logger)


class ValidationPipelineFactory:
    """Factory for wiring validators, batch validators and the upload gate."""

    @staticmethod
    def create_validator(
        decoder: Optional[ImageDecoderProtocol] = None,
        logger: Optional[LoggerProtocol] = None,
        use_decoder: bool = True,
    ) -> ImageQualityValidator:
        """Create a validator; `use_decoder=False` forces the basic path."""
        if not use_decoder:
            decoder = NullDecoder()
        return ImageQualityValidator(decoder=decoder, logger=logger)

    @staticmethod
    def create_batch_validator(
        processor: str = "serial",
        max_workers: Optional[int] = None,
        decoder: Optional[ImageDecoderProtocol] = None,
        logger: Optional[LoggerProtocol] = None,
        use_decoder: bool = True,
    ) -> BatchValidator:
        """Create a batch validator around a freshly built validator."""
        if logger is None:
            logger = LoggerFactory.create_logger("pipeline")

        validator = ValidationPipelineFactory.create_validator(
            decoder=decoder, logger=logger, use_decoder=use_decoder
        )
        return BatchValidator(
            validator=validator,
            processor=processor,
            max_workers=max_workers,
            logger=logger,
        )

    @staticmethod
    def create_screening_service(
        settings: Settings,
        decoder: Optional[ImageDecoderProtocol] = None,
        logger: Optional[LoggerProtocol] = None,
        config: Optional[ValidationConfig] = None,
    ) -> UploadScreeningService:
        """
        Create the upload gate switched and scheduled by `settings`.

        Thresholds come from `config`, or the upload preset
        `UPLOAD_VALIDATION_CONFIG` when omitted. `settings.validation` is not
        used here: it holds the general thresholds, which are looser than
        the upload preset.
        """
        batch_validator = ValidationPipelineFactory.create_batch_validator(
            processor=settings.processor,
            max_workers=settings.max_workers,
            decoder=decoder,
            logger=logger,
        )
        return UploadScreeningService(
            batch_validator=batch_validator,
            config=config,
            enabled=settings.enable_quality_validation,
            logger=logger,
        )
