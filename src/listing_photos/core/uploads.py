"""Quality gate applied to listing photo uploads."""

from typing import Optional, Sequence

from .config import load_settings
from .logging_config import get_logger
from .models import ScreeningDecision, ValidationConfig
from .protocols import ImageBuffer, LoggerProtocol
from .services import BatchValidator

# Listing uploads demand more bytes than the library default
UPLOAD_VALIDATION_CONFIG = ValidationConfig(
    min_width=400,
    min_height=300,
    min_file_size=50 * 1024,
)

REJECTED_MESSAGE = "Image quality validation failed"
ACCEPTED_MESSAGE = "Image quality validation passed"
SKIPPED_MESSAGE = "Image quality validation disabled"


class UploadScreeningService:
    """
    Decides whether a set of uploaded listing photos may be stored.

    Errors reject the whole upload. Warnings are logged and passed back to
    the caller but never block the upload.
    """

    def __init__(
        self,
        batch_validator: Optional[BatchValidator] = None,
        config: Optional[ValidationConfig] = None,
        enabled: Optional[bool] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        self._logger = logger or get_logger("uploads")
        self._batch_validator = batch_validator or BatchValidator(logger=self._logger)
        self._config = config or UPLOAD_VALIDATION_CONFIG
        if enabled is None:
            enabled = load_settings().enable_quality_validation
        self._enabled = enabled

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def config(self) -> ValidationConfig:
        return self._config

    def screen(self, buffers: Sequence[ImageBuffer]) -> ScreeningDecision:
        """Screen uploaded buffers and return the accept/reject decision."""
        if not self._enabled:
            self._logger.debug(f"Skipping quality screening of {len(buffers)} upload(s)")
            return ScreeningDecision(accepted=True, checked=False, message=SKIPPED_MESSAGE)

        batch = self._batch_validator.validate_all(buffers, self._config)

        if not batch.valid and batch.errors:
            self._logger.info(
                f"Rejected upload of {len(buffers)} image(s): {'; '.join(batch.errors)}"
            )
            return ScreeningDecision(
                accepted=False,
                errors=batch.errors,
                warnings=batch.warnings,
                message=REJECTED_MESSAGE,
            )

        if batch.warnings:
            self._logger.warning(f"Image quality warnings: {'; '.join(batch.warnings)}")

        return ScreeningDecision(
            accepted=True,
            warnings=batch.warnings,
            message=ACCEPTED_MESSAGE,
        )
