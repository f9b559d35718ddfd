"""Serial processor implementation - validates images one by one."""

from typing import List, Optional, Sequence

from ..core.models import ValidationConfig, ValidationResult
from ..core.protocols import ImageBuffer, ValidatorProtocol


def validate_batch(
    buffers: Sequence[ImageBuffer],
    config: ValidationConfig,
    validator: ValidatorProtocol,
    max_workers: Optional[int] = None,
) -> List[ValidationResult]:
    """
    Validates a batch of buffers serially, one by one, in the current thread.

    Args:
        buffers: Image buffers in upload order.
        config: `ValidationConfig` applied to every buffer.
        validator: Validator used for each buffer.
        max_workers: Ignored, accepted for a uniform strategy signature.

    Returns:
        A list of `ValidationResult` objects, one per buffer, in input order.
    """
    results = []

    for buffer in buffers:
        result = validator.validate(buffer, config)
        results.append(result)

    return results
