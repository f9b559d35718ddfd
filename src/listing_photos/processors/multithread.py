"""Multithreaded processor implementation - uses thread pool for parallelism."""

from typing import List, Optional, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed

from ..core.models import ValidationConfig, ValidationResult
from ..core.protocols import ImageBuffer, ValidatorProtocol


def validate_batch(
    buffers: Sequence[ImageBuffer],
    config: ValidationConfig,
    validator: ValidatorProtocol,
    max_workers: Optional[int] = None,
) -> List[ValidationResult]:
    """
    Validate a batch of buffers using multithreading.

    Args:
        buffers: Image buffers in upload order
        config: Validation configuration
        validator: Validator shared by all threads (it holds no mutable state)
        max_workers: Thread count, defaults to min(8, len(buffers))

    Returns:
        List of validation results, index-aligned with buffers
    """
    if not buffers:
        return []

    results: List[Optional[ValidationResult]] = [None] * len(buffers)
    workers = max_workers or min(8, len(buffers))

    with ThreadPoolExecutor(max_workers=workers) as executor:
        future_to_index = {
            executor.submit(validator.validate, buffer, config): index
            for index, buffer in enumerate(buffers)
        }

        # Collect results as they complete
        for future in as_completed(future_to_index):
            results[future_to_index[future]] = future.result()

    return results  # type: ignore[return-value]
