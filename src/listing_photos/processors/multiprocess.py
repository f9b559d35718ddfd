"""Multiprocess processor implementation - uses process pool for parallelism."""

import os
import multiprocessing
from typing import List, Optional, Sequence, Tuple
from concurrent.futures import ProcessPoolExecutor

from ..core.logging_config import get_logger
from ..core.models import ValidationConfig, ValidationResult
from ..core.protocols import ImageBuffer, ValidatorProtocol


def validate_single_image_worker(
    args: Tuple[ValidatorProtocol, bytes, ValidationConfig]
) -> ValidationResult:
    """
    Worker function designed for use with a `ProcessPoolExecutor`.

    Args:
        args: A tuple `(validator, buffer, config)`. All three are pickled
            into the worker process.

    Returns:
        The `ValidationResult` for the buffer.
    """
    validator, buffer, config = args

    worker_logger = get_logger(f"worker.{multiprocessing.current_process().name}")
    worker_logger.debug(f"Validating {len(buffer)} byte buffer")

    return validator.validate(buffer, config)


def validate_batch(
    buffers: Sequence[ImageBuffer],
    config: ValidationConfig,
    validator: ValidatorProtocol,
    max_workers: Optional[int] = None,
) -> List[ValidationResult]:
    """
    Validate a batch of buffers using a process pool.

    The validator and its decoder must be picklable. `executor.map` yields
    results in submission order, so the output stays index-aligned.

    Args:
        buffers: Image buffers in upload order
        config: Validation configuration
        validator: Validator sent to every worker
        max_workers: Process count, defaults to min(cpu count, len(buffers))

    Returns:
        List of validation results, index-aligned with buffers
    """
    if not buffers:
        return []

    workers = max_workers or min(os.cpu_count() or 1, len(buffers))
    work_items = [(validator, bytes(buffer), config) for buffer in buffers]

    with ProcessPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(validate_single_image_worker, work_items))
