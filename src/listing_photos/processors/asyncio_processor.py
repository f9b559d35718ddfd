"""AsyncIO processor implementation - runs validations as concurrent tasks."""

import asyncio
from typing import List, Optional, Sequence

from ..core.logging_config import get_logger
from ..core.models import ValidationConfig, ValidationResult
from ..core.protocols import ImageBuffer, ValidatorProtocol


async def validate_single_image_async(
    validator: ValidatorProtocol,
    buffer: ImageBuffer,
    config: ValidationConfig,
    semaphore: asyncio.Semaphore,
) -> ValidationResult:
    """Validate one buffer in a worker thread without blocking the loop."""
    async with semaphore:
        return await asyncio.to_thread(validator.validate, buffer, config)


async def validate_batch_async(
    buffers: Sequence[ImageBuffer],
    config: ValidationConfig,
    validator: ValidatorProtocol,
    max_workers: Optional[int] = None,
) -> List[ValidationResult]:
    """Validate all buffers concurrently; gather keeps them in input order."""
    logger = get_logger("asyncio-processor")
    semaphore = asyncio.Semaphore(max_workers or min(8, len(buffers)) or 1)

    tasks = [
        validate_single_image_async(validator, buffer, config, semaphore)
        for buffer in buffers
    ]
    logger.debug(f"Scheduled {len(tasks)} validation task(s)")

    return list(await asyncio.gather(*tasks))


def validate_batch(
    buffers: Sequence[ImageBuffer],
    config: ValidationConfig,
    validator: ValidatorProtocol,
    max_workers: Optional[int] = None,
) -> List[ValidationResult]:
    """
    Validate a batch of buffers using asyncio.

    This is the synchronous wrapper that runs the async function, so it must
    not be called from inside a running event loop; await
    `validate_batch_async` there instead.

    Args:
        buffers: Image buffers in upload order
        config: Validation configuration
        validator: Validator shared by all tasks
        max_workers: Maximum number of validations in flight

    Returns:
        List of validation results, index-aligned with buffers
    """
    if not buffers:
        return []

    return asyncio.run(validate_batch_async(buffers, config, validator, max_workers))
