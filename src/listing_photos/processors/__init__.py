"""Batch validation strategies with different concurrency models."""

from typing import Dict

from ..core.protocols import BatchStrategy
from .serial import validate_batch as serial_validate_batch
from .multiprocess import validate_batch as multiprocess_validate_batch
from .multithread import validate_batch as multithread_validate_batch
from .asyncio_processor import validate_batch as asyncio_validate_batch

BATCH_STRATEGIES: Dict[str, BatchStrategy] = {
    "serial": serial_validate_batch,
    "multithread": multithread_validate_batch,
    "multiprocess": multiprocess_validate_batch,
    "asyncio": asyncio_validate_batch,
}

__all__ = [
    "BATCH_STRATEGIES",
    "serial_validate_batch",
    "multiprocess_validate_batch",
    "multithread_validate_batch",
    "asyncio_validate_batch",
]
