"""Per-item error collection for batch steps that run before validation."""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Type, TypeVar

from .exceptions import ListingPhotosError
from .logging_config import get_logger
from .protocols import LoggerProtocol

T = TypeVar("T")


@dataclass(frozen=True)
class ItemFailure:
    """One item of a batch step that could not be completed."""

    item: str
    error: str


class BatchErrorCollector:
    """
    Context manager that keeps a batch step going past per-item failures.

    Expected failures raised through `capture` are recorded and summarized
    when the block exits. Anything else propagates out of the block.
    """

    def __init__(
        self,
        operation_name: str,
        logger: Optional[LoggerProtocol] = None,
        expected: Tuple[Type[BaseException], ...] = (ListingPhotosError,),
    ):
        self.operation_name = operation_name
        self.failures: List[ItemFailure] = []
        self.attempted = 0
        self._expected = expected
        self._logger = logger or get_logger("batch")

    def __enter__(self) -> "BatchErrorCollector":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is not None:
            self._logger.error(f"{self.operation_name} aborted: {exc_val!r}")
        elif self.failures:
            self._logger.warning(
                f"{self.operation_name}: {len(self.failures)} of {self.attempted} "
                f"item(s) failed ({', '.join(f.item for f in self.failures)})"
            )
        else:
            self._logger.debug(f"{self.operation_name}: {self.attempted} item(s) done")
        return False

    def capture(self, item: str, func: Callable[..., T], *args, **kwargs) -> Optional[T]:
        """
        Run `func` for one item, recording an expected failure instead of raising.

        Returns:
            The result of `func`, or None when it failed
        """
        self.attempted += 1
        try:
            return func(*args, **kwargs)
        except self._expected as exc:
            self.failures.append(ItemFailure(item=item, error=str(exc)))
            self._logger.debug(f"{self.operation_name} failed for {item}: {exc}")
            return None

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)
