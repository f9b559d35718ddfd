"""Protocol definitions for dependency injection and testability."""

from typing import Any, Callable, List, Optional, Protocol, Sequence, Union

from .models import DecodedImage, ValidationConfig, ValidationResult

ImageBuffer = Union[bytes, bytearray, memoryview]


class ImageDecoderProtocol(Protocol):
    """Protocol for the optional image decoding capability."""

    def decode(self, buffer: ImageBuffer) -> DecodedImage:
        """Parse image headers. Raise on any failure."""
        ...


class LoggerProtocol(Protocol):
    """Protocol for logging operations."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log debug message."""
        ...

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log info message."""
        ...

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log warning message."""
        ...

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log error message."""
        ...


class ValidatorProtocol(Protocol):
    """Protocol for anything that validates a single buffer."""

    def validate(
        self, buffer: ImageBuffer, config: Optional[ValidationConfig] = None
    ) -> ValidationResult:
        """Validate one buffer."""
        ...


BatchStrategy = Callable[
    [Sequence[ImageBuffer], ValidationConfig, ValidatorProtocol, Optional[int]],
    List[ValidationResult],
]
