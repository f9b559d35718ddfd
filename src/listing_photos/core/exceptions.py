"""Custom exceptions and error handling utilities for listing photo validation."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, TypeVar

from .logging_config import get_logger


class ListingPhotosError(Exception):
    """Base exception for all listing photo errors."""


class ConfigurationError(ListingPhotosError):
    """Error raised for invalid configuration options."""


class ImageDecodeError(ListingPhotosError):
    """Error raised by a decoder that cannot parse an image header."""


class DecoderUnavailableError(ImageDecodeError):
    """Error raised when no decoding capability is installed."""


class ImageReadError(ListingPhotosError):
    """Error raised when an image file cannot be read from disk."""


F = TypeVar("F", bound=Callable[..., Any])


def with_error_handling(func: F) -> F:
    """Wrap a function with standardized error handling."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:  # type: ignore[override]
        logger = get_logger("io")
        try:
            return func(*args, **kwargs)
        except ListingPhotosError:
            logger.error("Listing photos error", exc_info=True)
            raise
        except MemoryError:
            raise
        except Exception as exc:  # noqa: BLE001
            logger.error(f"Unhandled error in {func.__name__}: {exc}", exc_info=True)
            raise ImageReadError(str(exc)) from exc

    return wrapper  # type: ignore[return-value]
