"""Testing utilities and fakes for listing photo validation."""

from .fakes import (
    FakeDecoder,
    FailingDecoder,
    FakeLogger,
    build_png_header,
    create_test_image,
    pad_to_size,
)

__all__ = [
    "FakeDecoder",
    "FailingDecoder",
    "FakeLogger",
    "build_png_header",
    "create_test_image",
    "pad_to_size",
]
