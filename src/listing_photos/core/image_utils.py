"""Image inspection helpers shared by both validation paths.

Every rule returns the messages it produces so the metadata path and the
signature-only path report identical text for the same condition.
"""

from typing import List, Optional, Tuple

from .models import ImageFormat, ValidationConfig
from .protocols import ImageBuffer

ACCEPTED_FORMATS = ("jpeg", "jpg", "png", "webp")

JPEG_SIGNATURE = b"\xff\xd8"
PNG_SIGNATURE = b"\x89PNG"
RIFF_SIGNATURE = b"RIFF"
WEBP_FOURCC = b"WEBP"

INVALID_FORMAT_MESSAGE = "Invalid image format. Use JPEG, PNG, or WebP."


def sniff_format(buffer: ImageBuffer) -> ImageFormat:
    """
    Detect the image format from its leading bytes.

    WebP requires both the RIFF container tag and the ``WEBP`` fourcc at
    offset 8, so other RIFF payloads (WAV, AVI) are not mistaken for photos.

    Args:
        buffer: Raw image bytes

    Returns:
        "jpeg", "png", "webp" or "unknown"
    """
    header = bytes(buffer[:12])

    if header.startswith(JPEG_SIGNATURE):
        return "jpeg"
    if header.startswith(PNG_SIGNATURE):
        return "png"
    if header.startswith(RIFF_SIGNATURE) and header[8:12] == WEBP_FOURCC:
        return "webp"
    return "unknown"


def normalize_format(image_format: Optional[str]) -> ImageFormat:
    """Map a decoder-reported format name onto the accepted vocabulary."""
    if not image_format:
        return "unknown"

    name = image_format.lower()
    if name == "jpg":
        return "jpeg"
    if name in ("jpeg", "png", "webp"):
        return name  # type: ignore[return-value]
    return "unknown"


def format_kilobytes(size: int) -> str:
    return f"{size / 1024:.1f}KB"


def format_megabytes(size: int) -> str:
    return f"{size / 1024 / 1024:.1f}MB"


def format_ratio(ratio: float) -> str:
    return f"{ratio:.2f}"


def check_file_size(size: int, config: ValidationConfig) -> List[str]:
    """
    Check the buffer length against the configured bounds.

    Args:
        size: Buffer length in bytes
        config: Thresholds to apply

    Returns:
        Error messages, empty when the size is acceptable
    """
    errors = []

    if size < config.min_file_size:
        errors.append(
            f"Image too small ({format_kilobytes(size)}). "
            f"Minimum: {format_kilobytes(config.min_file_size)}"
        )

    if size > config.max_file_size:
        errors.append(
            f"Image too large ({format_megabytes(size)}). "
            f"Maximum: {format_megabytes(config.max_file_size)}"
        )

    return errors


def check_dimensions(
    width: int, height: int, config: ValidationConfig
) -> Tuple[List[str], List[str]]:
    """
    Check resolved dimensions.

    Returns:
        A ``(errors, warnings)`` tuple of message lists
    """
    errors: List[str] = []
    warnings: List[str] = []

    if width < config.min_width or height < config.min_height:
        errors.append(
            f"Image dimensions too small ({width}x{height}). "
            f"Minimum: {config.min_width}x{config.min_height}"
        )

    if width > config.max_width or height > config.max_height:
        warnings.append(
            f"Image dimensions very large ({width}x{height}). "
            "May take longer to upload."
        )

    return errors, warnings


def check_aspect_ratio(width: int, height: int, config: ValidationConfig) -> List[str]:
    """Warn about sideways, panoramic, or thumbnail-like proportions."""
    warnings = []
    ratio = width / height

    # Too narrow or too wide usually means a wrong orientation
    if ratio < config.min_aspect_ratio or ratio > config.max_aspect_ratio:
        warnings.append(
            f"Unusual aspect ratio ({format_ratio(ratio)}). "
            "Image may be rotated incorrectly."
        )

    # Small square images tend to be thumbnails
    if abs(ratio - 1.0) < config.square_tolerance and width < config.square_max_width:
        warnings.append(
            "Image appears to be square and small. "
            "Consider using a wider landscape photo."
        )

    return warnings


def check_format(image_format: Optional[str]) -> List[str]:
    """Reject formats outside the accepted set, naming the format as reported."""
    if image_format and image_format.lower() in ACCEPTED_FORMATS:
        return []
    label = image_format or "unknown"
    return [f"Unsupported image format: {label}. Use JPEG, PNG, or WebP."]


def check_density(size: int, width: int, height: int, config: ValidationConfig) -> List[str]:
    """
    Flag buffers that carry very few bytes per pixel.

    This is a coarse proxy for heavy compression, not a real quality metric.
    """
    pixels = width * height
    if pixels <= 0 or size <= 0:
        return []

    bytes_per_pixel = size / pixels
    if bytes_per_pixel < config.min_bytes_per_pixel:
        return ["Image may be low quality or heavily compressed."]
    return []
