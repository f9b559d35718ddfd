"""Decoding capabilities used by the metadata validation path."""

import io
import struct
from typing import TYPE_CHECKING, Any, Optional

from .exceptions import DecoderUnavailableError, ImageDecodeError
from .logging_config import get_logger
from .models import DecodedImage
from .protocols import ImageBuffer, ImageDecoderProtocol

if TYPE_CHECKING:
    from PIL import Image
else:
    try:
        from PIL import Image
    except ImportError:
        # Deployments without Pillow validate on signatures only
        Image = None

PILLOW_AVAILABLE = Image is not None

# Pillow reports camera multi-picture JPEGs as MPO
_FORMAT_ALIASES = {"MPO": "JPEG"}

# Errors a Pillow plugin raises when a buffer is not in its format
_PLUGIN_REJECTIONS = (SyntaxError, IndexError, TypeError, struct.error)


def open_header(buffer: ImageBuffer) -> "Image.Image":
    """
    Open an image lazily without the decompression-bomb pixel limit.

    `Image.open` refuses headers above twice `Image.MAX_IMAGE_PIXELS`, but no
    pixel data is decoded here, so very large listing photos must still
    report their size. The registered plugins are tried in the order
    `Image.open` uses, leaving the global limit untouched.

    Raises:
        ImageDecodeError: If no plugin recognizes the buffer
    """
    fp = io.BytesIO(buffer)
    prefix = fp.read(16)

    for load_plugins in (Image.preinit, Image.init):
        load_plugins()
        for format_id in Image.ID:
            factory, accept = Image.OPEN[format_id]
            if accept is not None:
                accepted = accept(prefix)
                # A string is a plugin warning, not a match
                if not accepted or isinstance(accepted, str):
                    continue
            fp.seek(0)
            try:
                return factory(fp, "")
            except _PLUGIN_REJECTIONS:
                continue

    raise ImageDecodeError("cannot identify image file")


class PillowDecoder:
    """Header-only decoder backed by Pillow."""

    def decode(self, buffer: ImageBuffer) -> DecodedImage:
        """
        Read width, height and format without decoding pixel data.

        Raises:
            DecoderUnavailableError: If Pillow is not installed
            ImageDecodeError: If the buffer is not an image Pillow recognizes
        """
        if not PILLOW_AVAILABLE:
            raise DecoderUnavailableError("Pillow is not installed")

        try:
            with open_header(buffer) as image:
                width, height = image.size
                image_format = image.format
        except (MemoryError, ImageDecodeError):
            raise
        except Exception as exc:  # noqa: BLE001
            raise ImageDecodeError(f"Pillow could not read image header: {exc}") from exc

        if image_format:
            image_format = _FORMAT_ALIASES.get(image_format, image_format).lower()

        return DecodedImage(width=width, height=height, format=image_format)


class NullDecoder:
    """Decoder used when no decoding library is available."""

    def decode(self, buffer: ImageBuffer) -> DecodedImage:
        raise DecoderUnavailableError("No image decoder is installed")


def load_default_decoder(logger: Optional[Any] = None) -> ImageDecoderProtocol:
    """
    Probe for the best available decoding capability.

    Returns:
        A PillowDecoder when Pillow imports, otherwise a NullDecoder
    """
    logger = logger or get_logger("decoders")

    if PILLOW_AVAILABLE:
        logger.debug("Using Pillow for image header decoding")
        return PillowDecoder()

    logger.info("Pillow not available, validating on file signatures only")
    return NullDecoder()
