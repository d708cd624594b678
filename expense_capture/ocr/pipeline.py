"""
Image -> ReceiptFields capture pipeline.

Runs the host-supplied OCR engine on an image buffer and hands the joined
text to the ReceiptParser. OCR failures are translated into the user-facing
OcrError family; an image in which nothing was detected is not a failure and
produces a blank draft for manual entry.
"""

from typing import Optional

from ..exceptions import ImageSourceError, OcrError, OcrFailedError, OcrPermissionError
from ..models import ReceiptFields
from ..parsers import ReceiptParser
from ..utils.logging_config import logger
from .interfaces import TextDetector, join_fragments

# Anything smaller cannot be a real encoded image
MIN_IMAGE_BYTES = 100

_PERMISSION_HINTS = ('permission', 'access')


def analyze_image(image: bytes, detector: TextDetector,
                  parser: Optional[ReceiptParser] = None) -> ReceiptFields:
    """
    OCR an image and extract receipt fields from the detected text.

    Args:
        image: Encoded image bytes (camera photo or rasterized PDF page).
        detector: OCR engine used to detect text fragments.
        parser: Parser to use; a default ReceiptParser when omitted.

    Raises:
        ImageSourceError: the buffer is empty or too small to be an image.
        OcrPermissionError: the engine was denied access to the image.
        OcrFailedError: any other engine failure.
    """
    parser = parser or ReceiptParser()

    if not image:
        raise ImageSourceError("Unable to prepare image for analysis (source empty).")
    if len(image) < MIN_IMAGE_BYTES:
        raise ImageSourceError("Unable to prepare image for analysis (corrupted data).")

    try:
        fragments = list(detector.detect_text(bytes(image)) or [])
    except OcrError:
        raise
    except Exception as e:
        logger.error(f"OCR engine failed: {e}")
        message = str(e).lower()
        if any(hint in message for hint in _PERMISSION_HINTS):
            raise OcrPermissionError() from e
        raise OcrFailedError() from e

    if not fragments:
        logger.info("OCR detected no text, returning blank receipt for manual entry")
        return parser.blank_fields()

    logger.info(f"OCR detected {len(fragments)} text fragments")
    return parser.parse(join_fragments(fragments))
