"""
Exception hierarchy for the expense capture toolkit.

The receipt parser never raises for "nothing found" conditions; these
exceptions cover invalid arguments, broken configuration and failures of the
OCR collaborator that sits in front of the parser.
"""

from typing import Optional


class ExpenseCaptureError(Exception):
    """Base class for all errors raised by expense_capture."""


class InvalidArgumentError(ExpenseCaptureError, ValueError):
    """Raised when the parser is handed something other than a string."""


class ConfigurationError(ExpenseCaptureError, ValueError):
    """Raised when a parser or form configuration cannot be loaded or validated."""


class OcrError(ExpenseCaptureError):
    """Base class for failures in the image -> text stage."""

    user_message = "OCR failed on this file. Try again with a clearer image or different file."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.user_message)


class ImageSourceError(OcrError):
    """The image buffer is missing or too small to be a real image."""

    user_message = "Unable to prepare image for analysis."


class OcrPermissionError(OcrError):
    """The detector could not read the image because access was denied."""

    user_message = "Permission required to read file. Please check settings."


class OcrFailedError(OcrError):
    """Any other detector failure."""
