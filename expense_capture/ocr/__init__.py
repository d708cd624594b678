"""
OCR collaborator contract and the image capture pipeline.
"""

from .interfaces import TextDetector, join_fragments, to_fragment
from .pipeline import MIN_IMAGE_BYTES, analyze_image

__all__ = ["TextDetector", "join_fragments", "to_fragment", "MIN_IMAGE_BYTES", "analyze_image"]
