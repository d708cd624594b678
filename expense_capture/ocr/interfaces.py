"""
Contract for the on-device OCR engine that feeds the parser.

The engine itself (ML Kit, Tesseract, a cloud API, ...) is supplied by the
host application; this package only needs the fragments it detects.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Mapping, Sequence, Union

from ..models import OcrFragment

FragmentLike = Union[OcrFragment, Mapping[str, Any], str]


class TextDetector(ABC):
    """Base OCR provider interface."""

    @abstractmethod
    def detect_text(self, image: bytes) -> Sequence[FragmentLike]:
        """
        Detect text in an image.

        Returns the detected fragments in reading order. Each fragment is an
        OcrFragment, a mapping with a ``text`` key, or a plain string. An
        image without text yields an empty sequence.
        """


def to_fragment(item: FragmentLike) -> OcrFragment:
    """Coerces whatever the engine reported into an OcrFragment."""
    if isinstance(item, OcrFragment):
        return item
    if isinstance(item, str):
        return OcrFragment(text=item)
    return OcrFragment.model_validate(dict(item))


def join_fragments(fragments: Iterable[FragmentLike]) -> str:
    """Concatenates fragment texts, in the order supplied, one per line."""
    texts: List[str] = [to_fragment(item).text for item in fragments or []]
    return "\n".join(texts)
