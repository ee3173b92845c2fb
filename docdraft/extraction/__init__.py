from docdraft.extraction.base import BaseExtractor
from docdraft.extraction.exceptions import ExtractionError
from docdraft.extraction.models import ExtractionMetadata, RawExtraction

__all__ = [
    "BaseExtractor",
    "ExtractionError",
    "ExtractionMetadata",
    "RawExtraction",
]
