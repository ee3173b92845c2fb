from abc import ABC, abstractmethod
from pathlib import Path

from docdraft.extraction.models import RawExtraction


class BaseExtractor(ABC):
    """Contract for all file text extraction collaborators."""

    @abstractmethod
    def extract(self, file_path: Path, original_name: str) -> RawExtraction:
        """Extract text content and metadata from an uploaded file.

        Args:
            file_path: Location of the temporary uploaded file.
            original_name: Filename as supplied by the client; its extension
                           selects the extraction strategy.

        Returns:
            RawExtraction with the text content and file metadata.

        Raises:
            ExtractionError: on unsupported format, corruption, or oversize.
        """
