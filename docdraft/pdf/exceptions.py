from docdraft.extraction.exceptions import ExtractionError


class PdfExtractionError(ExtractionError):
    """Raised when a PDF adapter fails to extract text."""
