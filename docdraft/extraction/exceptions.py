class ExtractionError(Exception):
    """Raised when text cannot be extracted from an uploaded file."""


class UnsupportedFileTypeError(ExtractionError):
    """Raised when the file extension is not in the supported set."""


class FileTooLargeError(ExtractionError):
    """Raised when the uploaded file exceeds the configured size limit."""


class SpreadsheetExtractionError(ExtractionError):
    """Raised when a workbook cannot be read."""
