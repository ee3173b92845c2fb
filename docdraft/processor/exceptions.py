from docdraft.extraction.exceptions import ExtractionError, FileTooLargeError
from docdraft.transformation.exceptions import (
    ContextLengthError,
    RateLimitError,
    TransformationCancelledError,
)


class ProcessorError(Exception):
    """Base exception for all orchestration errors."""


class InputError(ProcessorError):
    """Raised when the upload or the processing instructions are missing."""


class TransformationFailedError(ProcessorError):
    """Raised when the pipeline fails for a reason callers cannot act on."""


# Kinds the orchestrator lets through unchanged so callers can tell them apart.
DISTINGUISHABLE_ERRORS: tuple[type[Exception], ...] = (
    InputError,
    ExtractionError,
    RateLimitError,
    ContextLengthError,
    TransformationCancelledError,
    TransformationFailedError,
)


def user_message(exc: Exception) -> str:
    """Map a pipeline error to guidance suitable for end users."""
    if isinstance(exc, RateLimitError):
        if "tokens per min" in str(exc):
            return (
                "Document is too large or processing rate limit exceeded. Please try with "
                "a smaller document or wait a moment before retrying."
            )
        return "API rate limit exceeded. Please wait a moment before retrying."
    if isinstance(exc, ContextLengthError):
        return (
            "Document is too large to process. Please try with a smaller document "
            "or break it into smaller files."
        )
    if isinstance(exc, FileTooLargeError):
        return str(exc)
    if isinstance(exc, ExtractionError):
        return f"Failed to process uploaded file: {exc}"
    if isinstance(exc, InputError):
        return str(exc)
    if isinstance(exc, TransformationCancelledError):
        return "Document processing was cancelled."
    return "Failed to process uploaded document"
