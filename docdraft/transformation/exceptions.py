class TransformationError(Exception):
    """Base exception for all AI transformation errors."""


class ModelError(TransformationError):
    """Raised when the language-model provider call fails."""


class RateLimitError(ModelError):
    """Raised when the provider rejects a call because a quota was exhausted."""


class ContextLengthError(ModelError):
    """Raised when the prompt exceeds the model's context window."""


class TransportError(ModelError):
    """Raised when the provider cannot be reached (connection, timeout)."""


class ResponseFormatError(TransformationError):
    """Raised when a model response is not the expected JSON object."""


class ChunkTransformError(TransformationError):
    """Raised when a single chunk cannot be transformed."""

    def __init__(self, index: int, reason: str) -> None:
        super().__init__(f"Chunk {index} failed: {reason}")
        self.index = index


class SynthesisError(TransformationError):
    """Raised when document metadata cannot be synthesized."""


class SmallPathParseError(TransformationError):
    """Raised when a single-call response cannot be read as a structured draft."""


class TransformationCancelledError(TransformationError):
    """Raised when the caller cancels a request between chunk calls."""
