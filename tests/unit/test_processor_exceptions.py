import pytest

from docdraft.extraction.exceptions import ExtractionError, FileTooLargeError
from docdraft.processor.exceptions import (
    DISTINGUISHABLE_ERRORS,
    InputError,
    TransformationFailedError,
    user_message,
)
from docdraft.transformation.exceptions import (
    ContextLengthError,
    RateLimitError,
    TransformationCancelledError,
    TransportError,
)


class TestUserMessage:
    def test_token_rate_limit_suggests_smaller_document(self) -> None:
        message = user_message(RateLimitError("Rate limit reached for tokens per min"))
        assert "too large" in message

    def test_request_rate_limit_suggests_waiting(self) -> None:
        assert user_message(RateLimitError("requests per min")).startswith("API rate limit")

    def test_context_length(self) -> None:
        assert "break it into smaller files" in user_message(ContextLengthError("too long"))

    def test_file_too_large_keeps_its_message(self) -> None:
        error = FileTooLargeError("File size exceeds 5MB limit")
        assert user_message(error) == "File size exceeds 5MB limit"

    def test_extraction_error_is_prefixed(self) -> None:
        message = user_message(ExtractionError("File is not valid UTF-8 text"))
        assert message == "Failed to process uploaded file: File is not valid UTF-8 text"

    def test_input_error_keeps_its_message(self) -> None:
        assert user_message(InputError("No document file provided")) == "No document file provided"

    def test_cancelled(self) -> None:
        assert "cancelled" in user_message(TransformationCancelledError("stop"))

    @pytest.mark.parametrize(
        "error", [TransformationFailedError("boom"), TransportError("reset"), KeyError("x")]
    )
    def test_everything_else_is_generic(self, error: Exception) -> None:
        assert user_message(error) == "Failed to process uploaded document"


class TestDistinguishableErrors:
    def test_transport_errors_are_not_passed_through(self) -> None:
        assert not issubclass(TransportError, DISTINGUISHABLE_ERRORS)

    def test_rate_limit_is_passed_through(self) -> None:
        assert issubclass(RateLimitError, DISTINGUISHABLE_ERRORS)
