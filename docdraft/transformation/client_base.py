from abc import ABC, abstractmethod


class BaseCompletionClient(ABC):
    """Contract for provider-specific language-model completion clients."""

    @abstractmethod
    def complete(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
        max_output_tokens: int,
        temperature: float,
        json_output: bool = False,
    ) -> str:
        """Return the provider response as plain text.

        Raises:
            RateLimitError: when the provider quota is exhausted.
            ContextLengthError: when the prompt does not fit the model context.
            TransportError: when the provider cannot be reached.
            ModelError: on any other provider failure.
        """
