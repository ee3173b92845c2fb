from typing import Any

import httpx
import openai

from docdraft.transformation.client_base import BaseCompletionClient
from docdraft.transformation.exceptions import (
    ContextLengthError,
    ModelError,
    RateLimitError,
    TransportError,
)

_CONTEXT_LENGTH_CODE = "context_length_exceeded"


class OpenAIClientAdapter(BaseCompletionClient):
    """Completion client built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        organization: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            organization=organization or None,
            max_retries=0,
        )

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
        request: dict[str, Any] = {
            "model": model,
            "temperature": temperature,
            "max_tokens": max_output_tokens,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        }
        if json_output:
            request["response_format"] = {"type": "json_object"}

        try:
            response = self._client.chat.completions.create(**request)
        except openai.RateLimitError as exc:
            raise RateLimitError(f"AI provider rate limit exceeded: {exc}") from exc
        except openai.BadRequestError as exc:
            if _is_context_length_error(exc):
                raise ContextLengthError(f"Prompt exceeds model context: {exc}") from exc
            raise ModelError(f"AI provider rejected request: {exc}") from exc
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise TransportError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ModelError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise ModelError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise ModelError("AI returned empty response")
        return content


def _is_context_length_error(exc: openai.APIError) -> bool:
    return getattr(exc, "code", None) == _CONTEXT_LENGTH_CODE or _CONTEXT_LENGTH_CODE in str(exc)
