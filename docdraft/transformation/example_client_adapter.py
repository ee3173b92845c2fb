"""Offline completion client.

Returns canned responses without network calls. Useful for local runs and
as a template for new provider adapters: implement BaseCompletionClient and
register the provider in CompletionClientFactory.
"""

import json
from typing import ClassVar

from docdraft.transformation.client_base import BaseCompletionClient


class ExampleClientAdapter(BaseCompletionClient):
    """Answers JSON requests with a fixed draft and text requests with Markdown."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "title": "Example Document",
        "content": "# Example Document\n\nGenerated without contacting a model provider.",
        "tags": ["example", "offline"],
        "summary": "Placeholder output from the offline example client.",
    }
    DEFAULT_TEXT: ClassVar[str] = "## Example Section\n\nGenerated without contacting a model provider."

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
        _ = model, system_prompt, user_prompt, max_output_tokens, temperature
        if json_output:
            return json.dumps(self.DEFAULT_RESPONSE)
        return self.DEFAULT_TEXT
