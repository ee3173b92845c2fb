from pathlib import Path

from docdraft.extraction.models import RawExtraction
from docdraft.logging.logger import Log
from docdraft.transformation.assembler import default_title
from docdraft.transformation.client_base import BaseCompletionClient
from docdraft.transformation.exceptions import SmallPathParseError
from docdraft.transformation.models import DraftFields
from docdraft.transformation.prompt_loader import (
    SMALL_DOCUMENT_PROMPT,
    SYSTEM_PROMPT,
    load_prompt_template,
)
from docdraft.transformation.response_parser import (
    FallbackResponse,
    parse_structured,
    string_field,
    tags_field,
)

DEFAULT_TAGS = ("document-processing", "ai-generated")
DEFAULT_SUMMARY = "Document processed and converted to Markdown format"


class SmallDocumentProcessor:
    """Transforms a document that fits the input budget in a single call.

    The model is asked for a JSON draft. When it answers with anything else,
    the raw answer becomes the draft content under a generated title and
    default tags; a format violation alone never fails the request.
    """

    MAX_OUTPUT_TOKENS = 4000

    def __init__(
        self,
        *,
        client: BaseCompletionClient,
        model: str,
        temperature: float = 0.6,
        prompt_dir: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._system_prompt = load_prompt_template(SYSTEM_PROMPT, prompt_dir)
        self._prompt_template = load_prompt_template(SMALL_DOCUMENT_PROMPT, prompt_dir)

    def process(self, extraction: RawExtraction, instructions: str) -> DraftFields:
        metadata = extraction.metadata
        prompt = self._prompt_template.format(
            filename=metadata.original_name,
            file_type=metadata.extension,
            size_kb=round(metadata.size / 1024),
            content_length=metadata.content_length,
            content=extraction.content,
            instructions=instructions,
        )
        Log.debug(f"Small document prompt:\n{prompt}")

        raw = self._client.complete(
            model=self._model,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            max_output_tokens=self.MAX_OUTPUT_TOKENS,
            temperature=self._temperature,
            json_output=True,
        )
        Log.debug(f"Small document raw response:\n{raw}")

        try:
            return self._structure(raw, metadata.original_name)
        except SmallPathParseError as exc:
            Log.warning(
                "Model response was not a structured draft, using raw text",
                filename=metadata.original_name,
                error=str(exc),
            )
            return DraftFields(
                title=default_title(metadata.original_name),
                content=raw,
                tags=list(DEFAULT_TAGS),
                summary=DEFAULT_SUMMARY,
                structured=False,
            )

    @staticmethod
    def _structure(raw: str, filename: str) -> DraftFields:
        response = parse_structured(raw, required=("content",))
        if isinstance(response, FallbackResponse):
            raise SmallPathParseError(response.reason)
        data = response.data
        return DraftFields(
            title=string_field(data, "title") or default_title(filename),
            content=data["content"],
            tags=tags_field(data) or list(DEFAULT_TAGS),
            summary=string_field(data, "summary"),
            structured=True,
        )
