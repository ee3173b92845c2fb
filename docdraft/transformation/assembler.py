"""Joins chunk output and synthesizes title, tags and summary."""

from pathlib import Path

from docdraft.extraction.models import ExtractionMetadata
from docdraft.logging.logger import Log
from docdraft.transformation.client_base import BaseCompletionClient
from docdraft.transformation.exceptions import SynthesisError
from docdraft.transformation.models import AssembledDocument, ChunkResult, DraftMetadata
from docdraft.transformation.prompt_loader import (
    SYNTHESIS_PROMPT,
    SYSTEM_PROMPT,
    load_prompt_template,
)
from docdraft.transformation.response_parser import (
    FallbackResponse,
    parse_structured,
    string_field,
    tags_field,
)

CHUNK_SEPARATOR = "\n\n---\n\n"
DEFAULT_CHUNKED_TAGS = ("document-processing", "ai-generated", "large-document")
DEFAULT_CHUNKED_SUMMARY = "Large document processed in chunks and converted to Markdown format"


def default_title(filename: str) -> str:
    return f"Processed: {filename}"


class ResultAssembler:
    """Builds the final content of a chunked document.

    Exactly one synthesis call is made per document, and it only sees a
    bounded prefix of the assembled text. Any failure of that call falls
    back to deterministic metadata and is never raised to the caller.
    """

    MAX_OUTPUT_TOKENS = 300
    PREFIX_LENGTH = 500

    def __init__(
        self,
        *,
        client: BaseCompletionClient,
        model: str,
        temperature: float = 0.5,
        prompt_dir: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._system_prompt = load_prompt_template(SYSTEM_PROMPT, prompt_dir)
        self._prompt_template = load_prompt_template(SYNTHESIS_PROMPT, prompt_dir)

    def assemble(
        self,
        results: list[ChunkResult],
        metadata: ExtractionMetadata,
        instructions: str,
    ) -> AssembledDocument:
        ordered = sorted(results, key=lambda result: result.index)
        content = CHUNK_SEPARATOR.join(result.output_text for result in ordered)

        try:
            draft_metadata = self._synthesize(content, metadata.original_name, instructions)
        except SynthesisError as exc:
            Log.warning(
                "Metadata synthesis failed, using defaults",
                filename=metadata.original_name,
                error=str(exc),
            )
            return AssembledDocument(
                content=content,
                metadata=self.fallback_metadata(metadata.original_name),
                synthesized=False,
            )
        return AssembledDocument(content=content, metadata=draft_metadata, synthesized=True)

    @staticmethod
    def fallback_metadata(filename: str) -> DraftMetadata:
        return DraftMetadata(
            title=default_title(filename),
            tags=list(DEFAULT_CHUNKED_TAGS),
            summary=DEFAULT_CHUNKED_SUMMARY,
        )

    def _synthesize(self, content: str, filename: str, instructions: str) -> DraftMetadata:
        prompt = self._prompt_template.format(
            filename=filename,
            instructions=instructions,
            prefix_length=self.PREFIX_LENGTH,
            content_prefix=content[: self.PREFIX_LENGTH],
        )
        try:
            raw = self._client.complete(
                model=self._model,
                system_prompt=self._system_prompt,
                user_prompt=prompt,
                max_output_tokens=self.MAX_OUTPUT_TOKENS,
                temperature=self._temperature,
                json_output=True,
            )
        except Exception as exc:
            raise SynthesisError(f"Synthesis call failed: {exc}") from exc
        Log.debug(f"Synthesis raw response:\n{raw}")

        response = parse_structured(raw)
        if isinstance(response, FallbackResponse):
            raise SynthesisError(response.reason)

        data = response.data
        return DraftMetadata(
            title=string_field(data, "title") or default_title(filename),
            tags=tags_field(data) or list(DEFAULT_CHUNKED_TAGS),
            summary=string_field(data, "summary") or DEFAULT_CHUNKED_SUMMARY,
        )
