"""Sequential, failure-tolerant transformation of document chunks."""

import threading
import time
from pathlib import Path

from docdraft.extraction.models import ExtractionMetadata
from docdraft.logging.logger import Log
from docdraft.transformation.client_base import BaseCompletionClient
from docdraft.transformation.exceptions import (
    ChunkTransformError,
    TransformationCancelledError,
)
from docdraft.transformation.models import Chunk, ChunkResult
from docdraft.transformation.prompt_loader import (
    CHUNK_PROMPT,
    SYSTEM_PROMPT,
    load_prompt_template,
)


def failure_placeholder(index: int) -> str:
    return f"\n[Note: Chunk {index + 1} could not be processed due to an error]\n"


class ChunkProcessor:
    """Transforms chunks one at a time, never concurrently.

    A failing chunk call is logged and replaced by a placeholder; the loop
    always continues, so the result list has one entry per input chunk. A
    fixed delay separates consecutive calls to stay under provider rate
    limits.
    """

    MAX_OUTPUT_TOKENS = 1500

    def __init__(
        self,
        *,
        client: BaseCompletionClient,
        model: str,
        temperature: float = 0.6,
        delay_seconds: float = 1.0,
        prompt_dir: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._delay_seconds = delay_seconds
        self._system_prompt = load_prompt_template(SYSTEM_PROMPT, prompt_dir)
        self._prompt_template = load_prompt_template(CHUNK_PROMPT, prompt_dir)

    def process(
        self,
        chunks: list[Chunk],
        instructions: str,
        metadata: ExtractionMetadata,
        cancel_event: threading.Event | None = None,
    ) -> list[ChunkResult]:
        results: list[ChunkResult] = []
        for position, chunk in enumerate(chunks):
            if cancel_event is not None and cancel_event.is_set():
                raise TransformationCancelledError(
                    f"Processing cancelled before chunk {chunk.index + 1} of {len(chunks)}"
                )
            results.append(self._process_chunk(chunk, len(chunks), instructions, metadata))
            if position < len(chunks) - 1 and self._delay_seconds > 0:
                time.sleep(self._delay_seconds)

        failed = sum(1 for result in results if result.failed)
        Log.info(
            "Chunk processing finished",
            filename=metadata.original_name,
            chunk_count=len(chunks),
            failed_count=failed,
        )
        return results

    def _process_chunk(
        self,
        chunk: Chunk,
        chunk_count: int,
        instructions: str,
        metadata: ExtractionMetadata,
    ) -> ChunkResult:
        prompt = self._prompt_template.format(
            chunk_number=chunk.index + 1,
            chunk_count=chunk_count,
            filename=metadata.original_name,
            file_type=metadata.extension,
            instructions=instructions,
            chunk_text=chunk.text,
        )
        Log.debug(f"Chunk {chunk.index} prompt:\n{prompt}")
        try:
            output = self._client.complete(
                model=self._model,
                system_prompt=self._system_prompt,
                user_prompt=prompt,
                max_output_tokens=self.MAX_OUTPUT_TOKENS,
                temperature=self._temperature,
            )
        except Exception as exc:
            error = ChunkTransformError(chunk.index, str(exc))
            error.__cause__ = exc
            Log.error(
                "Error processing chunk",
                filename=metadata.original_name,
                chunk_index=chunk.index,
                error=str(exc),
            )
            return ChunkResult(
                index=chunk.index,
                output_text=failure_placeholder(chunk.index),
                failed=True,
                error=error,
            )
        return ChunkResult(index=chunk.index, output_text=output)
