from datetime import datetime, timezone

from docdraft.extraction.base import BaseExtractor
from docdraft.logging.logger import Log
from docdraft.processor.exceptions import InputError
from docdraft.processor.models import DocumentDraft, SourceDocument
from docdraft.processor.pipeline import PipelineContext, PipelineState, PipelineStep
from docdraft.transformation.assembler import ResultAssembler
from docdraft.transformation.chunk_processor import ChunkProcessor
from docdraft.transformation.chunker import ContentChunker
from docdraft.transformation.exceptions import ContextLengthError, RateLimitError
from docdraft.transformation.models import ChunkResult
from docdraft.transformation.small_document import SmallDocumentProcessor
from docdraft.transformation.tokens import estimate_tokens


class ValidateInputStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.state = PipelineState.VALIDATING
        if context.upload is None:
            raise InputError("No document file provided")
        if context.instructions is None or not context.instructions.strip():
            raise InputError("Processing instructions are required")
        return context


class ExtractContentStep(PipelineStep):
    def __init__(self, extractor: BaseExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.state = PipelineState.EXTRACTING
        if context.upload is None:
            raise ValueError("PipelineContext.upload must be validated before extraction")
        context.extraction = self._extractor.extract(
            context.upload.path, context.upload.original_name
        )
        return context


class EstimateTokensStep(PipelineStep):
    """Selects the single-call path when content fits the input budget."""

    def __init__(self, input_token_budget: int) -> None:
        self._input_token_budget = input_token_budget

    def run(self, context: PipelineContext) -> PipelineContext:
        context.state = PipelineState.ESTIMATING
        extraction = context.require_extraction()
        context.token_estimate = estimate_tokens(extraction.content)
        if context.token_estimate <= self._input_token_budget:
            context.state = PipelineState.SMALL_PATH
        else:
            context.state = PipelineState.CHUNKED_PATH
        Log.info(
            "Selected processing path",
            filename=extraction.metadata.original_name,
            token_estimate=context.token_estimate,
            input_token_budget=self._input_token_budget,
            path=context.state.value,
        )
        return context


class TransformSmallDocumentStep(PipelineStep):
    def __init__(self, processor: SmallDocumentProcessor) -> None:
        self._processor = processor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.draft_fields = self._processor.process(
            context.require_extraction(), context.require_instructions()
        )
        return context


class ChunkContentStep(PipelineStep):
    def __init__(self, chunker: ContentChunker) -> None:
        self._chunker = chunker

    def run(self, context: PipelineContext) -> PipelineContext:
        extraction = context.require_extraction()
        context.chunks = self._chunker.split(extraction.content)
        Log.info(
            "Processing large document in chunks",
            filename=extraction.metadata.original_name,
            total_tokens=context.token_estimate,
            chunk_count=len(context.chunks),
        )
        return context


class ProcessChunksStep(PipelineStep):
    def __init__(self, processor: ChunkProcessor) -> None:
        self._processor = processor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.chunk_results = self._processor.process(
            context.chunks,
            context.require_instructions(),
            context.require_extraction().metadata,
            cancel_event=context.cancel_event,
        )
        return context


class AssembleResultStep(PipelineStep):
    """Assembles chunk output, placeholders included.

    When every chunk failed with the same quota or context-length error,
    that error is raised instead.
    """

    def __init__(self, assembler: ResultAssembler) -> None:
        self._assembler = assembler

    def run(self, context: PipelineContext) -> PipelineContext:
        results = context.chunk_results
        shared_error = _shared_provider_error(results)
        if shared_error is not None:
            raise shared_error
        context.assembled = self._assembler.assemble(
            results,
            context.require_extraction().metadata,
            context.require_instructions(),
        )
        return context


class BuildDraftStep(PipelineStep):
    """Combines the transformed body with source-document metadata."""

    def run(self, context: PipelineContext) -> PipelineContext:
        metadata = context.require_extraction().metadata
        if context.draft_fields is not None:
            fields = context.draft_fields
            title, content, tags, summary = (
                fields.title, fields.content, fields.tags, fields.summary
            )
        elif context.assembled is not None:
            assembled = context.assembled
            title, content, tags, summary = (
                assembled.metadata.title,
                assembled.content,
                assembled.metadata.tags,
                assembled.metadata.summary,
            )
        else:
            raise ValueError("PipelineContext has no transformed content to build a draft from")

        context.draft = DocumentDraft(
            title=title,
            content=content,
            tags=list(tags),
            summary=summary,
            source_document=SourceDocument(
                filename=metadata.original_name,
                file_type=metadata.extension,
                original_size=metadata.size,
                processed_at=datetime.now(timezone.utc).isoformat(),
            ),
        )
        return context


def _shared_provider_error(results: list[ChunkResult]) -> BaseException | None:
    """Return the rate-limit or context-length error every chunk failed with, if any."""
    if not results or any(not result.failed or result.error is None for result in results):
        return None
    causes = [result.error.__cause__ for result in results if result.error is not None]
    for kind in (RateLimitError, ContextLengthError):
        if all(isinstance(cause, kind) for cause in causes):
            return causes[-1]
    return None
