import threading

from docdraft.config.settings import Settings
from docdraft.extraction.base import BaseExtractor
from docdraft.extraction.factory import ExtractorFactory
from docdraft.logging.logger import Log
from docdraft.processor.exceptions import DISTINGUISHABLE_ERRORS, TransformationFailedError
from docdraft.processor.models import DocumentDraft
from docdraft.processor.pipeline import PipelineContext, PipelineState, PipelineStep
from docdraft.processor.steps import (
    AssembleResultStep,
    BuildDraftStep,
    ChunkContentStep,
    EstimateTokensStep,
    ExtractContentStep,
    ProcessChunksStep,
    TransformSmallDocumentStep,
    ValidateInputStep,
)
from docdraft.processor.uploads import UploadedFile, release_upload
from docdraft.transformation.assembler import ResultAssembler
from docdraft.transformation.chunk_processor import ChunkProcessor
from docdraft.transformation.chunker import ContentChunker
from docdraft.transformation.client_base import BaseCompletionClient
from docdraft.transformation.factory import CompletionClientFactory
from docdraft.transformation.small_document import SmallDocumentProcessor


class DocumentTransformer:
    """Turns an uploaded file plus instructions into a document draft.

    Pipeline: validate -> extract -> estimate -> (small path | chunk ->
    process chunks -> assemble) -> build draft. The uploaded temp file is
    released exactly once, whatever the outcome.
    """

    def __init__(
        self,
        *,
        intake_steps: list[PipelineStep],
        small_path_steps: list[PipelineStep],
        chunked_path_steps: list[PipelineStep],
        final_steps: list[PipelineStep],
    ) -> None:
        self._intake_steps = intake_steps
        self._small_path_steps = small_path_steps
        self._chunked_path_steps = chunked_path_steps
        self._final_steps = final_steps

    def transform(
        self,
        upload: UploadedFile | None,
        instructions: str | None,
        cancel_event: threading.Event | None = None,
    ) -> DocumentDraft:
        """Run the pipeline and return the draft.

        Raises:
            InputError: if the upload or instructions are missing.
            ExtractionError: if the file cannot be read as text.
            RateLimitError: if the provider quota is exhausted.
            ContextLengthError: if the content does not fit the model.
            TransformationCancelledError: if *cancel_event* is set mid-run.
            TransformationFailedError: on any other failure.
        """
        context = self.run(
            PipelineContext(upload=upload, instructions=instructions, cancel_event=cancel_event)
        )
        if context.draft is None:
            raise TransformationFailedError("Pipeline finished without producing a draft")
        return context.draft

    def run(self, context: PipelineContext) -> PipelineContext:
        try:
            self._run_steps(self._intake_steps, context)
            if context.state is PipelineState.SMALL_PATH:
                self._run_steps(self._small_path_steps, context)
            else:
                self._run_steps(self._chunked_path_steps, context)
            self._run_steps(self._final_steps, context)
        except DISTINGUISHABLE_ERRORS as exc:
            self._mark_failed(context, exc)
            raise
        except Exception as exc:
            self._mark_failed(context, exc)
            raise TransformationFailedError(f"Failed to process uploaded document: {exc}") from exc
        finally:
            if context.upload is not None:
                release_upload(context.upload)

        context.state = PipelineState.DONE
        draft = context.draft
        Log.info(
            "Document processed successfully",
            filename=draft.source_document.filename if draft else None,
            processed_content_length=len(draft.content) if draft else 0,
        )
        return context

    @staticmethod
    def _run_steps(steps: list[PipelineStep], context: PipelineContext) -> None:
        for step in steps:
            step.run(context)

    @staticmethod
    def _mark_failed(context: PipelineContext, exc: Exception) -> None:
        failed_in = context.state
        context.state = PipelineState.FAILED
        context.error_message = str(exc)
        Log.error(
            "Error processing uploaded document",
            filename=context.upload.original_name if context.upload else None,
            state=failed_in.value,
            error_type=type(exc).__name__,
            error=str(exc),
        )


def build_transformer(
    settings: Settings,
    *,
    client: BaseCompletionClient | None = None,
    extractor: BaseExtractor | None = None,
) -> DocumentTransformer:
    """Build a DocumentTransformer wired from settings.

    *client* and *extractor* replace the configured collaborators, which
    lets tests and embedding applications inject their own.
    """
    client = client if client is not None else CompletionClientFactory.create(settings)
    extractor = extractor if extractor is not None else ExtractorFactory.create(settings)
    model = CompletionClientFactory.resolve_model(settings)
    synthesis_model = CompletionClientFactory.resolve_synthesis_model(settings)

    return DocumentTransformer(
        intake_steps=[
            ValidateInputStep(),
            ExtractContentStep(extractor),
            EstimateTokensStep(settings.input_token_budget),
        ],
        small_path_steps=[
            TransformSmallDocumentStep(SmallDocumentProcessor(client=client, model=model)),
        ],
        chunked_path_steps=[
            ChunkContentStep(ContentChunker(settings.max_tokens_per_chunk)),
            ProcessChunksStep(
                ChunkProcessor(
                    client=client,
                    model=model,
                    delay_seconds=settings.chunk_delay_seconds,
                )
            ),
            AssembleResultStep(ResultAssembler(client=client, model=synthesis_model)),
        ],
        final_steps=[BuildDraftStep()],
    )
