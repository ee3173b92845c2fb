import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from docdraft.extraction.models import RawExtraction
from docdraft.processor.models import DocumentDraft
from docdraft.processor.uploads import UploadedFile
from docdraft.transformation.models import (
    AssembledDocument,
    Chunk,
    ChunkResult,
    DraftFields,
)


class PipelineState(Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    EXTRACTING = "extracting"
    ESTIMATING = "estimating"
    SMALL_PATH = "small_path"
    CHUNKED_PATH = "chunked_path"
    DONE = "done"
    FAILED = "failed"


@dataclass(slots=True)
class PipelineContext:
    upload: UploadedFile | None
    instructions: str | None
    cancel_event: threading.Event | None = None
    state: PipelineState = PipelineState.IDLE
    extraction: RawExtraction | None = None
    token_estimate: int = 0
    chunks: list[Chunk] = field(default_factory=list)
    chunk_results: list[ChunkResult] = field(default_factory=list)
    assembled: AssembledDocument | None = None
    draft_fields: DraftFields | None = None
    draft: DocumentDraft | None = None
    error_message: str = ""

    def require_extraction(self) -> RawExtraction:
        if self.extraction is None:
            raise ValueError("PipelineContext.extraction must be set before this step")
        return self.extraction

    def require_instructions(self) -> str:
        if not self.instructions:
            raise ValueError("PipelineContext.instructions must be validated before this step")
        return self.instructions


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
