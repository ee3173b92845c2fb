from dataclasses import dataclass, field

from docdraft.transformation.exceptions import ChunkTransformError


@dataclass(frozen=True)
class Chunk:
    """A bounded, ordered slice of extracted text."""

    index: int
    text: str


@dataclass(frozen=True)
class ChunkResult:
    """Transformed output for one chunk, or a placeholder when it failed."""

    index: int
    output_text: str
    failed: bool = False
    error: ChunkTransformError | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class DraftMetadata:
    """Title, tags and summary describing a transformed document."""

    title: str
    tags: list[str]
    summary: str


@dataclass(frozen=True)
class AssembledDocument:
    """Joined chunk output plus its synthesized metadata."""

    content: str
    metadata: DraftMetadata
    synthesized: bool


@dataclass(frozen=True)
class DraftFields:
    """Draft body produced by the single-call path."""

    title: str
    content: str
    tags: list[str]
    summary: str
    structured: bool
