from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractionMetadata:
    """Facts about the uploaded file captured at extraction time."""

    original_name: str
    extension: str
    mime_type: str
    size: int
    extracted_at: str
    content_length: int


@dataclass(frozen=True)
class RawExtraction:
    """Extracted text plus source metadata; immutable pipeline input."""

    content: str
    metadata: ExtractionMetadata
