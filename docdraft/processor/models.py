from dataclasses import dataclass, field


@dataclass(frozen=True)
class SourceDocument:
    """Provenance of a draft: the file it was produced from."""

    filename: str
    file_type: str
    original_size: int
    processed_at: str


@dataclass(frozen=True)
class DocumentDraft:
    """Pipeline output handed to the document-persistence API."""

    title: str
    content: str
    source_document: SourceDocument
    tags: list[str] = field(default_factory=list)
    summary: str = ""

    def to_dict(self) -> dict[str, object]:
        """Serialize to the wire shape the persistence API accepts."""
        return {
            "title": self.title,
            "content": self.content,
            "tags": list(self.tags),
            "summary": self.summary,
            "sourceDocument": {
                "filename": self.source_document.filename,
                "fileType": self.source_document.file_type,
                "originalSize": self.source_document.original_size,
                "processedAt": self.source_document.processed_at,
            },
        }
