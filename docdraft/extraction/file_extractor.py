"""Extracts text from uploaded files of heterogeneous format.

Plain-text formats are read as UTF-8 and lightly reshaped for readability
(JSON pretty-printed, markup whitespace collapsed, CSV annotated with a row
count). PDF and XLSX files are delegated to their adapters.
"""

import json
import re
from datetime import datetime, timezone
from pathlib import Path

from docdraft.extraction.base import BaseExtractor
from docdraft.extraction.exceptions import (
    ExtractionError,
    FileTooLargeError,
    UnsupportedFileTypeError,
)
from docdraft.extraction.file_types import (
    MAX_FILE_SIZE,
    file_extension,
    format_size_limit,
    get_mime_type,
    is_supported_file_type,
)
from docdraft.extraction.models import ExtractionMetadata, RawExtraction
from docdraft.extraction.spreadsheet import SpreadsheetExtractor
from docdraft.logging.logger import Log
from docdraft.pdf.base import BasePdfExtractor

_MARKUP_GAP_RE = re.compile(r">\s+<")
_WHITESPACE_RE = re.compile(r"\s+")


class FileExtractor(BaseExtractor):
    """Reads an uploaded file and returns its text with source metadata."""

    def __init__(
        self,
        *,
        pdf_extractor: BasePdfExtractor,
        spreadsheet_extractor: SpreadsheetExtractor | None = None,
        max_file_size: int = MAX_FILE_SIZE,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._spreadsheet_extractor = spreadsheet_extractor or SpreadsheetExtractor()
        self._max_file_size = max_file_size

    def extract(self, file_path: Path, original_name: str) -> RawExtraction:
        size = self._file_size(file_path)
        extension = file_extension(original_name)

        if size > self._max_file_size:
            raise FileTooLargeError(
                "File size exceeds maximum allowed size of "
                f"{format_size_limit(self._max_file_size)}"
            )
        if not is_supported_file_type(original_name):
            raise UnsupportedFileTypeError(f"File type {extension or '(none)'} is not supported")

        raw_text, content = self._read_content(file_path, extension)
        metadata = ExtractionMetadata(
            original_name=original_name,
            extension=extension,
            mime_type=get_mime_type(original_name),
            size=size,
            extracted_at=datetime.now(timezone.utc).isoformat(),
            content_length=len(raw_text),
        )
        Log.info(
            "Extracted document content",
            filename=original_name,
            extension=extension,
            content_length=len(raw_text),
        )
        return RawExtraction(content=content, metadata=metadata)

    @staticmethod
    def _file_size(file_path: Path) -> int:
        try:
            return file_path.stat().st_size
        except OSError as exc:
            raise ExtractionError(f"Failed to read uploaded file: {exc}") from exc

    def _read_content(self, file_path: Path, extension: str) -> tuple[str, str]:
        """Return (raw text, text handed to the model)."""
        if extension == ".pdf":
            pdf = self._pdf_extractor.extract(self._read_bytes(file_path))
            return pdf.text, f"PDF Document ({pdf.page_count} pages):\n{pdf.text}"
        if extension == ".xlsx":
            workbook = self._spreadsheet_extractor.extract(file_path)
            return workbook.text, f"Excel Data ({workbook.sheet_count} sheets):\n{workbook.text}"

        raw_text = self._read_text(file_path)
        if extension == ".json":
            return raw_text, self._pretty_json(raw_text)
        if extension in (".html", ".xml"):
            return raw_text, self._collapse_markup(raw_text)
        if extension == ".csv":
            return raw_text, self._annotate_csv(raw_text)
        return raw_text, raw_text

    @staticmethod
    def _read_bytes(file_path: Path) -> bytes:
        try:
            return file_path.read_bytes()
        except OSError as exc:
            raise ExtractionError(f"Failed to read uploaded file: {exc}") from exc

    @classmethod
    def _read_text(cls, file_path: Path) -> str:
        try:
            return cls._read_bytes(file_path).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ExtractionError(f"File is not valid UTF-8 text: {exc}") from exc

    @staticmethod
    def _pretty_json(raw_text: str) -> str:
        try:
            return json.dumps(json.loads(raw_text), indent=2, ensure_ascii=False)
        except json.JSONDecodeError:
            return raw_text

    @staticmethod
    def _collapse_markup(raw_text: str) -> str:
        collapsed = _MARKUP_GAP_RE.sub("><", raw_text)
        return _WHITESPACE_RE.sub(" ", collapsed).strip()

    @staticmethod
    def _annotate_csv(raw_text: str) -> str:
        rows = [line for line in raw_text.split("\n") if line.strip()]
        if not rows:
            return raw_text
        return f"CSV Data ({len(rows)} rows):\n{raw_text}"
