import io
from pathlib import Path

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from docdraft.processor.uploads import UploadedFile


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def make_upload(tmp_path: Path):  # type: ignore[no-untyped-def]
    """Write content to a temp upload file and describe it as UploadedFile."""

    def _make(content: str | bytes, original_name: str = "notes.txt") -> UploadedFile:
        data = content.encode("utf-8") if isinstance(content, str) else content
        path = tmp_path / f"upload-test{Path(original_name).suffix}"
        path.write_bytes(data)
        return UploadedFile(path=path, original_name=original_name, size=len(data))

    return _make
