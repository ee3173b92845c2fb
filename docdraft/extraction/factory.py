from docdraft.config.settings import Settings
from docdraft.extraction.file_extractor import FileExtractor
from docdraft.extraction.spreadsheet import SpreadsheetExtractor
from docdraft.pdf.base import BasePdfExtractor
from docdraft.pdf.pdfplumber_adapter import PdfPlumberAdapter
from docdraft.pdf.pymupdf_adapter import PyMuPdfAdapter


class ExtractorFactory:
    """Creates the file extractor with the configured PDF engine."""

    PDF_ENGINES: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> FileExtractor:
        return FileExtractor(
            pdf_extractor=cls.create_pdf_extractor(settings.pdf_engine),
            spreadsheet_extractor=SpreadsheetExtractor(),
            max_file_size=settings.max_upload_size_bytes,
        )

    @classmethod
    def create_pdf_extractor(cls, engine: str) -> BasePdfExtractor:
        adapter_cls = cls.PDF_ENGINES.get(engine.lower())
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine.lower()}'. Choose from: {list(cls.PDF_ENGINES)}"
            )
        return adapter_cls()
