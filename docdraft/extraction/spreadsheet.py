import csv
import io
from dataclasses import dataclass
from pathlib import Path

import openpyxl

from docdraft.extraction.exceptions import SpreadsheetExtractionError


@dataclass(frozen=True)
class WorkbookText:
    """CSV rendering of every sheet in a workbook."""

    text: str
    sheet_count: int


class SpreadsheetExtractor:
    """Renders each worksheet as a CSV block headed by the sheet name."""

    def extract(self, file_path: Path) -> WorkbookText:
        try:
            workbook = openpyxl.load_workbook(file_path, read_only=True, data_only=True)
        except Exception as exc:
            raise SpreadsheetExtractionError(f"openpyxl could not open workbook: {exc}") from exc

        try:
            blocks = [
                f"\n--- Sheet: {sheet.title} ---\n{self._sheet_to_csv(sheet)}"
                for sheet in workbook.worksheets
            ]
        except Exception as exc:
            raise SpreadsheetExtractionError(f"Failed to read worksheet: {exc}") from exc
        finally:
            workbook.close()

        return WorkbookText(text="".join(blocks), sheet_count=len(blocks))

    @staticmethod
    def _sheet_to_csv(sheet: object) -> str:
        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        for row in sheet.iter_rows(values_only=True):  # type: ignore[attr-defined]
            writer.writerow(["" if value is None else value for value in row])
        return buf.getvalue()
