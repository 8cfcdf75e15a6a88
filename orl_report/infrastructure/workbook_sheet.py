"""Report rendering surface backed by an openpyxl workbook."""

from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Border, Font, Side
from openpyxl.utils import get_column_letter

from orl_report.application.ports.report_sheet import (
    Hyperlink,
    ReportSheetPort,
)
from orl_report.infrastructure.logging.logger import get_app_logger

TITLE_FONT = Font(size=18)
HEADER_FONT = Font(bold=True)
HEADER_BORDER = Border(bottom=Side(style="thin"))
AMOUNT_FORMAT = "0.00"
HEADER_ROW = 4
FIRST_AMOUNT_COLUMN = 5


class WorkbookReportSheet(ReportSheetPort):
    """Write the report into a worksheet and save it as ``.xlsx``.

    Layout: title in A1, subtitle in A2, header in row 4, data from row 5,
    totals right below the data, then a blank row and the summary line.
    """

    def __init__(
        self,
        output_path: Path | str,
        sheet_title: str = "ORL Report",
        workbook: Workbook | None = None,
        logger=None,
    ) -> None:
        self._output_path = Path(output_path)
        self._sheet_title = sheet_title
        self._workbook = workbook or Workbook()
        self._worksheet = self._workbook.active
        self._worksheet.title = sheet_title
        self._next_row = HEADER_ROW + 1
        self._logger = logger or get_app_logger()

    @property
    def worksheet(self):
        return self._worksheet

    @property
    def output_path(self) -> Path:
        return self._output_path

    def clear(self) -> None:
        self._workbook.remove(self._worksheet)
        self._worksheet = self._workbook.create_sheet(self._sheet_title, 0)
        self._next_row = HEADER_ROW + 1

    def write_title(self, title: str, subtitle: str) -> None:
        title_cell = self._worksheet.cell(row=1, column=1, value=title)
        title_cell.font = TITLE_FONT
        self._worksheet.cell(row=2, column=1, value=subtitle)

    def write_header(self, header: Sequence[str]) -> None:
        for col, name in enumerate(header, 1):
            cell = self._worksheet.cell(row=HEADER_ROW, column=col, value=name)
            cell.font = HEADER_FONT
            cell.border = HEADER_BORDER
        for col in range(1, len(header) + 1):
            self._worksheet.column_dimensions[
                get_column_letter(col)
            ].width = 16
        self._next_row = HEADER_ROW + 1

    def write_body(self, rows: Sequence[Sequence[object]]) -> None:
        for row in rows:
            self._write_row(row)

    def write_totals(self, totals: Sequence[object]) -> None:
        self._write_row(totals)

    def write_summary(self, summary: str) -> None:
        self._next_row += 1
        self._worksheet.cell(row=self._next_row, column=1, value=summary)
        self._next_row += 1

    def flush(self) -> None:
        self._output_path.parent.mkdir(parents=True, exist_ok=True)
        self._workbook.save(str(self._output_path))
        self._logger.info(f"Report saved to {self._output_path}")

    def _write_row(self, values: Sequence[object]) -> None:
        row_index = self._next_row
        for col, value in enumerate(values, 1):
            cell = self._worksheet.cell(row=row_index, column=col)
            if isinstance(value, Hyperlink):
                cell.value = value.label
                cell.hyperlink = value.url
                cell.style = "Hyperlink"
            else:
                cell.value = value
            if col >= FIRST_AMOUNT_COLUMN:
                cell.number_format = AMOUNT_FORMAT
        self._next_row += 1


__all__ = ["WorkbookReportSheet"]
