"""Application port for the report rendering surface.

The use case writes the report in a handful of bulk sections. Concrete
surfaces (workbook, Streamlit page) decide how each section is styled.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Hyperlink:
    """Cell value rendered as a clickable label."""

    url: str
    label: str

    def __str__(self) -> str:
        return self.label


class ReportSheetPort(Protocol):
    """Port accepting the sections of a rendered report."""

    def clear(self) -> None:
        """Remove previous content and formatting."""

    def write_title(self, title: str, subtitle: str) -> None:
        """Write the report title and the subtitle below it."""

    def write_header(self, header: Sequence[str]) -> None:
        """Write the column header row."""

    def write_body(self, rows: Sequence[Sequence[object]]) -> None:
        """Write all data rows at once."""

    def write_totals(self, totals: Sequence[object]) -> None:
        """Append the totals row below the data rows."""

    def write_summary(self, summary: str) -> None:
        """Append the summary line at the end of the report."""

    def flush(self) -> None:
        """Persist or publish the written content."""


__all__ = ["Hyperlink", "ReportSheetPort"]
