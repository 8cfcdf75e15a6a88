"""Report rendering surface drawing on a Streamlit page."""

from collections.abc import Sequence
from decimal import Decimal

import streamlit as st

from orl_report.application.ports.report_sheet import (
    Hyperlink,
    ReportSheetPort,
)

FOLIO_COLUMN = "Folio"


class StreamlitReportSheet(ReportSheetPort):
    """Collect the report sections and render them on flush."""

    def __init__(self) -> None:
        self.clear()

    def clear(self) -> None:
        self.title = ""
        self.subtitle = ""
        self.header: list[str] = []
        self.rows: list[list[object]] = []
        self.totals: list[object] = []
        self.summary = ""

    def write_title(self, title: str, subtitle: str) -> None:
        self.title = title
        self.subtitle = subtitle

    def write_header(self, header: Sequence[str]) -> None:
        self.header = list(header)

    def write_body(self, rows: Sequence[Sequence[object]]) -> None:
        self.rows.extend(list(row) for row in rows)

    def write_totals(self, totals: Sequence[object]) -> None:
        self.totals = list(totals)

    def write_summary(self, summary: str) -> None:
        self.summary = summary

    def table_data(self) -> list[dict[str, object]]:
        """Return rows as dataframe records, totals last."""
        data = [self._to_record(row) for row in self.rows]
        if self.totals:
            data.append(self._to_record(self.totals))
        return data

    def flush(self) -> None:
        st.subheader(self.title)
        st.caption(self.subtitle)
        if self.rows:
            st.dataframe(
                self.table_data(),
                width="stretch",
                hide_index=True,
                column_config={
                    FOLIO_COLUMN: st.column_config.LinkColumn(
                        FOLIO_COLUMN,
                        display_text="Open",
                    ),
                },
            )
        else:
            st.info("No records with an open balance.")
        st.caption(self.summary)

    def _to_record(self, row: Sequence[object]) -> dict[str, object]:
        record: dict[str, object] = {}
        for name, value in zip(self.header, row):
            if isinstance(value, Hyperlink):
                record[name] = value.label
                record[FOLIO_COLUMN] = value.url
            elif isinstance(value, Decimal):
                record[name] = float(value)
            else:
                record[name] = value
        record.setdefault(FOLIO_COLUMN, None)
        return record


__all__ = ["StreamlitReportSheet"]
