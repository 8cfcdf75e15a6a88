"""Domain services assembling the report table."""

from collections.abc import Callable
from decimal import Decimal

from orl_report.domain.constants import (
    BASE_HEADER,
    REFERENCE_TYPE_GUEST,
    TOTAL_LABEL,
)
from orl_report.domain.models import AggregationResult, Record, ReportTable
from orl_report.domain.services.aggregation import derive_liability_columns
from orl_report.utils.decimal_utils import round_currency


def _record_id_cell(record: Record) -> object:
    return record.record_id


def build_report_table(
    result: AggregationResult,
    identity_cell: Callable[[Record], object] = _record_id_cell,
    include_vat_columns: bool = True,
) -> ReportTable:
    """Build header, rows and totals for the retained records.

    Args:
        result: Aggregation outcome.
        identity_cell: Callable producing the first cell of a record row.
        include_vat_columns: Whether to split liabilities per VAT category.

    Returns:
        ReportTable: Table of width ``6 + number of VAT columns``.
    """
    columns = derive_liability_columns(result) if include_vat_columns else []
    header = [*BASE_HEADER, *(c.display_name for c in columns)]

    rows: list[list[object]] = []
    for record in result.records:
        is_guest = record.kind == REFERENCE_TYPE_GUEST
        rows.append(
            [
                identity_cell(record),
                record.arrival if is_guest else "",
                record.departure if is_guest else "",
                record.status if is_guest else "",
                record.receivables,
                record.liabilities_total,
                *(
                    record.liabilities.get(c.key, Decimal("0"))
                    for c in columns
                ),
            ]
        )

    totals = result.totals
    totals_row: list[object] = [
        "",
        "",
        "",
        TOTAL_LABEL,
        round_currency(totals.receivables),
        round_currency(totals.liabilities_total),
        *(
            round_currency(totals.liabilities.get(c.key))
            for c in columns
        ),
    ]
    return ReportTable(
        header=header,
        rows=rows,
        totals_row=totals_row,
        columns=columns,
    )


__all__ = ["build_report_table"]
