"""Tests for report table assembly and summary lines."""

from decimal import Decimal

from orl_report.domain.models import (
    Account,
    ReportVariant,
    ReservationRef,
    TaxAmount,
    Transaction,
)
from orl_report.domain.services import (
    aggregate_records,
    build_report_table,
    format_summary,
    group_transactions,
)


def _sample_transactions() -> list[Transaction]:
    reservation = ReservationRef(
        id="R1",
        arrival="2024-06-10T15:00:00Z",
        departure="2024-06-12T10:00:00Z",
        status="CheckedOut",
    )
    return [
        Transaction(
            reference_type="Guest",
            gross_amount=Decimal("100.00"),
            debited_account=Account(type="Receivables"),
            credited_account=Account(type="Revenues"),
            reservation=reservation,
        ),
        Transaction(
            reference_type="Guest",
            gross_amount=Decimal("50.00"),
            debited_account=Account(type="Payments"),
            credited_account=Account(type="Liabilities"),
            taxes=(TaxAmount(type="A", percent=Decimal("10")),),
            reservation=reservation,
        ),
        Transaction(
            reference_type="External",
            gross_amount=Decimal("20.00"),
            debited_account=Account(type="Payments"),
            credited_account=Account(type="Liabilities"),
            reference="EXT1",
        ),
    ]


def test_end_to_end_table_matches_expected_layout() -> None:
    """The untaxed external liability gets its own column before A 10%."""
    result = aggregate_records(group_transactions(_sample_transactions()))

    table = build_report_table(
        result,
        identity_cell=lambda record: f"link({record.record_id})",
    )

    assert table.header == [
        "Reservation ID",
        "Arrival",
        "Departure",
        "Status",
        "Receivables",
        "Liabilities",
        "Liab. Without",
        "Liab. A 10%",
    ]
    assert table.width == 8
    assert table.rows == [
        [
            "link(R1)",
            "2024-06-10",
            "2024-06-12",
            "CheckedOut",
            Decimal("100.00"),
            Decimal("50.00"),
            Decimal("0"),
            Decimal("50.00"),
        ],
        [
            "link(EXT1)",
            "",
            "",
            "",
            Decimal("0.00"),
            Decimal("20.00"),
            Decimal("20.00"),
            Decimal("0"),
        ],
    ]
    assert table.totals_row == [
        "",
        "",
        "",
        "Total",
        Decimal("100.00"),
        Decimal("70.00"),
        Decimal("20.00"),
        Decimal("50.00"),
    ]


def test_default_identity_cell_is_record_id() -> None:
    result = aggregate_records(group_transactions(_sample_transactions()))

    table = build_report_table(result)

    assert [row[0] for row in table.rows] == ["R1", "EXT1"]


def test_rows_have_header_width() -> None:
    """Every row and the totals row match the header width."""
    result = aggregate_records(group_transactions(_sample_transactions()))

    table = build_report_table(result)

    assert all(len(row) == table.width for row in table.rows)
    assert len(table.totals_row) == table.width


def test_table_without_vat_columns() -> None:
    """The simplified layout keeps only the six base columns."""
    result = aggregate_records(group_transactions(_sample_transactions()))

    table = build_report_table(result, include_vat_columns=False)

    assert table.width == 6
    assert table.columns == []
    assert table.totals_row[-1] == Decimal("70.00")


def test_empty_input_yields_zero_totals() -> None:
    result = aggregate_records(group_transactions([]))

    table = build_report_table(result)

    assert table.rows == []
    assert table.totals_row == [
        "",
        "",
        "",
        "Total",
        Decimal("0.00"),
        Decimal("0.00"),
    ]


def test_building_twice_gives_identical_tables() -> None:
    """Aggregation and table assembly are repeatable on the same input."""
    transactions = _sample_transactions()

    first = build_report_table(
        aggregate_records(group_transactions(transactions))
    )
    second = build_report_table(
        aggregate_records(group_transactions(transactions))
    )

    assert first.rows == second.rows
    assert first.totals_row == second.totals_row
    assert first.header == second.header


def test_detailed_summary_line() -> None:
    result = aggregate_records(group_transactions(_sample_transactions()))

    assert format_summary(result) == (
        "3 Transactions processed. Number of records with the open "
        "balance: total - 2, reservations - 1, external folios - 1"
    )


def test_simplified_summary_line() -> None:
    transactions = _sample_transactions()
    transactions.append(
        Transaction(
            reference_type="Guest",
            gross_amount=Decimal("5.00"),
            debited_account=Account(type="Revenues"),
            credited_account=Account(type="Revenues"),
            reservation=ReservationRef(
                id="R2",
                arrival="2024-06-11",
                departure="2024-06-13",
                status="Confirmed",
            ),
        )
    )
    result = aggregate_records(
        group_transactions(transactions, reference_types=("Guest",))
    )

    assert format_summary(result, ReportVariant.SIMPLIFIED) == (
        "Number of reservations with calculated balances: 2, "
        "thereof 1 with open balance."
    )
