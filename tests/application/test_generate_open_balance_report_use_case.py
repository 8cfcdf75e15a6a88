"""Tests for the GenerateOpenBalanceReportUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from orl_report.application.ports.report_sheet import Hyperlink
from orl_report.application.use_cases.generate_open_balance_report import (
    GenerateOpenBalanceReportUseCase,
)
from orl_report.domain.errors import UnsupportedReferenceTypeError
from orl_report.domain.models import (
    Account,
    ReportVariant,
    ReservationRef,
    TaxAmount,
    Transaction,
)


class _RecordingSheet:
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def clear(self) -> None:
        self.calls.append(("clear",))

    def write_title(self, title: str, subtitle: str) -> None:
        self.calls.append(("title", title, subtitle))

    def write_header(self, header) -> None:
        self.calls.append(("header", list(header)))

    def write_body(self, rows) -> None:
        self.calls.append(("body", [list(row) for row in rows]))

    def write_totals(self, totals) -> None:
        self.calls.append(("totals", list(totals)))

    def write_summary(self, summary: str) -> None:
        self.calls.append(("summary", summary))

    def flush(self) -> None:
        self.calls.append(("flush",))

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]


class _FolioUrls:
    def folio_url(self, property_id: str, record) -> str:
        return f"https://app.example/{property_id}/{record.kind}/{record.record_id}"


def _transactions() -> list[Transaction]:
    reservation = ReservationRef(
        id="R1",
        arrival="2024-06-10T15:00:00Z",
        departure="2024-06-12T10:00:00Z",
        status="InHouse",
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
        Transaction(
            reference_type="House",
            gross_amount=Decimal("7.00"),
            debited_account=Account(type="Receivables"),
            credited_account=Account(type="Revenues"),
            reference="HOUSE",
        ),
    ]


def _build_use_case(transactions, sheet):
    source = MagicMock()
    source.fetch_gross_transactions.return_value = transactions
    use_case = GenerateOpenBalanceReportUseCase(
        transactions_source=source,
        sheet=sheet,
        folio_urls=_FolioUrls(),
        logger=MagicMock(),
    )
    return use_case, source


def test_execute_renders_detailed_report() -> None:
    """The report is fetched, aggregated and written section by section."""
    sheet = _RecordingSheet()
    use_case, source = _build_use_case(_transactions(), sheet)

    report = use_case.execute("BER", date(2024, 6, 1), date(2024, 6, 30))

    source.fetch_gross_transactions.assert_called_once_with(
        "BER",
        date(2024, 6, 1),
        date(2024, 6, 30),
    )
    assert sheet.names() == [
        "clear",
        "title",
        "header",
        "body",
        "totals",
        "summary",
        "flush",
    ]
    assert sheet.calls[1] == (
        "title",
        "Open Receivables & Liabilities Report",
        "for property BER from 2024-06-01 to 2024-06-30",
    )
    assert sheet.calls[2][1][-2:] == ["Liab. Without", "Liab. A 10%"]
    body = sheet.calls[3][1]
    assert body[0][0] == Hyperlink(
        url="https://app.example/BER/Guest/R1",
        label="R1",
    )
    assert body[1][0].url == "https://app.example/BER/External/EXT1"
    assert sheet.calls[4][1] == [
        "",
        "",
        "",
        "Total",
        Decimal("100.00"),
        Decimal("70.00"),
        Decimal("20.00"),
        Decimal("50.00"),
    ]
    assert report.summary == (
        "3 Transactions processed. Number of records with the open "
        "balance: total - 2, reservations - 1, external folios - 1"
    )
    assert sheet.calls[5] == ("summary", report.summary)
    assert report.record_count == 2


def test_execute_simplified_variant_skips_external_and_vat() -> None:
    """The simplified layout only covers reservations, without VAT split."""
    sheet = _RecordingSheet()
    use_case, _ = _build_use_case(_transactions(), sheet)

    report = use_case.execute(
        "BER",
        date(2024, 6, 1),
        date(2024, 6, 30),
        variant=ReportVariant.SIMPLIFIED,
    )

    assert report.table.width == 6
    assert [row[0].label for row in report.table.rows] == ["R1"]
    assert report.summary == (
        "Number of reservations with calculated balances: 1, "
        "thereof 1 with open balance."
    )


def test_execute_without_open_balances_skips_body_and_totals() -> None:
    """An empty report still gets its title, header and summary."""
    sheet = _RecordingSheet()
    use_case, _ = _build_use_case([], sheet)

    report = use_case.execute("BER", date(2024, 6, 1), date(2024, 6, 30))

    assert sheet.names() == ["clear", "title", "header", "summary", "flush"]
    assert report.record_count == 0
    assert report.summary.startswith("0 Transactions processed.")


def test_execute_aborts_before_writing_on_unsupported_reference(
    monkeypatch,
) -> None:
    """A grouping failure leaves the sheet untouched."""
    from orl_report.application.use_cases import (
        generate_open_balance_report as module,
    )

    def _failing_group(transactions, reference_types):
        raise UnsupportedReferenceTypeError("House")

    monkeypatch.setattr(module, "group_transactions", _failing_group)
    sheet = _RecordingSheet()
    use_case, _ = _build_use_case(_transactions(), sheet)

    with pytest.raises(UnsupportedReferenceTypeError):
        use_case.execute("BER", date(2024, 6, 1), date(2024, 6, 30))

    assert sheet.calls == []


def test_execute_propagates_source_errors() -> None:
    """Data source failures reach the caller unchanged."""
    sheet = _RecordingSheet()
    use_case, source = _build_use_case([], sheet)
    source.fetch_gross_transactions.side_effect = ConnectionError("boom")

    with pytest.raises(ConnectionError):
        use_case.execute("BER", date(2024, 6, 1), date(2024, 6, 30))

    assert sheet.calls == []
