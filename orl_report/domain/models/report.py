"""Domain models for open balance records and report tables."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from orl_report.domain.models.transactions import Transaction


class ReportVariant(str, Enum):
    """Report layouts produced from the same aggregation."""

    DETAILED = "detailed"
    SIMPLIFIED = "simplified"


@dataclass(frozen=True)
class RecordKey:
    """Grouping key of a record, scoped by reference type."""

    kind: str
    value: str


@dataclass(frozen=True)
class Record:
    """Transactions of one reservation or one external folio.

    Attributes:
        kind: ``Guest`` or ``External``.
        record_id: Reservation id or external reference.
        arrival: Arrival date (YYYY-MM-DD), blank for external folios.
        departure: Departure date (YYYY-MM-DD), blank for external folios.
        status: Reservation status, blank for external folios.
        transactions: Transactions in first-seen order.
        receivables: Rounded receivables total.
        liabilities: Rounded liabilities per VAT key.
        liabilities_total: Rounded liabilities total.
    """

    kind: str
    record_id: str
    arrival: str = ""
    departure: str = ""
    status: str = ""
    transactions: tuple[Transaction, ...] = ()
    receivables: Decimal = Decimal("0")
    liabilities: dict[str, Decimal] = field(default_factory=dict)
    liabilities_total: Decimal = Decimal("0")

    @property
    def has_open_balance(self) -> bool:
        """Return True when receivables or liabilities are non-zero."""
        return self.receivables != 0 or self.liabilities_total != 0


@dataclass(frozen=True)
class VatCategory:
    """Tax rate classification used to split liabilities."""

    key: str
    type: str | None = None
    percent: Decimal | None = None

    @property
    def sort_weight(self) -> Decimal:
        """Return the percentage used to order liability columns."""
        return self.percent or Decimal("0")

    @property
    def display_name(self) -> str:
        """Return the column label, e.g. ``Liab. Normal 19%``."""
        if self.type:
            return f"Liab. {self.type} {format_percent(self.percent)}%"
        return f"Liab. {self.key}"


@dataclass(frozen=True)
class LiabilityColumn:
    """Visible liability column of the report."""

    key: str
    display_name: str


@dataclass(frozen=True)
class ReportTotals:
    """Grand totals over retained records."""

    receivables: Decimal
    liabilities_total: Decimal
    liabilities: dict[str, Decimal]


@dataclass(frozen=True)
class AggregationResult:
    """Outcome of the balance aggregation pass.

    Attributes:
        records: Retained records, guest records first.
        guest_count: Number of retained guest records.
        external_count: Number of retained external records.
        grouped_count: Number of records before the retention filter.
        transaction_count: Number of transactions that were grouped.
        vat_categories: VAT categories in discovery order.
        totals: Grand totals of the retained records.
    """

    records: tuple[Record, ...]
    guest_count: int
    external_count: int
    grouped_count: int
    transaction_count: int
    vat_categories: tuple[VatCategory, ...]
    totals: ReportTotals


@dataclass(frozen=True)
class ReportTable:
    """Header, body and totals rows ready for a rendering surface."""

    header: list[str]
    rows: list[list[object]]
    totals_row: list[object]
    columns: Sequence[LiabilityColumn]

    @property
    def width(self) -> int:
        return len(self.header)


def format_percent(percent: Decimal | None) -> str:
    """Render a tax percentage without trailing zeros."""
    if percent is None:
        return "0"
    if percent == percent.to_integral_value():
        return str(int(percent))
    return format(percent.normalize(), "f")


__all__ = [
    "ReportVariant",
    "RecordKey",
    "Record",
    "VatCategory",
    "LiabilityColumn",
    "ReportTotals",
    "AggregationResult",
    "ReportTable",
    "format_percent",
]
