"""Domain models package."""

from .report import (
    AggregationResult,
    LiabilityColumn,
    Record,
    RecordKey,
    ReportTable,
    ReportTotals,
    ReportVariant,
    VatCategory,
    format_percent,
)
from .transactions import Account, ReservationRef, TaxAmount, Transaction

__all__ = [
    "Account",
    "ReservationRef",
    "TaxAmount",
    "Transaction",
    "AggregationResult",
    "LiabilityColumn",
    "Record",
    "RecordKey",
    "ReportTable",
    "ReportTotals",
    "ReportVariant",
    "VatCategory",
    "format_percent",
]
