"""Domain package for business rules and core models."""

from .constants import (
    LIABILITIES_ACCOUNT_TYPE,
    RECEIVABLES_ACCOUNT_TYPE,
    REFERENCE_TYPE_EXTERNAL,
    REFERENCE_TYPE_GUEST,
    UNTAXED_VAT_KEY,
)
from .errors import UnsupportedReferenceTypeError
from .models import (
    Account,
    AggregationResult,
    LiabilityColumn,
    Record,
    RecordKey,
    ReportTable,
    ReportVariant,
    ReservationRef,
    TaxAmount,
    Transaction,
    VatCategory,
)
from .services import (
    aggregate_records,
    build_report_table,
    derive_liability_columns,
    format_summary,
    group_transactions,
)

__all__ = [
    "LIABILITIES_ACCOUNT_TYPE",
    "RECEIVABLES_ACCOUNT_TYPE",
    "REFERENCE_TYPE_EXTERNAL",
    "REFERENCE_TYPE_GUEST",
    "UNTAXED_VAT_KEY",
    "UnsupportedReferenceTypeError",
    "Account",
    "AggregationResult",
    "LiabilityColumn",
    "Record",
    "RecordKey",
    "ReportTable",
    "ReportVariant",
    "ReservationRef",
    "TaxAmount",
    "Transaction",
    "VatCategory",
    "aggregate_records",
    "build_report_table",
    "derive_liability_columns",
    "format_summary",
    "group_transactions",
]
