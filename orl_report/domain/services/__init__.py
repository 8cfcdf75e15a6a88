"""Domain services package."""

from .aggregation import (
    aggregate_records,
    derive_liability_columns,
    used_vat_keys,
)
from .balances import (
    VatCategoryRegistry,
    compute_liabilities,
    compute_receivables,
    vat_key_for,
)
from .grouping import (
    create_record,
    filter_supported_transactions,
    group_transactions,
    record_key,
)
from .report_table import build_report_table
from .summary import format_summary

__all__ = [
    "aggregate_records",
    "derive_liability_columns",
    "used_vat_keys",
    "VatCategoryRegistry",
    "compute_liabilities",
    "compute_receivables",
    "vat_key_for",
    "create_record",
    "filter_supported_transactions",
    "group_transactions",
    "record_key",
    "build_report_table",
    "format_summary",
]
