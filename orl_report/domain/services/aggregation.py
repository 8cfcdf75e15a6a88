"""Domain services aggregating grouped records into report balances."""

from collections.abc import Iterable
from dataclasses import replace
from decimal import Decimal

from orl_report.domain.constants import REFERENCE_TYPE_GUEST
from orl_report.domain.models import (
    AggregationResult,
    LiabilityColumn,
    Record,
    ReportTotals,
)
from orl_report.domain.services.balances import (
    VatCategoryRegistry,
    compute_liabilities,
    compute_receivables,
)
from orl_report.utils.decimal_utils import round_currency


def aggregate_records(records: Iterable[Record]) -> AggregationResult:
    """Compute balances and keep the records with an open balance.

    Args:
        records: Grouped records in first-seen order.

    Returns:
        AggregationResult: Retained records (guest records first, grouping
        order kept inside each bucket), VAT categories in discovery order
        and grand totals summed from the rounded per-record amounts.
    """
    registry = VatCategoryRegistry()
    guest_records: list[Record] = []
    external_records: list[Record] = []
    grouped_count = 0
    transaction_count = 0

    total_receivables = Decimal("0")
    total_liabilities = Decimal("0")
    totals_by_key: dict[str, Decimal] = {}

    for record in records:
        grouped_count += 1
        transaction_count += len(record.transactions)
        receivables = compute_receivables(record.transactions)
        liabilities, liabilities_total = compute_liabilities(
            record.transactions,
            registry,
        )
        balanced = replace(
            record,
            receivables=receivables,
            liabilities=liabilities,
            liabilities_total=liabilities_total,
        )
        if not balanced.has_open_balance:
            continue

        total_receivables += receivables
        total_liabilities += liabilities_total
        for key, amount in liabilities.items():
            totals_by_key[key] = totals_by_key.get(key, Decimal("0")) + amount

        if balanced.kind == REFERENCE_TYPE_GUEST:
            guest_records.append(balanced)
        else:
            external_records.append(balanced)

    totals = ReportTotals(
        receivables=round_currency(total_receivables),
        liabilities_total=round_currency(total_liabilities),
        liabilities={
            key: round_currency(amount)
            for key, amount in totals_by_key.items()
        },
    )
    return AggregationResult(
        records=tuple(guest_records + external_records),
        guest_count=len(guest_records),
        external_count=len(external_records),
        grouped_count=grouped_count,
        transaction_count=transaction_count,
        vat_categories=registry.categories(),
        totals=totals,
    )


def used_vat_keys(records: Iterable[Record]) -> set[str]:
    """Return VAT keys with a non-zero amount in at least one record."""
    return {
        key
        for record in records
        for key, amount in record.liabilities.items()
        if amount != 0
    }


def derive_liability_columns(
    result: AggregationResult,
) -> list[LiabilityColumn]:
    """Return the visible liability columns, lowest tax rate first.

    Args:
        result: Aggregation outcome.

    Returns:
        list[LiabilityColumn]: Columns for used VAT keys, sorted by
        percentage with ties kept in discovery order.
    """
    used = used_vat_keys(result.records)
    categories = [c for c in result.vat_categories if c.key in used]
    categories.sort(key=lambda category: category.sort_weight)
    return [
        LiabilityColumn(key=category.key, display_name=category.display_name)
        for category in categories
    ]


__all__ = [
    "aggregate_records",
    "used_vat_keys",
    "derive_liability_columns",
]
