"""Domain services computing receivables and liabilities of a record."""

from collections.abc import Iterable
from decimal import Decimal

from orl_report.domain.constants import (
    LIABILITIES_ACCOUNT_TYPE,
    RECEIVABLES_ACCOUNT_TYPE,
    UNTAXED_VAT_KEY,
)
from orl_report.domain.models import TaxAmount, Transaction, VatCategory
from orl_report.domain.models.report import format_percent
from orl_report.utils.decimal_utils import coerce_decimal, round_currency


class VatCategoryRegistry:
    """VAT categories in the order they were first seen."""

    def __init__(self) -> None:
        self._categories: dict[str, VatCategory] = {}

    def register(self, key: str, tax: TaxAmount | None) -> None:
        """Record display metadata for a key the first time it is seen."""
        if key in self._categories:
            return
        if tax is not None and key != UNTAXED_VAT_KEY:
            self._categories[key] = VatCategory(
                key=key,
                type=tax.type,
                percent=tax.percent,
            )
        else:
            self._categories[key] = VatCategory(key=key)

    def __contains__(self, key: str) -> bool:
        return key in self._categories

    def __len__(self) -> int:
        return len(self._categories)

    def categories(self) -> tuple[VatCategory, ...]:
        return tuple(self._categories.values())


def vat_key_for(tax: TaxAmount | None) -> str:
    """Return the VAT key for the first tax entry of a transaction.

    Args:
        tax: First tax entry, or None when the transaction has none.

    Returns:
        str: ``{type}-{percent}`` for taxed entries, else ``Without``.
    """
    if tax is not None and tax.type != UNTAXED_VAT_KEY:
        return f"{tax.type}-{format_percent(tax.percent)}"
    return UNTAXED_VAT_KEY


def compute_receivables(transactions: Iterable[Transaction]) -> Decimal:
    """Sum gross amounts debited to receivables, rounded to cents."""
    total = sum(
        (
            coerce_decimal(t.gross_amount)
            for t in transactions
            if t.debited_account.type == RECEIVABLES_ACCOUNT_TYPE
        ),
        Decimal("0"),
    )
    return round_currency(total)


def compute_liabilities(
    transactions: Iterable[Transaction],
    registry: VatCategoryRegistry,
) -> tuple[dict[str, Decimal], Decimal]:
    """Sum gross amounts credited to liabilities per VAT key.

    Sums accumulate at full precision and are rounded once at the end.

    Args:
        transactions: Transactions of a single record.
        registry: Registry receiving newly discovered VAT categories.

    Returns:
        tuple[dict[str, Decimal], Decimal]: Rounded amounts per VAT key
        and the rounded liabilities total.
    """
    by_key: dict[str, Decimal] = {}
    total = Decimal("0")
    for transaction in transactions:
        if transaction.credited_account.type != LIABILITIES_ACCOUNT_TYPE:
            continue
        tax = transaction.taxes[0] if transaction.taxes else None
        key = vat_key_for(tax)
        amount = coerce_decimal(transaction.gross_amount)
        by_key[key] = by_key.get(key, Decimal("0")) + amount
        total += amount
        registry.register(key, tax)

    rounded = {key: round_currency(amount) for key, amount in by_key.items()}
    return rounded, round_currency(total)


__all__ = [
    "VatCategoryRegistry",
    "vat_key_for",
    "compute_receivables",
    "compute_liabilities",
]
