"""Application port for gross transaction data access."""

from datetime import date
from typing import Protocol

from orl_report.domain.models import Transaction


class TransactionsSourcePort(Protocol):
    """Port exposing read access to the gross transactions export."""

    def fetch_gross_transactions(
        self,
        property_id: str,
        start_date: date,
        end_date: date,
    ) -> list[Transaction]:
        """Return the transactions of a property for an inclusive range.

        Args:
            property_id: Property code.
            start_date: First calendar day of the range.
            end_date: Last calendar day of the range.

        Returns:
            list[Transaction]: Transactions in source order.
        """


__all__ = ["TransactionsSourcePort"]
