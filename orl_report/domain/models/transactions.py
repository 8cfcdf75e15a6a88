"""Domain models for gross transactions."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class Account:
    """Account side of a transaction."""

    type: str
    number: str | None = None
    name: str | None = None


@dataclass(frozen=True)
class TaxAmount:
    """Tax entry attached to a transaction.

    Attributes:
        type: Tax type code, ``Without`` for untaxed entries.
        percent: Tax rate in percent.
        amount: Tax amount when the source reports it.
    """

    type: str
    percent: Decimal | None = None
    amount: Decimal | None = None


@dataclass(frozen=True)
class ReservationRef:
    """Reservation the transaction was posted on."""

    id: str
    arrival: str
    departure: str
    status: str


@dataclass(frozen=True)
class Transaction:
    """Gross transaction as exported by the back-office."""

    reference_type: str
    gross_amount: Decimal
    debited_account: Account
    credited_account: Account
    taxes: tuple[TaxAmount, ...] = field(default_factory=tuple)
    reservation: ReservationRef | None = None
    reference: str | None = None


__all__ = ["Account", "TaxAmount", "ReservationRef", "Transaction"]
