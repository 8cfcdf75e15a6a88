"""Domain services grouping transactions into report records."""

from collections.abc import Iterable

from orl_report.domain.constants import (
    REFERENCE_TYPE_EXTERNAL,
    REFERENCE_TYPE_GUEST,
    SUPPORTED_REFERENCE_TYPES,
)
from orl_report.domain.errors import UnsupportedReferenceTypeError
from orl_report.domain.models import Record, RecordKey, Transaction


def filter_supported_transactions(
    transactions: Iterable[Transaction],
    reference_types: Iterable[str] = SUPPORTED_REFERENCE_TYPES,
) -> list[Transaction]:
    """Keep the transactions the report describes.

    Args:
        transactions: Raw transactions from the data source.
        reference_types: Reference types to keep.

    Returns:
        list[Transaction]: Transactions of the requested reference types.
    """
    allowed = tuple(reference_types)
    return [t for t in transactions if t.reference_type in allowed]


def record_key(transaction: Transaction) -> RecordKey:
    """Return the grouping key of a transaction.

    Keys are scoped by reference type, so a reservation id and an external
    reference with the same text stay separate records.
    """
    if transaction.reference_type == REFERENCE_TYPE_GUEST:
        return RecordKey(
            transaction.reference_type,
            transaction.reservation.id,
        )
    return RecordKey(transaction.reference_type, transaction.reference)


def create_record(transaction: Transaction) -> Record:
    """Build the record described by the first transaction of a group.

    Args:
        transaction: First transaction seen for the grouping key.

    Returns:
        Record: Record with static fields set and no balances yet.

    Raises:
        UnsupportedReferenceTypeError: If the reference type is neither
            Guest nor External.
    """
    if transaction.reference_type == REFERENCE_TYPE_GUEST:
        reservation = transaction.reservation
        return Record(
            kind=REFERENCE_TYPE_GUEST,
            record_id=reservation.id,
            arrival=reservation.arrival[:10],
            departure=reservation.departure[:10],
            status=reservation.status,
        )
    if transaction.reference_type == REFERENCE_TYPE_EXTERNAL:
        return Record(
            kind=REFERENCE_TYPE_EXTERNAL,
            record_id=transaction.reference,
        )
    raise UnsupportedReferenceTypeError(transaction.reference_type)


def group_transactions(
    transactions: Iterable[Transaction],
    reference_types: Iterable[str] = SUPPORTED_REFERENCE_TYPES,
) -> list[Record]:
    """Group transactions per reservation or external reference.

    Args:
        transactions: Raw transactions from the data source.
        reference_types: Reference types to keep before grouping.

    Returns:
        list[Record]: One record per grouping key, in first-seen order,
        each holding its transactions in first-seen order.
    """
    headers: dict[RecordKey, Record] = {}
    members: dict[RecordKey, list[Transaction]] = {}
    for transaction in filter_supported_transactions(
        transactions,
        reference_types,
    ):
        key = record_key(transaction)
        if key not in headers:
            headers[key] = create_record(transaction)
            members[key] = []
        members[key].append(transaction)

    return [
        Record(
            kind=record.kind,
            record_id=record.record_id,
            arrival=record.arrival,
            departure=record.departure,
            status=record.status,
            transactions=tuple(members[key]),
        )
        for key, record in headers.items()
    ]


__all__ = [
    "filter_supported_transactions",
    "record_key",
    "create_record",
    "group_transactions",
]
