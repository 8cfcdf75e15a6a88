"""Tests for transaction grouping."""

from decimal import Decimal

import pytest

from orl_report.domain.errors import UnsupportedReferenceTypeError
from orl_report.domain.models import (
    Account,
    RecordKey,
    ReservationRef,
    Transaction,
)
from orl_report.domain.services.grouping import (
    create_record,
    filter_supported_transactions,
    group_transactions,
    record_key,
)


def _guest(reservation_id: str, amount: str = "10.00") -> Transaction:
    return Transaction(
        reference_type="Guest",
        gross_amount=Decimal(amount),
        debited_account=Account(type="Receivables"),
        credited_account=Account(type="Revenues"),
        reservation=ReservationRef(
            id=reservation_id,
            arrival="2024-03-01T14:00:00+01:00",
            departure="2024-03-04T11:00:00+01:00",
            status="InHouse",
        ),
    )


def _external(reference: str, amount: str = "10.00") -> Transaction:
    return Transaction(
        reference_type="External",
        gross_amount=Decimal(amount),
        debited_account=Account(type="Payments"),
        credited_account=Account(type="Liabilities"),
        reference=reference,
    )


def _house(amount: str = "5.00") -> Transaction:
    return Transaction(
        reference_type="House",
        gross_amount=Decimal(amount),
        debited_account=Account(type="Receivables"),
        credited_account=Account(type="Revenues"),
        reference="HOUSE",
    )


def test_filter_drops_unsupported_reference_types() -> None:
    """Only Guest and External transactions should be kept."""
    transactions = [_guest("R1"), _house(), _external("EXT1")]

    kept = filter_supported_transactions(transactions)

    assert [t.reference_type for t in kept] == ["Guest", "External"]


def test_record_key_uses_reservation_id_or_reference() -> None:
    """Guest transactions key on reservation id, others on reference."""
    assert record_key(_guest("R1")) == RecordKey("Guest", "R1")
    assert record_key(_external("EXT1")) == RecordKey("External", "EXT1")


def test_guest_and_external_with_same_id_stay_separate() -> None:
    """A reservation id and an equal external reference are two records."""
    guest = _guest("R1")
    external = _external("R1", "20.00")

    records = group_transactions([guest, external])

    assert [(r.kind, r.record_id, r.transactions) for r in records] == [
        ("Guest", "R1", (guest,)),
        ("External", "R1", (external,)),
    ]


def test_create_record_truncates_guest_dates() -> None:
    """Guest records keep only the calendar date of arrival/departure."""
    record = create_record(_guest("R1"))

    assert record.kind == "Guest"
    assert record.record_id == "R1"
    assert record.arrival == "2024-03-01"
    assert record.departure == "2024-03-04"
    assert record.status == "InHouse"


def test_create_record_for_external_has_no_dates() -> None:
    """External records only carry their reference."""
    record = create_record(_external("EXT1"))

    assert record.kind == "External"
    assert record.record_id == "EXT1"
    assert (record.arrival, record.departure, record.status) == ("", "", "")


def test_create_record_rejects_unsupported_reference_type() -> None:
    """Other reference types are a programming error."""
    with pytest.raises(UnsupportedReferenceTypeError) as excinfo:
        create_record(_house())

    assert excinfo.value.reference_type == "House"
    assert "House" in str(excinfo.value)


def test_group_transactions_keeps_first_seen_order() -> None:
    """Records and their transactions should follow first-seen order."""
    first = _guest("R2", "1.00")
    second = _external("EXT1", "2.00")
    third = _guest("R1", "3.00")
    fourth = _guest("R2", "4.00")
    fifth = _external("EXT1", "5.00")

    records = group_transactions(
        [first, second, _house(), third, fourth, fifth]
    )

    assert [r.record_id for r in records] == ["R2", "EXT1", "R1"]
    assert records[0].transactions == (first, fourth)
    assert records[1].transactions == (second, fifth)
    assert records[2].transactions == (third,)


def test_external_references_group_only_on_exact_match() -> None:
    """External references differing in case are separate records."""
    records = group_transactions(
        [_external("EXT1"), _external("ext1"), _external("EXT1")]
    )

    assert [(r.record_id, len(r.transactions)) for r in records] == [
        ("EXT1", 2),
        ("ext1", 1),
    ]


def test_group_transactions_with_custom_reference_types() -> None:
    """The simplified report only groups guest transactions."""
    records = group_transactions(
        [_guest("R1"), _external("EXT1")],
        reference_types=("Guest",),
    )

    assert [r.record_id for r in records] == ["R1"]


def test_group_transactions_does_not_compute_balances() -> None:
    """Grouped records start with zero balances."""
    (record,) = group_transactions([_guest("R1", "99.00")])

    assert record.receivables == Decimal("0")
    assert record.liabilities == {}
    assert record.liabilities_total == Decimal("0")
