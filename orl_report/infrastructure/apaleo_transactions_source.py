"""REST client reading the gross transactions export.

The export is paginated: pages are requested in order until the API answers
``204 No Content`` or returns a short page. HTTP failures propagate to the
caller through ``requests`` exceptions.
"""

from collections.abc import Mapping
from datetime import date

import requests

from orl_report.application.ports.transactions_source import (
    TransactionsSourcePort,
)
from orl_report.domain.models import (
    Account,
    ReservationRef,
    TaxAmount,
    Transaction,
)
from orl_report.infrastructure.logging.logger import get_app_logger
from orl_report.utils.decimal_utils import coerce_decimal

GROSS_TRANSACTIONS_PATH = "/reports/v0-nsfw/reports/gross-transactions"


class ApaleoTransactionsSource(TransactionsSourcePort):
    """TransactionsSourcePort backed by the Apaleo reports API."""

    def __init__(
        self,
        api_base_url: str,
        access_token: str,
        page_size: int = 1000,
        timeout_seconds: float = 60.0,
        session: requests.Session | None = None,
        logger=None,
    ) -> None:
        """Initialize the client.

        Args:
            api_base_url: Base URL of the REST API.
            access_token: Bearer token sent with every request.
            page_size: Number of transactions per page.
            timeout_seconds: Timeout applied to each request.
            session: Optional session, mainly for tests.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._url = api_base_url.rstrip("/") + GROSS_TRANSACTIONS_PATH
        self._page_size = page_size
        self._timeout = timeout_seconds
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {access_token}",
                "Accept": "application/json",
            }
        )
        self._logger = logger or get_app_logger()

    def fetch_gross_transactions(
        self,
        property_id: str,
        start_date: date,
        end_date: date,
    ) -> list[Transaction]:
        transactions: list[Transaction] = []
        page_number = 1
        while True:
            payload = self._fetch_page(
                property_id,
                start_date,
                end_date,
                page_number,
            )
            page = payload.get("transactions", []) if payload else []
            transactions.extend(parse_transaction(item) for item in page)
            self._logger.debug(
                f"Fetched page {page_number} with {len(page)} transactions"
            )
            if len(page) < self._page_size:
                break
            page_number += 1
        return transactions

    def _fetch_page(
        self,
        property_id: str,
        start_date: date,
        end_date: date,
        page_number: int,
    ) -> dict | None:
        """Request a single page of the export.

        Returns:
            dict | None: Decoded JSON body, or None for an empty page.
        """
        response = self._session.get(
            self._url,
            params={
                "propertyId": property_id,
                "from": start_date.isoformat(),
                "to": end_date.isoformat(),
                "pageNumber": page_number,
                "pageSize": self._page_size,
            },
            timeout=self._timeout,
        )
        response.raise_for_status()
        if response.status_code == 204 or not response.content:
            return None
        return response.json()


def _parse_amount(value):
    if isinstance(value, Mapping):
        return coerce_decimal(value.get("amount"))
    return coerce_decimal(value)


def _parse_account(payload: Mapping | None) -> Account:
    payload = payload or {}
    return Account(
        type=payload.get("type", ""),
        number=payload.get("number"),
        name=payload.get("name"),
    )


def _parse_tax(payload: Mapping) -> TaxAmount:
    percent = payload.get("percent")
    amount = payload.get("amount")
    return TaxAmount(
        type=payload["type"],
        percent=None if percent is None else coerce_decimal(percent),
        amount=None if amount is None else _parse_amount(amount),
    )


def _parse_reservation(payload: Mapping | None) -> ReservationRef | None:
    if not payload:
        return None
    return ReservationRef(
        id=payload["id"],
        arrival=payload.get("arrival", ""),
        departure=payload.get("departure", ""),
        status=payload.get("status", ""),
    )


def parse_transaction(payload: Mapping) -> Transaction:
    """Convert a JSON transaction into a domain Transaction.

    Args:
        payload: Transaction object from the export.

    Returns:
        Transaction: Parsed transaction.
    """
    return Transaction(
        reference_type=payload["referenceType"],
        gross_amount=_parse_amount(payload.get("grossAmount")),
        debited_account=_parse_account(payload.get("debitedAccount")),
        credited_account=_parse_account(payload.get("creditedAccount")),
        taxes=tuple(_parse_tax(tax) for tax in payload.get("taxes") or ()),
        reservation=_parse_reservation(payload.get("reservation")),
        reference=payload.get("reference"),
    )


__all__ = ["ApaleoTransactionsSource", "parse_transaction"]
