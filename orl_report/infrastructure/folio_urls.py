"""Folio links pointing at the back-office web app."""

from orl_report.application.ports.folio_urls import FolioUrlPort
from orl_report.domain.constants import (
    REFERENCE_TYPE_EXTERNAL,
    REFERENCE_TYPE_GUEST,
)
from orl_report.domain.models import Record


class ApaleoFolioUrls(FolioUrlPort):
    """Build reservation and general folio URLs."""

    def __init__(self, app_base_url: str = "https://app.apaleo.com") -> None:
        self._base_url = app_base_url.rstrip("/")

    def folio_url(self, property_id: str, record: Record) -> str:
        if record.kind == REFERENCE_TYPE_GUEST:
            return (
                f"{self._base_url}/{property_id}/reservations/"
                f"{record.record_id}/folio"
            )
        if record.kind == REFERENCE_TYPE_EXTERNAL:
            return (
                f"{self._base_url}/{property_id}/finance/folios/"
                f"{record.record_id}/general"
            )
        raise ValueError(f"No folio URL for record kind {record.kind}")


__all__ = ["ApaleoFolioUrls"]
