"""Application port building folio links for report records."""

from typing import Protocol

from orl_report.domain.models import Record


class FolioUrlPort(Protocol):
    """Port returning the folio URL of a record."""

    def folio_url(self, property_id: str, record: Record) -> str:
        """Return the folio URL for a reservation or external folio."""


__all__ = ["FolioUrlPort"]
