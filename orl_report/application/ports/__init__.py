"""Application ports package."""

from .folio_urls import FolioUrlPort
from .report_sheet import Hyperlink, ReportSheetPort
from .transactions_source import TransactionsSourcePort

__all__ = [
    "FolioUrlPort",
    "Hyperlink",
    "ReportSheetPort",
    "TransactionsSourcePort",
]
