"""Composition root for wiring infrastructure adapters."""

from pathlib import Path

from orl_report.application.ports.folio_urls import FolioUrlPort
from orl_report.application.ports.report_sheet import ReportSheetPort
from orl_report.application.ports.transactions_source import (
    TransactionsSourcePort,
)
from orl_report.application.use_cases.generate_open_balance_report import (
    GenerateOpenBalanceReportUseCase,
)
from orl_report.infrastructure.apaleo_transactions_source import (
    ApaleoTransactionsSource,
)
from orl_report.infrastructure.folio_urls import ApaleoFolioUrls
from orl_report.infrastructure.logging.logger import get_app_logger
from orl_report.infrastructure.settings import ApaleoSettings
from orl_report.infrastructure.workbook_sheet import WorkbookReportSheet


def build_settings() -> ApaleoSettings:
    """Return settings sourced from the environment."""
    return ApaleoSettings.from_env()


def build_transactions_source(
    settings: ApaleoSettings | None = None,
) -> TransactionsSourcePort:
    """Return the REST-backed transactions source."""
    resolved = settings or build_settings()
    return ApaleoTransactionsSource(
        api_base_url=resolved.api_base_url,
        access_token=resolved.access_token,
        page_size=resolved.page_size,
        timeout_seconds=resolved.timeout_seconds,
        logger=get_app_logger(),
    )


def build_folio_urls(settings: ApaleoSettings | None = None) -> FolioUrlPort:
    """Return the folio URL builder."""
    resolved = settings or build_settings()
    return ApaleoFolioUrls(resolved.app_base_url)


def build_workbook_sheet(
    settings: ApaleoSettings | None = None,
    output_path: Path | str | None = None,
) -> WorkbookReportSheet:
    """Return a workbook sheet writing to the configured output path."""
    resolved = settings or build_settings()
    return WorkbookReportSheet(
        output_path or resolved.output_path,
        logger=get_app_logger(),
    )


def build_report_use_case(
    sheet: ReportSheetPort,
    settings: ApaleoSettings | None = None,
) -> GenerateOpenBalanceReportUseCase:
    """Return the report use case rendering on the given sheet."""
    resolved = settings or build_settings()
    return GenerateOpenBalanceReportUseCase(
        transactions_source=build_transactions_source(resolved),
        sheet=sheet,
        folio_urls=build_folio_urls(resolved),
        logger=get_app_logger(),
    )


__all__ = [
    "build_settings",
    "build_transactions_source",
    "build_folio_urls",
    "build_workbook_sheet",
    "build_report_use_case",
]
