"""Use case to generate the Open Receivables & Liabilities report."""

from dataclasses import dataclass
from datetime import date

from orl_report.application.ports.folio_urls import FolioUrlPort
from orl_report.application.ports.report_sheet import (
    Hyperlink,
    ReportSheetPort,
)
from orl_report.application.ports.transactions_source import (
    TransactionsSourcePort,
)
from orl_report.domain.constants import (
    REFERENCE_TYPE_GUEST,
    REPORT_TITLE,
    SUPPORTED_REFERENCE_TYPES,
)
from orl_report.domain.models import (
    AggregationResult,
    Record,
    ReportTable,
    ReportVariant,
)
from orl_report.domain.services import (
    aggregate_records,
    build_report_table,
    format_summary,
    group_transactions,
)
from orl_report.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class OpenBalanceReport:
    """Rendered report content and the aggregation it came from."""

    table: ReportTable
    summary: str
    aggregation: AggregationResult

    @property
    def record_count(self) -> int:
        return len(self.table.rows)


class GenerateOpenBalanceReportUseCase:
    """Fetch gross transactions, aggregate them and render the report."""

    def __init__(
        self,
        transactions_source: TransactionsSourcePort,
        sheet: ReportSheetPort,
        folio_urls: FolioUrlPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            transactions_source: Port providing gross transactions.
            sheet: Rendering surface receiving the report.
            folio_urls: Port building folio links for record ids.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._transactions_source = transactions_source
        self._sheet = sheet
        self._folio_urls = folio_urls
        self._logger = logger or get_app_logger()

    def execute(
        self,
        property_id: str,
        start_date: date,
        end_date: date,
        variant: ReportVariant = ReportVariant.DETAILED,
    ) -> OpenBalanceReport:
        """Generate the report and write it to the rendering surface.

        Nothing is written when aggregation fails.

        Args:
            property_id: Property code.
            start_date: First calendar day of the report range.
            end_date: Last calendar day of the report range.
            variant: Detailed (per VAT) or simplified layout.

        Returns:
            OpenBalanceReport: Table, summary line and aggregation result.
        """
        transactions = self._transactions_source.fetch_gross_transactions(
            property_id,
            start_date,
            end_date,
        )
        self._logger.info(
            f"Retrieved {len(transactions)} transactions for {property_id} "
            f"from {start_date} to {end_date}"
        )

        simplified = variant == ReportVariant.SIMPLIFIED
        reference_types = (
            (REFERENCE_TYPE_GUEST,) if simplified else SUPPORTED_REFERENCE_TYPES
        )
        records = group_transactions(transactions, reference_types)
        aggregation = aggregate_records(records)

        def identity_cell(record: Record) -> Hyperlink:
            return Hyperlink(
                url=self._folio_urls.folio_url(property_id, record),
                label=record.record_id,
            )

        table = build_report_table(
            aggregation,
            identity_cell=identity_cell,
            include_vat_columns=not simplified,
        )
        summary = format_summary(aggregation, variant)
        self._logger.info(
            f"Processed {aggregation.transaction_count} transactions: "
            f"{len(table.rows)} records with open balance, "
            f"{len(table.columns)} VAT columns"
        )

        self._render(property_id, start_date, end_date, table, summary)
        return OpenBalanceReport(
            table=table,
            summary=summary,
            aggregation=aggregation,
        )

    def _render(
        self,
        property_id: str,
        start_date: date,
        end_date: date,
        table: ReportTable,
        summary: str,
    ) -> None:
        sheet = self._sheet
        sheet.clear()
        sheet.write_title(
            REPORT_TITLE,
            f"for property {property_id} from {start_date.isoformat()} "
            f"to {end_date.isoformat()}",
        )
        sheet.write_header(table.header)
        if table.rows:
            sheet.write_body(table.rows)
            sheet.write_totals(table.totals_row)
        sheet.write_summary(summary)
        sheet.flush()


__all__ = ["GenerateOpenBalanceReportUseCase", "OpenBalanceReport"]
