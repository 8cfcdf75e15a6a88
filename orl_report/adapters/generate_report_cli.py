"""CLI adapter generating the Open Receivables & Liabilities workbook.

The report parameters are read from the environment:
``ORL_PROPERTY_ID``, ``ORL_START_DATE`` and ``ORL_END_DATE`` (YYYY-MM-DD),
plus the optional ``ORL_VARIANT`` (``detailed`` or ``simplified``).
"""

from datetime import date
import os

from orl_report.domain.models import ReportVariant
from orl_report.infrastructure.container import (
    build_report_use_case,
    build_settings,
    build_workbook_sheet,
)
from orl_report.infrastructure.logging.logger import get_app_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when missing or invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _parse_variant(value: str | None, logger) -> ReportVariant | None:
    if not value:
        return ReportVariant.DETAILED
    try:
        return ReportVariant(value.strip().lower())
    except ValueError:
        logger.warning(
            f"Invalid report variant '{value}'. "
            "Expected detailed or simplified."
        )
        return None


def main() -> None:
    """Run the report for the configured property and period."""
    logger = get_app_logger()
    property_id = (os.getenv("ORL_PROPERTY_ID") or "").strip()
    start_date = _parse_date(os.getenv("ORL_START_DATE"), logger)
    end_date = _parse_date(os.getenv("ORL_END_DATE"), logger)
    variant = _parse_variant(os.getenv("ORL_VARIANT"), logger)
    if not property_id or start_date is None or end_date is None:
        logger.warning(
            "ORL_PROPERTY_ID, ORL_START_DATE and ORL_END_DATE are required."
        )
        return
    if variant is None:
        return
    if start_date > end_date:
        logger.warning(
            f"Start date {start_date} is after end date {end_date}."
        )
        return

    try:
        settings = build_settings()
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    sheet = build_workbook_sheet(settings)
    use_case = build_report_use_case(sheet, settings)
    report = use_case.execute(
        property_id,
        start_date,
        end_date,
        variant=variant,
    )

    print(report.summary)
    print(f"Report written to {sheet.output_path}")


if __name__ == "__main__":  # pragma: no cover
    main()
