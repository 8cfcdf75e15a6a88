"""Streamlit entry point for the Open Receivables & Liabilities report."""

from datetime import date, timedelta

import streamlit as st

from orl_report.adapters.interface.streamlit.report_sheet import (
    StreamlitReportSheet,
)
from orl_report.application.use_cases.generate_open_balance_report import (
    OpenBalanceReport,
)
from orl_report.domain.constants import REPORT_TITLE
from orl_report.domain.models import ReportVariant
from orl_report.infrastructure.container import (
    build_report_use_case,
    build_settings,
)
from orl_report.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


def _generate_report(
    property_id: str,
    start_date: date,
    end_date: date,
    variant: ReportVariant,
) -> OpenBalanceReport:
    """Run the report use case rendering on the Streamlit page."""
    sheet = StreamlitReportSheet()
    use_case = build_report_use_case(sheet, build_settings())
    return use_case.execute(
        property_id,
        start_date,
        end_date,
        variant=variant,
    )


def _default_period(today: date) -> tuple[date, date]:
    """Return the previous 30 days, today included."""
    return today - timedelta(days=30), today


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title=REPORT_TITLE, layout="wide")
    st.title(REPORT_TITLE)

    default_start, default_end = _default_period(date.today())
    property_id = st.sidebar.text_input("Property code").strip()
    start_date = st.sidebar.date_input("From", value=default_start)
    end_date = st.sidebar.date_input("To", value=default_end)
    variant_label = st.sidebar.selectbox(
        "Layout",
        ["Detailed", "Simplified"],
    )
    variant = ReportVariant(variant_label.lower())

    if not st.sidebar.button("Generate"):
        st.caption("Choose a property and a period, then press Generate.")
        return
    if not property_id:
        st.warning("Enter a property code.")
        return
    if start_date > end_date:
        st.warning("The start date must not be after the end date.")
        return

    try:
        report = _generate_report(property_id, start_date, end_date, variant)
    except RuntimeError as exc:
        get_app_logger().error(str(exc))
        st.error(str(exc))
        return

    get_usage_logger().info(
        f"Report generated for {property_id} from {start_date} to "
        f"{end_date} ({variant.value}): {report.record_count} records"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
