"""Summary lines printed below the report."""

from orl_report.domain.models import AggregationResult, ReportVariant


def format_summary(
    result: AggregationResult,
    variant: ReportVariant = ReportVariant.DETAILED,
) -> str:
    """Return the human-readable summary of a report run.

    Args:
        result: Aggregation outcome.
        variant: Report layout the summary belongs to.

    Returns:
        str: Summary line.
    """
    if variant == ReportVariant.SIMPLIFIED:
        return (
            "Number of reservations with calculated balances: "
            f"{result.grouped_count}, thereof {len(result.records)} "
            "with open balance."
        )
    return (
        f"{result.transaction_count} Transactions processed. "
        "Number of records with the open balance: "
        f"total - {len(result.records)}, "
        f"reservations - {result.guest_count}, "
        f"external folios - {result.external_count}"
    )


__all__ = ["format_summary"]
