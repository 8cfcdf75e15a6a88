"""Domain constants for the open balance report."""

REFERENCE_TYPE_GUEST = "Guest"
REFERENCE_TYPE_EXTERNAL = "External"
SUPPORTED_REFERENCE_TYPES = (
    REFERENCE_TYPE_GUEST,
    REFERENCE_TYPE_EXTERNAL,
)

RECEIVABLES_ACCOUNT_TYPE = "Receivables"
LIABILITIES_ACCOUNT_TYPE = "Liabilities"

# Tax type of untaxed entries, also used as the VAT key for untaxed amounts.
UNTAXED_VAT_KEY = "Without"

REPORT_TITLE = "Open Receivables & Liabilities Report"
TOTAL_LABEL = "Total"
BASE_HEADER = (
    "Reservation ID",
    "Arrival",
    "Departure",
    "Status",
    "Receivables",
    "Liabilities",
)


__all__ = [
    "REFERENCE_TYPE_GUEST",
    "REFERENCE_TYPE_EXTERNAL",
    "SUPPORTED_REFERENCE_TYPES",
    "RECEIVABLES_ACCOUNT_TYPE",
    "LIABILITIES_ACCOUNT_TYPE",
    "UNTAXED_VAT_KEY",
    "REPORT_TITLE",
    "TOTAL_LABEL",
    "BASE_HEADER",
]
