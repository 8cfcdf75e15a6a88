"""Open Receivables & Liabilities report for hotel back-office data."""
