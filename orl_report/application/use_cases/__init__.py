"""Application use cases package."""

from .generate_open_balance_report import (
    GenerateOpenBalanceReportUseCase,
    OpenBalanceReport,
)

__all__ = ["GenerateOpenBalanceReportUseCase", "OpenBalanceReport"]
