from __future__ import annotations

from datetime import date

from ...employees.model import Employee
from ..engine import DateRange, ReportSummary, compute_contractual_summary, filter_by_date_range
from .base import BalanceCalculator, LedgerSnapshot


class ContractualBalanceCalculator(BalanceCalculator):
    """Earned = sum of quantity * price over work records in range."""

    def summarize(self, employee: Employee, ledger: LedgerSnapshot, date_range: DateRange, *, today: date) -> ReportSummary:
        return compute_contractual_summary(ledger.work_records, ledger.payments, date_range)

    def earning_records(self, ledger: LedgerSnapshot, date_range: DateRange) -> list:
        return filter_by_date_range(ledger.work_records, date_range.start, date_range.end)
