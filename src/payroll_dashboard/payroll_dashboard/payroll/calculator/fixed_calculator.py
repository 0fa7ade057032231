from __future__ import annotations

from datetime import date
from functools import partial

from ...core.exceptions import DataInconsistencyError
from ...employees.model import Employee, FixedEmployee
from ..engine import DateRange, ReportSummary, compute_fixed_summary, filter_by_date_range, months_in_range
from .base import BalanceCalculator, LedgerSnapshot


class FixedBalanceCalculator(BalanceCalculator):
    """Earned = monthly salary * periods in range + overtime in range.

    Open bounds are resolved for period counting only: hire date for the
    start, the caller's "today" for the end.
    """

    def summarize(self, employee: Employee, ledger: LedgerSnapshot, date_range: DateRange, *, today: date) -> ReportSummary:
        if not isinstance(employee, FixedEmployee):
            raise DataInconsistencyError(f"Employee {employee.employee_id} is not on a fixed salary")

        period_count_fn = partial(months_in_range, default_start=employee.hire_date, default_end=today)
        return compute_fixed_summary(employee, ledger.overtime_records, ledger.payments, date_range, period_count_fn)

    def earning_records(self, ledger: LedgerSnapshot, date_range: DateRange) -> list:
        return filter_by_date_range(ledger.overtime_records, date_range.start, date_range.end)
