from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.money import FormatConfig
from ..core.enums import BalanceState
from ..core.exceptions import DataInconsistencyError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..ledger.repository import LedgerRepository
from .calculator.base import LedgerSnapshot
from .calculator.factory import BalanceCalculatorFactory
from .engine import DateRange, ReportSummary, filter_by_date_range
from .report import CompanyInfo, ReportView, assemble_report, label_balance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OverviewData:
    rows: list[dict]
    totals: dict


class PayrollReportService:
    """Use case: employee reports, payslips and the organization overview.

    Fetches records from the store, hands them to the balance engine through the
    calculator for the employee's variant, then assembles the view.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        ledger: LedgerRepository,
        *,
        fmt: Optional[FormatConfig] = None,
        company: Optional[CompanyInfo] = None,
        calculator_factory: Optional[BalanceCalculatorFactory] = None,
    ):
        self._employees = employees
        self._ledger = ledger
        self._fmt = fmt or FormatConfig()
        self._company = company
        self._factory = calculator_factory or BalanceCalculatorFactory()

    def _get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise DataInconsistencyError(f"Employee {employee_id} not found")
        return employee

    def _snapshot(self, employee: Employee) -> LedgerSnapshot:
        employee_id = employee.employee_id
        return LedgerSnapshot(
            work_records=list(self._ledger.list_work_records(employee_id)),
            overtime_records=list(self._ledger.list_overtime_records(employee_id)),
            payments=list(self._ledger.list_salary_payments(employee_id)),
            advances=list(self._ledger.list_advances(employee_id)),
        )

    def compute_summary(self, employee_id: int, *, date_range: DateRange, today: date) -> ReportSummary:
        employee = self._get_employee(employee_id)
        calculator = self._factory.for_employee(employee)
        return calculator.summarize(employee, self._snapshot(employee), date_range, today=today)

    def _build(self, employee_id: int, *, date_range: DateRange, today: date, kind: str) -> ReportView:
        employee = self._get_employee(employee_id)
        ledger = self._snapshot(employee)
        calculator = self._factory.for_employee(employee)

        summary = calculator.summarize(employee, ledger, date_range, today=today)
        view = assemble_report(
            employee,
            calculator.earning_records(ledger, date_range),
            filter_by_date_range(ledger.payments, date_range.start, date_range.end),
            summary,
            date_range,
            fmt=self._fmt,
            kind=kind,
            advances=filter_by_date_range(ledger.advances, date_range.start, date_range.end),
            generated_on=today if kind == "payslip" else None,
            company=self._company if kind == "payslip" else None,
        )
        logger.debug(
            "Built %s for employee %s: earned=%s paid=%s balance=%s",
            kind, employee.employee_id, summary.earned, summary.paid, summary.balance,
        )
        return view

    def build_report(self, employee_id: int, *, date_range: DateRange, today: date) -> ReportView:
        return self._build(employee_id, date_range=date_range, today=today, kind="report")

    def build_payslip(self, employee_id: int, *, date_range: DateRange, today: date) -> ReportView:
        return self._build(employee_id, date_range=date_range, today=today, kind="payslip")

    def organization_overview(self, *, date_range: DateRange, today: date) -> OverviewData:
        rows: list[dict] = []
        totals = {"earned": 0.0, "paid": 0.0, "outstanding": 0.0, "overpaid": 0.0}

        for employee in self._employees.list_all():
            if not employee.is_active:
                continue
            calculator = self._factory.for_employee(employee)
            summary = calculator.summarize(employee, self._snapshot(employee), date_range, today=today)
            label = label_balance(summary.balance, places=self._fmt.decimal_places)

            rows.append(
                {
                    "employee_id": employee.employee_id,
                    "full_name": employee.full_name,
                    "employee_type": employee.employee_type.value,
                    "earned": summary.earned,
                    "paid": summary.paid,
                    "balance": summary.balance,
                    "balance_state": label.state.value,
                    "balance_label": label.label,
                }
            )
            totals["earned"] += summary.earned
            totals["paid"] += summary.paid
            if label.state == BalanceState.OUTSTANDING:
                totals["outstanding"] += summary.balance
            elif label.state == BalanceState.OVERPAID:
                totals["overpaid"] += -summary.balance

        rows.sort(key=lambda x: x["balance"], reverse=True)
        return OverviewData(rows=rows, totals=totals)
