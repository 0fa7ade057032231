from __future__ import annotations

from datetime import date

import pytest

from src.payroll_dashboard.payroll_dashboard.core.enums import EmployeeStatus
from src.payroll_dashboard.payroll_dashboard.core.exceptions import DataInconsistencyError
from src.payroll_dashboard.payroll_dashboard.ledger.model import Advance, OvertimeRecord, SalaryPayment, WorkRecord
from src.payroll_dashboard.payroll_dashboard.payroll.calculator.base import LedgerSnapshot
from src.payroll_dashboard.payroll_dashboard.payroll.calculator.factory import BalanceCalculatorFactory
from src.payroll_dashboard.payroll_dashboard.payroll.calculator.fixed_calculator import FixedBalanceCalculator
from src.payroll_dashboard.payroll_dashboard.payroll.engine import DateRange
from src.payroll_dashboard.payroll_dashboard.payroll.report import CompanyInfo
from src.payroll_dashboard.payroll_dashboard.payroll.service import PayrollReportService

TODAY = date(2025, 10, 15)
SEPTEMBER = DateRange(date(2025, 9, 1), date(2025, 9, 30))


@pytest.fixture
def seeded_ledger(ledger):
    ledger.create_work_record(WorkRecord(1, date(2025, 9, 15), "Stitching", 40, 50, 2000))
    ledger.create_work_record(WorkRecord(1, date(2025, 9, 16), "Stitching", 10, 50, 500))
    ledger.create_salary_payment(SalaryPayment(1, 1500, date(2025, 9, 16)))
    ledger.create_advance(Advance(1, 200, date(2025, 9, 20), reason="Travel"))

    ledger.create_overtime_record(OvertimeRecord(2, date(2025, 9, 12), 7, 60, 420))
    ledger.create_salary_payment(SalaryPayment(2, 4500, date(2025, 9, 30)))
    return ledger


@pytest.fixture
def service(employees, seeded_ledger):
    return PayrollReportService(employees, seeded_ledger, company=CompanyInfo(name="Acme Textiles"))


def test_report_for_contractual_employee(service):
    view = service.build_report(1, date_range=SEPTEMBER, today=TODAY)

    assert (view.earned, view.paid, view.balance) == (2500, 1500, 1000)
    assert view.balance_label == "Outstanding"
    assert len(view.rows) == 2
    assert view.advance_rows[0].description == "Travel"
    assert view.company is None


def test_advances_do_not_change_the_balance(service, seeded_ledger):
    before = service.compute_summary(1, date_range=SEPTEMBER, today=TODAY)
    seeded_ledger.create_advance(Advance(1, 999, date(2025, 9, 21)))
    after = service.compute_summary(1, date_range=SEPTEMBER, today=TODAY)

    assert before == after


def test_payslip_for_fixed_employee(service):
    view = service.build_payslip(2, date_range=SEPTEMBER, today=TODAY)

    assert view.kind == "payslip"
    assert (view.earned, view.paid, view.balance) == (5420, 4500, 920)
    assert view.period_count == 1
    assert view.company.name == "Acme Textiles"
    assert view.generated_on == "15/10/2025"


def test_report_and_payslip_agree(service):
    report = service.build_report(2, date_range=SEPTEMBER, today=TODAY)
    payslip = service.build_payslip(2, date_range=SEPTEMBER, today=TODAY)

    assert report.summary_figures() == payslip.summary_figures()
    assert report.balance_label == payslip.balance_label


def test_open_range_counts_periods_from_hire_date_to_today(service):
    # hired 2025-03-01, today 2025-10-15: 228 days is eight 30-day periods
    summary = service.compute_summary(2, date_range=DateRange(), today=TODAY)

    assert summary.period_count == 8
    assert summary.base_salary == 40000


def test_missing_employee_is_surfaced(service):
    with pytest.raises(DataInconsistencyError):
        service.build_report(99, date_range=SEPTEMBER, today=TODAY)


def test_fixed_calculator_rejects_contractual_employee(contractual_employee):
    with pytest.raises(DataInconsistencyError):
        FixedBalanceCalculator().summarize(contractual_employee, LedgerSnapshot(), SEPTEMBER, today=TODAY)


def test_factory_picks_calculator_by_employee_type(contractual_employee, fixed_employee):
    factory = BalanceCalculatorFactory()

    assert isinstance(factory.for_employee(fixed_employee), FixedBalanceCalculator)
    assert not isinstance(factory.for_employee(contractual_employee), FixedBalanceCalculator)


def test_overview_lists_active_employees_by_balance(service, employees, fixed_employee):
    overview = service.organization_overview(date_range=SEPTEMBER, today=TODAY)

    assert [r["employee_id"] for r in overview.rows] == [1, 2]
    assert overview.totals == {"earned": 7920, "paid": 6000, "outstanding": 1920, "overpaid": 0.0}

    employees.set_status(fixed_employee.employee_id, status=EmployeeStatus.INACTIVE)
    overview = service.organization_overview(date_range=SEPTEMBER, today=TODAY)
    assert [r["employee_id"] for r in overview.rows] == [1]


def test_overview_totals_follow_the_displayed_label(employees, ledger):
    ledger.create_work_record(WorkRecord(1, date(2025, 9, 15), "Trim", 1, 100, 100))
    ledger.create_salary_payment(SalaryPayment(1, 100.004, date(2025, 9, 16)))
    service = PayrollReportService(employees, ledger)

    overview = service.organization_overview(date_range=SEPTEMBER, today=TODAY)

    row = next(r for r in overview.rows if r["employee_id"] == 1)
    assert row["balance_label"] == "Cleared"
    assert overview.totals["overpaid"] == 0.0
