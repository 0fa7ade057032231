from __future__ import annotations

from datetime import date

import pytest

from src.payroll_dashboard.payroll_dashboard.common.money import FormatConfig
from src.payroll_dashboard.payroll_dashboard.core.enums import BalanceState
from src.payroll_dashboard.payroll_dashboard.ledger.model import Advance, OvertimeRecord, SalaryPayment, WorkRecord
from src.payroll_dashboard.payroll_dashboard.payroll.engine import DateRange, ReportSummary
from src.payroll_dashboard.payroll_dashboard.payroll.export import report_to_csv
from src.payroll_dashboard.payroll_dashboard.payroll.report import assemble_report, label_balance, period_label

SEPTEMBER = DateRange(date(2025, 9, 1), date(2025, 9, 30))


@pytest.mark.parametrize(
    "balance,state,label,caption,amount",
    [
        (1000.0, BalanceState.OUTSTANDING, "Outstanding", "Due to employee", 1000.0),
        (-500.0, BalanceState.OVERPAID, "Overpaid", "Paid beyond earnings", 500.0),
        (0.0, BalanceState.CLEARED, "Cleared", "Settled", 0.0),
        (0.004, BalanceState.CLEARED, "Cleared", "Settled", 0.0),
    ],
)
def test_label_balance(balance, state, label, caption, amount):
    result = label_balance(balance)

    assert result.state == state
    assert result.label == label
    assert result.caption == caption
    assert result.amount == amount


def test_contractual_report_rows_and_totals(contractual_employee):
    work = [
        WorkRecord(1, date(2025, 9, 15), "Stitching", 40, 50, 2000),
        WorkRecord(1, date(2025, 9, 16), "Delivery", None, 750, 750),
    ]
    payments = [SalaryPayment(1, 1500, date(2025, 9, 16), notes="Partial")]
    summary = ReportSummary(earned=2750, paid=1500, balance=1250)

    view = assemble_report(contractual_employee, work, payments, summary, SEPTEMBER)

    assert view.kind == "report"
    assert view.employee_name == "Ali Raza"
    assert view.employee_type == "contractual"
    assert view.period_label == "01/09/2025 - 30/09/2025"
    assert [r.quantity for r in view.rows] == ["40", "-"]
    assert view.rows[0].amount == "Rs 2,000.00"
    assert view.rows[1].raw_amount == 750
    assert view.payment_rows[0].description == "Partial"
    assert view.balance_label == "Outstanding"
    assert view.balance_display == "Rs 1,250.00"


def test_fixed_payslip_shows_salary_line_and_overpaid_label(fixed_employee):
    overtime = [OvertimeRecord(2, date(2025, 9, 10), 2.5, 40, 100, description="Audit")]
    advances = [Advance(2, 300, date(2025, 9, 5), reason="Medical")]
    summary = ReportSummary(earned=5100, paid=5600, balance=-500, base_salary=5000, overtime=100, period_count=1)
    fmt = FormatConfig(currency="USD", date_format="%Y-%m-%d")

    view = assemble_report(
        fixed_employee, overtime, [], summary, SEPTEMBER,
        fmt=fmt, kind="payslip", advances=advances, generated_on=date(2025, 10, 1),
    )

    assert view.rows[0].description == "Monthly salary"
    assert view.rows[0].amount == "$ 5,000.00"
    assert view.rows[1].quantity == "2.5 h"
    assert view.advance_rows[0].description == "Medical"
    assert view.balance_state == BalanceState.OVERPAID
    assert view.balance_display == "$ 500.00"
    assert view.is_negative_balance
    assert view.generated_on == "2025-10-01"
    assert view.to_dict()["summary"]["balance"] == -500


def test_summary_figures_survive_assembly_unchanged(contractual_employee):
    summary = ReportSummary(earned=0.1 + 0.2, paid=1 / 3, balance=(0.1 + 0.2) - 1 / 3)

    view = assemble_report(contractual_employee, [], [], summary, DateRange())

    assert view.summary_figures() == {"earned": summary.earned, "paid": summary.paid, "balance": summary.balance}


def test_sub_cent_negative_balance_is_cleared_not_overpaid(contractual_employee):
    view = assemble_report(contractual_employee, [], [], ReportSummary(100.0, 100.004, -0.004), SEPTEMBER)

    assert view.balance_state == BalanceState.CLEARED
    assert not view.is_negative_balance
    assert view.to_dict()["summary"]["is_negative_balance"] is False


def test_period_labels():
    fmt = FormatConfig()

    assert period_label(DateRange(), fmt) == "All Time"
    assert period_label(DateRange(start=date(2025, 9, 1)), fmt) == "From 01/09/2025"
    assert period_label(DateRange(end=date(2025, 9, 30)), fmt) == "Until 30/09/2025"


def test_report_csv_has_rows_payments_and_totals(contractual_employee):
    work = [WorkRecord(1, date(2025, 9, 15), "Stitching", 40, 50, 2000)]
    payments = [SalaryPayment(1, 1500, date(2025, 9, 16))]
    view = assemble_report(
        contractual_employee, work, payments, ReportSummary(2000, 1500, 500), SEPTEMBER
    )

    data = report_to_csv(view)

    assert data.startswith(b"\xef\xbb\xbf")
    lines = data.decode("utf-8-sig").splitlines()
    assert lines[0] == "section,date,description,quantity,rate,amount"
    assert lines[1].startswith("earning,15/09/2025,Stitching,40")
    assert lines[2].startswith("payment,16/09/2025")
    assert lines[-1] == "total,,Outstanding,,,Rs 500.00"
