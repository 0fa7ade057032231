from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..common.money import FormatConfig, format_currency, format_date, format_number, round_money
from ..core.enums import BalanceState
from ..employees.model import Employee, FixedEmployee
from ..ledger.model import Advance, OvertimeRecord, SalaryPayment, WorkRecord
from .engine import DateRange, ReportSummary


@dataclass(frozen=True)
class BalanceLabel:
    state: BalanceState
    label: str
    caption: str
    amount: float


def label_balance(balance: float, *, places: int = 2) -> BalanceLabel:
    """Sign convention used by every report and payslip, for both employee kinds.

    The amount shown is always non-negative; the label carries the direction.
    Zero is judged at display precision so float noise never reads as a debt.
    """

    shown = round_money(balance, places)
    if shown > 0:
        return BalanceLabel(BalanceState.OUTSTANDING, "Outstanding", "Due to employee", abs(balance))
    if shown < 0:
        return BalanceLabel(BalanceState.OVERPAID, "Overpaid", "Paid beyond earnings", abs(balance))
    return BalanceLabel(BalanceState.CLEARED, "Cleared", "Settled", 0.0)


@dataclass(frozen=True)
class ReportRow:
    date: str
    description: str
    quantity: str
    rate: str
    amount: str
    raw_amount: float


@dataclass(frozen=True)
class PaymentRow:
    date: str
    description: str
    amount: str
    raw_amount: float


@dataclass(frozen=True)
class CompanyInfo:
    name: str
    address: str = ""
    phone: str = ""


@dataclass(frozen=True)
class ReportView:
    """Render-ready report/payslip (used identically by screen, print and export)."""

    kind: str
    employee_id: int
    employee_name: str
    employee_type: str
    phone: str
    role: str
    hire_date: str
    period_label: str
    earned: float
    paid: float
    balance: float
    earned_display: str
    paid_display: str
    balance_display: str
    balance_state: BalanceState
    balance_label: str
    balance_caption: str
    rows: tuple[ReportRow, ...] = ()
    payment_rows: tuple[PaymentRow, ...] = ()
    advance_rows: tuple[PaymentRow, ...] = ()
    base_salary: float = 0.0
    overtime: float = 0.0
    period_count: int = 0
    generated_on: Optional[str] = None
    company: Optional[CompanyInfo] = None
    currency: str = ""

    @property
    def is_negative_balance(self) -> bool:
        return self.balance_state == BalanceState.OVERPAID

    def summary_figures(self) -> dict:
        return {"earned": self.earned, "paid": self.paid, "balance": self.balance}

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "employee": {
                "employee_id": self.employee_id,
                "name": self.employee_name,
                "type": self.employee_type,
                "phone": self.phone,
                "role": self.role,
                "hire_date": self.hire_date,
            },
            "period": self.period_label,
            "summary": {
                **self.summary_figures(),
                "earned_display": self.earned_display,
                "paid_display": self.paid_display,
                "balance_display": self.balance_display,
                "balance_state": self.balance_state.value,
                "balance_label": self.balance_label,
                "balance_caption": self.balance_caption,
                "is_negative_balance": self.is_negative_balance,
                "base_salary": self.base_salary,
                "overtime": self.overtime,
                "period_count": self.period_count,
            },
            "rows": [r.__dict__ for r in self.rows],
            "payments": [r.__dict__ for r in self.payment_rows],
            "advances": [r.__dict__ for r in self.advance_rows],
            "generated_on": self.generated_on,
            "company": self.company.__dict__ if self.company else None,
            "currency": self.currency,
        }


def period_label(date_range: DateRange, fmt: FormatConfig) -> str:
    if date_range.start and date_range.end:
        return f"{format_date(date_range.start, fmt)} - {format_date(date_range.end, fmt)}"
    if date_range.start:
        return f"From {format_date(date_range.start, fmt)}"
    if date_range.end:
        return f"Until {format_date(date_range.end, fmt)}"
    return "All Time"


def _work_row(r: WorkRecord, fmt: FormatConfig) -> ReportRow:
    line_total = r.effective_quantity * r.price
    return ReportRow(
        date=format_date(r.work_date, fmt),
        description=r.description,
        quantity="-" if r.quantity is None else format_number(r.quantity),
        rate=format_currency(r.price, fmt),
        amount=format_currency(line_total, fmt),
        raw_amount=line_total,
    )


def _overtime_row(r: OvertimeRecord, fmt: FormatConfig) -> ReportRow:
    return ReportRow(
        date=format_date(r.work_date, fmt),
        description=r.description or "Overtime",
        quantity="-" if r.hours is None else f"{format_number(r.hours)} h",
        rate=format_currency(r.rate, fmt),
        amount=format_currency(r.amount, fmt),
        raw_amount=r.amount,
    )


def _salary_row(employee: FixedEmployee, summary: ReportSummary, fmt: FormatConfig) -> ReportRow:
    return ReportRow(
        date="",
        description="Monthly salary",
        quantity=format_number(summary.period_count),
        rate=format_currency(employee.monthly_salary, fmt),
        amount=format_currency(summary.base_salary, fmt),
        raw_amount=summary.base_salary,
    )


def _payment_row(p: SalaryPayment, fmt: FormatConfig) -> PaymentRow:
    return PaymentRow(
        date=format_date(p.payment_date, fmt),
        description=p.notes or p.payment_type or "Salary payment",
        amount=format_currency(p.amount, fmt),
        raw_amount=p.amount,
    )


def _advance_row(a: Advance, fmt: FormatConfig) -> PaymentRow:
    return PaymentRow(
        date=format_date(a.payment_date, fmt),
        description=a.reason or a.notes or "Advance",
        amount=format_currency(a.amount, fmt),
        raw_amount=a.amount,
    )


def assemble_report(
    employee: Employee,
    earning_records: Sequence[WorkRecord | OvertimeRecord],
    payments: Sequence[SalaryPayment],
    summary: ReportSummary,
    date_range: DateRange,
    *,
    fmt: Optional[FormatConfig] = None,
    kind: str = "report",
    advances: Sequence[Advance] = (),
    generated_on: Optional[date] = None,
    company: Optional[CompanyInfo] = None,
) -> ReportView:
    """Combine a computed summary with identity data and already-filtered records.

    Pure transformation: the summary figures are carried through untouched, only
    their display strings are rounded.
    """

    fmt = fmt or FormatConfig()

    rows: list[ReportRow] = []
    if isinstance(employee, FixedEmployee):
        rows.append(_salary_row(employee, summary, fmt))
    for r in earning_records:
        if isinstance(r, WorkRecord):
            rows.append(_work_row(r, fmt))
        else:
            rows.append(_overtime_row(r, fmt))

    balance = label_balance(summary.balance, places=fmt.decimal_places)

    return ReportView(
        kind=kind,
        employee_id=employee.employee_id,
        employee_name=employee.full_name,
        employee_type=employee.employee_type.value,
        phone=employee.phone,
        role=employee.role,
        hire_date=format_date(employee.hire_date, fmt),
        period_label=period_label(date_range, fmt),
        earned=summary.earned,
        paid=summary.paid,
        balance=summary.balance,
        earned_display=format_currency(summary.earned, fmt),
        paid_display=format_currency(summary.paid, fmt),
        balance_display=format_currency(balance.amount, fmt),
        balance_state=balance.state,
        balance_label=balance.label,
        balance_caption=balance.caption,
        rows=tuple(rows),
        payment_rows=tuple(_payment_row(p, fmt) for p in payments),
        advance_rows=tuple(_advance_row(a, fmt) for a in advances),
        base_salary=summary.base_salary,
        overtime=summary.overtime,
        period_count=summary.period_count,
        generated_on=format_date(generated_on, fmt) if generated_on else None,
        company=company,
        currency=fmt.currency,
    )
