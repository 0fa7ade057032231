"""Balance engine: pure reductions from ledger records to payroll totals.

No I/O, no clock, no formatting. Callers pass the date range (and "today",
where an open range needs one) explicitly, so the same inputs always give the
same totals. Monetary math stays in float at full precision; rounding belongs
to presentation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Iterable, List, Optional, Sequence, TypeVar

from ..common.datetime_utils import DateLike, as_calendar_date
from ..common.validators import optional_date
from ..core.constants import SALARY_PERIOD_DAYS
from ..core.exceptions import DataIntegrityError, InvalidRangeError
from ..employees.model import FixedEmployee
from ..ledger.model import OvertimeRecord, SalaryPayment, WorkRecord

R = TypeVar("R")


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar-date range; either bound may be open."""

    start: Optional[date] = None
    end: Optional[date] = None

    def __post_init__(self) -> None:
        # Bounds may arrive as ISO strings or timestamps; only the calendar day is kept.
        if self.start is not None:
            object.__setattr__(self, "start", as_calendar_date(self.start))
        if self.end is not None:
            object.__setattr__(self, "end", as_calendar_date(self.end))
        if self.start and self.end and self.start > self.end:
            raise InvalidRangeError(
                f"Start date {self.start.isoformat()} is after end date {self.end.isoformat()}"
            )

    @classmethod
    def from_strings(cls, start: Optional[str], end: Optional[str]) -> "DateRange":
        return cls(start=optional_date(start, "start"), end=optional_date(end, "end"))

    def contains(self, value: Any) -> bool:
        # Time-of-day is dropped, so an end bound captures the whole day.
        day = as_calendar_date(value)
        if self.start and day < self.start:
            return False
        if self.end and day > self.end:
            return False
        return True


@dataclass(frozen=True)
class ReportSummary:
    earned: float
    paid: float
    balance: float
    base_salary: float = 0.0
    overtime: float = 0.0
    period_count: int = 0


def _number(value: Any, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DataIntegrityError(f"{field_name} is not a number: {value!r}")
    if math.isnan(value) or math.isinf(value):
        raise DataIntegrityError(f"{field_name} is not a finite number: {value!r}")
    return float(value)


def filter_by_date_range(
    records: Iterable[R], start: Optional[DateLike] = None, end: Optional[DateLike] = None
) -> List[R]:
    """Keep records whose `record_date` lies in [start, end]; order is preserved."""

    date_range = DateRange(start=start, end=end)
    return [r for r in records if date_range.contains(r.record_date)]


def sum_work(records: Iterable[WorkRecord]) -> float:
    total = 0.0
    for r in records:
        quantity = 1.0 if r.quantity is None else _number(r.quantity, "quantity")
        total += quantity * _number(r.price, "price")
    return total


def sum_overtime(records: Iterable[OvertimeRecord]) -> float:
    # Stored amount wins over hours * rate; a record may have been overridden by hand.
    total = 0.0
    for r in records:
        total += _number(r.amount, "amount")
    return total


def sum_amounts(records: Iterable[Any]) -> float:
    """Sum `amount` over any records that carry one (payments, advances, expenses)."""
    total = 0.0
    for r in records:
        total += _number(r.amount, "amount")
    return total


def sum_payments(records: Iterable[SalaryPayment]) -> float:
    return sum_amounts(records)


def months_in_range(
    date_range: DateRange,
    *,
    default_start: Optional[date] = None,
    default_end: Optional[date] = None,
) -> int:
    """Number of 30-day salary periods the range spans, never fewer than one.

    The span is end minus start in days, so Sep 1..Sep 30, Oct 1..Oct 31 and
    Jan 31..Feb 28 are all a single period. Open bounds fall back to the
    defaults; with no usable bounds the count is a single period.
    """

    start = date_range.start or default_start
    end = date_range.end or default_end
    if start is None or end is None or end < start:
        return 1

    days = (as_calendar_date(end) - as_calendar_date(start)).days
    return max(1, math.ceil(days / SALARY_PERIOD_DAYS))


def compute_contractual_summary(
    work_records: Sequence[WorkRecord],
    payments: Sequence[SalaryPayment],
    date_range: DateRange,
) -> ReportSummary:
    earned = sum_work(filter_by_date_range(work_records, date_range.start, date_range.end))
    paid = sum_payments(filter_by_date_range(payments, date_range.start, date_range.end))
    return ReportSummary(earned=earned, paid=paid, balance=earned - paid)


def compute_fixed_summary(
    employee: FixedEmployee,
    overtime_records: Sequence[OvertimeRecord],
    payments: Sequence[SalaryPayment],
    date_range: DateRange,
    period_count_fn: Callable[[DateRange], int] = months_in_range,
) -> ReportSummary:
    period_count = int(period_count_fn(date_range))
    base_salary = _number(employee.monthly_salary, "monthly_salary") * period_count
    overtime = sum_overtime(filter_by_date_range(overtime_records, date_range.start, date_range.end))
    earned = base_salary + overtime
    paid = sum_payments(filter_by_date_range(payments, date_range.start, date_range.end))
    return ReportSummary(
        earned=earned,
        paid=paid,
        balance=earned - paid,
        base_salary=base_salary,
        overtime=overtime,
        period_count=period_count,
    )
