from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Sequence

from ...employees.model import Employee
from ...ledger.model import Advance, OvertimeRecord, SalaryPayment, WorkRecord
from ..engine import DateRange, ReportSummary


@dataclass(frozen=True)
class LedgerSnapshot:
    """Everything fetched from the record store for one employee."""

    work_records: Sequence[WorkRecord] = ()
    overtime_records: Sequence[OvertimeRecord] = ()
    payments: Sequence[SalaryPayment] = ()
    advances: Sequence[Advance] = ()


class BalanceCalculator(ABC):
    """Calculator interface (Strategy Pattern per employee variant)."""

    @abstractmethod
    def summarize(self, employee: Employee, ledger: LedgerSnapshot, date_range: DateRange, *, today: date) -> ReportSummary:
        raise NotImplementedError

    @abstractmethod
    def earning_records(self, ledger: LedgerSnapshot, date_range: DateRange) -> list:
        """Ledger lines that make up `earned` within the range."""
        raise NotImplementedError
