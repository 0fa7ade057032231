from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import EmployeeStatus, EmployeeType
from .model import Employee, NewEmployee


class EmployeeRepository(Protocol):
    """Repository interface for employees.

    Note: the service layer depends on this interface, not on a concrete database.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self, *, employee_type: Optional[EmployeeType] = None) -> Sequence[Employee]:
        raise NotImplementedError

    def create(self, data: NewEmployee) -> int:
        raise NotImplementedError

    def update(self, employee_id: int, data: NewEmployee) -> bool:
        raise NotImplementedError

    def set_status(self, employee_id: int, *, status: EmployeeStatus) -> bool:
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError
