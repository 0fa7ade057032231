from __future__ import annotations

from datetime import date

import pytest

from src.payroll_dashboard.payroll_dashboard.core.enums import EmployeeStatus, EmployeeType
from src.payroll_dashboard.payroll_dashboard.core.exceptions import DataInconsistencyError, MissingFieldError, ValidationError
from src.payroll_dashboard.payroll_dashboard.employees.model import FixedEmployee
from src.payroll_dashboard.payroll_dashboard.employees.service import EmployeeService


@pytest.fixture
def service(employees):
    return EmployeeService(employees)


def _payload(**overrides):
    data = {
        "first_name": "Bilal",
        "last_name": "Ahmed",
        "phone": "03111234567",
        "role": "driver",
        "employee_type": "fixed",
        "hire_date": "2025-06-01",
        "monthly_salary": "3000",
    }
    data.update(overrides)
    return data


def test_add_fixed_employee(service):
    employee_id = service.add_employee(_payload())

    employee = service.get_employee(employee_id)
    assert isinstance(employee, FixedEmployee)
    assert employee.monthly_salary == 3000
    assert employee.hire_date == date(2025, 6, 1)
    assert employee.full_name == "Bilal Ahmed"


def test_fixed_employee_requires_salary(service):
    with pytest.raises(MissingFieldError):
        service.add_employee(_payload(monthly_salary=""))


def test_contractual_employee_ignores_salary(service):
    employee_id = service.add_employee(_payload(employee_type="Contractual", monthly_salary="999"))

    assert service.get_employee(employee_id).employee_type == EmployeeType.CONTRACTUAL


def test_unknown_type_rejected(service):
    with pytest.raises(ValidationError):
        service.add_employee(_payload(employee_type="intern"))


def test_edit_and_status(service):
    service.edit_employee(2, _payload(first_name="Sara", last_name="Malik", monthly_salary="5500"))
    service.set_status(2, "inactive")

    employee = service.get_employee(2)
    assert employee.last_name == "Malik"
    assert employee.monthly_salary == 5500
    assert employee.status == EmployeeStatus.INACTIVE


def test_delete_and_missing(service):
    service.delete_employee(1)

    with pytest.raises(DataInconsistencyError):
        service.get_employee(1)
    with pytest.raises(DataInconsistencyError):
        service.delete_employee(1)


def test_list_by_type(service):
    assert [e.employee_id for e in service.list_employees(employee_type="fixed")] == [2]
    assert len(service.list_employees()) == 2


def test_stats(service):
    service.add_employee(_payload())
    service.set_status(1, EmployeeStatus.INACTIVE)

    stats = service.employee_stats()

    assert stats == {
        "total": 3,
        "active": 2,
        "inactive": 1,
        "contractual": 1,
        "fixed": 2,
        "total_fixed_salaries": 8000,
    }
