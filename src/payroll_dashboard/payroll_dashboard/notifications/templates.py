"""SMS bodies sent after ledger events."""

from __future__ import annotations


def salary_payment(employee_name: str, amount: str, on: str, sender: str) -> str:
    return f"Hello {employee_name}, your salary payment of {amount} has been processed on {on}. Thank you! - {sender}"


def work_assignment(employee_name: str, description: str, on: str, sender: str) -> str:
    return f"Hello {employee_name}, new work recorded: {description} on {on}. - {sender}"


def advance_payment(employee_name: str, amount: str, on: str, sender: str) -> str:
    return f"Hello {employee_name}, advance payment of {amount} has been approved on {on}. - {sender}"


def overtime_approved(employee_name: str, hours: str, on: str, sender: str) -> str:
    return f"Hello {employee_name}, overtime of {hours} hours has been approved for {on}. - {sender}"
