from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .common.money import FormatConfig
from .core.constants import DEFAULT_COUNTRY_CODE, DEFAULT_CURRENCY, DEFAULT_DATE_FORMAT, DEFAULT_DECIMAL_PLACES
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .expenses.mysql_expense_repository import MySQLExpenseRepository
from .expenses.repository import ExpenseRepository
from .expenses.service import ExpenseService
from .ledger.mysql_ledger_repository import MySQLLedgerRepository
from .ledger.repository import LedgerRepository
from .ledger.service import LedgerService
from .notifications.model import SmsSettings
from .notifications.mysql_sms_log_repository import MySQLSmsLogRepository
from .notifications.repository import SmsLogRepository
from .notifications.sender import LoggingSmsSender, NotificationSender
from .notifications.service import NotificationService
from .payments.mysql_payment_repository import MySQLPaymentRepository
from .payments.repository import PaymentRepository
from .payments.service import PaymentService
from .payroll.calculator.factory import BalanceCalculatorFactory
from .payroll.report import CompanyInfo
from .payroll.service import PayrollReportService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    ledger_repo: LedgerRepository
    expenses_repo: ExpenseRepository
    payments_repo: PaymentRepository
    sms_log_repo: SmsLogRepository

    employee_service: EmployeeService
    ledger_service: LedgerService
    payroll_report_service: PayrollReportService
    expense_service: ExpenseService
    payment_service: PaymentService
    notification_service: NotificationService

    conn: Optional[DatabaseConnection] = None


def format_config_from(settings: Any) -> FormatConfig:
    return FormatConfig(
        currency=getattr(settings, "CURRENCY", DEFAULT_CURRENCY),
        symbol=getattr(settings, "CURRENCY_SYMBOL", ""),
        date_format=getattr(settings, "DATE_FORMAT", DEFAULT_DATE_FORMAT),
        decimal_places=int(getattr(settings, "DECIMAL_PLACES", DEFAULT_DECIMAL_PLACES)),
    )


def company_info_from(settings: Any) -> CompanyInfo:
    return CompanyInfo(
        name=getattr(settings, "COMPANY_NAME", "Payroll Dashboard"),
        address=getattr(settings, "COMPANY_ADDRESS", ""),
        phone=getattr(settings, "COMPANY_PHONE", ""),
    )


def sms_settings_from(settings: Any) -> SmsSettings:
    return SmsSettings(
        enabled=bool(getattr(settings, "SMS_ENABLED", False)),
        test_mode=bool(getattr(settings, "SMS_TEST_MODE", True)),
        default_country_code=str(getattr(settings, "SMS_DEFAULT_COUNTRY_CODE", DEFAULT_COUNTRY_CODE)),
        sender_name=getattr(settings, "SMS_SENDER_NAME", "Payroll Dashboard"),
        notify_on_salary_payment=bool(getattr(settings, "SMS_NOTIFY_ON_SALARY_PAYMENT", True)),
        notify_on_advance=bool(getattr(settings, "SMS_NOTIFY_ON_ADVANCE", True)),
        notify_on_overtime=bool(getattr(settings, "SMS_NOTIFY_ON_OVERTIME", False)),
        notify_on_work=bool(getattr(settings, "SMS_NOTIFY_ON_WORK", False)),
    )


def wire_services(
    *,
    employees_repo: EmployeeRepository,
    ledger_repo: LedgerRepository,
    expenses_repo: ExpenseRepository,
    payments_repo: PaymentRepository,
    sms_log_repo: SmsLogRepository,
    settings: Any = None,
    sender: Optional[NotificationSender] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build every service on top of the given repositories."""

    fmt = format_config_from(settings)
    sms_settings = sms_settings_from(settings)
    if sender is None:
        if not sms_settings.test_mode:
            logger.warning("No SMS gateway is configured; messages are only written to the log")
        sender = LoggingSmsSender()

    notification_service = NotificationService(sender, sms_log_repo, sms_settings, fmt=fmt)
    return Container(
        employees_repo=employees_repo,
        ledger_repo=ledger_repo,
        expenses_repo=expenses_repo,
        payments_repo=payments_repo,
        sms_log_repo=sms_log_repo,
        employee_service=EmployeeService(employees_repo),
        ledger_service=LedgerService(employees_repo, ledger_repo, notifications=notification_service),
        payroll_report_service=PayrollReportService(
            employees_repo,
            ledger_repo,
            fmt=fmt,
            company=company_info_from(settings),
            calculator_factory=BalanceCalculatorFactory(),
        ),
        expense_service=ExpenseService(expenses_repo, employees_repo, default_currency=fmt.currency),
        payment_service=PaymentService(payments_repo, expenses=expenses_repo, default_currency=fmt.currency),
        notification_service=notification_service,
        conn=conn,
    )


def build_container(*, db_config: dict, settings: Any = None) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)

    return wire_services(
        employees_repo=MySQLEmployeeRepository(conn),
        ledger_repo=MySQLLedgerRepository(conn),
        expenses_repo=MySQLExpenseRepository(conn),
        payments_repo=MySQLPaymentRepository(conn),
        sms_log_repo=MySQLSmsLogRepository(conn),
        settings=settings,
        conn=conn,
    )
