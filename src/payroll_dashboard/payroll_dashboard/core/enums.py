from __future__ import annotations

from enum import Enum


class EmployeeType(str, Enum):
    """Compensation basis of an employee."""

    CONTRACTUAL = "contractual"
    FIXED = "fixed"


class EmployeeStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class BalanceState(str, Enum):
    """Sign convention shared by every report and payslip."""

    OUTSTANDING = "OUTSTANDING"
    OVERPAID = "OVERPAID"
    CLEARED = "CLEARED"


class MessageType(str, Enum):
    SALARY_PAYMENT = "salary_payment"
    WORK_ASSIGNMENT = "work_assignment"
    ADVANCE_PAYMENT = "advance_payment"
    OVERTIME = "overtime"
    CUSTOM = "custom"


class DeliveryStatus(str, Enum):
    SENT = "sent"
    FAILED = "failed"


class ExpenseCategory(str, Enum):
    SETUP_PURCHASE = "setup_purchase"
    RENT_BILL_GUEST = "rent_bill_guest"
    MATERIAL = "material"
    LOGISTIC = "logistic"
    OUTSOURCE = "outsource"


class ExpenseStatus(str, Enum):
    """Approval flow of an expense claim."""

    DRAFT = "draft"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    REJECTED = "rejected"
    PAID = "paid"


class PaymentType(str, Enum):
    """Direction of a general payment: money in (credit) or out (debit)."""

    CREDIT = "credit"
    DEBIT = "debit"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


class PaymentMethod(str, Enum):
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    BANK_TRANSFER = "bank_transfer"
    CASH = "cash"
    DIGITAL_WALLET = "digital_wallet"
