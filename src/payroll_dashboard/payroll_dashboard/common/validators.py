from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any, Optional

from ..core.constants import ISO_DATE_FORMAT
from ..core.exceptions import InvalidNumberError, MissingFieldError, ValidationError


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is None or not str(value).strip():
        raise MissingFieldError(f"{field_name} is required", field=field_name)
    return str(value).strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    if _is_blank(value):
        return None
    return str(value).strip()


def _parse_number(value: Any, field_name: str) -> float:
    if isinstance(value, bool):
        raise MissingFieldError(f"{field_name} must be a number", field=field_name)
    try:
        if isinstance(value, (int, float)):
            number = float(value)
        else:
            number = float(str(value).strip().replace(",", ""))
    except OverflowError:
        raise InvalidNumberError(f"{field_name} is too large", field=field_name)
    except ValueError:
        raise MissingFieldError(f"{field_name} must be a number", field=field_name)

    if math.isnan(number) or math.isinf(number):
        raise InvalidNumberError(f"{field_name} must be a finite number", field=field_name)
    return number


def require_amount(value: Any, field_name: str) -> float:
    """Required non-negative number. Blank never becomes zero."""

    if _is_blank(value):
        raise MissingFieldError(f"{field_name} is required", field=field_name)
    number = _parse_number(value, field_name)
    if number < 0:
        raise InvalidNumberError(f"{field_name} cannot be negative", field=field_name)
    return number


def optional_amount(value: Any, field_name: str) -> Optional[float]:
    if _is_blank(value):
        return None
    return require_amount(value, field_name)


def require_date(value: Any, field_name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if _is_blank(value):
        raise MissingFieldError(f"{field_name} is required", field=field_name)
    try:
        return datetime.strptime(str(value).strip(), ISO_DATE_FORMAT).date()
    except ValueError:
        raise InvalidNumberError(f"{field_name} must be a valid date (YYYY-MM-DD)", field=field_name)


def optional_date(value: Any, field_name: str) -> Optional[date]:
    if _is_blank(value):
        return None
    return require_date(value, field_name)


def require_choice(value: Any, enum_cls, field_name: str):
    if isinstance(value, enum_cls):
        return value
    text = require_non_empty(value, field_name)
    try:
        return enum_cls(text.lower())
    except ValueError:
        allowed = ", ".join(e.value for e in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}", field=field_name)
