from __future__ import annotations

from datetime import date, datetime
from typing import Union

from ..core.constants import ISO_DATE_FORMAT
from ..core.exceptions import DataIntegrityError

DateLike = Union[date, datetime, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def as_calendar_date(value: DateLike) -> date:
    """Reduce a stored date value to its calendar date.

    Stored values may carry a time component (timestamps) or arrive as ISO
    strings straight from the store; only the calendar day matters for ranges.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return parse_iso_date(value.strip()[:10])
        except ValueError:
            raise DataIntegrityError(f"Not an ISO date: {value!r}")
    raise DataIntegrityError(f"Unsupported date value: {value!r}")


def today_local() -> date:
    """Current local date.

    Note: Only callers at the edge (controllers, scripts) use this; services
    and the balance engine always receive "today" as a parameter.
    """
    return date.today()


def now_local() -> datetime:
    return datetime.now()
