from __future__ import annotations

import re
from typing import Optional

from ..core.constants import DEFAULT_COUNTRY_CODE

_E164_RE = re.compile(r"\+\d{7,15}")


def _e164_or_none(candidate: str) -> Optional[str]:
    return candidate if _E164_RE.fullmatch(candidate) else None


def normalize_phone(phone: Optional[str], default_country_code: str = DEFAULT_COUNTRY_CODE) -> Optional[str]:
    """Normalize a phone number to E.164, or None when it cannot be one.

    Local numbers ("0300...", or ten bare digits) get the default country code.
    """

    if not phone or not phone.strip():
        return None

    phone = phone.strip()
    if phone.startswith("+"):
        return _e164_or_none(re.sub(r"\s", "", phone))

    digits = re.sub(r"\D", "", phone)
    if digits.startswith("00"):
        return _e164_or_none("+" + digits[2:])
    if digits.startswith("0"):
        return _e164_or_none(f"+{default_country_code}{digits[1:]}")
    if len(digits) == 10:
        return _e164_or_none(f"+{default_country_code}{digits}")
    if len(digits) > 10:
        return _e164_or_none("+" + digits)
    return None
