"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_CURRENCY = "PKR"
DEFAULT_DATE_FORMAT = "%d/%m/%Y"
DEFAULT_DECIMAL_PLACES = 2
DEFAULT_COUNTRY_CODE = "92"
DEFAULT_SMS_LOG_LIMIT = 100
ISO_DATE_FORMAT = "%Y-%m-%d"
SALARY_PERIOD_DAYS = 30
