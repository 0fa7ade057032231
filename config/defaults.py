"""Settings shared by every environment; each environment module overrides what it needs."""

import os

from config import env_flag

# Reports and payslips
CURRENCY = os.getenv("CURRENCY", "PKR")
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "")
DATE_FORMAT = os.getenv("DATE_FORMAT", "%d/%m/%Y")
DECIMAL_PLACES = int(os.getenv("DECIMAL_PLACES", "2"))

COMPANY_NAME = os.getenv("COMPANY_NAME", "Payroll Dashboard")
COMPANY_ADDRESS = os.getenv("COMPANY_ADDRESS", "")
COMPANY_PHONE = os.getenv("COMPANY_PHONE", "")

# SMS notifications
SMS_ENABLED = env_flag("SMS_ENABLED", "0")
SMS_TEST_MODE = env_flag("SMS_TEST_MODE", "1")
SMS_DEFAULT_COUNTRY_CODE = os.getenv("SMS_DEFAULT_COUNTRY_CODE", "92")
SMS_SENDER_NAME = os.getenv("SMS_SENDER_NAME", COMPANY_NAME)
SMS_NOTIFY_ON_SALARY_PAYMENT = env_flag("SMS_NOTIFY_ON_SALARY_PAYMENT", "1")
SMS_NOTIFY_ON_ADVANCE = env_flag("SMS_NOTIFY_ON_ADVANCE", "1")
SMS_NOTIFY_ON_OVERTIME = env_flag("SMS_NOTIFY_ON_OVERTIME", "0")
SMS_NOTIFY_ON_WORK = env_flag("SMS_NOTIFY_ON_WORK", "0")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
