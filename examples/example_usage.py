"""Example: use the service layer without Flask.

Prints each active employee's balance for the current month.
"""

import importlib

from config import get_settings_module

from src.payroll_dashboard.payroll_dashboard.common.datetime_utils import today_local
from src.payroll_dashboard.payroll_dashboard.container import build_container
from src.payroll_dashboard.payroll_dashboard.payroll.engine import DateRange


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, settings=settings)

    today = today_local()
    month = DateRange(start=today.replace(day=1), end=today)
    overview = container.payroll_report_service.organization_overview(date_range=month, today=today)
    for row in overview.rows:
        print(f"{row['full_name']:<24} {row['balance_label']:<12} {row['balance']:>12.2f}")
    print("totals:", overview.totals)


if __name__ == "__main__":
    main()
