from __future__ import annotations

import csv
import io

from .report import ReportView

REPORT_CSV_FIELDS = ["section", "date", "description", "quantity", "rate", "amount"]


def report_to_csv(view: ReportView) -> bytes:
    """Write a report's line items, payments and totals as CSV (UTF-8 with BOM for Excel)."""

    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=REPORT_CSV_FIELDS)
    writer.writeheader()

    for row in view.rows:
        writer.writerow(
            {
                "section": "earning",
                "date": row.date,
                "description": row.description,
                "quantity": row.quantity,
                "rate": row.rate,
                "amount": row.amount,
            }
        )
    for row in view.payment_rows:
        writer.writerow({"section": "payment", "date": row.date, "description": row.description, "amount": row.amount})
    for row in view.advance_rows:
        writer.writerow({"section": "advance", "date": row.date, "description": row.description, "amount": row.amount})

    writer.writerow({"section": "total", "description": "Earned", "amount": view.earned_display})
    writer.writerow({"section": "total", "description": "Paid", "amount": view.paid_display})
    writer.writerow({"section": "total", "description": view.balance_label, "amount": view.balance_display})

    return out.getvalue().encode("utf-8-sig")
