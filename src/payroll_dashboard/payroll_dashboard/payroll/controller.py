from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_local
from ..container import Container
from .engine import DateRange
from .export import report_to_csv


def register(app: Flask, container: Container) -> None:
    service = container.payroll_report_service

    def _range_from_args(today: date) -> DateRange:
        # An omitted end means "up to today"; an omitted start stays open.
        end = request.args.get("end") or today.isoformat()
        return DateRange.from_strings(request.args.get("start"), end)

    @app.route("/api/employees/<int:employee_id>/report", methods=["GET"], endpoint="employee_report")
    def employee_report(employee_id: int):
        today = today_local()
        view = service.build_report(employee_id, date_range=_range_from_args(today), today=today)
        return jsonify({"success": True, "report": view.to_dict()})

    @app.route("/api/employees/<int:employee_id>/payslip", methods=["GET"], endpoint="employee_payslip")
    def employee_payslip(employee_id: int):
        today = today_local()
        view = service.build_payslip(employee_id, date_range=_range_from_args(today), today=today)
        return jsonify({"success": True, "payslip": view.to_dict()})

    @app.route("/api/employees/<int:employee_id>/report.csv", methods=["GET"], endpoint="employee_report_csv")
    def employee_report_csv(employee_id: int):
        today = today_local()
        date_range = _range_from_args(today)
        view = service.build_report(employee_id, date_range=date_range, today=today)

        start_tag = date_range.start.strftime("%Y%m%d") if date_range.start else "all"
        filename = f"report_{employee_id}_{start_tag}_{date_range.end.strftime('%Y%m%d')}.csv"
        return app.response_class(
            report_to_csv(view),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/reports/overview", methods=["GET"], endpoint="reports_overview")
    def reports_overview():
        today = today_local()
        data = service.organization_overview(date_range=_range_from_args(today), today=today)
        return jsonify({"success": True, "employees": data.rows, "totals": data.totals})
