from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.http import json_body, to_json
from ..container import Container
from ..payroll.engine import DateRange


def register(app: Flask, container: Container) -> None:
    service = container.expense_service

    def _range_from_args() -> DateRange:
        return DateRange.from_strings(request.args.get("start"), request.args.get("end"))

    @app.route("/api/expenses", methods=["GET"], endpoint="list_expenses")
    def list_expenses():
        expenses = service.list_expenses(
            date_range=_range_from_args(),
            category=request.args.get("category"),
            status=request.args.get("status"),
        )
        return jsonify({"success": True, "expenses": to_json(list(expenses))})

    @app.route("/api/expenses", methods=["POST"], endpoint="create_expense")
    def create_expense():
        expense_id = service.create_expense(json_body())
        return jsonify({"success": True, "expense_id": expense_id}), 201

    @app.route("/api/expenses/stats", methods=["GET"], endpoint="expense_stats")
    def expense_stats():
        return jsonify({"success": True, "stats": service.expense_stats(date_range=_range_from_args())})

    @app.route("/api/expenses/<int:expense_id>", methods=["PUT"], endpoint="update_expense")
    def update_expense(expense_id: int):
        service.update_expense(expense_id, json_body())
        return jsonify({"success": True})

    @app.route("/api/expenses/<int:expense_id>", methods=["DELETE"], endpoint="delete_expense")
    def delete_expense(expense_id: int):
        service.delete_expense(expense_id)
        return jsonify({"success": True})

    @app.route("/api/expenses/<int:expense_id>/approve", methods=["POST"], endpoint="approve_expense")
    def approve_expense(expense_id: int):
        service.approve(expense_id, approved_by=json_body().get("approved_by"), now=now_local())
        return jsonify({"success": True})

    @app.route("/api/expenses/<int:expense_id>/reject", methods=["POST"], endpoint="reject_expense")
    def reject_expense(expense_id: int):
        service.reject(expense_id, reason=json_body().get("reason"))
        return jsonify({"success": True})
