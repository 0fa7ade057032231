from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, to_json
from ..container import Container
from ..payroll.engine import DateRange


def register(app: Flask, container: Container) -> None:
    service = container.payment_service

    def _range_from_args() -> DateRange:
        return DateRange.from_strings(request.args.get("start"), request.args.get("end"))

    @app.route("/api/payments", methods=["GET"], endpoint="list_payments")
    def list_payments():
        payments = service.list_payments(
            date_range=_range_from_args(),
            payment_type=request.args.get("type"),
            status=request.args.get("status"),
        )
        return jsonify({"success": True, "payments": to_json(list(payments))})

    @app.route("/api/payments", methods=["POST"], endpoint="create_payment")
    def create_payment():
        payment_id = service.create_payment(json_body())
        return jsonify({"success": True, "payment_id": payment_id}), 201

    @app.route("/api/payments/stats", methods=["GET"], endpoint="payment_stats")
    def payment_stats():
        return jsonify({"success": True, "stats": service.payment_stats(date_range=_range_from_args())})

    @app.route("/api/payments/<int:payment_id>", methods=["GET"], endpoint="get_payment")
    def get_payment(payment_id: int):
        return jsonify({"success": True, "payment": to_json(service.get_payment(payment_id))})

    @app.route("/api/payments/<int:payment_id>", methods=["PUT"], endpoint="update_payment")
    def update_payment(payment_id: int):
        service.update_payment(payment_id, json_body())
        return jsonify({"success": True})

    @app.route("/api/payments/<int:payment_id>", methods=["DELETE"], endpoint="delete_payment")
    def delete_payment(payment_id: int):
        service.delete_payment(payment_id)
        return jsonify({"success": True})

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard_summary")
    def dashboard_summary():
        return jsonify({"success": True, "summary": service.dashboard_summary(date_range=_range_from_args())})
