from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, to_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.ledger_service

    # work records (contractual employees)
    @app.route("/api/employees/<int:employee_id>/work-records", methods=["GET"], endpoint="list_work_records")
    def list_work_records(employee_id: int):
        return jsonify({"success": True, "records": to_json(list(service.list_work_records(employee_id)))})

    @app.route("/api/employees/<int:employee_id>/work-records", methods=["POST"], endpoint="add_work_record")
    def add_work_record(employee_id: int):
        record_id = service.add_work_record(employee_id, json_body())
        return jsonify({"success": True, "record_id": record_id}), 201

    @app.route("/api/work-records/<int:record_id>", methods=["PUT"], endpoint="edit_work_record")
    def edit_work_record(record_id: int):
        service.edit_work_record(record_id, json_body())
        return jsonify({"success": True})

    @app.route("/api/work-records/<int:record_id>", methods=["DELETE"], endpoint="delete_work_record")
    def delete_work_record(record_id: int):
        service.delete_work_record(record_id)
        return jsonify({"success": True})

    # overtime (fixed employees)
    @app.route("/api/employees/<int:employee_id>/overtime-records", methods=["GET"], endpoint="list_overtime_records")
    def list_overtime_records(employee_id: int):
        return jsonify({"success": True, "records": to_json(list(service.list_overtime_records(employee_id)))})

    @app.route("/api/employees/<int:employee_id>/overtime-records", methods=["POST"], endpoint="add_overtime_record")
    def add_overtime_record(employee_id: int):
        record_id = service.add_overtime_record(employee_id, json_body())
        return jsonify({"success": True, "record_id": record_id}), 201

    @app.route("/api/overtime-records/<int:record_id>", methods=["PUT"], endpoint="edit_overtime_record")
    def edit_overtime_record(record_id: int):
        service.edit_overtime_record(record_id, json_body())
        return jsonify({"success": True})

    @app.route("/api/overtime-records/<int:record_id>", methods=["DELETE"], endpoint="delete_overtime_record")
    def delete_overtime_record(record_id: int):
        service.delete_overtime_record(record_id)
        return jsonify({"success": True})

    # salary payments
    @app.route("/api/employees/<int:employee_id>/salary-payments", methods=["GET"], endpoint="list_salary_payments")
    def list_salary_payments(employee_id: int):
        return jsonify({"success": True, "payments": to_json(list(service.list_salary_payments(employee_id)))})

    @app.route("/api/employees/<int:employee_id>/salary-payments", methods=["POST"], endpoint="add_salary_payment")
    def add_salary_payment(employee_id: int):
        payment_id = service.add_salary_payment(employee_id, json_body())
        return jsonify({"success": True, "payment_id": payment_id}), 201

    @app.route("/api/salary-payments/<int:payment_id>", methods=["PUT"], endpoint="edit_salary_payment")
    def edit_salary_payment(payment_id: int):
        service.edit_salary_payment(payment_id, json_body())
        return jsonify({"success": True})

    @app.route("/api/salary-payments/<int:payment_id>", methods=["DELETE"], endpoint="delete_salary_payment")
    def delete_salary_payment(payment_id: int):
        service.delete_salary_payment(payment_id)
        return jsonify({"success": True})

    # advances
    @app.route("/api/employees/<int:employee_id>/advances", methods=["GET"], endpoint="list_advances")
    def list_advances(employee_id: int):
        return jsonify({"success": True, "advances": to_json(list(service.list_advances(employee_id)))})

    @app.route("/api/employees/<int:employee_id>/advances", methods=["POST"], endpoint="add_advance")
    def add_advance(employee_id: int):
        advance_id = service.add_advance(employee_id, json_body())
        return jsonify({"success": True, "advance_id": advance_id}), 201

    @app.route("/api/advances/<int:advance_id>", methods=["DELETE"], endpoint="delete_advance")
    def delete_advance(advance_id: int):
        service.delete_advance(advance_id)
        return jsonify({"success": True})
