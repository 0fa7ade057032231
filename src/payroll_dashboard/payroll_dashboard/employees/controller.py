from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, to_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        employees = service.list_employees(employee_type=request.args.get("type"))
        return jsonify({"success": True, "employees": to_json(list(employees))})

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        employee_id = service.add_employee(json_body())
        return jsonify({"success": True, "employee_id": employee_id}), 201

    @app.route("/api/employees/stats", methods=["GET"], endpoint="employee_stats")
    def employee_stats():
        return jsonify({"success": True, "stats": service.employee_stats()})

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: int):
        return jsonify({"success": True, "employee": to_json(service.get_employee(employee_id))})

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="edit_employee")
    def edit_employee(employee_id: int):
        service.edit_employee(employee_id, json_body())
        return jsonify({"success": True})

    @app.route("/api/employees/<int:employee_id>/status", methods=["POST"], endpoint="set_employee_status")
    def set_employee_status(employee_id: int):
        service.set_status(employee_id, json_body().get("status"))
        return jsonify({"success": True})

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: int):
        service.delete_employee(employee_id)
        return jsonify({"success": True})
