from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, to_json
from ..container import Container
from ..core.constants import DEFAULT_SMS_LOG_LIMIT
from ..core.enums import MessageType


def register(app: Flask, container: Container) -> None:
    service = container.notification_service

    @app.route("/api/sms/send", methods=["POST"], endpoint="send_sms")
    def send_sms():
        data = json_body()
        result = service.send(
            data.get("phone"),
            data.get("message"),
            data.get("message_type") or data.get("type") or MessageType.CUSTOM,
        )
        if not result.delivered:
            return jsonify({"success": False, "message": result.error, "test_mode": result.test_mode}), 400
        return jsonify(
            {
                "success": True,
                "message": "SMS sent successfully",
                "message_id": result.message_id,
                "test_mode": result.test_mode,
            }
        )

    @app.route("/api/sms/logs", methods=["GET"], endpoint="sms_logs")
    def sms_logs():
        limit = request.args.get("limit", type=int) or DEFAULT_SMS_LOG_LIMIT
        return jsonify({"success": True, "logs": to_json(list(service.list_logs(limit)))})
