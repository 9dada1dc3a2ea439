from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_int
from ..container import Container
from ..core.exceptions import ValidationError
from .model import Location


def _location(payload: dict):
    lat, lng = payload.get("latitude"), payload.get("longitude")
    if lat is None and lng is None:
        return None
    try:
        return Location(latitude=float(lat), longitude=float(lng))
    except (TypeError, ValueError) as exc:
        raise ValidationError("latitude and longitude must be numbers") from exc


def register(app: Flask, container: Container) -> None:
    def _payload() -> dict:
        return request.get_json(silent=True) or {}

    @app.route("/api/time-records/clock-in", methods=["POST"], endpoint="clock_in")
    def clock_in():
        payload = _payload()
        record = container.punch_service.clock_in(
            require_int(payload.get("employeeId"), "employeeId"),
            location=_location(payload),
        )
        return jsonify(record.to_dict(container.tz)), 201

    @app.route("/api/time-records/lunch-start", methods=["POST"], endpoint="lunch_start")
    def lunch_start():
        employee_id = require_int(_payload().get("employeeId"), "employeeId")
        return jsonify(container.punch_service.start_lunch(employee_id).to_dict(container.tz))

    @app.route("/api/time-records/lunch-end", methods=["POST"], endpoint="lunch_end")
    def lunch_end():
        employee_id = require_int(_payload().get("employeeId"), "employeeId")
        return jsonify(container.punch_service.end_lunch(employee_id).to_dict(container.tz))

    @app.route("/api/time-records/clock-out", methods=["POST"], endpoint="clock_out")
    def clock_out():
        employee_id = require_int(_payload().get("employeeId"), "employeeId")
        return jsonify(container.punch_service.clock_out(employee_id).to_dict(container.tz))

    @app.route("/api/time-records/today", methods=["GET"], endpoint="today_record")
    def today_record():
        employee_id = require_int(request.args.get("employeeId"), "employeeId")
        record = container.punch_service.today_record(employee_id)
        return jsonify(record.to_dict(container.tz) if record else None)
