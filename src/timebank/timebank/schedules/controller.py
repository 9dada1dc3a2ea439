from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/work-schedules/<int:employee_id>", methods=["PUT"], endpoint="work_schedule_set")
    def work_schedule_set(employee_id: int):
        payload = request.get_json(silent=True) or {}
        days = payload.get("days", payload.get("customDays"))
        if not isinstance(days, list):
            raise ValidationError("days must be a list of weekday entries")
        schedule = container.schedule_service.set_schedule(employee_id=employee_id, days=days)
        return jsonify(schedule.to_dict())

    @app.route("/api/work-schedules/<int:employee_id>", methods=["GET"], endpoint="work_schedule_get")
    def work_schedule_get(employee_id: int):
        return jsonify(container.schedule_service.get_schedule(employee_id).to_dict())
