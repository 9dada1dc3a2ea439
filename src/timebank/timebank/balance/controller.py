from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/time-records/summary", methods=["GET"], endpoint="time_records_summary")
    def time_records_summary():
        employee_id = require_int(request.args.get("employeeId"), "employeeId")
        summary = container.balance_service.summary(
            employee_id,
            start=request.args.get("startDate"),
            end=request.args.get("endDate"),
            granularity=request.args.get("period"),
        )
        return jsonify(summary.to_dict(container.tz))
