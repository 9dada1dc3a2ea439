from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_int, require_non_empty
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/absences", methods=["POST"], endpoint="absences_register")
    def absences_register():
        payload = request.get_json(silent=True) or {}
        try:
            work_date = parse_iso_date(require_non_empty(payload.get("date"), "date"))
        except ValueError as exc:
            raise ValidationError("date must be YYYY-MM-DD") from exc

        created_by = payload.get("createdBy")
        absence = container.absence_service.register(
            employee_id=require_int(payload.get("employeeId"), "employeeId"),
            work_date=work_date,
            absence_type=require_non_empty(payload.get("type"), "type"),
            description=payload.get("description"),
            created_by=require_int(created_by, "createdBy") if created_by is not None else None,
        )
        return jsonify(absence.to_dict()), 201

    @app.route("/api/absences/<int:employee_id>", methods=["GET"], endpoint="absences_list")
    def absences_list(employee_id: int):
        return jsonify([a.to_dict() for a in container.absence_service.list_for_employee(employee_id)])
