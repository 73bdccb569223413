from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, current_context, json_body
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/employees", methods=["GET"], endpoint="admin_employees")
    @admin_required
    def admin_employees():
        views = container.employee_service.list_employees(current_context())
        return jsonify([v.to_dict() for v in views])

    @app.route("/api/admin/employees/<int:user_id>/details", methods=["PUT"], endpoint="admin_employee_details")
    @admin_required
    def admin_employee_details(user_id: int):
        data = json_body()
        shift = data.get("shift") or {}
        if not isinstance(shift, dict):
            raise ValidationError("shift must be an object")
        details = container.employee_service.update_details(
            current_context(),
            user_id,
            hourly_rate=data.get("hourly_rate"),
            overtime_rate=data.get("overtime_rate"),
            position=data.get("position"),
            start_hour=shift.get("start_hour"),
            start_minute=shift.get("start_minute"),
            end_hour=shift.get("end_hour"),
            end_minute=shift.get("end_minute"),
        )
        return jsonify(details.to_dict())
