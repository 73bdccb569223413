from __future__ import annotations

from datetime import datetime

from flask import Flask, jsonify, request

from ..common.web import admin_required, current_context, login_required, query_int
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/state", methods=["GET"], endpoint="attendance_state")
    @login_required
    def attendance_state():
        status = container.attendance_service.current_status(current_context())
        return jsonify(status.to_dict())

    @app.route("/api/attendance/clock", methods=["POST"], endpoint="attendance_clock")
    @login_required
    def attendance_clock():
        """Clock in or out. Without a ``type`` the next action is picked from the current state."""
        data = request.get_json(silent=True) or {}
        ctx = current_context()
        image_ref = data.get("image_ref")

        if data.get("type"):
            record = container.attendance_service.clock(ctx, data["type"], image_ref=image_ref)
        else:
            record = container.attendance_service.toggle(ctx, image_ref=image_ref)
        return jsonify({"success": True, "record": record.to_dict()}), 201

    @app.route("/api/attendance/history", methods=["GET"], endpoint="attendance_history")
    @login_required
    def attendance_history():
        rows = container.attendance_service.history(current_context(), limit=query_int("limit"))
        return jsonify([r.to_dict() for r in rows])

    @app.route("/api/admin/employees/<int:user_id>/attendance", methods=["GET"], endpoint="admin_employee_attendance")
    @admin_required
    def admin_employee_attendance(user_id: int):
        rows = container.attendance_service.employee_history(current_context(), user_id, limit=query_int("limit"))
        return jsonify([r.to_dict() for r in rows])

    @app.route("/api/events", methods=["GET"], endpoint="events_poll")
    @login_required
    def events_poll():
        """Poll for changes to the caller's records since an ISO timestamp."""
        ctx = current_context()
        since = request.args.get("since")
        after = None
        if since:
            if since.endswith("Z"):
                # Python 3.10 fromisoformat does not accept the "Z" suffix.
                since = since[:-1] + "+00:00"
            try:
                after = datetime.fromisoformat(since)
            except ValueError:
                raise ValidationError("since must be an ISO 8601 timestamp") from None
            if after.tzinfo is None:
                raise ValidationError("since must include a UTC offset")
        events = container.recent_events.since(ctx.user_id, after)
        return jsonify(
            [{"name": e.name, "occurred_at": e.occurred_at.isoformat(), "payload": e.payload} for e in events]
        )
