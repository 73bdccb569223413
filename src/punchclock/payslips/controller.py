from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, current_context, json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payslips", methods=["GET"], endpoint="my_payslips")
    @login_required
    def my_payslips():
        items = container.payslip_service.list_for_user(current_context())
        return jsonify([p.to_dict() for p in items])

    @app.route("/api/admin/employees/<int:user_id>/payslips", methods=["POST"], endpoint="admin_issue_payslip")
    @admin_required
    def admin_issue_payslip(user_id: int):
        data = json_body()
        payslip = container.payslip_service.issue(current_context(), user_id, data.get("content", ""))
        return jsonify(payslip.to_dict()), 201
