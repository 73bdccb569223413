from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, current_context, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/roles", methods=["GET"], endpoint="admin_roles")
    @admin_required
    def admin_roles():
        items = container.role_service.list_assignments(current_context())
        return jsonify([a.to_dict() for a in items])

    @app.route("/api/admin/roles/<string:email>", methods=["PUT"], endpoint="admin_assign_role")
    @admin_required
    def admin_assign_role(email: str):
        data = json_body()
        assignment = container.role_service.assign_role(current_context(), email=email, role=data.get("role"))
        return jsonify(assignment.to_dict())

    @app.route("/api/admin/roles/<string:email>", methods=["DELETE"], endpoint="admin_revoke_role")
    @admin_required
    def admin_revoke_role(email: str):
        container.role_service.revoke_role(current_context(), email=email)
        return jsonify({"success": True})
