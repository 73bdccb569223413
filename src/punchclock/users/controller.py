from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import current_context, json_body, login_required
from ..container import Container
from .service import SessionUser


def _start_session(user: SessionUser) -> None:
    session.clear()
    session["user_id"] = user.user_id


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/register", methods=["POST"], endpoint="register")
    def register_account():
        data = json_body()
        user = container.auth_service.register(
            email=data.get("email", ""),
            password=data.get("password", ""),
            full_name=data.get("full_name", ""),
        )
        _start_session(user)
        return jsonify({"success": True, "user": {"id": user.user_id, "role": user.role.value}}), 201

    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        user = container.auth_service.authenticate(data.get("email", ""), data.get("password", ""))
        _start_session(user)
        return jsonify({"success": True, "user": {"id": user.user_id, "role": user.role.value}})

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/api/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        user = container.user_service.get_profile(current_context())
        return jsonify(user.to_public_dict())

    @app.route("/api/me/profile-picture", methods=["PUT"], endpoint="me_profile_picture")
    @login_required
    def me_profile_picture():
        data = json_body()
        user = container.user_service.update_profile_picture(current_context(), data.get("image_ref", ""))
        return jsonify(user.to_public_dict())
