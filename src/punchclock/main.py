from __future__ import annotations

import importlib
import logging
from typing import Optional

import click
from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .common.web import register_error_handlers
from .config import get_settings_module
from .container import Container, build_container
from .core.constants import DEFAULT_HISTORY_LIMIT
from .database.bootstrap import apply_schema, list_tables
from .employees.controller import register as register_employees
from .payslips.controller import register as register_payslips
from .roles.controller import register as register_roles
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    db_config = getattr(settings, "DB_CONFIG")
    history_limit = int(getattr(settings, "HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT))

    if container is None:
        container = build_container(db_config=db_config, history_limit=history_limit)
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(container.conn)
            logger.debug("Schema ready (tables=%d)", len(list_tables(container.conn)))

    logger.info(
        "punchclock starting: settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    app.extensions["punchclock"] = container
    register_error_handlers(app)
    register_users(app, container)
    register_roles(app, container)
    register_attendance(app, container)
    register_employees(app, container)
    register_payslips(app, container)
    register_cli(app, container)

    return app


def register_cli(app: Flask, container: Container) -> None:
    @app.cli.command("init-db")
    def init_db():
        """Create the database and tables."""
        if container.conn is None:
            raise click.ClickException("No database connection configured")
        count = apply_schema(container.conn)
        click.echo(f"OK: applied {count} statements, tables={len(list_tables(container.conn))}")

    @app.cli.command("grant-role")
    @click.argument("email")
    @click.argument("role", type=click.Choice(["admin", "employee"]))
    def grant_role(email: str, role: str):
        """Grant ROLE to EMAIL (use this to create the first administrator)."""
        assignment = container.role_service.grant(email=email, role=role, assigned_by=None)
        click.echo(f"OK: {assignment.email} -> {assignment.role.value}")
