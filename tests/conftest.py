from __future__ import annotations

import pytest

from punchclock.container import wire_container
from punchclock.core.enums import Role
from punchclock.main import create_app
from tests.fakes import InMemoryAttendance, InMemoryDetails, InMemoryPayslips, InMemoryRoles, InMemoryUsers


@pytest.fixture
def container():
    details = InMemoryDetails()
    return wire_container(
        users_repo=InMemoryUsers(),
        roles_repo=InMemoryRoles(),
        shifts_repo=details,
        details_repo=details,
        attendance_repo=InMemoryAttendance(),
        payslips_repo=InMemoryPayslips(),
    )


@pytest.fixture
def app(container):
    app = create_app(container, settings_module="punchclock.config.testing")
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin(container):
    container.roles_repo.upsert(email="boss@example.com", role=Role.ADMIN, assigned_by=None)
    return container.users_repo.add(email="boss@example.com", full_name="Boss", password="admin123", role=Role.ADMIN)


@pytest.fixture
def employee(container):
    return container.users_repo.add(email="ana@example.com", full_name="Ana Cruz", password="secret1")

