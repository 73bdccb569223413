from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import to_business
from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, from_db_datetime
from .model import RoleAssignment
from .repository import RoleAssignmentRepository


def _to_assignment(r: dict) -> RoleAssignment:
    return RoleAssignment(
        email=r["email"],
        role=Role(r["role"]),
        assigned_by=r.get("assigned_by"),
        assigned_at=to_business(from_db_datetime(r["assigned_at"])),
    )


class MySQLRoleAssignmentRepository(RoleAssignmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, email: str) -> Optional[RoleAssignment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT email, role, assigned_by, assigned_at FROM role_assignments WHERE email=%s",
                (email,),
            )
            r = fetchone(cur)
            return _to_assignment(r) if r else None

    def upsert(self, *, email: str, role: Role, assigned_by: Optional[int]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO role_assignments(email, role, assigned_by, assigned_at)
                VALUES(%s,%s,%s,UTC_TIMESTAMP())
                ON DUPLICATE KEY UPDATE role=VALUES(role), assigned_by=VALUES(assigned_by), assigned_at=UTC_TIMESTAMP()
                """,
                (email, role.value, assigned_by),
            )

    def delete(self, email: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM role_assignments WHERE email=%s", (email,))
            return cur.rowcount > 0

    def list_all(self) -> Sequence[RoleAssignment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT email, role, assigned_by, assigned_at FROM role_assignments ORDER BY email")
            return [_to_assignment(r) for r in fetchall(cur)]
