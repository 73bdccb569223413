from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from ..shifts.model import ShiftConfig
from .model import EmployeeDetails
from .repository import EmployeeDetailsRepository


def _money(value) -> Optional[float]:
    return float(value) if value is not None else None


class MySQLEmployeeDetailsRepository(EmployeeDetailsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, user_id: int) -> Optional[EmployeeDetails]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, hourly_rate, overtime_rate, position,
                       start_hour, start_minute, end_hour, end_minute
                FROM employee_details
                WHERE user_id=%s
                """,
                (user_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return EmployeeDetails(
                user_id=int(r["user_id"]),
                hourly_rate=_money(r.get("hourly_rate")),
                overtime_rate=_money(r.get("overtime_rate")),
                position=r.get("position"),
                shift=ShiftConfig.from_mapping(r),
            )

    def upsert(self, details: EmployeeDetails) -> None:
        shift = details.shift
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employee_details(
                    user_id, hourly_rate, overtime_rate, position,
                    start_hour, start_minute, end_hour, end_minute
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    hourly_rate=VALUES(hourly_rate),
                    overtime_rate=VALUES(overtime_rate),
                    position=VALUES(position),
                    start_hour=VALUES(start_hour),
                    start_minute=VALUES(start_minute),
                    end_hour=VALUES(end_hour),
                    end_minute=VALUES(end_minute)
                """,
                (
                    details.user_id,
                    details.hourly_rate,
                    details.overtime_rate,
                    details.position,
                    shift.start_hour,
                    shift.start_minute,
                    shift.end_hour,
                    shift.end_minute,
                ),
            )
