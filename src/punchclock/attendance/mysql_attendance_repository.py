from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import to_business
from ..core.enums import AttendanceStatus, ClockEventType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, from_db_datetime, to_db_datetime
from .model import AttendanceRecord, AttendanceResult
from .repository import AttendanceRepository

_COLUMNS = """
    record_id, user_id, event_type, raw_timestamp, effective_timestamp,
    status, is_overtime, image_ref, created_at
"""


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=int(r["record_id"]),
        user_id=int(r["user_id"]),
        event_type=ClockEventType(r["event_type"]),
        raw_timestamp=to_business(from_db_datetime(r["raw_timestamp"])),
        effective_timestamp=to_business(from_db_datetime(r["effective_timestamp"])),
        status=AttendanceStatus(r["status"]),
        is_overtime=bool(r["is_overtime"]),
        image_ref=r.get("image_ref"),
        created_at=to_business(from_db_datetime(r["created_at"])),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_recent_for_user(self, user_id: int, limit: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE user_id=%s
                ORDER BY created_at DESC, record_id DESC
                LIMIT %s
                """,
                (user_id, int(limit)),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get_last_for_user(self, user_id: int) -> Optional[AttendanceRecord]:
        rows = self.get_recent_for_user(user_id, 1)
        return rows[0] if rows else None

    def append(
        self,
        *,
        user_id: int,
        event_type: ClockEventType,
        raw_timestamp: datetime,
        result: AttendanceResult,
        image_ref: Optional[str],
    ) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(
                    user_id, event_type, raw_timestamp, effective_timestamp, status, is_overtime, image_ref, created_at
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,UTC_TIMESTAMP(3))
                """,
                (
                    user_id,
                    event_type.value,
                    to_db_datetime(raw_timestamp),
                    to_db_datetime(result.effective_timestamp),
                    result.status.value,
                    int(result.is_overtime),
                    image_ref,
                ),
            )
            record_id = int(cur.lastrowid)
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records WHERE record_id=%s", (record_id,))
            return _to_record(fetchone(cur))
