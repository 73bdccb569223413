from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..common.datetime_utils import to_business
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, from_db_datetime, to_db_datetime
from .model import Payslip
from .repository import PayslipRepository


def _to_payslip(r: dict) -> Payslip:
    return Payslip(
        payslip_id=int(r["payslip_id"]),
        user_id=int(r["user_id"]),
        content=r["content"],
        sent_by=int(r["sent_by"]),
        issued_at=to_business(from_db_datetime(r["issued_at"])),
    )


class MySQLPayslipRepository(PayslipRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, user_id: int, content: str, sent_by: int, issued_at: datetime) -> Payslip:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payslips(user_id, content, sent_by, issued_at)
                VALUES(%s,%s,%s,%s)
                """,
                (user_id, content, sent_by, to_db_datetime(issued_at)),
            )
            return Payslip(
                payslip_id=int(cur.lastrowid),
                user_id=user_id,
                content=content,
                sent_by=sent_by,
                issued_at=to_business(issued_at),
            )

    def list_for_user(self, user_id: int) -> Sequence[Payslip]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT payslip_id, user_id, content, sent_by, issued_at
                FROM payslips
                WHERE user_id=%s
                ORDER BY issued_at DESC, payslip_id DESC
                """,
                (user_id,),
            )
            return [_to_payslip(r) for r in fetchall(cur)]
