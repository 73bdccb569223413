from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import ClockEventType
from .model import AttendanceRecord, AttendanceResult


class AttendanceRepository(Protocol):
    def get_recent_for_user(self, user_id: int, limit: int) -> Sequence[AttendanceRecord]:
        """Newest first."""

        raise NotImplementedError

    def get_last_for_user(self, user_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def append(
        self,
        *,
        user_id: int,
        event_type: ClockEventType,
        raw_timestamp: datetime,
        result: AttendanceResult,
        image_ref: Optional[str],
    ) -> AttendanceRecord:
        """Append-only write; records are never updated afterwards."""

        raise NotImplementedError
