from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftConfig
from ..model import AttendanceResult
from .base import AttendanceStrategy


class OnTimeStrategy(AttendanceStrategy):
    """Clock-in at/after shift start, or clock-out at/before shift end."""

    def decide(self, *, now: datetime, shift: ShiftConfig) -> AttendanceResult:
        return AttendanceResult(effective_timestamp=now, status=AttendanceStatus.ON_TIME)
