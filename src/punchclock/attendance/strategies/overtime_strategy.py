from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftConfig
from ..model import AttendanceResult
from .base import AttendanceStrategy


class OvertimeStrategy(AttendanceStrategy):
    """Clock-out past the grace period: the actual time is credited as overtime."""

    def decide(self, *, now: datetime, shift: ShiftConfig) -> AttendanceResult:
        return AttendanceResult(effective_timestamp=now, status=AttendanceStatus.OVERTIME, is_overtime=True)
