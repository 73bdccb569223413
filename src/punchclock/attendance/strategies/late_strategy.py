from __future__ import annotations

from datetime import datetime

from ...common.datetime_utils import at_clock_time
from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftConfig
from ..model import AttendanceResult
from .base import AttendanceStrategy


class LateClockOutStrategy(AttendanceStrategy):
    """Clock-out inside the grace period after shift end.

    The extra minutes are not credited: the record counts as leaving at shift end.
    """

    def decide(self, *, now: datetime, shift: ShiftConfig) -> AttendanceResult:
        return AttendanceResult(
            effective_timestamp=at_clock_time(now, shift.end_hour, shift.end_minute),
            status=AttendanceStatus.LATE,
        )
