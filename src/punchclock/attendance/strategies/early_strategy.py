from __future__ import annotations

from datetime import datetime

from ...common.datetime_utils import at_clock_time
from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftConfig
from ..model import AttendanceResult
from .base import AttendanceStrategy


class EarlyClockInStrategy(AttendanceStrategy):
    """Clock-in before shift start: credited from the start of the shift."""

    def decide(self, *, now: datetime, shift: ShiftConfig) -> AttendanceResult:
        return AttendanceResult(
            effective_timestamp=at_clock_time(now, shift.start_hour, shift.start_minute),
            status=AttendanceStatus.EARLY,
        )
