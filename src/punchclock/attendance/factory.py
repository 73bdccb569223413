from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common.datetime_utils import at_clock_time
from ..core.constants import OVERTIME_THRESHOLD_MINUTES
from ..shifts.model import ShiftConfig
from .strategies.base import AttendanceStrategy
from .strategies.early_strategy import EarlyClockInStrategy
from .strategies.late_strategy import LateClockOutStrategy
from .strategies.normal_strategy import OnTimeStrategy
from .strategies.overtime_strategy import OvertimeStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules.

    Comparisons against the shift window use hour/minute only; seconds are
    ignored, so 19:00:45 is not yet past a 19:00 shift end.
    """

    overtime_threshold_minutes: int = OVERTIME_THRESHOLD_MINUTES

    def for_clock_in(self, *, now: datetime, shift: ShiftConfig) -> AttendanceStrategy:
        if (now.hour, now.minute) < (shift.start_hour, shift.start_minute):
            return EarlyClockInStrategy()
        # Arriving after start is still credited as on time.
        return OnTimeStrategy()

    def for_clock_out(self, *, now: datetime, shift: ShiftConfig) -> AttendanceStrategy:
        if (now.hour, now.minute) <= (shift.end_hour, shift.end_minute):
            return OnTimeStrategy()

        shift_end = at_clock_time(now, shift.end_hour, shift.end_minute)
        diff_minutes = (now - shift_end).total_seconds() / 60
        if diff_minutes >= self.overtime_threshold_minutes:
            return OvertimeStrategy()
        return LateClockOutStrategy()
