from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for authorization."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class ClockEventType(str, Enum):
    """Kind of clock action a user performs."""

    CLOCK_IN = "clockIn"
    CLOCK_OUT = "clockOut"


class AttendanceStatus(str, Enum):
    """Status label stored with every attendance record."""

    ON_TIME = "onTime"
    EARLY = "early"
    LATE = "late"
    OVERTIME = "overtime"


class ClockState(str, Enum):
    CLOCKED_IN = "clockedIn"
    CLOCKED_OUT = "clockedOut"
