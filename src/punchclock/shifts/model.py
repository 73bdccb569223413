from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Any, Mapping, Optional

from ..common.validators import require_int_in_range
from ..core.constants import DEFAULT_END_HOUR, DEFAULT_END_MINUTE, DEFAULT_START_HOUR, DEFAULT_START_MINUTE
from ..core.exceptions import ValidationError


def _component(value: Any, default: int, high: int) -> int:
    # Anything that is not a whole number in range falls back to the default.
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, float):
        if not value.is_integer():
            return default
        value = int(value)
    if isinstance(value, str):
        value = value.strip()
        if not value.isdigit():
            return default
        value = int(value)
    if not isinstance(value, int) or value < 0 or value > high:
        return default
    return value


@dataclass(frozen=True)
class ShiftConfig:
    """Domain entity: an employee's shift window in business-local clock time."""

    start_hour: int = DEFAULT_START_HOUR
    start_minute: int = DEFAULT_START_MINUTE
    end_hour: int = DEFAULT_END_HOUR
    end_minute: int = DEFAULT_END_MINUTE

    @property
    def start_time(self) -> time:
        return time(self.start_hour, self.start_minute)

    @property
    def end_time(self) -> time:
        return time(self.end_hour, self.end_minute)

    @classmethod
    def coerce(
        cls,
        *,
        start_hour: Any = None,
        start_minute: Any = None,
        end_hour: Any = None,
        end_minute: Any = None,
    ) -> "ShiftConfig":
        """Build a config from loosely typed stored values, defaulting bad components."""
        return cls(
            start_hour=_component(start_hour, DEFAULT_START_HOUR, 23),
            start_minute=_component(start_minute, DEFAULT_START_MINUTE, 59),
            end_hour=_component(end_hour, DEFAULT_END_HOUR, 23),
            end_minute=_component(end_minute, DEFAULT_END_MINUTE, 59),
        )

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "ShiftConfig":
        if not data:
            return cls()
        return cls.coerce(
            start_hour=data.get("start_hour"),
            start_minute=data.get("start_minute"),
            end_hour=data.get("end_hour"),
            end_minute=data.get("end_minute"),
        )

    @classmethod
    def validated(cls, *, start_hour: Any, start_minute: Any, end_hour: Any, end_minute: Any) -> "ShiftConfig":
        """Strict constructor used when an administrator configures a shift.

        Unlike :meth:`coerce`, bad values are rejected instead of defaulted,
        and the window must end after it starts.
        """
        config = cls(
            start_hour=require_int_in_range(start_hour, "Start hour", 0, 23),
            start_minute=require_int_in_range(start_minute, "Start minute", 0, 59),
            end_hour=require_int_in_range(end_hour, "End hour", 0, 23),
            end_minute=require_int_in_range(end_minute, "End minute", 0, 59),
        )
        if config.end_time <= config.start_time:
            raise ValidationError("Shift end time must be after the start time")
        return config

    def to_dict(self) -> dict:
        return {
            "start_hour": self.start_hour,
            "start_minute": self.start_minute,
            "end_hour": self.end_hour,
            "end_minute": self.end_minute,
        }

    def label(self) -> str:
        return f"{self.start_time.strftime('%H:%M')} - {self.end_time.strftime('%H:%M')}"
