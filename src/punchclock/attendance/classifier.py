"""Attendance status classification.

Turns a clock action into the timestamp credited for payroll and a status
label, using the employee's shift window in the business timezone:

* clock-in before shift start is ``early`` and credited from shift start;
  any later clock-in is ``onTime``;
* clock-out at or before shift end is ``onTime``;
* clock-out within the grace period after shift end is ``late`` and
  credited at shift end;
* clock-out at or past the overtime threshold is ``overtime`` and credited
  at the actual time.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional, Union

from ..common.datetime_utils import to_business
from ..core.enums import ClockEventType
from ..core.exceptions import InvalidArgument
from ..shifts.model import ShiftConfig
from .factory import AttendanceStrategyFactory
from .model import AttendanceResult

ShiftLike = Union[ShiftConfig, Mapping[str, Any], None]


def parse_event_type(value: Any) -> ClockEventType:
    if isinstance(value, ClockEventType):
        return value
    try:
        return ClockEventType(value)
    except ValueError:
        raise InvalidArgument(f"Unsupported clock event type: {value!r}") from None


def _as_shift(shift_config: ShiftLike) -> ShiftConfig:
    if isinstance(shift_config, ShiftConfig):
        return shift_config
    return ShiftConfig.from_mapping(shift_config)


class AttendanceClassifier:
    """Pure, stateless classifier. Safe to share between requests."""

    def __init__(self, strategy_factory: Optional[AttendanceStrategyFactory] = None):
        self._factory = strategy_factory or AttendanceStrategyFactory()

    def classify(self, event_type: Any, now: datetime, shift_config: ShiftLike = None) -> AttendanceResult:
        event = parse_event_type(event_type)
        if not isinstance(now, datetime):
            raise InvalidArgument("now must be a datetime")

        local_now = to_business(now)
        shift = _as_shift(shift_config)

        if event == ClockEventType.CLOCK_IN:
            strategy = self._factory.for_clock_in(now=local_now, shift=shift)
        else:
            strategy = self._factory.for_clock_out(now=local_now, shift=shift)
        return strategy.decide(now=local_now, shift=shift)


_default_classifier = AttendanceClassifier()


def classify(event_type: Any, now: datetime, shift_config: ShiftLike = None) -> AttendanceResult:
    """Module-level shortcut for :meth:`AttendanceClassifier.classify`."""
    return _default_classifier.classify(event_type, now, shift_config)
