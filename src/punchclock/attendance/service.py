from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Sequence

from ..common.context import RequestContext
from ..common.datetime_utils import now_business, to_business
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import ClockEventType, ClockState
from ..core.exceptions import NotFoundError, ValidationError
from ..events.bus import ATTENDANCE_RECORDED, DomainEvent, EventBus
from ..shifts.model import ShiftConfig
from ..shifts.service import ShiftConfigService
from ..users.repository import UserRepository
from .classifier import AttendanceClassifier, parse_event_type
from .model import AttendanceRecord, AttendanceResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClockStatus:
    state: ClockState
    last_record: Optional[AttendanceRecord]

    @property
    def next_event(self) -> ClockEventType:
        if self.state == ClockState.CLOCKED_IN:
            return ClockEventType.CLOCK_OUT
        return ClockEventType.CLOCK_IN

    def to_dict(self) -> dict:
        return {
            "state": self.state.value,
            "next_action": self.next_event.value,
            "last_record": self.last_record.to_dict() if self.last_record else None,
        }


def state_from_last(record: Optional[AttendanceRecord]) -> ClockState:
    if record and record.event_type == ClockEventType.CLOCK_IN:
        return ClockState.CLOCKED_IN
    return ClockState.CLOCKED_OUT


class AttendanceService:
    """Use case: clock in/out and read attendance history."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        users: UserRepository,
        shifts: ShiftConfigService,
        *,
        classifier: AttendanceClassifier | None = None,
        events: EventBus | None = None,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ):
        self._attendance = attendance
        self._users = users
        self._shifts = shifts
        self._classifier = classifier or AttendanceClassifier()
        self._events = events
        self._history_limit = int(history_limit)

    def get_shift_config(self, employee_id: int) -> ShiftConfig:
        return self._shifts.get_shift_config(employee_id)

    def classify(self, event_type: Any, now: datetime, shift_config: ShiftConfig) -> AttendanceResult:
        return self._classifier.classify(event_type, now, shift_config)

    def append_record(
        self,
        employee_id: int,
        result: AttendanceResult,
        image_ref: Optional[str],
        *,
        event_type: ClockEventType,
        raw_timestamp: datetime,
    ) -> AttendanceRecord:
        record = self._attendance.append(
            user_id=int(employee_id),
            event_type=event_type,
            raw_timestamp=raw_timestamp,
            result=result,
            image_ref=image_ref,
        )
        if self._events:
            self._events.publish(DomainEvent(name=ATTENDANCE_RECORDED, user_id=record.user_id, payload=record.to_dict()))
        return record

    def current_status(self, ctx: RequestContext) -> ClockStatus:
        last = self._attendance.get_last_for_user(ctx.user_id)
        return ClockStatus(state=state_from_last(last), last_record=last)

    def clock(
        self,
        ctx: RequestContext,
        event_type: Any,
        *,
        image_ref: Optional[str] = None,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        event = parse_event_type(event_type)
        if image_ref is not None and not isinstance(image_ref, str):
            raise ValidationError("image_ref must be a string")
        raw = to_business(now) if now else now_business()

        if not self._users.get_by_id(ctx.user_id):
            raise NotFoundError("User does not exist")

        status = self.current_status(ctx)
        if event != status.next_event:
            if event == ClockEventType.CLOCK_IN:
                raise ValidationError("You are already clocked in")
            raise ValidationError("You are not clocked in")

        shift = self.get_shift_config(ctx.user_id)
        result = self.classify(event, raw, shift)
        record = self.append_record(ctx.user_id, result, image_ref, event_type=event, raw_timestamp=raw)

        logger.info(
            "user_id=%s %s at %s -> %s (effective %s)",
            ctx.user_id,
            event.value,
            raw.isoformat(),
            result.status.value,
            result.effective_timestamp.isoformat(),
        )
        return record

    def toggle(self, ctx: RequestContext, *, image_ref: Optional[str] = None, now: datetime | None = None) -> AttendanceRecord:
        """Single-button flow: clock in when clocked out and vice versa."""
        return self.clock(ctx, self.current_status(ctx).next_event, image_ref=image_ref, now=now)

    def history(self, ctx: RequestContext, *, limit: int | None = None) -> Sequence[AttendanceRecord]:
        return self._attendance.get_recent_for_user(ctx.user_id, self._limit(limit))

    def employee_history(self, ctx: RequestContext, user_id: int, *, limit: int | None = None) -> Sequence[AttendanceRecord]:
        ctx.require_admin()
        if not self._users.get_by_id(int(user_id)):
            raise NotFoundError("Employee does not exist")
        return self._attendance.get_recent_for_user(int(user_id), self._limit(limit))

    def _limit(self, limit: int | None) -> int:
        if limit is None:
            return self._history_limit
        return max(1, min(int(limit), 500))
