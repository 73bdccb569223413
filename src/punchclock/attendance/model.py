from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus, ClockEventType


@dataclass(frozen=True)
class AttendanceResult:
    """Outcome of classifying one clock action."""

    effective_timestamp: datetime
    status: AttendanceStatus
    is_overtime: bool = False


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one clock action. Immutable once written."""

    record_id: int
    user_id: int
    event_type: ClockEventType
    raw_timestamp: datetime
    effective_timestamp: datetime
    status: AttendanceStatus
    is_overtime: bool
    image_ref: Optional[str]
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "user_id": self.user_id,
            "type": self.event_type.value,
            "raw_timestamp": self.raw_timestamp.isoformat(),
            "effective_timestamp": self.effective_timestamp.isoformat(),
            "status": self.status.value,
            "is_overtime": self.is_overtime,
            "image_ref": self.image_ref,
            "created_at": self.created_at.isoformat(),
        }
