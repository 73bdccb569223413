from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..shifts.model import ShiftConfig
from ..users.model import User


@dataclass(frozen=True)
class EmployeeDetails:
    """Domain entity: pay and schedule settings an administrator keeps per employee."""

    user_id: int
    hourly_rate: Optional[float] = None
    overtime_rate: Optional[float] = None
    position: Optional[str] = None
    shift: ShiftConfig = field(default_factory=ShiftConfig)

    def to_dict(self) -> dict:
        return {
            "hourly_rate": self.hourly_rate,
            "overtime_rate": self.overtime_rate,
            "position": self.position,
            "shift": self.shift.to_dict(),
        }


@dataclass(frozen=True)
class EmployeeView:
    """Read-model for the admin employee list."""

    user: User
    details: EmployeeDetails

    def to_dict(self) -> dict:
        out = self.user.to_public_dict()
        out.update(self.details.to_dict())
        return out
