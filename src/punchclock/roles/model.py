from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class RoleAssignment:
    """An administrator-managed grant of a role to an email address."""

    email: str
    role: Role
    assigned_by: Optional[int]
    assigned_at: datetime

    def to_dict(self) -> dict:
        return {
            "email": self.email,
            "role": self.role.value,
            "assigned_by": self.assigned_by,
            "assigned_at": self.assigned_at.isoformat(),
        }
