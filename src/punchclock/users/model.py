from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: portal account.

    Note: plain data object (no DB access code).
    """

    user_id: int
    email: str
    full_name: str
    password_hash: str
    role: Role
    profile_pic_ref: Optional[str] = None
    is_active: bool = True

    def to_public_dict(self) -> dict:
        return {
            "id": self.user_id,
            "email": self.email,
            "full_name": self.full_name,
            "role": self.role.value,
            "profile_pic_ref": self.profile_pic_ref,
        }
