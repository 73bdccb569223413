from __future__ import annotations

from typing import Optional, Protocol

from .model import ShiftConfig


class ShiftConfigRepository(Protocol):
    def get_for_user(self, user_id: int) -> Optional[ShiftConfig]:
        """Stored shift window for a user, or None when never configured."""

        raise NotImplementedError
