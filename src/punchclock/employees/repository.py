from __future__ import annotations

from typing import Optional, Protocol

from .model import EmployeeDetails


class EmployeeDetailsRepository(Protocol):
    def get(self, user_id: int) -> Optional[EmployeeDetails]:
        raise NotImplementedError

    def upsert(self, details: EmployeeDetails) -> None:
        """Replace the stored row (latest write wins)."""

        raise NotImplementedError
