from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import RoleAssignment


class RoleAssignmentRepository(Protocol):
    def get(self, email: str) -> Optional[RoleAssignment]:
        raise NotImplementedError

    def upsert(self, *, email: str, role: Role, assigned_by: Optional[int]) -> None:
        raise NotImplementedError

    def delete(self, email: str) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[RoleAssignment]:
        raise NotImplementedError
