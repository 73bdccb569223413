from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..common.context import RequestContext
from ..common.validators import require_email
from ..core.enums import Role
from ..core.exceptions import NotFoundError, ValidationError
from ..users.repository import UserRepository
from .model import RoleAssignment
from .repository import RoleAssignmentRepository

logger = logging.getLogger(__name__)


def parse_role(value: Any) -> Role:
    try:
        return Role(value)
    except ValueError:
        raise ValidationError("Role is not valid") from None


class RoleService:
    """Use case: auditable role assignment (admin).

    Every grant records who made it. An existing account's role is updated
    together with the assignment row.
    """

    def __init__(self, roles: RoleAssignmentRepository, users: UserRepository):
        self._roles = roles
        self._users = users

    def list_assignments(self, ctx: RequestContext) -> Sequence[RoleAssignment]:
        ctx.require_admin()
        return self._roles.list_all()

    def assign_role(self, ctx: RequestContext, *, email: str, role: Any) -> RoleAssignment:
        ctx.require_admin()
        me = self._users.get_by_id(ctx.user_id)
        if me and me.email == str(email or "").strip().lower():
            raise ValidationError("You cannot change your own role")
        return self.grant(email=email, role=role, assigned_by=ctx.user_id)

    def revoke_role(self, ctx: RequestContext, *, email: str) -> None:
        ctx.require_admin()
        email = require_email(email)

        user = self._users.get_by_email(email)
        if user and user.user_id == ctx.user_id:
            raise ValidationError("You cannot revoke your own role")

        if not self._roles.delete(email):
            raise NotFoundError("No role assignment for this email")
        if user and user.role != Role.EMPLOYEE:
            self._users.set_role(user.user_id, Role.EMPLOYEE)
        logger.info("Role assignment for %s revoked by user_id=%s", email, ctx.user_id)

    def grant(self, *, email: str, role: Any, assigned_by: Optional[int]) -> RoleAssignment:
        """Unchecked grant, also used by the ``grant-role`` CLI command."""
        email = require_email(email)
        role = parse_role(role)

        self._roles.upsert(email=email, role=role, assigned_by=assigned_by)
        user = self._users.get_by_email(email)
        if user and user.role != role:
            self._users.set_role(user.user_id, role)

        logger.info("Role %s granted to %s by user_id=%s", role.value, email, assigned_by)
        assignment = self._roles.get(email)
        if assignment is None:
            raise ValidationError("Role assignment was not saved")
        return assignment
