from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..common.context import RequestContext
from ..common.validators import require_non_negative_number
from ..core.enums import Role
from ..core.exceptions import NotFoundError, ValidationError
from ..events.bus import EMPLOYEE_DETAILS_UPDATED, DomainEvent, EventBus
from ..shifts.model import ShiftConfig
from ..users.repository import UserRepository
from .model import EmployeeDetails, EmployeeView
from .repository import EmployeeDetailsRepository

logger = logging.getLogger(__name__)


def _merged_rate(value: Any, current: Optional[float], field_name: str) -> Optional[float]:
    # None keeps the stored rate; a blank string clears it.
    if value is None:
        return current
    if isinstance(value, str) and not value.strip():
        return None
    return round(require_non_negative_number(value, field_name), 2)


def _merged(value: Any, current: Any) -> Any:
    return current if value is None else value


class EmployeeService:
    """Use case: administrators manage pay rates, positions and shift windows."""

    def __init__(self, users: UserRepository, details: EmployeeDetailsRepository, *, events: Optional[EventBus] = None):
        self._users = users
        self._details = details
        self._events = events

    def _view(self, user) -> EmployeeView:
        return EmployeeView(user=user, details=self._details.get(user.user_id) or EmployeeDetails(user_id=user.user_id))

    def list_employees(self, ctx: RequestContext) -> Sequence[EmployeeView]:
        ctx.require_admin()
        return [self._view(u) for u in self._users.list_by_role(Role.EMPLOYEE)]

    def get_employee(self, ctx: RequestContext, user_id: int) -> EmployeeView:
        ctx.require_admin()
        user = self._users.get_by_id(int(user_id))
        if not user:
            raise NotFoundError("Employee does not exist")
        return self._view(user)

    def update_details(
        self,
        ctx: RequestContext,
        user_id: int,
        *,
        start_hour: Any = None,
        start_minute: Any = None,
        end_hour: Any = None,
        end_minute: Any = None,
        hourly_rate: Any = None,
        overtime_rate: Any = None,
        position: Optional[str] = None,
    ) -> EmployeeDetails:
        """Merge the given fields into the stored details.

        Arguments left as ``None`` keep their stored value (or the default
        shift component when nothing is stored yet).
        """
        view = self.get_employee(ctx, user_id)
        if view.user.role != Role.EMPLOYEE:
            raise ValidationError("Details can only be set for employees")
        current = view.details

        details = EmployeeDetails(
            user_id=view.user.user_id,
            hourly_rate=_merged_rate(hourly_rate, current.hourly_rate, "Hourly rate"),
            overtime_rate=_merged_rate(overtime_rate, current.overtime_rate, "Overtime rate"),
            position=current.position if position is None else (str(position).strip() or None),
            shift=ShiftConfig.validated(
                start_hour=_merged(start_hour, current.shift.start_hour),
                start_minute=_merged(start_minute, current.shift.start_minute),
                end_hour=_merged(end_hour, current.shift.end_hour),
                end_minute=_merged(end_minute, current.shift.end_minute),
            ),
        )
        self._details.upsert(details)
        logger.info(
            "Employee details for user_id=%s updated by user_id=%s (shift %s)",
            details.user_id,
            ctx.user_id,
            details.shift.label(),
        )
        if self._events:
            self._events.publish(DomainEvent(name=EMPLOYEE_DETAILS_UPDATED, user_id=details.user_id, payload=details.to_dict()))
        return details
