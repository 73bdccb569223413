from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.context import RequestContext
from ..common.datetime_utils import now_business
from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError
from ..events.bus import PAYSLIP_ISSUED, DomainEvent, EventBus
from ..users.repository import UserRepository
from .model import Payslip
from .repository import PayslipRepository

logger = logging.getLogger(__name__)


class PayslipService:
    """Use case: administrators issue payslips; employees read their own."""

    def __init__(self, payslips: PayslipRepository, users: UserRepository, *, events: Optional[EventBus] = None):
        self._payslips = payslips
        self._users = users
        self._events = events

    def issue(self, ctx: RequestContext, user_id: int, content: str, *, now: Optional[datetime] = None) -> Payslip:
        ctx.require_admin()
        content = require_non_empty(content, "Payslip content")

        if not self._users.get_by_id(int(user_id)):
            raise NotFoundError("Employee does not exist")

        payslip = self._payslips.create(
            user_id=int(user_id),
            content=content,
            sent_by=ctx.user_id,
            issued_at=now or now_business(),
        )
        logger.info("Payslip %s issued to user_id=%s by user_id=%s", payslip.payslip_id, payslip.user_id, ctx.user_id)
        if self._events:
            self._events.publish(DomainEvent(name=PAYSLIP_ISSUED, user_id=payslip.user_id, payload=payslip.to_dict()))
        return payslip

    def list_for_user(self, ctx: RequestContext) -> Sequence[Payslip]:
        return self._payslips.list_for_user(ctx.user_id)
