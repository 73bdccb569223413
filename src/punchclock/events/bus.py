from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, DefaultDict, List

from ..common.datetime_utils import now_business

logger = logging.getLogger(__name__)

ATTENDANCE_RECORDED = "attendance.recorded"
PAYSLIP_ISSUED = "payslip.issued"
EMPLOYEE_DETAILS_UPDATED = "employee.details_updated"
PROFILE_UPDATED = "user.profile_updated"

WILDCARD = "*"


@dataclass(frozen=True)
class DomainEvent:
    name: str
    user_id: int
    payload: dict = field(default_factory=dict)
    occurred_at: datetime = field(default_factory=now_business)


Handler = Callable[[DomainEvent], Any]


class EventBus:
    """In-process change notification channel.

    Services publish after their write has committed. Handlers run
    synchronously; a failing handler is logged and does not undo the write
    or stop the remaining handlers.
    """

    def __init__(self) -> None:
        self._handlers: DefaultDict[str, List[Handler]] = defaultdict(list)

    def subscribe(self, name: str, handler: Handler) -> Callable[[], None]:
        self._handlers[name].append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers[name]:
                self._handlers[name].remove(handler)

        return unsubscribe

    def publish(self, event: DomainEvent) -> None:
        handlers = list(self._handlers.get(event.name, ())) + list(self._handlers.get(WILDCARD, ()))
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception("Event handler failed for %s (user_id=%s)", event.name, event.user_id)


class RecentEvents:
    """Bounded per-user buffer of published events, read by the polling endpoint."""

    def __init__(self, *, max_per_user: int = 100):
        self._max = int(max_per_user)
        self._by_user: DefaultDict[int, List[DomainEvent]] = defaultdict(list)

    def __call__(self, event: DomainEvent) -> None:
        items = self._by_user[event.user_id]
        items.append(event)
        del items[: -self._max]

    def since(self, user_id: int, after: datetime | None = None) -> List[DomainEvent]:
        items = self._by_user.get(user_id, [])
        if after is None:
            return list(items)
        return [e for e in items if e.occurred_at > after]
