from __future__ import annotations

from datetime import datetime, time

from ..core.constants import BUSINESS_TZ


def now_business() -> datetime:
    """Current instant in the business timezone.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(BUSINESS_TZ)


def to_business(value: datetime) -> datetime:
    """Express an instant in the business timezone.

    Naive datetimes are taken as business wall-clock time already.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=BUSINESS_TZ)
    return value.astimezone(BUSINESS_TZ)


def at_clock_time(day: datetime, hour: int, minute: int) -> datetime:
    """Same business-local date as ``day`` at hour:minute:00.000."""
    return datetime.combine(day.date(), time(hour=hour, minute=minute), tzinfo=day.tzinfo)

