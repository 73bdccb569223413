from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from ...shifts.model import ShiftConfig
from ..model import AttendanceResult


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how a clock action is credited.

    ``now`` is always expressed in the business timezone.
    """

    @abstractmethod
    def decide(self, *, now: datetime, shift: ShiftConfig) -> AttendanceResult:
        raise NotImplementedError
