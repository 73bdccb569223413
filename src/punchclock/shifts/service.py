from __future__ import annotations

from .model import ShiftConfig
from .repository import ShiftConfigRepository


class ShiftConfigService:
    """Use case: resolve the shift window used to classify clock actions."""

    def __init__(self, shifts: ShiftConfigRepository):
        self._shifts = shifts

    def get_shift_config(self, employee_id: int) -> ShiftConfig:
        return self._shifts.get_for_user(int(employee_id)) or ShiftConfig()
