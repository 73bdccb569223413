from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import Payslip


class PayslipRepository(Protocol):
    def create(self, *, user_id: int, content: str, sent_by: int, issued_at: datetime) -> Payslip:
        raise NotImplementedError

    def list_for_user(self, user_id: int) -> Sequence[Payslip]:
        """Newest first."""

        raise NotImplementedError
