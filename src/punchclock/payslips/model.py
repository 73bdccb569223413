from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Payslip:
    """Domain entity: payslip text (or a link to a document) sent to an employee."""

    payslip_id: int
    user_id: int
    content: str
    sent_by: int
    issued_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.payslip_id,
            "user_id": self.user_id,
            "content": self.content,
            "sent_by": self.sent_by,
            "issued_at": self.issued_at.isoformat(),
            "period": self.issued_at.strftime("%B %Y"),
        }
