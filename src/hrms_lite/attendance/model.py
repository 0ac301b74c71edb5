from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common.datetime_utils import to_iso_utc
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark per employee per date."""

    employee_id: str
    date: str
    status: AttendanceStatus
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "date": self.date,
            "status": self.status.value,
            "createdAt": to_iso_utc(self.created_at),
        }
