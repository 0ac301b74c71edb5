from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common.datetime_utils import to_iso_utc


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Plain data object; ``employee_id`` is the external identifier, the storage
    primary key never appears here.
    """

    employee_id: str
    full_name: str
    email: str
    department: str
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "fullName": self.full_name,
            "email": self.email,
            "department": self.department,
            "createdAt": to_iso_utc(self.created_at),
        }
