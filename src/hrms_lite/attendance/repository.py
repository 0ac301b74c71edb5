from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class EmployeeLookup(Protocol):
    """Narrow view of the employee directory used for referential checks."""

    def exists(self, employee_id: str) -> bool:
        raise NotImplementedError


class AttendanceRepository(Protocol):
    """Repository interface for attendance records.

    Records are addressed by their natural key (employee_id, date), which
    implementations must keep unique, raising ``DuplicateKeyError`` on conflict.
    """

    def list_all(self) -> Sequence[AttendanceRecord]:
        """All records, newest date first, then newest ``created_at``."""
        raise NotImplementedError

    def get(self, employee_id: str, date: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def insert(self, record: AttendanceRecord) -> None:
        raise NotImplementedError

    def update(
        self,
        employee_id: str,
        date: str,
        *,
        new_employee_id: str,
        new_date: str,
        status: AttendanceStatus,
    ) -> bool:
        raise NotImplementedError

    def delete(self, employee_id: str, date: str) -> bool:
        raise NotImplementedError

    def delete_for_employee(self, employee_id: str) -> int:
        raise NotImplementedError
