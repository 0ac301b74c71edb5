from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Implementations must enforce uniqueness of ``employee_id`` and ``email``
    and raise ``DuplicateKeyError`` (with ``field`` set when known) on conflict.
    """

    def list_all(self) -> Sequence[Employee]:
        """All employees, newest ``created_at`` first."""
        raise NotImplementedError

    def exists(self, employee_id: str) -> bool:
        raise NotImplementedError

    def insert(self, employee: Employee) -> None:
        raise NotImplementedError

    def update(self, employee_id: str, *, full_name: str, email: str, department: str) -> bool:
        raise NotImplementedError

    def delete(self, employee_id: str) -> bool:
        raise NotImplementedError


class AttendanceCleanup(Protocol):
    """The part of the attendance ledger the directory needs for cascade deletes."""

    def delete_for_employee(self, employee_id: str) -> int:
        raise NotImplementedError
