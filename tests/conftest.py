from __future__ import annotations

from datetime import datetime
from typing import Optional

import pytest

from config import testing as testing_settings
from hrms_lite.attendance.model import AttendanceRecord
from hrms_lite.container import wire
from hrms_lite.core.enums import AttendanceStatus
from hrms_lite.core.exceptions import DuplicateKeyError, StorageError
from hrms_lite.employees.model import Employee
from hrms_lite.main import create_app


class InMemoryEmployees:
    """Employee store enforcing the same unique keys as the MySQL schema."""

    def __init__(self):
        self._by_id: dict[str, tuple[int, Employee]] = {}
        self._seq = 0

    def list_all(self):
        rows = sorted(self._by_id.values(), key=lambda t: (t[1].created_at, t[0]), reverse=True)
        return [e for _, e in rows]

    def stored(self, employee_id: str) -> Optional[Employee]:
        row = self._by_id.get(employee_id)
        return row[1] if row else None

    def exists(self, employee_id: str) -> bool:
        return employee_id in self._by_id

    def _email_taken(self, email: str, *, except_id: Optional[str] = None) -> bool:
        return any(e.email == email and eid != except_id for eid, (_, e) in self._by_id.items())

    def insert(self, employee: Employee) -> None:
        if employee.employee_id in self._by_id:
            raise DuplicateKeyError("uq_employees_employee_id", field="employeeId")
        if self._email_taken(employee.email):
            raise DuplicateKeyError("uq_employees_email", field="email")
        self._seq += 1
        self._by_id[employee.employee_id] = (self._seq, employee)

    def update(self, employee_id: str, *, full_name: str, email: str, department: str) -> bool:
        row = self._by_id.get(employee_id)
        if not row:
            return False
        if self._email_taken(email, except_id=employee_id):
            raise DuplicateKeyError("uq_employees_email", field="email")
        seq, old = row
        self._by_id[employee_id] = (
            seq,
            Employee(
                employee_id=employee_id,
                full_name=full_name,
                email=email,
                department=department,
                created_at=old.created_at,
            ),
        )
        return True

    def delete(self, employee_id: str) -> bool:
        return self._by_id.pop(employee_id, None) is not None


class InMemoryAttendance:
    """Attendance store keyed by (employee_id, date) like the unique index."""

    def __init__(self):
        self._by_key: dict[tuple[str, str], tuple[int, AttendanceRecord]] = {}
        self._seq = 0

    def list_all(self):
        rows = sorted(self._by_key.values(), key=lambda t: (t[1].date, t[1].created_at, t[0]), reverse=True)
        return [r for _, r in rows]

    def get(self, employee_id: str, date: str) -> Optional[AttendanceRecord]:
        row = self._by_key.get((employee_id, date))
        return row[1] if row else None

    def insert(self, record: AttendanceRecord) -> None:
        key = (record.employee_id, record.date)
        if key in self._by_key:
            raise DuplicateKeyError("uq_attendance_employee_date", field="date")
        self._seq += 1
        self._by_key[key] = (self._seq, record)

    def update(self, employee_id, date, *, new_employee_id, new_date, status) -> bool:
        row = self._by_key.get((employee_id, date))
        if not row:
            return False
        new_key = (new_employee_id, new_date)
        if new_key != (employee_id, date) and new_key in self._by_key:
            raise DuplicateKeyError("uq_attendance_employee_date", field="date")
        seq, old = self._by_key.pop((employee_id, date))
        self._by_key[new_key] = (
            seq,
            AttendanceRecord(employee_id=new_employee_id, date=new_date, status=status, created_at=old.created_at),
        )
        return True

    def delete(self, employee_id: str, date: str) -> bool:
        return self._by_key.pop((employee_id, date), None) is not None

    def delete_for_employee(self, employee_id: str) -> int:
        keys = [k for k in self._by_key if k[0] == employee_id]
        for k in keys:
            del self._by_key[k]
        return len(keys)

    def count_for(self, employee_id: str) -> int:
        return sum(1 for k in self._by_key if k[0] == employee_id)


class BrokenStorage:
    """Every call fails the way an unreachable database does."""

    def __getattr__(self, name):
        def fail(*args, **kwargs):
            raise StorageError(f"connection refused during {name}")

        return fail


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 1, 9, 0, 0)


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees()


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def container(employees_repo, attendance_repo):
    return wire(employees_repo, attendance_repo)


@pytest.fixture
def client(container):
    app = create_app(container=container, settings=testing_settings)
    return app.test_client()


@pytest.fixture
def broken_client():
    storage = BrokenStorage()
    app = create_app(container=wire(storage, storage), settings=testing_settings)
    return app.test_client()


@pytest.fixture
def make_employee(fixed_now):
    def _make(employee_id: str = "EMP-1", email: str = "a@b.com", **kwargs) -> Employee:
        return Employee(
            employee_id=employee_id,
            full_name=kwargs.get("full_name", "A B"),
            email=email,
            department=kwargs.get("department", "Eng"),
            created_at=kwargs.get("created_at", fixed_now),
        )

    return _make


@pytest.fixture
def make_record(fixed_now):
    def _make(employee_id: str = "EMP-1", date: str = "2024-01-01", status=AttendanceStatus.PRESENT, **kwargs):
        return AttendanceRecord(
            employee_id=employee_id,
            date=date,
            status=status,
            created_at=kwargs.get("created_at", fixed_now),
        )

    return _make
