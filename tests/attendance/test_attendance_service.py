from __future__ import annotations

from datetime import timedelta

import pytest

from hrms_lite.attendance.service import AttendanceService
from hrms_lite.core.constants import MSG_ATTENDANCE_DUPLICATE, MSG_ATTENDANCE_NOT_FOUND, MSG_EMPLOYEE_NOT_FOUND
from hrms_lite.core.enums import AttendanceStatus, OutcomeKind


class StubLookup:
    """Answers existence checks from a fixed set; no directory needed."""

    def __init__(self, *known):
        self.known = set(known)
        self.calls = 0

    def exists(self, employee_id):
        self.calls += 1
        return employee_id in self.known


def mark(**overrides):
    data = {"employeeId": "EMP-1", "date": "2024-01-01", "status": "Present"}
    data.update(overrides)
    return data


@pytest.fixture
def svc(attendance_repo):
    return AttendanceService(attendance_repo, StubLookup("EMP-1", "EMP-2"))


def test_record_for_known_employee(svc, attendance_repo, fixed_now):
    outcome = svc.record_attendance(mark(employeeId=" EMP-1 "), now=fixed_now)

    assert outcome.ok
    rec = attendance_repo.get("EMP-1", "2024-01-01")
    assert rec.status == AttendanceStatus.PRESENT
    assert rec.created_at == fixed_now


def test_record_invalid_status_is_validation_error(svc, attendance_repo):
    outcome = svc.record_attendance(mark(status="Late"))

    assert outcome.kind == OutcomeKind.VALIDATION_ERROR
    assert attendance_repo.list_all() == []


def test_record_unknown_employee_is_not_found_and_writes_nothing(attendance_repo):
    svc = AttendanceService(attendance_repo, StubLookup())

    outcome = svc.record_attendance(mark())

    assert outcome.kind == OutcomeKind.NOT_FOUND
    assert outcome.message == MSG_EMPLOYEE_NOT_FOUND
    assert attendance_repo.list_all() == []


def test_second_mark_same_day_conflicts_other_day_succeeds(svc):
    assert svc.record_attendance(mark()).ok

    dup = svc.record_attendance(mark(status="Absent"))
    other_day = svc.record_attendance(mark(date="2024-01-02"))

    assert dup.kind == OutcomeKind.CONFLICT
    assert dup.message == MSG_ATTENDANCE_DUPLICATE
    assert other_day.ok


def test_write_is_undone_when_employee_disappears_mid_record(attendance_repo):
    class VanishingLookup:
        def __init__(self):
            self.answers = [True, False]

        def exists(self, employee_id):
            return self.answers.pop(0)

    svc = AttendanceService(attendance_repo, VanishingLookup())

    outcome = svc.record_attendance(mark())

    assert outcome.kind == OutcomeKind.NOT_FOUND
    assert attendance_repo.count_for("EMP-1") == 0


def test_list_orders_by_date_then_created_at(svc, fixed_now):
    svc.record_attendance(mark(date="2024-01-01"), now=fixed_now)
    svc.record_attendance(mark(employeeId="EMP-2", date="2024-01-02"), now=fixed_now)
    svc.record_attendance(mark(date="2024-01-02"), now=fixed_now + timedelta(minutes=5))

    rows = svc.list_attendance()

    assert [(r["employeeId"], r["date"]) for r in rows] == [
        ("EMP-1", "2024-01-02"),
        ("EMP-2", "2024-01-02"),
        ("EMP-1", "2024-01-01"),
    ]
    assert rows[0] == {
        "employeeId": "EMP-1",
        "date": "2024-01-02",
        "status": "Present",
        "createdAt": "2024-01-01T09:05:00.000Z",
    }


def test_update_changes_status_and_keeps_created_at(svc, attendance_repo, fixed_now):
    svc.record_attendance(mark(), now=fixed_now)

    outcome = svc.update_attendance("EMP-1", "2024-01-01", mark(status="Absent"))

    assert outcome.ok
    rec = attendance_repo.get("EMP-1", "2024-01-01")
    assert rec.status == AttendanceStatus.ABSENT
    assert rec.created_at == fixed_now


def test_update_revalidates_payload(svc):
    svc.record_attendance(mark())

    assert svc.update_attendance("EMP-1", "2024-01-01", mark(status="")).kind == OutcomeKind.VALIDATION_ERROR


def test_update_unknown_handle_is_not_found(svc):
    outcome = svc.update_attendance("EMP-1", "1999-01-01", mark())

    assert outcome.kind == OutcomeKind.NOT_FOUND
    assert outcome.message == MSG_ATTENDANCE_NOT_FOUND


def test_update_to_unknown_employee_is_not_found(svc):
    svc.record_attendance(mark())

    outcome = svc.update_attendance("EMP-1", "2024-01-01", mark(employeeId="NOPE"))

    assert outcome.kind == OutcomeKind.NOT_FOUND
    assert outcome.message == MSG_EMPLOYEE_NOT_FOUND


def test_update_onto_occupied_date_conflicts(svc):
    svc.record_attendance(mark())
    svc.record_attendance(mark(date="2024-01-02"))

    outcome = svc.update_attendance("EMP-1", "2024-01-02", mark(date="2024-01-01"))

    assert outcome.kind == OutcomeKind.CONFLICT


def test_delete_by_handle(svc, attendance_repo):
    svc.record_attendance(mark())

    assert svc.delete_attendance("EMP-1", "2024-01-01").ok
    assert svc.delete_attendance("EMP-1", "2024-01-01").kind == OutcomeKind.NOT_FOUND
    assert attendance_repo.list_all() == []


def test_moved_record_is_dropped_when_new_owner_disappears(attendance_repo, make_record):
    class VanishingLookup:
        def __init__(self):
            self.answers = [True, False]

        def exists(self, employee_id):
            return self.answers.pop(0)

    attendance_repo.insert(make_record("EMP-1"))
    svc = AttendanceService(attendance_repo, VanishingLookup())

    outcome = svc.update_attendance("EMP-1", "2024-01-01", mark(employeeId="EMP-2"))

    assert outcome.kind == OutcomeKind.NOT_FOUND
    assert outcome.message == MSG_EMPLOYEE_NOT_FOUND
    assert attendance_repo.count_for("EMP-2") == 0


def test_move_to_other_employee_checks_owner_after_write(attendance_repo, make_record):
    lookup = StubLookup("EMP-1", "EMP-2")
    attendance_repo.insert(make_record("EMP-1"))
    svc = AttendanceService(attendance_repo, lookup)

    outcome = svc.update_attendance("EMP-1", "2024-01-01", mark(employeeId="EMP-2"))

    assert outcome.ok
    assert lookup.calls == 2
    assert attendance_repo.get("EMP-2", "2024-01-01") is not None
