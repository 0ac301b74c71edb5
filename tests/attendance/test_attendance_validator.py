import pytest

from hrms_lite.attendance.validator import validate_attendance
from hrms_lite.core.constants import MSG_ATTENDANCE_REQUIRED, MSG_INVALID_STATUS

VALID = {"employeeId": "EMP-1", "date": "2024-01-01", "status": "Present"}


@pytest.mark.parametrize("status", ["Present", "Absent"])
def test_known_statuses_pass(status):
    assert validate_attendance({**VALID, "status": status}) is None


@pytest.mark.parametrize("field", ["employeeId", "date", "status"])
def test_missing_field_fails(field):
    payload = {k: v for k, v in VALID.items() if k != field}
    assert validate_attendance(payload) == MSG_ATTENDANCE_REQUIRED


@pytest.mark.parametrize("status", ["present", "Late", "PRESENT "])
def test_unknown_status_fails(status):
    assert validate_attendance({**VALID, "status": status}) == MSG_INVALID_STATUS


def test_date_is_not_interpreted():
    assert validate_attendance({**VALID, "date": "week 12"}) is None


@pytest.mark.parametrize("field, limit", [("employeeId", 64), ("date", 32)])
def test_values_up_to_column_width_pass(field, limit):
    assert validate_attendance({**VALID, field: "x" * limit}) is None


@pytest.mark.parametrize("field, limit", [("employeeId", 64), ("date", 32)])
def test_values_over_column_width_fail(field, limit):
    assert validate_attendance({**VALID, field: "x" * (limit + 1)}) == (
        f"{field} must be at most {limit} characters."
    )
