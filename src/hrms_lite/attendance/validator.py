from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.validators import first_missing, first_non_text, first_too_long
from ..core.constants import (
    MAX_DATE_LENGTH,
    MAX_EMPLOYEE_ID_LENGTH,
    MSG_ATTENDANCE_FIELD_TYPE,
    MSG_ATTENDANCE_REQUIRED,
    MSG_FIELD_TOO_LONG,
    MSG_INVALID_STATUS,
)
from ..core.enums import AttendanceStatus

ATTENDANCE_FIELDS = ("employeeId", "date", "status")
STATUS_VALUES = frozenset(s.value for s in AttendanceStatus)
FIELD_LIMITS = {
    "employeeId": MAX_EMPLOYEE_ID_LENGTH,
    "date": MAX_DATE_LENGTH,
}


def validate_attendance(payload: Mapping[str, Any]) -> Optional[str]:
    """Return an error message for an invalid attendance payload, else None."""
    if first_missing(payload, ATTENDANCE_FIELDS):
        return MSG_ATTENDANCE_REQUIRED
    if first_non_text(payload, ATTENDANCE_FIELDS):
        return MSG_ATTENDANCE_FIELD_TYPE
    too_long = first_too_long(payload, FIELD_LIMITS)
    if too_long:
        return MSG_FIELD_TOO_LONG.format(field=too_long, limit=FIELD_LIMITS[too_long])
    if payload["status"] not in STATUS_VALUES:
        return MSG_INVALID_STATUS
    return None
