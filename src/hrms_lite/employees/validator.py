from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.validators import first_missing, first_non_text, first_too_long, is_valid_email
from ..core.constants import (
    MAX_EMPLOYEE_ID_LENGTH,
    MAX_TEXT_LENGTH,
    MSG_EMPLOYEE_FIELD_TYPE,
    MSG_EMPLOYEE_REQUIRED,
    MSG_FIELD_TOO_LONG,
    MSG_INVALID_EMAIL,
)

EMPLOYEE_FIELDS = ("employeeId", "fullName", "email", "department")
FIELD_LIMITS = {
    "employeeId": MAX_EMPLOYEE_ID_LENGTH,
    "fullName": MAX_TEXT_LENGTH,
    "email": MAX_TEXT_LENGTH,
    "department": MAX_TEXT_LENGTH,
}


def validate_employee(payload: Mapping[str, Any]) -> Optional[str]:
    """Return an error message for an invalid employee payload, else None."""
    if first_missing(payload, EMPLOYEE_FIELDS):
        return MSG_EMPLOYEE_REQUIRED
    if first_non_text(payload, EMPLOYEE_FIELDS):
        return MSG_EMPLOYEE_FIELD_TYPE
    too_long = first_too_long(payload, FIELD_LIMITS)
    if too_long:
        return MSG_FIELD_TOO_LONG.format(field=too_long, limit=FIELD_LIMITS[too_long])
    if not is_valid_email(payload["email"]):
        return MSG_INVALID_EMAIL
    return None
