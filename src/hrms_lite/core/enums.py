from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Allowed attendance statuses, stored exactly as written here."""

    PRESENT = "Present"
    ABSENT = "Absent"


class OutcomeKind(str, Enum):
    """Result kinds a service operation can produce for expected conditions."""

    OK = "ok"
    VALIDATION_ERROR = "validation_error"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
