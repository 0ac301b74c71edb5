from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import now_utc
from ..core.constants import (
    MSG_EMAIL_EXISTS,
    MSG_EMPLOYEE_ADDED,
    MSG_EMPLOYEE_EXISTS,
    MSG_EMPLOYEE_ID_EXISTS,
    MSG_EMPLOYEE_ID_IMMUTABLE,
    MSG_EMPLOYEE_NOT_FOUND,
    MSG_EMPLOYEE_REMOVED,
    MSG_EMPLOYEE_UPDATED,
)
from ..core.exceptions import DuplicateKeyError
from ..core.outcome import Outcome
from .model import Employee
from .repository import AttendanceCleanup, EmployeeRepository
from .validator import validate_employee

logger = logging.getLogger(__name__)

_CONFLICT_MESSAGES = {
    "employeeId": MSG_EMPLOYEE_ID_EXISTS,
    "email": MSG_EMAIL_EXISTS,
}


def normalize_employee(payload: Mapping[str, Any]) -> dict:
    """Trim every field and lowercase the email. Assumes a validated payload."""
    return {
        "employee_id": payload["employeeId"].strip(),
        "full_name": payload["fullName"].strip(),
        "email": payload["email"].strip().lower(),
        "department": payload["department"].strip(),
    }


def _conflict(e: DuplicateKeyError) -> Outcome:
    return Outcome.conflict(_CONFLICT_MESSAGES.get(e.field or "", MSG_EMPLOYEE_EXISTS), field=e.field)


class EmployeeService:
    """Use cases of the employee directory."""

    def __init__(self, employees: EmployeeRepository, attendance: AttendanceCleanup):
        self._employees = employees
        self._attendance = attendance

    def list_employees(self) -> list[dict]:
        return [e.to_dict() for e in self._employees.list_all()]

    def add_employee(self, payload: Mapping[str, Any], *, now: Optional[datetime] = None) -> Outcome:
        error = validate_employee(payload)
        if error:
            return Outcome.invalid(error)

        # Normalize first so the unique indexes compare normalized values.
        employee = Employee(**normalize_employee(payload), created_at=now or now_utc())
        try:
            self._employees.insert(employee)
        except DuplicateKeyError as e:
            logger.info("Rejected employee %s: duplicate %s", employee.employee_id, e.field or e.key)
            return _conflict(e)

        logger.info("Added employee %s", employee.employee_id)
        return Outcome.success(MSG_EMPLOYEE_ADDED)

    def update_employee(self, employee_id: str, payload: Mapping[str, Any]) -> Outcome:
        error = validate_employee(payload)
        if error:
            return Outcome.invalid(error)

        fields = normalize_employee(payload)
        if fields["employee_id"] != employee_id:
            return Outcome.invalid(MSG_EMPLOYEE_ID_IMMUTABLE)

        try:
            updated = self._employees.update(
                employee_id,
                full_name=fields["full_name"],
                email=fields["email"],
                department=fields["department"],
            )
        except DuplicateKeyError as e:
            return _conflict(e)

        if not updated:
            return Outcome.not_found(MSG_EMPLOYEE_NOT_FOUND)
        return Outcome.success(MSG_EMPLOYEE_UPDATED)

    def remove_employee(self, employee_id: str) -> Outcome:
        """Delete the employee and cascade to its attendance records.

        The cascade runs even when no employee matched so orphans get cleaned
        up; a storage failure in either step propagates to the caller.
        """
        removed = self._employees.delete(employee_id)
        purged = self._attendance.delete_for_employee(employee_id)

        if not removed:
            if purged:
                logger.warning("Purged %d orphan attendance records for %s", purged, employee_id)
            return Outcome.not_found(MSG_EMPLOYEE_NOT_FOUND)

        logger.info("Removed employee %s (%d attendance records)", employee_id, purged)
        return Outcome.success(MSG_EMPLOYEE_REMOVED)
