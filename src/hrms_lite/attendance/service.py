from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import now_utc
from ..core.constants import (
    MSG_ATTENDANCE_DELETED,
    MSG_ATTENDANCE_DUPLICATE,
    MSG_ATTENDANCE_NOT_FOUND,
    MSG_ATTENDANCE_RECORDED,
    MSG_ATTENDANCE_UPDATED,
    MSG_EMPLOYEE_NOT_FOUND,
)
from ..core.enums import AttendanceStatus
from ..core.exceptions import DuplicateKeyError
from ..core.outcome import Outcome
from .model import AttendanceRecord
from .repository import AttendanceRepository, EmployeeLookup
from .validator import validate_attendance

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases of the attendance ledger."""

    def __init__(self, attendance: AttendanceRepository, employees: EmployeeLookup):
        self._attendance = attendance
        self._employees = employees

    def list_attendance(self) -> list[dict]:
        return [r.to_dict() for r in self._attendance.list_all()]

    def record_attendance(self, payload: Mapping[str, Any], *, now: Optional[datetime] = None) -> Outcome:
        error = validate_attendance(payload)
        if error:
            return Outcome.invalid(error)

        employee_id = payload["employeeId"].strip()
        if not self._employees.exists(employee_id):
            return Outcome.not_found(MSG_EMPLOYEE_NOT_FOUND)

        record = AttendanceRecord(
            employee_id=employee_id,
            date=payload["date"].strip(),
            status=AttendanceStatus(payload["status"]),
            created_at=now or now_utc(),
        )
        try:
            self._attendance.insert(record)
        except DuplicateKeyError:
            return Outcome.conflict(MSG_ATTENDANCE_DUPLICATE, field="date")

        # A concurrent remove may have run its cascade between the check and
        # the insert; undo the write rather than leave an orphan behind.
        if not self._employees.exists(employee_id):
            self._attendance.delete(record.employee_id, record.date)
            logger.warning("Employee %s removed while recording %s; write undone", employee_id, record.date)
            return Outcome.not_found(MSG_EMPLOYEE_NOT_FOUND)

        logger.info("Recorded %s for %s on %s", record.status.value, employee_id, record.date)
        return Outcome.success(MSG_ATTENDANCE_RECORDED)

    def update_attendance(self, employee_id: str, date: str, payload: Mapping[str, Any]) -> Outcome:
        error = validate_attendance(payload)
        if error:
            return Outcome.invalid(error)

        if self._attendance.get(employee_id, date) is None:
            return Outcome.not_found(MSG_ATTENDANCE_NOT_FOUND)

        new_employee_id = payload["employeeId"].strip()
        if new_employee_id != employee_id and not self._employees.exists(new_employee_id):
            return Outcome.not_found(MSG_EMPLOYEE_NOT_FOUND)

        new_date = payload["date"].strip()
        try:
            updated = self._attendance.update(
                employee_id,
                date,
                new_employee_id=new_employee_id,
                new_date=new_date,
                status=AttendanceStatus(payload["status"]),
            )
        except DuplicateKeyError:
            return Outcome.conflict(MSG_ATTENDANCE_DUPLICATE, field="date")

        if not updated:
            return Outcome.not_found(MSG_ATTENDANCE_NOT_FOUND)

        # Same race as in record_attendance: the new owner may have been
        # removed after the check above.
        if new_employee_id != employee_id and not self._employees.exists(new_employee_id):
            self._attendance.delete(new_employee_id, new_date)
            logger.warning("Employee %s removed while moving %s; record dropped", new_employee_id, new_date)
            return Outcome.not_found(MSG_EMPLOYEE_NOT_FOUND)

        return Outcome.success(MSG_ATTENDANCE_UPDATED)

    def delete_attendance(self, employee_id: str, date: str) -> Outcome:
        if not self._attendance.delete(employee_id, date):
            return Outcome.not_found(MSG_ATTENDANCE_NOT_FOUND)
        return Outcome.success(MSG_ATTENDANCE_DELETED)
