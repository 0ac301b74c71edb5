from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository

KEY_FIELDS = {
    "uq_attendance_employee_date": "date",
}


def _to_record(row: dict) -> AttendanceRecord:
    return AttendanceRecord(
        employee_id=row["employee_id"],
        date=row["work_date"],
        status=AttendanceStatus(row["status"]),
        created_at=row["created_at"],
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, work_date, status, created_at
                FROM attendance
                ORDER BY work_date DESC, created_at DESC, id DESC
                """
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get(self, employee_id: str, date: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, work_date, status, created_at
                FROM attendance
                WHERE employee_id=%s AND work_date=%s
                """,
                (employee_id, date),
            )
            row = fetchone(cur)
            return _to_record(row) if row else None

    def insert(self, record: AttendanceRecord) -> None:
        with db_cursor(self._conn_factory, key_fields=KEY_FIELDS) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(employee_id, work_date, status, created_at)
                VALUES(%s,%s,%s,%s)
                """,
                (record.employee_id, record.date, record.status.value, record.created_at),
            )

    def update(
        self,
        employee_id: str,
        date: str,
        *,
        new_employee_id: str,
        new_date: str,
        status: AttendanceStatus,
    ) -> bool:
        with db_cursor(self._conn_factory, key_fields=KEY_FIELDS) as (_, cur):
            cur.execute(
                "SELECT id FROM attendance WHERE employee_id=%s AND work_date=%s FOR UPDATE",
                (employee_id, date),
            )
            row = fetchone(cur)
            if row is None:
                return False
            cur.execute(
                """
                UPDATE attendance
                SET employee_id=%s, work_date=%s, status=%s
                WHERE id=%s
                """,
                (new_employee_id, new_date, status.value, row["id"]),
            )
            return True

    def delete(self, employee_id: str, date: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM attendance WHERE employee_id=%s AND work_date=%s",
                (employee_id, date),
            )
            return cur.rowcount > 0

    def delete_for_employee(self, employee_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE employee_id=%s", (employee_id,))
            return int(cur.rowcount or 0)
