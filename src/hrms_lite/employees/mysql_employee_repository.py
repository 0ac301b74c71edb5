from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

KEY_FIELDS = {
    "uq_employees_employee_id": "employeeId",
    "uq_employees_email": "email",
}


def _to_employee(row: dict) -> Employee:
    return Employee(
        employee_id=row["employee_id"],
        full_name=row["full_name"],
        email=row["email"],
        department=row["department"],
        created_at=row["created_at"],
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, full_name, email, department, created_at
                FROM employees
                ORDER BY created_at DESC, id DESC
                """
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def exists(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS found FROM employees WHERE employee_id=%s", (employee_id,))
            return fetchone(cur) is not None

    def insert(self, employee: Employee) -> None:
        with db_cursor(self._conn_factory, key_fields=KEY_FIELDS) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(employee_id, full_name, email, department, created_at)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (
                    employee.employee_id,
                    employee.full_name,
                    employee.email,
                    employee.department,
                    employee.created_at,
                ),
            )

    def update(self, employee_id: str, *, full_name: str, email: str, department: str) -> bool:
        with db_cursor(self._conn_factory, key_fields=KEY_FIELDS) as (_, cur):
            # Matched rows, not changed rows: an identical update still counts.
            cur.execute("SELECT 1 AS found FROM employees WHERE employee_id=%s FOR UPDATE", (employee_id,))
            if fetchone(cur) is None:
                return False
            cur.execute(
                """
                UPDATE employees
                SET full_name=%s, email=%s, department=%s
                WHERE employee_id=%s
                """,
                (full_name, email, department, employee_id),
            )
            return True

    def delete(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (employee_id,))
            return cur.rowcount > 0
