from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService


@dataclass(frozen=True)
class Container:
    employee_service: EmployeeService
    attendance_service: AttendanceService


def wire(employees_repo: EmployeeRepository, attendance_repo: AttendanceRepository) -> Container:
    return Container(
        employee_service=EmployeeService(employees_repo, attendance_repo),
        attendance_service=AttendanceService(attendance_repo, employees_repo),
    )


def build_container(*, db_config: DBConfig) -> Container:
    conn = DatabaseConnection(db_config).open()
    return wire(MySQLEmployeeRepository(conn), MySQLAttendanceRepository(conn))
