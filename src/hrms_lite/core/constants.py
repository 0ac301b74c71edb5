"""Constants and user-facing messages.

Note: Keep messages here so services, controllers and tests agree on wording.
"""

DEFAULT_PORT = 4000
DEFAULT_POOL_SIZE = 5
DEFAULT_CONNECT_TIMEOUT = 10

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"

# Employees
MSG_EMPLOYEE_REQUIRED = "Employee ID, full name, email, and department are required."
MSG_EMPLOYEE_FIELD_TYPE = "Employee fields must be text."
MSG_INVALID_EMAIL = "Please provide a valid email address."
MSG_EMPLOYEE_ADDED = "Employee added."
MSG_EMPLOYEE_UPDATED = "Employee updated."
MSG_EMPLOYEE_REMOVED = "Employee removed."
MSG_EMPLOYEE_NOT_FOUND = "Employee not found."
MSG_EMPLOYEE_ID_IMMUTABLE = "Employee ID cannot be changed."
MSG_EMPLOYEE_ID_EXISTS = "Employee ID already exists."
MSG_EMAIL_EXISTS = "Email address already exists."
MSG_EMPLOYEE_EXISTS = "Employee already exists."

# Attendance
MSG_ATTENDANCE_REQUIRED = "Employee, date, and status are required."
MSG_ATTENDANCE_FIELD_TYPE = "Attendance fields must be text."
MSG_INVALID_STATUS = "Attendance status must be Present or Absent."
MSG_ATTENDANCE_RECORDED = "Attendance recorded."
MSG_ATTENDANCE_UPDATED = "Attendance updated."
MSG_ATTENDANCE_DELETED = "Attendance deleted."
MSG_ATTENDANCE_DUPLICATE = "Attendance already recorded for that date."
MSG_ATTENDANCE_NOT_FOUND = "Attendance record not found."

# HTTP
MSG_ROUTE_NOT_FOUND = "Route not found."
MSG_INTERNAL_ERROR = "Internal server error."

# Column widths of the storage schema; validators reject longer values.
MAX_EMPLOYEE_ID_LENGTH = 64
MAX_TEXT_LENGTH = 255
MAX_DATE_LENGTH = 32

MSG_FIELD_TOO_LONG = "{field} must be at most {limit} characters."
