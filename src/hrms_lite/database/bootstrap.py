from __future__ import annotations

from typing import Iterable

import mysql.connector

from ..core.constants import MAX_DATE_LENGTH, MAX_EMPLOYEE_ID_LENGTH, MAX_TEXT_LENGTH
from ..core.exceptions import StorageError
from .connection import DBConfig

SCHEMA_SQL = f"""
CREATE TABLE IF NOT EXISTS employees (
    id BIGINT UNSIGNED NOT NULL AUTO_INCREMENT,
    employee_id VARCHAR({MAX_EMPLOYEE_ID_LENGTH}) NOT NULL,
    full_name VARCHAR({MAX_TEXT_LENGTH}) NOT NULL,
    email VARCHAR({MAX_TEXT_LENGTH}) NOT NULL,
    department VARCHAR({MAX_TEXT_LENGTH}) NOT NULL,
    created_at DATETIME(6) NOT NULL,
    PRIMARY KEY (id),
    UNIQUE KEY uq_employees_employee_id (employee_id),
    UNIQUE KEY uq_employees_email (email),
    KEY ix_employees_created_at (created_at)
) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_bin;

CREATE TABLE IF NOT EXISTS attendance (
    id BIGINT UNSIGNED NOT NULL AUTO_INCREMENT,
    employee_id VARCHAR({MAX_EMPLOYEE_ID_LENGTH}) NOT NULL,
    work_date VARCHAR({MAX_DATE_LENGTH}) NOT NULL,
    status VARCHAR(16) NOT NULL,
    created_at DATETIME(6) NOT NULL,
    PRIMARY KEY (id),
    UNIQUE KEY uq_attendance_employee_date (employee_id, work_date),
    KEY ix_attendance_date_created (work_date, created_at)
) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_bin;
"""


def iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _server_connect(config: DBConfig, *, with_database: bool = True):
    kwargs = dict(
        host=config.host,
        port=config.port,
        user=config.user,
        password=config.password,
        connection_timeout=config.connect_timeout,
        use_pure=True,
    )
    if with_database:
        kwargs["database"] = config.database
    try:
        return mysql.connector.connect(**kwargs)
    except mysql.connector.Error as e:
        raise StorageError(f"Could not connect to {config.describe()}") from e


def ensure_database_exists(config: DBConfig) -> None:
    conn = _server_connect(config, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(config: DBConfig) -> None:
    """Create the database and tables if missing. Safe to run repeatedly."""
    ensure_database_exists(config)

    conn = _server_connect(config)
    try:
        cur = conn.cursor()
        for stmt in iter_sql_statements(SCHEMA_SQL):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()


def list_tables(config: DBConfig) -> list[str]:
    conn = _server_connect(config)
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
