"""Record queries and updates against the application's MySQL database."""

from __future__ import annotations

import logging
from contextlib import closing
from typing import Any, Callable

from .model import INSERT, UPDATE

_LOG = logging.getLogger("svckit.records")

DB_USER = "your_username"
PASSWORD = "password"
DB_NAME = "your_database_name"
DB_HOST = "localhost"

SELECT_QUERY = "// Enter Select Query"
INSERT_QUERY = "Enter Insert Query"
UPDATE_QUERY = "Enter Update Query"
INSERT_RECORDS_QUERY = "//Enter Insert Query"
UPDATE_RECORDS_QUERY = "//Enter Update Query"

Connector = Callable[..., Any]
ConnectionFactory = Callable[[], Any]


class RecordError(Exception):
    """Raised when a record operation fails; the message carries its error code."""


def _dsn() -> str:
    return f"{DB_USER}:{PASSWORD}@tcp({DB_HOST})/{DB_NAME}"


def _mysql_connect(*, host: str, user: str, password: str, database: str) -> Any:
    import pymysql

    return pymysql.connect(host=host, user=user, password=password, database=database)


def db_connection(connector: Connector | None = None) -> Any:
    """Open and ping a connection to the application database.

    ``connector`` is called with ``host``, ``user``, ``password`` and
    ``database`` keywords and must return a DB-API connection.
    """
    connect = connector or _mysql_connect
    password = PASSWORD
    try:
        conn = connect(host=DB_HOST, user=DB_USER, password=password, database=DB_NAME)
    except Exception as exc:
        _LOG.error("DBConnection - Error connecting to the database: %s", exc)
        raise RecordError(f"DBConnection - Error connecting to the database: {exc}") from exc

    ping = getattr(conn, "ping", None)
    if ping is not None:
        try:
            ping()
        except Exception as exc:
            conn.close()
            _LOG.error("DBConnection - Error pinging database: %s", exc)
            raise RecordError(f"DBConnection - Error pinging database: {exc}") from exc
    _LOG.debug("DBConnection opened %s", _dsn().replace(PASSWORD, "***", 1))
    return conn


def _scan_string(row: Any) -> str:
    values = tuple(row)
    if len(values) != 1:
        raise ValueError(
            f"sql: expected {len(values)} destination arguments in Scan, not 1"
        )
    value = values[0]
    if value is None:
        raise ValueError("converting NULL to string is unsupported")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    return str(value)


def select_records(parameter: Any, connection_factory: ConnectionFactory | None = None) -> str:
    """Run the select query with ``parameter`` and return the value of the last row."""
    _LOG.info("SelectRecordsMethod (+)")
    factory = connection_factory or db_connection
    try:
        conn = factory()
    except Exception as exc:
        _LOG.error("ASRM:001 %s", exc)
        raise RecordError(f"SelectRecordsMethod - (ASRM-001) {exc}") from exc

    result = ""
    with closing(conn), closing(conn.cursor()) as cursor:
        try:
            cursor.execute(SELECT_QUERY, (parameter,))
        except Exception as exc:
            _LOG.error("ASRM:003 %s", exc)
            raise RecordError(f"SelectRecordsMethod - (ASRM-003) {exc}") from exc
        for row in cursor:
            try:
                result = _scan_string(row)
            except ValueError as exc:
                _LOG.error("ASRM:004 %s", exc)
                raise RecordError(f"SelectRecordsMethod - (ASRM-004) {exc}") from exc

    _LOG.info("SelectRecordsMethod (-)")
    return result


def _execute(
    name: str,
    code: str,
    query: str,
    parameter: Any,
    factory: ConnectionFactory,
    success: str,
) -> int | None:
    _LOG.info("%s (+)", name)
    try:
        conn = factory()
    except Exception as exc:
        _LOG.error("%s-001 %s", code, exc)
        raise RecordError(f"{name} - ({code}-001) {exc}") from exc

    with closing(conn):
        try:
            with closing(conn.cursor()) as cursor:
                cursor.execute(query, (parameter,))
                affected = cursor.rowcount
            commit = getattr(conn, "commit", None)
            if commit is not None:
                commit()
        except Exception as exc:
            _LOG.error("%s-002 %s", code, exc)
            raise RecordError(f"{name} - ({code}-002) {exc}") from exc

    if affected is None or affected < 0:
        _LOG.error("%s-003 rows affected not available", code)
        affected = None
    else:
        _LOG.info("%s Rows affected: %d", name, affected)
        _LOG.info(success)
    _LOG.info("%s (-)", name)
    return affected


def insert_update(
    parameter: Any, flag: str, connection_factory: ConnectionFactory | None = None
) -> int | None:
    """Insert or update a record depending on ``flag`` and return the rows affected."""
    queries = {INSERT: INSERT_QUERY, UPDATE: UPDATE_QUERY}
    if flag not in queries:
        raise ValueError(f"InsertUpdateMethod - unsupported flag: {flag!r}")
    return _execute(
        "InsertUpdateMethod",
        "AIUM",
        queries[flag],
        parameter,
        connection_factory or db_connection,
        "Record Inserted or Updated successfully",
    )


def insert_records(
    parameter: Any, connection_factory: ConnectionFactory | None = None
) -> int | None:
    """Insert a record and return the rows affected."""
    return _execute(
        "InsertRecords",
        "AIR",
        INSERT_RECORDS_QUERY,
        parameter,
        connection_factory or db_connection,
        "Record Inserted successfully",
    )


def update_records(
    parameter: Any, connection_factory: ConnectionFactory | None = None
) -> int | None:
    """Update a record and return the rows affected."""
    return _execute(
        "UpdateRecords",
        "AUR",
        UPDATE_RECORDS_QUERY,
        parameter,
        connection_factory or db_connection,
        "Record Updated successfully",
    )