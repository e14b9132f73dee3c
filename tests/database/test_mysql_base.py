from __future__ import annotations

import mysql.connector
import pytest
from mysql.connector import errorcode

from src.hr_timesheet.hr_timesheet.core.exceptions import ConflictError, StorageError
from src.hr_timesheet.hr_timesheet.database.connection import DBConfig, DatabaseConnection
from src.hr_timesheet.hr_timesheet.database.mysql_base import db_cursor, translate_error


class FakeCursor:
    def __init__(self, error=None):
        self._error = error
        self.closed = False

    def execute(self, sql, params=None):
        if self._error:
            raise self._error

    def close(self):
        self.closed = True


class FakeConn:
    def __init__(self, error=None):
        self.cursor_obj = FakeCursor(error)
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self.cursor_obj

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeFactory:
    def __init__(self, conn):
        self.conn = conn

    def connect(self):
        return self.conn


def test_duplicate_key_becomes_conflict():
    err = mysql.connector.IntegrityError(msg="Duplicate entry 'NV001' for key 'uq_employees_ma_nv'", errno=errorcode.ER_DUP_ENTRY)
    assert isinstance(translate_error(err), ConflictError)


def test_other_driver_errors_become_storage_error_with_message():
    err = mysql.connector.OperationalError(msg="Lost connection to MySQL server", errno=errorcode.CR_SERVER_LOST)
    translated = translate_error(err)
    assert isinstance(translated, StorageError)
    assert "Lost connection" in str(translated)


def test_db_cursor_commits_on_success():
    conn = FakeConn()
    with db_cursor(FakeFactory(conn)) as (_, cur):
        cur.execute("SELECT 1")

    assert conn.committed and not conn.rolled_back
    assert conn.cursor_obj.closed and conn.closed


def test_db_cursor_rolls_back_and_translates():
    conn = FakeConn(error=mysql.connector.IntegrityError(msg="Duplicate entry", errno=errorcode.ER_DUP_ENTRY))

    with pytest.raises(ConflictError):
        with db_cursor(FakeFactory(conn)) as (_, cur):
            cur.execute("INSERT ...")

    assert conn.rolled_back and not conn.committed
    assert conn.closed


def test_closed_connection_refuses_new_work():
    conn = DatabaseConnection(DBConfig.from_dict({"host": "db", "database": "nhansu_db"}))
    conn.close()

    assert conn.closed
    with pytest.raises(StorageError):
        conn.connect()
