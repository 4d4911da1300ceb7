import sys
from pathlib import Path

import pytest

# Ensure project root on sys.path
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from config import DatabaseSettings  # noqa: E402
from db.connection import Database  # noqa: E402


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn
        self.description = None
        self.rowcount = -1
        self._rows = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    def execute(self, sql, params=None):
        pool = self.conn.pool
        pool.executed.append((sql, params))
        response = pool.responses.pop(0) if pool.responses else None
        if isinstance(response, Exception):
            if getattr(response, "closes_connection", False):
                self.conn.closed = 2
            raise response
        if response is None:
            self.description = None
            self._rows = []
            self.rowcount = 0
        else:
            self.description = [("column",)]
            self._rows = list(response)
            self.rowcount = len(self._rows)

    def fetchall(self):
        return self._rows


class FakeConnection:
    def __init__(self, pool, number):
        self.pool = pool
        self.number = number
        self.closed = 0
        self.commits = 0
        self.rollbacks = 0
        self.cursor_factories = []

    def cursor(self, cursor_factory=None):
        self.cursor_factories.append(cursor_factory)
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1


class FakePool:
    """Stands in for psycopg2's ThreadedConnectionPool and records every statement."""

    def __init__(self):
        self.factory_calls = []
        self.executed = []
        self.responses = []
        self.idle = []
        self.created = []
        self.discarded = []
        self.checked_out = 0
        self.minconn = 1
        self.closed_all = 0

    def factory(self, minconn, maxconn, **kwargs):
        self.factory_calls.append((minconn, maxconn, kwargs))
        self.minconn = minconn
        return self

    def respond(self, *responses):
        """Queue results for the next statements: a list of row dicts, None, or an exception."""
        self.responses.extend(responses)

    @property
    def last_sql(self):
        return self.executed[-1][0]

    @property
    def last_params(self):
        return self.executed[-1][1]

    def getconn(self):
        self.checked_out += 1
        if self.idle:
            return self.idle.pop()
        conn = FakeConnection(self, len(self.created) + 1)
        self.created.append(conn)
        return conn

    def putconn(self, conn, key=None, close=False):
        # Same policy as psycopg2's AbstractConnectionPool._putconn: keep at
        # most minconn idle connections and close the rest.
        self.checked_out -= 1
        if not close and not conn.closed and len(self.idle) < self.minconn:
            self.idle.append(conn)
        else:
            conn.closed = 1
            self.discarded.append(conn)

    def closeall(self):
        self.closed_all += 1


SETTINGS = DatabaseSettings(
    host="localhost",
    port=5432,
    dbname="lightbnb_test",
    user="development",
    password="development",
    min_connections=1,
    max_connections=20,
    idle_timeout_seconds=60,
)


@pytest.fixture()
def settings():
    return SETTINGS


@pytest.fixture()
def fake_pool():
    return FakePool()


@pytest.fixture()
def db(fake_pool):
    database = Database(SETTINGS, pool_factory=fake_pool.factory)
    database.open()
    yield database
    database.close_gracefully()
