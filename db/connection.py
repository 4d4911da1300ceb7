"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's ThreadedConnectionPool behind a `Database` handle that
is opened once at startup and injected into every repository.
"""

import time
from typing import Any, Callable, Optional, Sequence

import psycopg2
from psycopg2 import pool, extras

from config import DatabaseSettings
from utils.logger import get_logger

logger = get_logger(__name__)

# Every failure reported by the driver (constraint violation, lost
# connection, malformed statement) is a subclass of psycopg2.Error.
DataAccessFailure = psycopg2.Error

PoolFactory = Callable[..., pool.AbstractConnectionPool]


class Database:
    """Process-scoped handle around a pool of PostgreSQL connections."""

    def __init__(
        self,
        settings: DatabaseSettings,
        pool_factory: PoolFactory = pool.ThreadedConnectionPool,
    ):
        self.settings = settings
        self._pool_factory = pool_factory
        self._pool: Optional[pool.AbstractConnectionPool] = None
        self._last_used: dict[int, float] = {}

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    # ── LIFECYCLE ─────────────────────────────────────────

    def open(self) -> None:
        """
        Create the connection pool. Calling it on an open handle is a no-op.

        Raises:
            psycopg2.OperationalError: If the database is unreachable.
        """
        if self._pool is not None:
            return
        try:
            self._pool = self._pool_factory(
                self.settings.min_connections,
                self.settings.max_connections,
                **self.settings.connect_kwargs(),
            )
            logger.info(
                f"Database connection pool initialized "
                f"({self.settings.user}@{self.settings.host}:{self.settings.port}/{self.settings.dbname}, "
                f"max={self.settings.max_connections})."
            )
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise

    def close_gracefully(self) -> None:
        """Close all connections in the pool."""
        if self._pool is None:
            return
        logger.info("Closing database connection pool...")
        self._pool.closeall()
        self._pool = None
        self._last_used.clear()
        logger.info("Database connection pool closed.")

    def __enter__(self) -> "Database":
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close_gracefully()
        return False

    # ── CONNECTIONS ───────────────────────────────────────

    def get_connection(self):
        """
        Get a connection from the pool, replacing any that sat idle
        for longer than the configured idle timeout.

        Raises:
            RuntimeError: If the pool has not been opened.
        """
        if self._pool is None:
            raise RuntimeError("Database pool not initialized. Call open() first.")
        while True:
            conn = self._pool.getconn()
            last_used = self._last_used.pop(id(conn), None)
            if last_used is None:
                return conn
            if time.monotonic() - last_used <= self.settings.idle_timeout_seconds:
                return conn
            logger.debug("Discarding connection idle past timeout.")
            self._pool.putconn(conn, close=True)

    def release_connection(self, conn) -> None:
        """Return a connection back to the pool, dropping it if it was closed."""
        if self._pool is None:
            return
        if conn.closed:
            self._pool.putconn(conn, close=True)
            return
        self._last_used[id(conn)] = time.monotonic()
        self._pool.putconn(conn)
        # The pool closes connections beyond minconn instead of keeping them.
        if conn.closed:
            self._last_used.pop(id(conn), None)

    # ── QUERIES ───────────────────────────────────────────

    def query(self, sql: str, params: Sequence[Any] = ()) -> list[dict]:
        """
        Run a single statement on a pooled connection and commit it.

        Args:
            sql: Statement text with %s placeholders.
            params: Values bound to the placeholders, in order.

        Returns:
            The result rows as dicts (empty for statements without results).

        Raises:
            DataAccessFailure: Re-raised unchanged after logging.
        """
        conn = self.get_connection()
        try:
            start = time.perf_counter()
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, list(params) or None)
                rows = [dict(r) for r in cur.fetchall()] if cur.description else []
                rowcount = cur.rowcount
            conn.commit()
            duration_ms = (time.perf_counter() - start) * 1000
            logger.debug(f"executed query | {duration_ms:.1f} ms | rows={rowcount} | {_compact(sql)}")
            return rows
        except psycopg2.Error as e:
            if not conn.closed:
                conn.rollback()
            logger.error(f"Query error | {_compact(sql)} | params={list(params)} | {e}")
            raise
        finally:
            self.release_connection(conn)

    def ping(self) -> dict:
        """Check connectivity with `SELECT NOW()` and return the row."""
        return self.query("SELECT NOW() AS now;")[0]


def _compact(sql: str) -> str:
    """Collapse whitespace so multi-line statements log on one line."""
    return " ".join(sql.split())
