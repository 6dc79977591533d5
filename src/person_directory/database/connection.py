"""
Database connection management for the embedded SQLite store
"""

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator

logger = logging.getLogger(__name__)


class SQLiteDatabase:
    """
    Handle on a single SQLite database file.

    Only the path and busy timeout are shared. Every call to ``connect``
    opens a fresh connection, so one instance can be used from any number
    of request threads at once.
    """

    def __init__(self, path: str, timeout: float = 5.0):
        self.path = path
        self.timeout = timeout
        logger.info(f"SQLite database configured at: {path}")

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        """Open a connection, commit on success, roll back on error and always close"""
        conn = sqlite3.connect(self.path, timeout=self.timeout)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def ping(self) -> bool:
        """Check that the database file can be opened and queried"""
        try:
            with self.connect() as conn:
                conn.execute("SELECT 1").fetchone()
            return True
        except sqlite3.Error as e:
            logger.error(f"Database ping failed for {self.path}: {e}")
            return False
