"""DuckDB connection management for the PPA dashboard

Holds one lazily opened connection to a local DuckDB file and the small
key/value table the record store persists into.
"""

import duckdb
from pathlib import Path
from typing import Optional, Tuple, Union
import logging
from contextlib import contextmanager

from config.constants import DATABASE_PATH, STATE_TABLE

logger = logging.getLogger(__name__)


class DatabaseConnection:
    """Manages DuckDB connection lifecycle"""

    def __init__(self, db_path: Optional[Union[str, Path]] = None):
        """Initialize database connection manager

        Args:
            db_path: Path to DuckDB database file, or ':memory:'.
                    Defaults to the file under the app config directory.
        """
        if db_path is None:
            db_path = DATABASE_PATH
        self.db_path = str(db_path)
        self._conn: Optional[duckdb.DuckDBPyConnection] = None
        logger.info(f"DatabaseConnection initialized with path: {self.db_path}")

    def get_connection(self) -> duckdb.DuckDBPyConnection:
        """Get or create database connection"""
        if self._conn is None:
            if self.db_path != ":memory:":
                Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            try:
                self._conn = duckdb.connect(self.db_path)
                logger.info(f"DuckDB connected: {self.db_path}")
            except Exception as e:
                logger.error(f"Failed to connect to DuckDB: {e}")
                raise
        return self._conn

    def close(self):
        """Close database connection"""
        if self._conn:
            try:
                self._conn.close()
                logger.info("DuckDB connection closed")
            except Exception as e:
                logger.error(f"Error closing connection: {e}")
            finally:
                self._conn = None

    def execute(self, query: str, params: Optional[Tuple] = None) -> duckdb.DuckDBPyConnection:
        """Execute SQL query with optional parameters

        Example:
            >>> db.execute("SELECT value FROM app_state WHERE key = ?", ("ppa_team_data",))
        """
        conn = self.get_connection()
        try:
            if params:
                return conn.execute(query, params)
            return conn.execute(query)
        except Exception as e:
            logger.error(f"Query execution failed: {query[:100]}... Error: {e}")
            raise

    def fetch_one(self, query: str, params: Optional[Tuple] = None) -> Optional[Tuple]:
        """Execute query and fetch one result"""
        return self.execute(query, params).fetchone()

    @contextmanager
    def transaction(self):
        """Context manager for database transactions

        Commits on success, rolls back on exception.
        """
        conn = self.get_connection()
        try:
            conn.execute("BEGIN TRANSACTION")
            yield conn
            conn.execute("COMMIT")
            logger.debug("Transaction committed")
        except Exception as e:
            conn.execute("ROLLBACK")
            logger.error(f"Transaction rolled back due to error: {e}")
            raise

    def ensure_state_table(self):
        """Create the key/value state table if it does not exist"""
        self.execute(
            f"CREATE TABLE IF NOT EXISTS {STATE_TABLE} ("
            "key VARCHAR PRIMARY KEY, "
            "value VARCHAR NOT NULL, "
            "updated_at TIMESTAMPTZ DEFAULT current_timestamp)"
        )


# Global singleton instance
_db_instance: Optional[DatabaseConnection] = None


def get_db(db_path: Optional[Union[str, Path]] = None) -> DatabaseConnection:
    """Get global database instance (singleton pattern)

    Args:
        db_path: Optional database path. Only used on first call.
    """
    global _db_instance
    if _db_instance is None:
        _db_instance = DatabaseConnection(db_path)
    return _db_instance
