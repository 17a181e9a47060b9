"""
SQLite-backed ordered key-value store.

Stores every entry in a single ``ledger`` table keyed by TEXT with the
default BINARY collation, so ORDER BY key follows UTF-8 byte order.
"""

import logging
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from farm_ledger.core.exceptions import StoreError
from farm_ledger.store.base import Entry, LedgerStore

logger = logging.getLogger(__name__)


class SQLiteStore(LedgerStore):
    """
    Ledger store with SQLite backend.

    Each thread gets its own connection in autocommit mode, so every put is
    durable once it returns and visible to later reads on any thread.
    """

    backend_name = "sqlite"
    DEFAULT_DB_PATH = Path("var/ledger/ledger.db")

    def __init__(self, db_path: Path | str | None = None):
        """
        Initialize the store and create the schema if needed.

        Args:
            db_path: Path to the SQLite database file

        Raises:
            StoreError: If the database cannot be opened or initialized
        """
        self._db_path = Path(db_path) if db_path else self.DEFAULT_DB_PATH
        self._local = threading.local()
        self._lock = threading.Lock()
        self._connections: list[sqlite3.Connection] = []

        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreError(
                f"Cannot create database directory: {self._db_path.parent}",
                operation="open",
                backend=self.backend_name,
            ) from exc

        self._init_db()

    @property
    def db_path(self) -> Path:
        """Location of the database file."""
        return self._db_path

    @property
    def _conn(self) -> sqlite3.Connection:
        """Get thread-local database connection."""
        if not hasattr(self._local, "conn"):
            self._local.conn = self._get_connection()
        return self._local.conn

    def _get_connection(self) -> sqlite3.Connection:
        """Create a new database connection."""
        try:
            conn = sqlite3.connect(
                self._db_path,
                check_same_thread=False,
                isolation_level=None,  # Autocommit mode
            )
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA journal_mode=WAL")
            conn.execute("PRAGMA synchronous=NORMAL")
        except sqlite3.Error as exc:
            raise StoreError(
                f"Cannot open ledger database: {self._db_path}",
                operation="open",
                backend=self.backend_name,
            ) from exc
        with self._lock:
            self._connections.append(conn)
        logger.debug("Opened SQLite connection to %s", self._db_path)
        return conn

    def _init_db(self) -> None:
        """Create the ledger table."""
        try:
            self._conn.execute(
                """
                CREATE TABLE IF NOT EXISTS ledger (
                    key TEXT PRIMARY KEY,
                    value BLOB NOT NULL
                ) WITHOUT ROWID
            """
            )
        except sqlite3.Error as exc:
            raise StoreError(
                "Failed to initialize ledger schema",
                operation="init",
                backend=self.backend_name,
            ) from exc

    def get(self, key: str) -> bytes | None:
        try:
            row = self._conn.execute(
                "SELECT value FROM ledger WHERE key = ?", (key,)
            ).fetchone()
        except sqlite3.Error as exc:
            raise StoreError(
                f"Failed to read key '{key}'",
                operation="get",
                key=key,
                backend=self.backend_name,
            ) from exc
        if row is None:
            return None
        return bytes(row["value"])

    def put(self, key: str, value: bytes) -> None:
        payload = self._check_payload(key, value)
        try:
            self._conn.execute(
                "INSERT OR REPLACE INTO ledger (key, value) VALUES (?, ?)",
                (key, sqlite3.Binary(payload)),
            )
        except sqlite3.Error as exc:
            raise StoreError(
                f"Failed to write key '{key}'",
                operation="put",
                key=key,
                backend=self.backend_name,
            ) from exc

    @contextmanager
    def scan(self, lo: str, hi: str) -> Iterator[Iterator[Entry]]:
        try:
            cursor = self._conn.execute(
                "SELECT key, value FROM ledger WHERE key >= ? AND key < ? ORDER BY key",
                (lo, hi),
            )
        except sqlite3.Error as exc:
            raise StoreError(
                f"Failed to open scan [{lo!r}, {hi!r})",
                operation="scan",
                key=lo,
                backend=self.backend_name,
            ) from exc
        try:
            yield self._iter_rows(cursor, lo)
        finally:
            cursor.close()

    def _iter_rows(self, cursor: sqlite3.Cursor, lo: str) -> Iterator[Entry]:
        """Yield (key, payload) pairs, wrapping cursor faults."""
        while True:
            try:
                row = cursor.fetchone()
            except sqlite3.Error as exc:
                raise StoreError(
                    "Failed to advance scan cursor",
                    operation="scan",
                    key=lo,
                    backend=self.backend_name,
                ) from exc
            if row is None:
                return
            yield row["key"], bytes(row["value"])

    def ping(self) -> bool:
        try:
            self._conn.execute("SELECT 1").fetchone()
        except (sqlite3.Error, StoreError):
            return False
        return True

    def close(self) -> None:
        """Close every connection opened by this store."""
        with self._lock:
            connections, self._connections = self._connections, []
        for conn in connections:
            conn.close()
        if hasattr(self._local, "conn"):
            delattr(self._local, "conn")
        logger.debug("Closed %d SQLite connection(s) to %s", len(connections), self._db_path)
