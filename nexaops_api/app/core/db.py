"""
SQLite database integration and simple migration system.

The ``Database`` class wraps the location of the SQLite file and
hands out short‑lived connections.  A single instance is created by
``create_app`` and injected into the services through FastAPI
dependencies; nothing in the application reaches for a module level
connection.  ``init_db`` applies migrations on application start.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Tuple

from .config import Settings

logger = logging.getLogger(__name__)


# Millisecond precision keeps ``ORDER BY created_at`` meaningful for
# records created within the same second.
CREATED_AT_DEFAULT = "(strftime('%Y-%m-%dT%H:%M:%fZ', 'now'))"

MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        f"""
        CREATE TABLE IF NOT EXISTS sales (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            item_name TEXT NOT NULL,
            amount REAL NOT NULL CHECK (amount >= 0),
            date TEXT NOT NULL,
            customer TEXT,
            created_at TEXT NOT NULL DEFAULT {CREATED_AT_DEFAULT}
        );

        CREATE TABLE IF NOT EXISTS expenses (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            description TEXT NOT NULL,
            amount REAL NOT NULL CHECK (amount >= 0),
            date TEXT NOT NULL,
            created_at TEXT NOT NULL DEFAULT {CREATED_AT_DEFAULT}
        );

        CREATE TABLE IF NOT EXISTS inventory (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            item_name TEXT NOT NULL,
            quantity INTEGER NOT NULL CHECK (quantity >= 0),
            price REAL NOT NULL CHECK (price >= 0),
            created_at TEXT NOT NULL DEFAULT {CREATED_AT_DEFAULT}
        );
        """,
    ),
    # Migration 2: indices backing the "most recent first" listings
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_sales_created_at ON sales(created_at);
        CREATE INDEX IF NOT EXISTS idx_expenses_created_at ON expenses(created_at);
        CREATE INDEX IF NOT EXISTS idx_inventory_created_at ON inventory(created_at);
        """,
    ),
]


class Database:
    """Handle to the SQLite database used by the record stores."""

    def __init__(self, path: str, timeout: float = 10.0) -> None:
        self.path = path
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a handle from ``settings.database_url``.

        Relative paths are resolved against the current working
        directory.  ``:memory:`` is passed through untouched, although
        every connection then sees its own empty database.
        """
        db_url = settings.database_url
        if db_url != ":memory:":
            db_url = str(Path(db_url).expanduser().resolve())
        return cls(db_url, timeout=settings.db_timeout)

    def connect(self) -> sqlite3.Connection:
        """Create and return a new SQLite connection.

        Rows are returned as ``sqlite3.Row`` so columns can be read by
        name.  ``timeout`` bounds how long a statement waits for a
        locked database.
        """
        conn = sqlite3.connect(self.path, timeout=self.timeout)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor, commit on success and always close the connection."""
        conn = self.connect()
        try:
            yield conn.cursor()
            conn.commit()
        finally:
            conn.close()

    def ping(self) -> bool:
        """Return ``True`` if a trivial query succeeds."""
        try:
            with self.cursor() as cursor:
                cursor.execute("SELECT 1").fetchone()
        except sqlite3.Error as exc:
            logger.error("Database connection test failed: %s", exc)
            return False
        return True

    def init_db(self) -> None:
        """Initialise the database and apply pending migrations.

        Creates the ``migrations`` table if it does not exist, checks
        the current schema version and applies any migration from
        ``MIGRATIONS`` with a higher version number.
        """
        with self.cursor() as cursor:
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            cursor.execute("SELECT MAX(version) as version FROM migrations")
            row = cursor.fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    cursor.executescript(sql)
                    cursor.execute(
                        "INSERT INTO migrations (version) VALUES (?)", (version,)
                    )
                    logger.info("Applied migration %s", version)
                    current_version = version
