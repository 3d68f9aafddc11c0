"""
Persistence gateway for a single resource table.

A ``RecordStore`` performs exactly two operations against its table:
insert a row and read it back, or list every row newest first.  All
queries use parameterized statements; table and column names come
from the static ``ResourceDescriptor`` and never from user input.

Any ``sqlite3.Error`` (missing file, locked database, constraint
violation) is logged with its traceback and re‑raised as
``PersistenceError`` carrying a message that is safe to return to
clients.  On insert the same applies to ``OverflowError``, raised
when an integer does not fit a SQLite INTEGER column.
"""

import logging
import sqlite3
from typing import Any, List, Mapping

from pydantic import BaseModel

from nexaops_api.app.core.db import Database
from nexaops_api.app.core.errors import PersistenceError
from nexaops_api.app.services.resources import ResourceDescriptor

logger = logging.getLogger(__name__)


class RecordStore:
    """Insert/list access to the table described by ``descriptor``."""

    def __init__(self, database: Database, descriptor: ResourceDescriptor) -> None:
        self.database = database
        self.descriptor = descriptor

    @property
    def _columns(self) -> str:
        return ", ".join(("id",) + self.descriptor.fields + ("created_at",))

    def insert(self, fields: Mapping[str, Any]) -> BaseModel:
        """Insert a row and return it as stored, including ``id`` and ``created_at``."""
        descriptor = self.descriptor
        names = descriptor.fields
        placeholders = ", ".join("?" for _ in names)
        try:
            with self.database.cursor() as cursor:
                cursor.execute(
                    f"INSERT INTO {descriptor.table} ({', '.join(names)}) VALUES ({placeholders})",
                    tuple(fields.get(name) for name in names),
                )
                row = cursor.execute(
                    f"SELECT {self._columns} FROM {descriptor.table} WHERE id = ?",
                    (cursor.lastrowid,),
                ).fetchone()
        except (sqlite3.Error, OverflowError) as exc:
            logger.exception("Database error adding %s", descriptor.label)
            raise PersistenceError(f"Failed to add {descriptor.label} to database") from exc
        record = self._row_to_record(row)
        logger.info("Created %s %s", descriptor.label, record.id)
        return record

    def list_all(self) -> List[BaseModel]:
        """Return every row, most recently created first.

        Rows sharing a ``created_at`` value are ordered by ``id`` so the
        later insert still comes first.
        """
        descriptor = self.descriptor
        try:
            with self.database.cursor() as cursor:
                rows = cursor.execute(
                    f"SELECT {self._columns} FROM {descriptor.table} "
                    "ORDER BY created_at DESC, id DESC"
                ).fetchall()
        except sqlite3.Error as exc:
            logger.exception("Database error fetching %s", descriptor.plural_label)
            raise PersistenceError(f"Failed to fetch {descriptor.plural_label} from database") from exc
        return [self._row_to_record(row) for row in rows]

    def _row_to_record(self, row: sqlite3.Row) -> BaseModel:
        """Convert a database row to the descriptor's read schema."""
        return self.descriptor.read_schema(**dict(row))
