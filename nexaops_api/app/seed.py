"""
Populate the NexaOps database with sample data.

Sample records are created through the same ``ResourceService`` the
API uses, so they are validated and trimmed exactly like client
input.

Usage:
    python -m nexaops_api.app.seed             # add sample records
    python -m nexaops_api.app.seed --clear     # empty the tables first
    python -m nexaops_api.app.seed --check     # only test the connection
"""

import argparse
import asyncio
import logging
import sqlite3
import sys
from typing import Any, Dict, List, Optional, Sequence

from nexaops_api.app.core.config import settings
from nexaops_api.app.core.db import Database
from nexaops_api.app.core.errors import ServiceError
from nexaops_api.app.core.logging_config import setup_logging
from nexaops_api.app.services.record_store import RecordStore
from nexaops_api.app.services.resource_service import ResourceService
from nexaops_api.app.services.resources import EXPENSES, INVENTORY, RESOURCES, SALES, ResourceDescriptor

logger = logging.getLogger(__name__)

SAMPLE_SALES: List[Dict[str, Any]] = [
    {"item_name": "Premium Product A", "amount": 2500.00, "date": "2024-01-15", "customer": "Enterprise Client"},
    {"item_name": "Standard Product B", "amount": 1200.00, "date": "2024-01-14", "customer": "Business Customer"},
    {"item_name": "Basic Product C", "amount": 500.00, "date": "2024-01-13", "customer": "Individual Buyer"},
]

SAMPLE_EXPENSES: List[Dict[str, Any]] = [
    {"description": "Office rent and utilities", "amount": 5000.00, "date": "2024-01-15"},
    {"description": "Marketing and advertising", "amount": 2000.00, "date": "2024-01-14"},
    {"description": "Equipment and supplies", "amount": 1500.00, "date": "2024-01-13"},
]

SAMPLE_INVENTORY: List[Dict[str, Any]] = [
    {"item_name": "Premium Product A", "quantity": 10, "price": 250.00},
    {"item_name": "Standard Product B", "quantity": 15, "price": 80.00},
    {"item_name": "Basic Product C", "quantity": 50, "price": 10.00},
]

SAMPLES = (
    (SALES, SAMPLE_SALES),
    (EXPENSES, SAMPLE_EXPENSES),
    (INVENTORY, SAMPLE_INVENTORY),
)


def clear_tables(database: Database, descriptors: Sequence[ResourceDescriptor] = RESOURCES) -> None:
    """Delete every row from the resource tables."""
    with database.cursor() as cursor:
        for descriptor in descriptors:
            cursor.execute(f"DELETE FROM {descriptor.table}")
            logger.info("Cleared %s table", descriptor.table)


async def seed(database: Database) -> Dict[str, int]:
    """Insert the sample records and return how many were added per table."""
    counts: Dict[str, int] = {}
    for descriptor, samples in SAMPLES:
        service = ResourceService(descriptor, RecordStore(database, descriptor))
        for sample in samples:
            await service.create(sample)
        counts[descriptor.table] = len(samples)
        logger.info("Seeded %s %s", len(samples), descriptor.plural_label)
    return counts


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Seed the NexaOps database with sample data.")
    ap.add_argument("--db", default=settings.database_url, help="Path to SQLite DB file (default: DATABASE_URL)")
    ap.add_argument("--clear", action="store_true", help="Delete existing sales, expenses and inventory first")
    ap.add_argument("--check", action="store_true", help="Only test the database connection")
    args = ap.parse_args(argv)

    setup_logging(settings.log_level)
    database = Database(args.db, timeout=settings.db_timeout)

    if not database.ping():
        print(f"[!] Cannot connect to database: {args.db}", file=sys.stderr)
        return 1
    if args.check:
        print(f"[+] Database connection OK: {args.db}")
        return 0

    try:
        database.init_db()
        if args.clear:
            clear_tables(database)
        counts = asyncio.run(seed(database))
    except (ServiceError, sqlite3.Error) as exc:
        print(f"[!] Seeding failed: {exc}", file=sys.stderr)
        return 1
    for table, count in counts.items():
        print(f"[+] {table}: {count} records added")
    return 0


if __name__ == "__main__":
    sys.exit(main())
