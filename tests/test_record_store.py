import sqlite3

import pytest

from nexaops_api.app.core.errors import PersistenceError
from nexaops_api.app.services.record_store import RecordStore
from nexaops_api.app.services.resources import EXPENSES, INVENTORY, SALES


def test_insert_returns_generated_fields(database):
    store = RecordStore(database, SALES)
    record = store.insert({"item_name": "Widget", "amount": 19.99, "date": "2024-03-01", "customer": None})
    assert record.id == 1
    assert record.item_name == "Widget"
    assert record.amount == pytest.approx(19.99)
    assert record.customer is None
    assert record.created_at.endswith("Z")


def test_list_all_empty_table(database):
    assert RecordStore(database, EXPENSES).list_all() == []


def test_list_all_newest_first(database):
    store = RecordStore(database, INVENTORY)
    for name in ("A", "B", "C"):
        store.insert({"item_name": name, "quantity": 1, "price": 1.0})
    assert [item.item_name for item in store.list_all()] == ["C", "B", "A"]


def test_list_all_orders_by_created_at(database):
    store = RecordStore(database, EXPENSES)
    first = store.insert({"description": "first", "amount": 1, "date": "2024-01-01"})
    second = store.insert({"description": "second", "amount": 2, "date": "2024-01-02"})
    with database.cursor() as cursor:
        cursor.execute(
            "UPDATE expenses SET created_at = '2099-01-01T00:00:00.000Z' WHERE id = ?", (first.id,)
        )
    assert [expense.id for expense in store.list_all()] == [first.id, second.id]


def test_ids_are_never_reused(database):
    store = RecordStore(database, SALES)
    first = store.insert({"item_name": "A", "amount": 1, "date": "2024-01-01", "customer": None})
    with database.cursor() as cursor:
        cursor.execute("DELETE FROM sales")
    second = store.insert({"item_name": "B", "amount": 1, "date": "2024-01-01", "customer": None})
    assert second.id > first.id


def test_insert_constraint_violation_raises_persistence_error(database):
    store = RecordStore(database, INVENTORY)
    with pytest.raises(PersistenceError) as excinfo:
        store.insert({"item_name": "Gadget", "quantity": -1, "price": 5})
    assert excinfo.value.message == "Failed to add inventory item to database"
    assert isinstance(excinfo.value.__cause__, sqlite3.IntegrityError)
    assert store.list_all() == []


def test_unavailable_database_raises_persistence_error(broken_database):
    store = RecordStore(broken_database, SALES)
    with pytest.raises(PersistenceError, match="Failed to fetch sales from database"):
        store.list_all()
    with pytest.raises(PersistenceError, match="Failed to add sale to database"):
        store.insert({"item_name": "Widget", "amount": 1, "date": "2024-03-01", "customer": None})


def test_missing_table_raises_persistence_error(database):
    with database.cursor() as cursor:
        cursor.execute("DROP TABLE expenses")
    with pytest.raises(PersistenceError):
        RecordStore(database, EXPENSES).list_all()
