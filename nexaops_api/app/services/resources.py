"""
Descriptors for the business resources exposed by the API.

A ``ResourceDescriptor`` bundles everything that differs between
sales, expenses and inventory: the table, the writable columns, the
validator, the schema used to read rows back and the labels used in
log lines and response messages.  ``RecordStore``, ``ResourceService``
and the router factory are written once against this description.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Type

from pydantic import BaseModel

from nexaops_api.app.schemas.expense import ExpenseRead
from nexaops_api.app.schemas.inventory import InventoryItemRead
from nexaops_api.app.schemas.sale import SaleRead
from nexaops_api.app.services.validators import (
    ValidationResult,
    validate_expense,
    validate_inventory_item,
    validate_sale,
)


@dataclass(frozen=True)
class ResourceDescriptor:
    """Static description of one resource kind."""

    name: str
    table: str
    fields: Tuple[str, ...]
    validator: Callable[[Any], ValidationResult]
    read_schema: Type[BaseModel]
    label: str
    plural_label: str
    # Per-field conversions applied after validation, e.g. ``3.0`` -> ``3``.
    converters: Mapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    @property
    def title(self) -> str:
        """Label with an upper‑case first letter, for response messages."""
        return self.label[:1].upper() + self.label[1:]

    def clean(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Return the column values to insert for a validated payload.

        Unknown keys are dropped, strings are stripped and missing
        optional fields become ``None``.
        """
        values: Dict[str, Any] = {}
        for name in self.fields:
            value: Optional[Any] = payload.get(name)
            if isinstance(value, str):
                value = value.strip()
            converter = self.converters.get(name)
            if converter is not None and value is not None:
                value = converter(value)
            values[name] = value
        return values


SALES = ResourceDescriptor(
    name="sales",
    table="sales",
    fields=("item_name", "amount", "date", "customer"),
    validator=validate_sale,
    read_schema=SaleRead,
    label="sale",
    plural_label="sales",
    converters={"amount": float},
)

EXPENSES = ResourceDescriptor(
    name="expenses",
    table="expenses",
    fields=("description", "amount", "date"),
    validator=validate_expense,
    read_schema=ExpenseRead,
    label="expense",
    plural_label="expenses",
    converters={"amount": float},
)

INVENTORY = ResourceDescriptor(
    name="inventory",
    table="inventory",
    fields=("item_name", "quantity", "price"),
    validator=validate_inventory_item,
    read_schema=InventoryItemRead,
    label="inventory item",
    plural_label="inventory items",
    converters={"quantity": int, "price": float},
)

RESOURCES: Tuple[ResourceDescriptor, ...] = (SALES, EXPENSES, INVENTORY)
