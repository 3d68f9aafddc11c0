"""
Pydantic models for inventory items.

Inventory rows record what is in stock: the item name, how many units
are held and the unit price.
"""

from pydantic import BaseModel, Field


class InventoryItemRead(BaseModel):
    """Schema for reading an inventory item from the API."""

    id: int
    item_name: str = Field(..., example="Gadget")
    quantity: int = Field(..., example=10)
    price: float = Field(..., example=5.0)
    created_at: str

    model_config = {
        "from_attributes": True,
    }
