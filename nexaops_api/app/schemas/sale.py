"""
Pydantic models for sale records.

A sale is created from an item name, an amount, the date of the sale
and an optional customer name.  ``id`` and ``created_at`` are assigned
by the database.
"""

from typing import Optional

from pydantic import BaseModel, Field


class SaleRead(BaseModel):
    """Schema for reading a sale from the API."""

    id: int
    item_name: str = Field(..., example="Widget")
    amount: float = Field(..., example=19.99)
    date: str = Field(..., example="2024-03-01")
    customer: Optional[str] = Field(None, example="Acme")
    created_at: str

    model_config = {
        "from_attributes": True,
    }
