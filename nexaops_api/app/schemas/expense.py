"""Pydantic models for expense records."""

from pydantic import BaseModel, Field


class ExpenseRead(BaseModel):
    """Schema for reading an expense from the API."""

    id: int
    description: str = Field(..., example="Office rent and utilities")
    amount: float = Field(..., example=5000.0)
    date: str = Field(..., example="2024-01-15")
    created_at: str

    model_config = {
        "from_attributes": True,
    }
