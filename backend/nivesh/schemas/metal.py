"""
Metal transaction Pydantic schemas for API validation.
"""

from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Optional
from nivesh.models.metal_transaction import Metal


class MetalTransactionBase(BaseModel):
    """Base metal transaction schema."""
    date: date
    amount_sent: float = Field(..., gt=0)
    rate: float = Field(..., gt=0, description="Price per gram at purchase")
    tax_amount: float = Field(0, ge=0)
    quantity_purchased: float = Field(..., gt=0, description="Grams bought")
    notes: Optional[str] = None


class MetalTransactionCreate(MetalTransactionBase):
    """Schema for creating or replacing a metal transaction."""
    pass


class MetalTransactionResponse(MetalTransactionBase):
    """Schema for metal transaction response."""
    id: str
    user_id: str
    metal: Metal
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class MetalTransactionList(BaseModel):
    """Schema for listing metal transactions."""
    items: list[MetalTransactionResponse]
    total: int
