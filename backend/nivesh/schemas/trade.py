"""
Stock and mutual fund transaction schemas.
"""

from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Optional
from nivesh.models.stock_transaction import TransactionType


class StockTransactionBase(BaseModel):
    date: date
    symbol: str = Field(..., min_length=1, max_length=32)
    company_name: str = Field(..., min_length=1, max_length=255)
    quantity: float = Field(..., gt=0)
    price: float = Field(..., gt=0)
    transaction_type: TransactionType
    brokerage_charges: float = Field(0, ge=0)
    notes: Optional[str] = None


class StockTransactionCreate(StockTransactionBase):
    pass


class StockTransactionResponse(StockTransactionBase):
    id: str
    user_id: str
    total_amount: float
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class StockTransactionList(BaseModel):
    items: list[StockTransactionResponse]
    total: int


class MutualFundTransactionBase(BaseModel):
    date: date
    fund_name: str = Field(..., min_length=1, max_length=255)
    scheme_code: Optional[str] = Field(None, max_length=64)
    units: float = Field(..., gt=0)
    nav: float = Field(..., gt=0)
    transaction_type: TransactionType
    charges: float = Field(0, ge=0)
    notes: Optional[str] = None


class MutualFundTransactionCreate(MutualFundTransactionBase):
    pass


class MutualFundTransactionResponse(MutualFundTransactionBase):
    id: str
    user_id: str
    total_amount: float
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class MutualFundTransactionList(BaseModel):
    items: list[MutualFundTransactionResponse]
    total: int
