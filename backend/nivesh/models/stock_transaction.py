"""
Equity buy/sell transaction model.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Date, Numeric, Text, Enum, Index
import enum
from nivesh.database import Base


class TransactionType(str, enum.Enum):
    """Direction of an equity or fund trade."""
    buy = "buy"
    sell = "sell"


class StockTransaction(Base):
    """Stock transaction model."""

    __tablename__ = "stock_transactions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(128), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    symbol = Column(String(32), nullable=False)
    company_name = Column(String(255), nullable=False)
    quantity = Column(Numeric(14, 4), nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    total_amount = Column(Numeric(14, 2), nullable=False)  # quantity x price at entry
    transaction_type = Column(Enum(TransactionType), nullable=False)
    brokerage_charges = Column(Numeric(12, 2), default=0, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("idx_stock_user_symbol", "user_id", "symbol"),
    )
