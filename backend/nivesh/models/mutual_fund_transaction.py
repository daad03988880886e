"""
Mutual fund purchase/redemption model.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Date, Numeric, Text, Enum, Index
from nivesh.database import Base
from nivesh.models.stock_transaction import TransactionType


class MutualFundTransaction(Base):
    """Mutual fund transaction model. Units are bought or redeemed at the day's NAV."""

    __tablename__ = "mutual_fund_transactions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(128), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    fund_name = Column(String(255), nullable=False)
    scheme_code = Column(String(64), nullable=True)
    units = Column(Numeric(16, 4), nullable=False)
    nav = Column(Numeric(12, 4), nullable=False)
    total_amount = Column(Numeric(14, 2), nullable=False)  # units x nav at entry
    transaction_type = Column(Enum(TransactionType), nullable=False)
    charges = Column(Numeric(12, 2), default=0, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("idx_fund_user_name", "user_id", "fund_name"),
    )
