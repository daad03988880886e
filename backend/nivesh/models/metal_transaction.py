"""
Precious metal (gold/silver) purchase model.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Date, Numeric, Text, Enum, Index
import enum
from nivesh.database import Base


class Metal(str, enum.Enum):
    """Spot-priced metals tracked by weight."""
    gold = "gold"
    silver = "silver"


class MetalTransaction(Base):
    """A single metal purchase: cash sent, the rate paid and the grams bought."""

    __tablename__ = "metal_transactions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(128), nullable=False, index=True)
    metal = Column(Enum(Metal), nullable=False)
    date = Column(Date, nullable=False, index=True)
    amount_sent = Column(Numeric(14, 2), nullable=False)
    rate = Column(Numeric(12, 2), nullable=False)  # Price per gram at purchase
    tax_amount = Column(Numeric(12, 2), default=0, nullable=False)
    quantity_purchased = Column(Numeric(14, 4), nullable=False)  # Grams
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("idx_metal_user_metal", "user_id", "metal"),
    )
