"""
Fixed deposit database model.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, Date, Numeric, Text, Enum
import enum
from nivesh.database import Base


class InterestType(str, enum.Enum):
    """How deposit interest is applied."""
    simple = "simple"
    compound = "compound"


class FixedDeposit(Base):
    """Fixed deposit with its maturity snapshot taken at creation."""

    __tablename__ = "fixed_deposits"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(128), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    amount = Column(Numeric(14, 2), nullable=False)  # Principal
    bank_name = Column(String(120), nullable=False)
    interest_rate = Column(Numeric(5, 2), nullable=False)  # Annual %
    duration_months = Column(Integer, nullable=False)
    interest_type = Column(Enum(InterestType), default=InterestType.compound, nullable=False)
    compounding_frequency = Column(Integer, default=4, nullable=False)
    maturity_date = Column(Date, nullable=False)
    maturity_amount = Column(Numeric(14, 2), nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
