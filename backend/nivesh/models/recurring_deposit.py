"""
Recurring deposit database model.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, Date, Numeric, Text
from nivesh.database import Base


class RecurringDeposit(Base):
    """Recurring deposit: a fixed monthly installment for a number of months."""

    __tablename__ = "recurring_deposits"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(128), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)  # First installment
    monthly_amount = Column(Numeric(14, 2), nullable=False)
    bank_name = Column(String(120), nullable=False)
    interest_rate = Column(Numeric(5, 2), nullable=False)  # Annual %
    duration_months = Column(Integer, nullable=False)
    maturity_date = Column(Date, nullable=False)
    total_invested = Column(Numeric(14, 2), nullable=False)
    maturity_amount = Column(Numeric(14, 2), nullable=False)
    installments_paid = Column(Integer, default=0, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
