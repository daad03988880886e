"""
Fixed and recurring deposit schemas.
"""

from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Literal, Optional
from nivesh.models.fixed_deposit import InterestType


CompoundingFrequency = Literal[1, 2, 4, 12]


class FixedDepositBase(BaseModel):
    date: date
    amount: float = Field(..., gt=0)
    bank_name: str = Field(..., min_length=1, max_length=120)
    interest_rate: float = Field(..., ge=0, le=100)
    duration_months: int = Field(..., gt=0)
    interest_type: InterestType = InterestType.compound
    compounding_frequency: CompoundingFrequency = 4
    notes: Optional[str] = None


class FixedDepositCreate(FixedDepositBase):
    """Maturity date and amount are derived from these inputs."""
    pass


class FixedDepositResponse(FixedDepositBase):
    id: str
    user_id: str
    maturity_date: date
    maturity_amount: float
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class FixedDepositList(BaseModel):
    items: list[FixedDepositResponse]
    total: int


class RecurringDepositBase(BaseModel):
    date: date
    monthly_amount: float = Field(..., gt=0)
    bank_name: str = Field(..., min_length=1, max_length=120)
    interest_rate: float = Field(..., ge=0, le=100)
    duration_months: int = Field(..., gt=0)
    notes: Optional[str] = None


class RecurringDepositCreate(RecurringDepositBase):
    """Maturity date, total invested and maturity amount are derived from these inputs."""
    pass


class RecurringDepositResponse(RecurringDepositBase):
    id: str
    user_id: str
    maturity_date: date
    total_invested: float
    maturity_amount: float
    installments_paid: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class RecurringDepositList(BaseModel):
    items: list[RecurringDepositResponse]
    total: int
