"""
What-if deposit calculator schemas.
"""

from pydantic import BaseModel, Field
from datetime import date
from typing import Optional
from nivesh.models.fixed_deposit import InterestType
from nivesh.schemas.deposit import CompoundingFrequency
from nivesh.schemas.valuation import FDCalculationResult, RDMaturityResult


class FDCalculatorRequest(BaseModel):
    principal: float = Field(..., gt=0)
    interest_rate: float = Field(..., ge=0, le=100)
    duration_months: int = Field(..., gt=0)
    interest_type: InterestType = InterestType.compound
    compounding_frequency: CompoundingFrequency = 4
    start_date: Optional[date] = None


class FDCalculatorResponse(FDCalculationResult):
    maturity_date: Optional[date] = None


class RDCalculatorRequest(BaseModel):
    monthly_amount: float = Field(..., gt=0)
    interest_rate: float = Field(..., ge=0, le=100)
    duration_months: int = Field(..., gt=0)
    start_date: Optional[date] = None


class RDCalculatorResponse(RDMaturityResult):
    maturity_date: Optional[date] = None
