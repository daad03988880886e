"""
Valuation result schemas shared by the calculation services and the API.
"""

from pydantic import BaseModel, Field
from datetime import date
from typing import Dict, Optional


class FDCalculationResult(BaseModel):
    maturity_amount: float
    total_interest: float
    monthly_interest: float
    effective_rate: float


class RDMaturityResult(BaseModel):
    total_invested: float
    maturity_amount: float
    total_interest: float


class InvestmentResult(BaseModel):
    """Valuation of one asset class at a reference date."""
    invested: float
    current_value: float
    profit_loss: float
    roi: float
    additional_info: Dict[str, float] = Field(default_factory=dict)


class Holding(BaseModel):
    """A still-held equity or fund position."""
    key: str
    name: str
    quantity: float
    average_cost: float
    last_price: float
    invested: float
    current_value: float
    profit_loss: float
    roi: float


class HoldingList(BaseModel):
    items: list[Holding]
    total: int


class DepositStatus(BaseModel):
    """Where one fixed or recurring deposit stands at the valuation date."""
    id: str
    bank_name: str
    interest_rate: float
    maturity_date: Optional[date] = None
    is_matured: bool
    days_to_maturity: int
    current_value: float
    installments_paid: Optional[int] = None
    completion_percent: Optional[float] = None


class DepositStatusList(BaseModel):
    items: list[DepositStatus]
    total: int
