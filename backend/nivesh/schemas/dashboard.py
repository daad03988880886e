"""
Dashboard schemas.
"""

from pydantic import BaseModel, Field
from datetime import date
from typing import Dict, List
from nivesh.models.asset_class import AssetClass


class AssetClassSummary(BaseModel):
    asset_class: AssetClass
    label: str
    invested: float
    current_value: float
    profit_loss: float
    roi: float
    items_count: int
    additional_info: Dict[str, float] = Field(default_factory=dict)


class DistributionSlice(BaseModel):
    asset_class: AssetClass
    label: str
    value: float
    percent: float


class PortfolioSummary(BaseModel):
    as_of: date
    total_invested: float
    total_current_value: float
    total_profit_loss: float
    roi: float
    by_asset_class: List[AssetClassSummary]
    distribution: List[DistributionSlice]


class ReferenceData(BaseModel):
    bank_names: List[str]
    popular_stocks: List[Dict[str, str]]
    popular_mutual_funds: List[Dict[str, str]]
