"""
Dashboard API endpoints.
"""

from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from nivesh.dependencies import get_db, get_current_user_id, get_as_of
from nivesh.schemas.dashboard import PortfolioSummary, ReferenceData
from nivesh.services.formatting import BANK_NAMES, POPULAR_MUTUAL_FUNDS, POPULAR_STOCKS
from nivesh.services.portfolio_service import build_portfolio

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard/portfolio", response_model=PortfolioSummary)
def get_portfolio_summary(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
    as_of: date = Depends(get_as_of)
):
    """
    Portfolio totals across every asset class with transactions.
    Returns: total_invested, total_current_value, total_profit_loss, roi,
    by_asset_class and the current-value distribution.
    """
    return build_portfolio(db, user_id, as_of)


@router.get("/reference", response_model=ReferenceData)
def get_reference_data():
    """Bank names and popular instruments for entry forms"""
    return ReferenceData(
        bank_names=BANK_NAMES,
        popular_stocks=POPULAR_STOCKS,
        popular_mutual_funds=POPULAR_MUTUAL_FUNDS,
    )
