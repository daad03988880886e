"""
Portfolio rollup across asset classes.
"""

import logging
from datetime import date
from typing import Dict, Mapping, Optional

from sqlalchemy.orm import Session

from nivesh.config import settings
from nivesh.models import AssetClass, ASSET_CLASS_LABELS, Metal
from nivesh.schemas.dashboard import AssetClassSummary, DistributionSlice, PortfolioSummary
from nivesh.schemas.valuation import InvestmentResult
from nivesh.services import investment_service, rate_service
from nivesh.services.valuation_service import (
    calculate_fd_investment,
    calculate_gold_investment,
    calculate_mutual_fund_investment,
    calculate_rd_investment,
    calculate_roi,
    calculate_silver_investment,
    calculate_stock_investment,
)

logger = logging.getLogger(__name__)


def summarize_portfolio(
    results: Mapping[AssetClass, InvestmentResult],
    as_of: date,
    items_count: Optional[Mapping[AssetClass, int]] = None
) -> PortfolioSummary:
    """
    Sum per-class results into portfolio totals.

    The distribution is weighted by current value; classes worth zero or less
    are left out of it.
    """
    items_count = items_count or {}

    total_invested = sum(r.invested for r in results.values())
    total_current_value = sum(r.current_value for r in results.values())
    total_profit_loss = total_current_value - total_invested

    by_asset_class = [
        AssetClassSummary(
            asset_class=asset_class,
            label=ASSET_CLASS_LABELS[asset_class],
            invested=result.invested,
            current_value=result.current_value,
            profit_loss=result.profit_loss,
            roi=result.roi,
            items_count=items_count.get(asset_class, 0),
            additional_info=result.additional_info,
        )
        for asset_class, result in results.items()
    ]

    positive = {ac: r.current_value for ac, r in results.items() if r.current_value > 0}
    positive_total = sum(positive.values())
    distribution = [
        DistributionSlice(
            asset_class=asset_class,
            label=ASSET_CLASS_LABELS[asset_class],
            value=value,
            percent=value / positive_total * 100,
        )
        for asset_class, value in positive.items()
    ]

    return PortfolioSummary(
        as_of=as_of,
        total_invested=total_invested,
        total_current_value=total_current_value,
        total_profit_loss=total_profit_loss,
        roi=calculate_roi(total_profit_loss, total_invested),
        by_asset_class=by_asset_class,
        distribution=distribution,
    )


def value_asset_class(db: Session, user_id: str, asset_class: AssetClass, as_of: date, transactions=None) -> InvestmentResult:
    """Fetch (unless given) and value one asset class for a user."""
    if transactions is None:
        transactions = investment_service.list_transactions(db, asset_class, user_id)

    if asset_class == AssetClass.gold:
        return calculate_gold_investment(transactions, rate_service.get_current_rate(db, user_id, Metal.gold))
    if asset_class == AssetClass.silver:
        return calculate_silver_investment(transactions, rate_service.get_current_rate(db, user_id, Metal.silver))
    if asset_class == AssetClass.fd:
        return calculate_fd_investment(transactions, as_of, settings.fd_accrual_honors_interest_type)
    if asset_class == AssetClass.rd:
        return calculate_rd_investment(transactions, as_of)
    if asset_class == AssetClass.stocks:
        return calculate_stock_investment(transactions)
    return calculate_mutual_fund_investment(transactions)


def build_portfolio(db: Session, user_id: str, as_of: date) -> PortfolioSummary:
    """Value every asset class the user holds transactions in and roll them up."""
    results: Dict[AssetClass, InvestmentResult] = {}
    counts: Dict[AssetClass, int] = {}

    for asset_class in AssetClass:
        transactions = investment_service.list_transactions(db, asset_class, user_id)
        if not transactions:
            continue
        results[asset_class] = value_asset_class(db, user_id, asset_class, as_of, transactions)
        counts[asset_class] = len(transactions)

    summary = summarize_portfolio(results, as_of, counts)
    logger.debug(
        "Portfolio for %s as of %s: %d classes, invested=%.2f current=%.2f",
        user_id, as_of, len(results), summary.total_invested, summary.total_current_value
    )
    return summary
