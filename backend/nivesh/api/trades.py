"""
Stock and mutual fund API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from nivesh.dependencies import get_db, get_current_user_id
from nivesh.models import AssetClass
from nivesh.schemas.trade import (
    StockTransactionCreate,
    StockTransactionResponse,
    StockTransactionList,
    MutualFundTransactionCreate,
    MutualFundTransactionResponse,
    MutualFundTransactionList,
)
from nivesh.schemas.valuation import InvestmentResult, HoldingList
from nivesh.services import investment_service
from nivesh.services.valuation_service import (
    MUTUAL_FUND_FIELDS,
    STOCK_FIELDS,
    build_holdings,
    calculate_mutual_fund_investment,
    calculate_stock_investment,
)

stocks_router = APIRouter(prefix="/stocks", tags=["stocks"])
funds_router = APIRouter(prefix="/mutual-funds", tags=["mutual-funds"])


# Stocks

@stocks_router.get("", response_model=StockTransactionList)
def list_stock_transactions(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    items = investment_service.list_transactions(db, AssetClass.stocks, user_id)
    return StockTransactionList(
        items=[StockTransactionResponse.model_validate(t) for t in items],
        total=len(items)
    )


@stocks_router.post("", response_model=StockTransactionResponse, status_code=201)
def create_stock_transaction(
    transaction: StockTransactionCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    record = investment_service.create_transaction(db, AssetClass.stocks, user_id, transaction)
    return StockTransactionResponse.model_validate(record)


@stocks_router.get("/valuation", response_model=InvestmentResult)
def get_stock_valuation(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    """Value held positions at each stock's last transaction price."""
    transactions = investment_service.list_transactions(db, AssetClass.stocks, user_id)
    return calculate_stock_investment(transactions)


@stocks_router.get("/holdings", response_model=HoldingList)
def get_stock_holdings(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    transactions = investment_service.list_transactions(db, AssetClass.stocks, user_id)
    holdings = build_holdings(transactions, STOCK_FIELDS)
    return HoldingList(items=holdings, total=len(holdings))


@stocks_router.get("/{transaction_id}", response_model=StockTransactionResponse)
def get_stock_transaction(
    transaction_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    record = investment_service.get_transaction(db, AssetClass.stocks, user_id, transaction_id)
    if not record:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return StockTransactionResponse.model_validate(record)


@stocks_router.put("/{transaction_id}", response_model=StockTransactionResponse)
def update_stock_transaction(
    transaction_id: str,
    transaction: StockTransactionCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    try:
        record = investment_service.update_transaction(db, AssetClass.stocks, user_id, transaction_id, transaction)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return StockTransactionResponse.model_validate(record)


@stocks_router.delete("/{transaction_id}", status_code=204)
def delete_stock_transaction(
    transaction_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    try:
        investment_service.delete_transaction(db, AssetClass.stocks, user_id, transaction_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return None


# Mutual funds

@funds_router.get("", response_model=MutualFundTransactionList)
def list_mutual_fund_transactions(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    items = investment_service.list_transactions(db, AssetClass.mutualfunds, user_id)
    return MutualFundTransactionList(
        items=[MutualFundTransactionResponse.model_validate(t) for t in items],
        total=len(items)
    )


@funds_router.post("", response_model=MutualFundTransactionResponse, status_code=201)
def create_mutual_fund_transaction(
    transaction: MutualFundTransactionCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    record = investment_service.create_transaction(db, AssetClass.mutualfunds, user_id, transaction)
    return MutualFundTransactionResponse.model_validate(record)


@funds_router.get("/valuation", response_model=InvestmentResult)
def get_mutual_fund_valuation(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    """Value held units at each fund's last transaction NAV."""
    transactions = investment_service.list_transactions(db, AssetClass.mutualfunds, user_id)
    return calculate_mutual_fund_investment(transactions)


@funds_router.get("/holdings", response_model=HoldingList)
def get_mutual_fund_holdings(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    transactions = investment_service.list_transactions(db, AssetClass.mutualfunds, user_id)
    holdings = build_holdings(transactions, MUTUAL_FUND_FIELDS)
    return HoldingList(items=holdings, total=len(holdings))


@funds_router.get("/{transaction_id}", response_model=MutualFundTransactionResponse)
def get_mutual_fund_transaction(
    transaction_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    record = investment_service.get_transaction(db, AssetClass.mutualfunds, user_id, transaction_id)
    if not record:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return MutualFundTransactionResponse.model_validate(record)


@funds_router.put("/{transaction_id}", response_model=MutualFundTransactionResponse)
def update_mutual_fund_transaction(
    transaction_id: str,
    transaction: MutualFundTransactionCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    try:
        record = investment_service.update_transaction(
            db, AssetClass.mutualfunds, user_id, transaction_id, transaction
        )
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return MutualFundTransactionResponse.model_validate(record)


@funds_router.delete("/{transaction_id}", status_code=204)
def delete_mutual_fund_transaction(
    transaction_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    try:
        investment_service.delete_transaction(db, AssetClass.mutualfunds, user_id, transaction_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return None
