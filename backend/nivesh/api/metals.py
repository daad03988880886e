"""
Gold and silver transaction API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from nivesh.dependencies import get_db, get_current_user_id
from nivesh.models import Metal
from nivesh.schemas.metal import (
    MetalTransactionCreate,
    MetalTransactionResponse,
    MetalTransactionList,
)
from nivesh.schemas.valuation import InvestmentResult
from nivesh.services import investment_service
from nivesh.services.investment_service import metal_asset_class
from nivesh.services.rate_service import get_current_rate
from nivesh.services.valuation_service import calculate_metal_investment

router = APIRouter(prefix="/metals/{metal}", tags=["metals"])


@router.get("/transactions", response_model=MetalTransactionList)
def list_metal_transactions(
    metal: Metal,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    """List a user's purchases of one metal, newest first."""
    items = investment_service.list_transactions(db, metal_asset_class(metal), user_id)
    return MetalTransactionList(
        items=[MetalTransactionResponse.model_validate(t) for t in items],
        total=len(items)
    )


@router.post("/transactions", response_model=MetalTransactionResponse, status_code=201)
def create_metal_transaction(
    metal: Metal,
    transaction: MetalTransactionCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    record = investment_service.create_transaction(db, metal_asset_class(metal), user_id, transaction)
    return MetalTransactionResponse.model_validate(record)


@router.get("/transactions/{transaction_id}", response_model=MetalTransactionResponse)
def get_metal_transaction(
    metal: Metal,
    transaction_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    record = investment_service.get_transaction(db, metal_asset_class(metal), user_id, transaction_id)
    if not record:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return MetalTransactionResponse.model_validate(record)


@router.put("/transactions/{transaction_id}", response_model=MetalTransactionResponse)
def update_metal_transaction(
    metal: Metal,
    transaction_id: str,
    transaction: MetalTransactionCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    try:
        record = investment_service.update_transaction(
            db, metal_asset_class(metal), user_id, transaction_id, transaction
        )
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return MetalTransactionResponse.model_validate(record)


@router.delete("/transactions/{transaction_id}", status_code=204)
def delete_metal_transaction(
    metal: Metal,
    transaction_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    try:
        investment_service.delete_transaction(db, metal_asset_class(metal), user_id, transaction_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return None


@router.get("/valuation", response_model=InvestmentResult)
def get_metal_valuation(
    metal: Metal,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    """Value holdings of one metal at the user's current rate."""
    transactions = investment_service.list_transactions(db, metal_asset_class(metal), user_id)
    return calculate_metal_investment(transactions, get_current_rate(db, user_id, metal))
