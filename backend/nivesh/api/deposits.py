"""
Fixed and recurring deposit API endpoints.
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from nivesh.config import settings
from nivesh.dependencies import get_db, get_current_user_id, get_as_of
from nivesh.models import AssetClass
from nivesh.schemas.deposit import (
    FixedDepositCreate,
    FixedDepositResponse,
    FixedDepositList,
    RecurringDepositCreate,
    RecurringDepositResponse,
    RecurringDepositList,
)
from nivesh.schemas.valuation import DepositStatusList, InvestmentResult
from nivesh.services import investment_service
from nivesh.services.valuation_service import (
    build_deposit_statuses,
    calculate_fd_investment,
    calculate_rd_investment,
)

fd_router = APIRouter(prefix="/fixed-deposits", tags=["fixed-deposits"])
rd_router = APIRouter(prefix="/recurring-deposits", tags=["recurring-deposits"])


# Fixed deposits

@fd_router.get("", response_model=FixedDepositList)
def list_fixed_deposits(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    items = investment_service.list_transactions(db, AssetClass.fd, user_id)
    return FixedDepositList(
        items=[FixedDepositResponse.model_validate(t) for t in items],
        total=len(items)
    )


@fd_router.post("", response_model=FixedDepositResponse, status_code=201)
def create_fixed_deposit(
    deposit: FixedDepositCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    """Book a fixed deposit. Maturity date and amount are computed here and stored."""
    record = investment_service.create_transaction(db, AssetClass.fd, user_id, deposit)
    return FixedDepositResponse.model_validate(record)


@fd_router.get("/valuation", response_model=InvestmentResult)
def get_fixed_deposit_valuation(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
    as_of: date = Depends(get_as_of)
):
    transactions = investment_service.list_transactions(db, AssetClass.fd, user_id)
    return calculate_fd_investment(transactions, as_of, settings.fd_accrual_honors_interest_type)


@fd_router.get("/status", response_model=DepositStatusList)
def get_fixed_deposit_status(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
    as_of: date = Depends(get_as_of)
):
    """Days to maturity and live value per deposit, soonest maturity first."""
    transactions = investment_service.list_transactions(db, AssetClass.fd, user_id)
    statuses = build_deposit_statuses(
        transactions, as_of, honor_interest_type=settings.fd_accrual_honors_interest_type
    )
    return DepositStatusList(items=statuses, total=len(statuses))


@fd_router.get("/{deposit_id}", response_model=FixedDepositResponse)
def get_fixed_deposit(
    deposit_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    record = investment_service.get_transaction(db, AssetClass.fd, user_id, deposit_id)
    if not record:
        raise HTTPException(status_code=404, detail="Fixed deposit not found")
    return FixedDepositResponse.model_validate(record)


@fd_router.put("/{deposit_id}", response_model=FixedDepositResponse)
def update_fixed_deposit(
    deposit_id: str,
    deposit: FixedDepositCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    try:
        record = investment_service.update_transaction(db, AssetClass.fd, user_id, deposit_id, deposit)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return FixedDepositResponse.model_validate(record)


@fd_router.delete("/{deposit_id}", status_code=204)
def delete_fixed_deposit(
    deposit_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    try:
        investment_service.delete_transaction(db, AssetClass.fd, user_id, deposit_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return None


# Recurring deposits

@rd_router.get("", response_model=RecurringDepositList)
def list_recurring_deposits(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    items = investment_service.list_transactions(db, AssetClass.rd, user_id)
    return RecurringDepositList(
        items=[RecurringDepositResponse.model_validate(t) for t in items],
        total=len(items)
    )


@rd_router.post("", response_model=RecurringDepositResponse, status_code=201)
def create_recurring_deposit(
    deposit: RecurringDepositCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    """Open a recurring deposit. Total invested and maturity amount are stored at creation."""
    record = investment_service.create_transaction(db, AssetClass.rd, user_id, deposit)
    return RecurringDepositResponse.model_validate(record)


@rd_router.get("/valuation", response_model=InvestmentResult)
def get_recurring_deposit_valuation(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
    as_of: date = Depends(get_as_of)
):
    transactions = investment_service.list_transactions(db, AssetClass.rd, user_id)
    return calculate_rd_investment(transactions, as_of)


@rd_router.get("/status", response_model=DepositStatusList)
def get_recurring_deposit_status(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
    as_of: date = Depends(get_as_of)
):
    """Installments paid, completion and days to maturity per deposit."""
    transactions = investment_service.list_transactions(db, AssetClass.rd, user_id)
    statuses = build_deposit_statuses(transactions, as_of, recurring=True)
    return DepositStatusList(items=statuses, total=len(statuses))


@rd_router.get("/{deposit_id}", response_model=RecurringDepositResponse)
def get_recurring_deposit(
    deposit_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    record = investment_service.get_transaction(db, AssetClass.rd, user_id, deposit_id)
    if not record:
        raise HTTPException(status_code=404, detail="Recurring deposit not found")
    return RecurringDepositResponse.model_validate(record)


@rd_router.put("/{deposit_id}", response_model=RecurringDepositResponse)
def update_recurring_deposit(
    deposit_id: str,
    deposit: RecurringDepositCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    try:
        record = investment_service.update_transaction(db, AssetClass.rd, user_id, deposit_id, deposit)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return RecurringDepositResponse.model_validate(record)


@rd_router.delete("/{deposit_id}", status_code=204)
def delete_recurring_deposit(
    deposit_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    try:
        investment_service.delete_transaction(db, AssetClass.rd, user_id, deposit_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return None
