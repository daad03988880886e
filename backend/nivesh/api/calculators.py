"""
Deposit calculator endpoints. Nothing is stored.
"""

from fastapi import APIRouter

from nivesh.schemas.calculator import (
    FDCalculatorRequest,
    FDCalculatorResponse,
    RDCalculatorRequest,
    RDCalculatorResponse,
)
from nivesh.services.interest import add_months, calculate_fd_maturity, calculate_rd_maturity

router = APIRouter(prefix="/calculators", tags=["calculators"])


@router.post("/fd", response_model=FDCalculatorResponse)
def calculate_fixed_deposit(request: FDCalculatorRequest):
    """Maturity amount, interest and effective rate for a prospective fixed deposit."""
    result = calculate_fd_maturity(
        request.principal,
        request.interest_rate,
        request.duration_months,
        request.interest_type,
        request.compounding_frequency,
    )
    maturity_date = add_months(request.start_date, request.duration_months) if request.start_date else None
    return FDCalculatorResponse(**result.model_dump(), maturity_date=maturity_date)


@router.post("/rd", response_model=RDCalculatorResponse)
def calculate_recurring_deposit(request: RDCalculatorRequest):
    """Maturity amount for a prospective recurring deposit."""
    result = calculate_rd_maturity(request.monthly_amount, request.interest_rate, request.duration_months)
    maturity_date = add_months(request.start_date, request.duration_months) if request.start_date else None
    return RDCalculatorResponse(**result.model_dump(), maturity_date=maturity_date)
