"""
Current metal rate API endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from nivesh.dependencies import get_db, get_current_user_id
from nivesh.models import Metal
from nivesh.schemas.rate import RateList, RateResponse, RateUpdate
from nivesh.services import rate_service

router = APIRouter(prefix="/rates", tags=["rates"])


@router.get("", response_model=RateList)
def list_rates(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    return RateList(items=[rate_service.get_rate(db, user_id, metal) for metal in Metal])


@router.get("/{metal}", response_model=RateResponse)
def get_rate(
    metal: Metal,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    return rate_service.get_rate(db, user_id, metal)


@router.put("/{metal}", response_model=RateResponse)
def update_rate(
    metal: Metal,
    update: RateUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    return rate_service.set_current_rate(db, user_id, metal, update.value)
