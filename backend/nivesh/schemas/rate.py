from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional, List
from nivesh.models.metal_transaction import Metal


class RateResponse(BaseModel):
    metal: Metal
    value: float
    is_default: bool
    updated_at: Optional[datetime] = None


class RateUpdate(BaseModel):
    value: float = Field(..., gt=0, description="Current price per gram")


class RateList(BaseModel):
    items: List[RateResponse]
