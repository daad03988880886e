"""Per-user current spot rate for metals - persisted like the other settings rows."""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Numeric, Enum, UniqueConstraint

from nivesh.database import Base
from nivesh.models.metal_transaction import Metal


class RateSetting(Base):
    """
    Today's market price per gram for one metal, as entered by the user.
    One row per (user_id, metal); missing rows fall back to configured defaults.
    """
    __tablename__ = "rate_settings"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(128), nullable=False, index=True)
    metal = Column(Enum(Metal), nullable=False)
    value = Column(Numeric(12, 2), nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "metal", name="uq_rate_user_metal"),
    )
