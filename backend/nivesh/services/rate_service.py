"""Current spot-rate store for metals, with configured fallbacks."""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from nivesh.config import settings
from nivesh.models import Metal, RateSetting
from nivesh.schemas.rate import RateResponse

logger = logging.getLogger(__name__)


def default_rate(metal: Metal) -> float:
    if metal == Metal.gold:
        return settings.default_gold_rate
    return settings.default_silver_rate


def _get_setting(db: Session, user_id: str, metal: Metal) -> Optional[RateSetting]:
    return db.query(RateSetting).filter(
        RateSetting.user_id == user_id,
        RateSetting.metal == metal
    ).first()


def get_rate(db: Session, user_id: str, metal: Metal) -> RateResponse:
    """The user's current rate for a metal, or the configured default when unset."""
    setting = _get_setting(db, user_id, metal)
    if not setting:
        logger.debug("No %s rate for user %s, using default", metal.value, user_id)
        return RateResponse(metal=metal, value=default_rate(metal), is_default=True)

    return RateResponse(
        metal=metal,
        value=float(setting.value),
        is_default=False,
        updated_at=setting.updated_at,
    )


def get_current_rate(db: Session, user_id: str, metal: Metal) -> float:
    return get_rate(db, user_id, metal).value


def set_current_rate(db: Session, user_id: str, metal: Metal, value: float) -> RateResponse:
    """Create or overwrite the user's rate for a metal."""
    if value <= 0:
        raise ValueError(f"Rate must be positive, got {value}")

    setting = _get_setting(db, user_id, metal)
    if setting:
        setting.value = value
    else:
        setting = RateSetting(user_id=user_id, metal=metal, value=value)
        db.add(setting)

    db.commit()
    db.refresh(setting)

    logger.info("Set %s rate to %s for user %s", metal.value, value, user_id)
    return get_rate(db, user_id, metal)
