"""
FastAPI dependencies.
"""

from datetime import date
from typing import Generator, Optional

from fastapi import Header, Query
from sqlalchemy.orm import Session

from nivesh.config import settings
from nivesh.database import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for getting database sessions.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user_id(
    x_user_id: Optional[str] = Header(None, alias="X-User-Id")
) -> str:
    """Owning user of the request. No verification is performed."""
    return x_user_id or settings.default_user_id


def get_as_of(
    as_of: Optional[date] = Query(None, description="Valuation date, YYYY-MM-DD (defaults to today)")
) -> date:
    """Reference date captured once per request and threaded through valuation."""
    return as_of or date.today()
