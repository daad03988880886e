"""Shared test fixtures."""

import os

# Keep the app's startup hook off the on-disk database
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
from datetime import date
from decimal import Decimal
import uuid

from nivesh.database import Base
from nivesh.dependencies import get_db
from nivesh.main import app
from nivesh.models import (
    FixedDeposit,
    InterestType,
    Metal,
    MetalTransaction,
    RecurringDeposit,
    StockTransaction,
    TransactionType,
)

TEST_USER = "test-user"


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test using in-memory SQLite."""
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app, headers={"X-User-Id": TEST_USER}) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_gold(db_session):
    """1.5 g bought at 6000/g from a 10000 transfer with 100 tax."""
    txn = MetalTransaction(
        id=str(uuid.uuid4()),
        user_id=TEST_USER,
        metal=Metal.gold,
        date=date(2024, 1, 10),
        amount_sent=Decimal("10000.00"),
        rate=Decimal("6000.00"),
        tax_amount=Decimal("100.00"),
        quantity_purchased=Decimal("1.5"),
    )
    db_session.add(txn)
    db_session.commit()
    db_session.refresh(txn)
    return txn


@pytest.fixture
def sample_fd(db_session):
    """One-year quarterly compounding FD booked on 2024-01-01."""
    deposit = FixedDeposit(
        id=str(uuid.uuid4()),
        user_id=TEST_USER,
        date=date(2024, 1, 1),
        amount=Decimal("100000.00"),
        bank_name="State Bank of India",
        interest_rate=Decimal("7.00"),
        duration_months=12,
        interest_type=InterestType.compound,
        compounding_frequency=4,
        maturity_date=date(2025, 1, 1),
        maturity_amount=Decimal("107185.90"),
    )
    db_session.add(deposit)
    db_session.commit()
    db_session.refresh(deposit)
    return deposit


@pytest.fixture
def sample_rd(db_session):
    """Three-month RD of 5000/month booked on 2024-01-01."""
    deposit = RecurringDeposit(
        id=str(uuid.uuid4()),
        user_id=TEST_USER,
        date=date(2024, 1, 1),
        monthly_amount=Decimal("5000.00"),
        bank_name="HDFC Bank",
        interest_rate=Decimal("6.00"),
        duration_months=3,
        maturity_date=date(2024, 4, 1),
        total_invested=Decimal("15000.00"),
        maturity_amount=Decimal("15149.75"),
        installments_paid=0,
    )
    db_session.add(deposit)
    db_session.commit()
    db_session.refresh(deposit)
    return deposit


@pytest.fixture
def sample_stock_trades(db_session):
    """Buy 10 INFY at 100, sell 4 at 120 later."""
    trades = [
        StockTransaction(
            id=str(uuid.uuid4()),
            user_id=TEST_USER,
            date=date(2024, 1, 1),
            symbol="INFY",
            company_name="Infosys",
            quantity=Decimal("10"),
            price=Decimal("100.00"),
            total_amount=Decimal("1000.00"),
            transaction_type=TransactionType.buy,
            brokerage_charges=Decimal("10.00"),
        ),
        StockTransaction(
            id=str(uuid.uuid4()),
            user_id=TEST_USER,
            date=date(2024, 2, 1),
            symbol="INFY",
            company_name="Infosys",
            quantity=Decimal("4"),
            price=Decimal("120.00"),
            total_amount=Decimal("480.00"),
            transaction_type=TransactionType.sell,
            brokerage_charges=Decimal("5.00"),
        ),
    ]
    db_session.add_all(trades)
    db_session.commit()
    return trades


@pytest.fixture
def user_id():
    """Owner of the sample records."""
    return TEST_USER
