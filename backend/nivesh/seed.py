"""
Seed script for a demo portfolio.
"""

from datetime import date
from typing import Dict

from sqlalchemy.orm import Session

from nivesh.config import settings
from nivesh.database import SessionLocal, init_db
from nivesh.models import AssetClass, InterestType, Metal, TransactionType
from nivesh.services import investment_service, rate_service
from nivesh.services.formatting import format_currency, format_percentage, format_weight
from nivesh.services.portfolio_service import build_portfolio


DEMO_TRANSACTIONS = {
    AssetClass.gold: [
        {"date": date(2024, 1, 10), "amount_sent": 10000, "rate": 6000, "tax_amount": 100,
         "quantity_purchased": 1.5, "notes": "Digital gold"},
    ],
    AssetClass.silver: [
        {"date": date(2024, 2, 5), "amount_sent": 5000, "rate": 75, "tax_amount": 150,
         "quantity_purchased": 64},
    ],
    AssetClass.fd: [
        {"date": date(2024, 4, 1), "amount": 100000, "bank_name": "State Bank of India",
         "interest_rate": 7.0, "duration_months": 12, "interest_type": InterestType.compound,
         "compounding_frequency": 4},
    ],
    AssetClass.rd: [
        {"date": date(2024, 6, 1), "monthly_amount": 5000, "bank_name": "HDFC Bank",
         "interest_rate": 6.5, "duration_months": 24},
    ],
    AssetClass.stocks: [
        {"date": date(2024, 3, 1), "symbol": "TCS", "company_name": "Tata Consultancy Services",
         "quantity": 10, "price": 3900, "transaction_type": TransactionType.buy, "brokerage_charges": 20},
        {"date": date(2024, 9, 2), "symbol": "TCS", "company_name": "Tata Consultancy Services",
         "quantity": 4, "price": 4300, "transaction_type": TransactionType.sell, "brokerage_charges": 20},
    ],
    AssetClass.mutualfunds: [
        {"date": date(2024, 5, 15), "fund_name": "SBI Blue Chip Fund", "scheme_code": "SBI-BLUECHIP",
         "units": 120.5, "nav": 83.0, "transaction_type": TransactionType.buy, "charges": 0},
    ],
}

DEMO_RATES = {
    Metal.gold: 7200.0,
    Metal.silver: 88.0,
}


def seed_demo_portfolio(db: Session, user_id: str) -> Dict[AssetClass, int]:
    """Insert demo records for every asset class that has none yet. Returns counts added."""
    added: Dict[AssetClass, int] = {}

    for asset_class, records in DEMO_TRANSACTIONS.items():
        if investment_service.count_transactions(db, asset_class, user_id) > 0:
            continue
        for record in records:
            investment_service.create_transaction(db, asset_class, user_id, record)
        added[asset_class] = len(records)

    for metal, value in DEMO_RATES.items():
        if rate_service.get_rate(db, user_id, metal).is_default:
            rate_service.set_current_rate(db, user_id, metal, value)

    return added


def main():
    init_db()
    db = SessionLocal()

    try:
        user_id = settings.default_user_id
        added = seed_demo_portfolio(db, user_id)
        if not added:
            print(f"Demo portfolio already seeded for {user_id}")
        else:
            print(f"Seeded {sum(added.values())} transactions across {len(added)} asset classes")

        summary = build_portfolio(db, user_id, date.today())
        for entry in summary.by_asset_class:
            if entry.asset_class in (AssetClass.gold, AssetClass.silver):
                print(f"{entry.label}: {format_weight(entry.additional_info.get('held', 0))} held")
        print(
            f"Invested {format_currency(summary.total_invested)}, "
            f"current {format_currency(summary.total_current_value)} "
            f"({format_percentage(summary.roi)})"
        )
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
