"""Transaction repository: per-asset-class CRUD scoped to the owning user."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel
from sqlalchemy.orm import Session

from nivesh.models import (
    AssetClass,
    FixedDeposit,
    InterestType,
    Metal,
    MetalTransaction,
    MutualFundTransaction,
    RecurringDeposit,
    StockTransaction,
)
from nivesh.services.interest import add_months, calculate_fd_maturity, calculate_rd_maturity

logger = logging.getLogger(__name__)

Payload = Union[BaseModel, Dict[str, Any]]


@dataclass(frozen=True)
class _Collection:
    model: Any
    metal: Optional[Metal] = None


COLLECTIONS = {
    AssetClass.gold: _Collection(MetalTransaction, Metal.gold),
    AssetClass.silver: _Collection(MetalTransaction, Metal.silver),
    AssetClass.fd: _Collection(FixedDeposit),
    AssetClass.rd: _Collection(RecurringDeposit),
    AssetClass.stocks: _Collection(StockTransaction),
    AssetClass.mutualfunds: _Collection(MutualFundTransaction),
}


def metal_asset_class(metal: Metal) -> AssetClass:
    return AssetClass(metal.value)


def _query(db: Session, asset_class: AssetClass, user_id: str):
    collection = COLLECTIONS[asset_class]
    query = db.query(collection.model).filter(collection.model.user_id == user_id)
    if collection.metal is not None:
        query = query.filter(collection.model.metal == collection.metal)
    return query


def _to_dict(data: Payload) -> Dict[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump()
    return dict(data)


def derive_fields(asset_class: AssetClass, values: Dict[str, Any]) -> Dict[str, Any]:
    """
    Fill in the fields computed from user input.

    Deposit maturity figures are snapshots taken here, on create and on edit;
    reads never recompute them.
    """
    values = dict(values)

    if asset_class == AssetClass.fd:
        values["maturity_date"] = add_months(values["date"], values["duration_months"])
        result = calculate_fd_maturity(
            float(values["amount"]),
            float(values["interest_rate"]),
            values["duration_months"],
            InterestType(values.get("interest_type") or InterestType.compound),
            values.get("compounding_frequency") or 4,
        )
        values["maturity_amount"] = round(result.maturity_amount, 2)

    elif asset_class == AssetClass.rd:
        values["maturity_date"] = add_months(values["date"], values["duration_months"])
        result = calculate_rd_maturity(
            float(values["monthly_amount"]),
            float(values["interest_rate"]),
            values["duration_months"],
        )
        values["total_invested"] = round(result.total_invested, 2)
        values["maturity_amount"] = round(result.maturity_amount, 2)
        values["installments_paid"] = 0

    elif asset_class == AssetClass.stocks:
        values["total_amount"] = round(float(values["quantity"]) * float(values["price"]), 2)

    elif asset_class == AssetClass.mutualfunds:
        values["total_amount"] = round(float(values["units"]) * float(values["nav"]), 2)

    else:
        values["metal"] = COLLECTIONS[asset_class].metal

    return values


def list_transactions(db: Session, asset_class: AssetClass, user_id: str) -> List[Any]:
    """All of a user's transactions for one asset class, newest first."""
    model = COLLECTIONS[asset_class].model
    return _query(db, asset_class, user_id).order_by(
        model.date.desc(),
        model.created_at.desc()
    ).all()


def count_transactions(db: Session, asset_class: AssetClass, user_id: str) -> int:
    return _query(db, asset_class, user_id).count()


def get_transaction(
    db: Session,
    asset_class: AssetClass,
    user_id: str,
    transaction_id: str
) -> Optional[Any]:
    """Return the transaction, or None if missing or owned by someone else."""
    model = COLLECTIONS[asset_class].model
    return _query(db, asset_class, user_id).filter(model.id == transaction_id).first()


def create_transaction(db: Session, asset_class: AssetClass, user_id: str, data: Payload) -> Any:
    values = derive_fields(asset_class, _to_dict(data))
    record = COLLECTIONS[asset_class].model(user_id=user_id, **values)
    db.add(record)
    db.commit()
    db.refresh(record)

    logger.info("Created %s transaction %s for user %s", asset_class.value, record.id, user_id)
    return record


def update_transaction(
    db: Session,
    asset_class: AssetClass,
    user_id: str,
    transaction_id: str,
    data: Payload
) -> Any:
    """
    Replace every user-editable field of a transaction and re-derive its snapshots.

    Raises:
        ValueError: if the transaction does not exist for this user
    """
    record = get_transaction(db, asset_class, user_id, transaction_id)
    if not record:
        raise ValueError(f"{asset_class.value} transaction {transaction_id} not found")

    for field, value in derive_fields(asset_class, _to_dict(data)).items():
        setattr(record, field, value)

    db.commit()
    db.refresh(record)

    logger.info("Updated %s transaction %s", asset_class.value, transaction_id)
    return record


def delete_transaction(db: Session, asset_class: AssetClass, user_id: str, transaction_id: str) -> None:
    """
    Raises:
        ValueError: if the transaction does not exist for this user
    """
    record = get_transaction(db, asset_class, user_id, transaction_id)
    if not record:
        raise ValueError(f"{asset_class.value} transaction {transaction_id} not found")

    db.delete(record)
    db.commit()
    logger.info("Deleted %s transaction %s", asset_class.value, transaction_id)
