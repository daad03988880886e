"""
Investment valuation engine.

Turns a snapshot of transactions (ORM rows, schemas or plain dicts) plus a
reference rate or date into invested amount, current value, profit/loss and
ROI for each asset class. Near-identical asset classes share one formula
implementation configured by a field-accessor dataclass:

- metals (gold, silver): spot-priced weight plus unspent cash
- deposits (FD, RD): stored maturity snapshot once matured, live accrual before
- holdings (stocks, mutual funds): net position at the last seen price
"""

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

from nivesh.models.fixed_deposit import InterestType
from nivesh.schemas.valuation import DepositStatus, InvestmentResult, Holding
from nivesh.services.interest import (
    DateLike,
    DEFAULT_COMPOUNDING_FREQUENCY,
    add_months,
    calculate_fd_accrued_value,
    calculate_rd_accrued_value,
    months_elapsed,
    to_datetime,
)

logger = logging.getLogger(__name__)

QUANTITY_EPSILON = 1e-9


# ==============================================================================
# RECORD ACCESS
# ==============================================================================

def to_number(value: Any) -> float:
    """Coerce a stored value to float. Missing, NaN and non-numeric values become 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, Decimal):
        value = float(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def get_field(record: Any, name: str) -> Any:
    """Read a field from a mapping or an object."""
    if isinstance(record, dict):
        return record.get(name)
    return getattr(record, name, None)


def _number(record: Any, name: str) -> float:
    return to_number(get_field(record, name))


def _enum_value(value: Any) -> str:
    return str(getattr(value, "value", value) or "").lower()


def parse_date(value: Any) -> Optional[datetime]:
    """Read a stored date; None when missing or unparseable."""
    if value is None:
        return None
    try:
        return to_datetime(value)
    except (TypeError, ValueError):
        return None


def _date_or_min(value: Any) -> datetime:
    parsed = parse_date(value)
    return datetime.min if parsed is None else parsed


def calculate_roi(profit_loss: float, invested: float) -> float:
    """Percentage return; 0 when nothing is invested."""
    if invested <= 0:
        return 0.0
    return profit_loss / invested * 100


def _build_result(invested: float, current_value: float, additional_info: Dict[str, float]) -> InvestmentResult:
    profit_loss = current_value - invested
    return InvestmentResult(
        invested=invested,
        current_value=current_value,
        profit_loss=profit_loss,
        roi=calculate_roi(profit_loss, invested),
        additional_info=additional_info,
    )


# ==============================================================================
# METALS
# ==============================================================================

@dataclass(frozen=True)
class MetalFields:
    """Names of the fields a metal purchase record carries."""
    amount_sent: str = "amount_sent"
    rate: str = "rate"
    tax_amount: str = "tax_amount"
    quantity: str = "quantity_purchased"


GOLD_FIELDS = MetalFields()
SILVER_FIELDS = MetalFields()


def calculate_metal_investment(
    transactions: Iterable[Any],
    current_rate: float,
    fields: MetalFields = GOLD_FIELDS
) -> InvestmentResult:
    """
    Value metal purchases at today's spot rate.

    Each purchase leaves cash unspent: (amount sent - tax) - grams * rate paid.
    That leftover (possibly negative) is part of the current value alongside
    the metal held.

    Example:
        >>> txns = [{"amount_sent": 10000, "rate": 6000, "tax_amount": 100, "quantity_purchased": 1.5}]
        >>> calculate_metal_investment(txns, 6500).current_value
        10650.0
    """
    current_rate = to_number(current_rate)
    invested = 0.0
    held = 0.0
    leftover = 0.0

    for t in transactions:
        amount_sent = _number(t, fields.amount_sent)
        quantity = _number(t, fields.quantity)
        usable = amount_sent - _number(t, fields.tax_amount)
        cost = quantity * _number(t, fields.rate)

        invested += amount_sent
        held += quantity
        leftover += usable - cost

    value = held * current_rate
    return _build_result(invested, value + leftover, {
        "held": held,
        "value": value,
        "leftover": leftover,
    })


def calculate_gold_investment(transactions: Iterable[Any], current_rate: float) -> InvestmentResult:
    return calculate_metal_investment(transactions, current_rate, GOLD_FIELDS)


def calculate_silver_investment(transactions: Iterable[Any], current_rate: float) -> InvestmentResult:
    return calculate_metal_investment(transactions, current_rate, SILVER_FIELDS)


# ==============================================================================
# DEPOSITS
# ==============================================================================

def _maturity_date(record: Any) -> Optional[datetime]:
    maturity = parse_date(get_field(record, "maturity_date"))
    if maturity is None:
        start = parse_date(get_field(record, "date"))
        if start is None:
            return None
        maturity = to_datetime(add_months(start, int(_number(record, "duration_months"))))
    return maturity


def is_matured(record: Any, as_of: DateLike) -> bool:
    """A deposit with no usable maturity or start date never counts as matured."""
    maturity = _maturity_date(record)
    return maturity is not None and to_datetime(as_of) >= maturity


def days_to_maturity(record: Any, as_of: DateLike) -> int:
    """Whole days left until maturity, rounded up; 0 once matured or when unknown."""
    maturity = _maturity_date(record)
    if maturity is None:
        return 0
    seconds = (maturity - to_datetime(as_of)).total_seconds()
    return max(0, math.ceil(seconds / 86400))


def average_interest_rate(transactions: Iterable[Any]) -> float:
    """Unweighted mean of the deposits' annual rates; 0 for no deposits."""
    rates = [_number(t, "interest_rate") for t in transactions]
    if not rates:
        return 0.0
    return sum(rates) / len(rates)


def fd_current_value(record: Any, as_of: DateLike, honor_interest_type: bool = False) -> float:
    """
    Live value of one fixed deposit.

    Matured deposits are worth their stored maturity amount. Before maturity
    the value accrues as quarterly compound interest, unless honor_interest_type
    asks for the deposit's own interest type and frequency.
    """
    if is_matured(record, as_of):
        return _number(record, "maturity_amount")

    start = parse_date(get_field(record, "date"))
    if start is None:
        return _number(record, "amount")

    interest_type = InterestType.compound
    frequency = DEFAULT_COMPOUNDING_FREQUENCY
    if honor_interest_type:
        if _enum_value(get_field(record, "interest_type")) == InterestType.simple.value:
            interest_type = InterestType.simple
        frequency = int(_number(record, "compounding_frequency")) or DEFAULT_COMPOUNDING_FREQUENCY

    return calculate_fd_accrued_value(
        _number(record, "amount"),
        _number(record, "interest_rate"),
        start,
        as_of,
        interest_type,
        frequency,
    )


def calculate_fd_investment(
    transactions: Iterable[Any],
    as_of: DateLike,
    honor_interest_type: bool = False
) -> InvestmentResult:
    transactions = list(transactions)
    invested = sum(_number(t, "amount") for t in transactions)
    current_value = 0.0
    matured = 0

    for t in transactions:
        if is_matured(t, as_of):
            matured += 1
        current_value += fd_current_value(t, as_of, honor_interest_type)

    logger.debug("Valued %d fixed deposits: invested=%.2f current=%.2f", len(transactions), invested, current_value)
    return _build_result(invested, current_value, {
        "accrued_value": current_value,
        "active_count": len(transactions) - matured,
        "matured_count": matured,
        "average_interest_rate": average_interest_rate(transactions),
    })


def rd_installments_paid(record: Any, as_of: DateLike) -> int:
    """Installments paid by as_of, including the booking month. 0 without a usable start date."""
    start = parse_date(get_field(record, "date"))
    if start is None:
        return 0
    return months_elapsed(start, as_of, int(_number(record, "duration_months")))


def rd_completion_percent(record: Any, as_of: DateLike) -> float:
    duration = int(_number(record, "duration_months"))
    if duration <= 0:
        return 0.0
    return rd_installments_paid(record, as_of) / duration * 100


def rd_invested_so_far(record: Any, as_of: DateLike) -> float:
    return _number(record, "monthly_amount") * rd_installments_paid(record, as_of)


def rd_current_value(record: Any, as_of: DateLike) -> float:
    """Stored maturity amount once matured, otherwise the accrued value of installments so far."""
    if is_matured(record, as_of):
        return _number(record, "maturity_amount")

    return calculate_rd_accrued_value(
        _number(record, "monthly_amount"),
        _number(record, "interest_rate"),
        rd_installments_paid(record, as_of),
    )


def calculate_rd_investment(transactions: Iterable[Any], as_of: DateLike) -> InvestmentResult:
    transactions = list(transactions)
    invested = 0.0
    current_value = 0.0
    active = 0
    matured = 0
    monthly_commitment = 0.0

    for t in transactions:
        invested += rd_invested_so_far(t, as_of)
        current_value += rd_current_value(t, as_of)
        if is_matured(t, as_of):
            matured += 1
        else:
            active += 1
            monthly_commitment += _number(t, "monthly_amount")

    return _build_result(invested, current_value, {
        "accrued_value": current_value,
        "active_count": active,
        "matured_count": matured,
        "monthly_commitment": monthly_commitment,
        "average_interest_rate": average_interest_rate(transactions),
    })


def build_deposit_statuses(
    transactions: Iterable[Any],
    as_of: DateLike,
    recurring: bool = False,
    honor_interest_type: bool = False
) -> List[DepositStatus]:
    """Per-deposit maturity countdown and live value, soonest maturity first."""
    statuses = []
    for t in transactions:
        maturity = _maturity_date(t)
        status = DepositStatus(
            id=str(get_field(t, "id") or ""),
            bank_name=str(get_field(t, "bank_name") or ""),
            interest_rate=_number(t, "interest_rate"),
            maturity_date=maturity.date() if maturity else None,
            is_matured=is_matured(t, as_of),
            days_to_maturity=days_to_maturity(t, as_of),
            current_value=rd_current_value(t, as_of) if recurring else fd_current_value(t, as_of, honor_interest_type),
        )
        if recurring:
            status.installments_paid = rd_installments_paid(t, as_of)
            status.completion_percent = rd_completion_percent(t, as_of)
        statuses.append(status)

    return sorted(statuses, key=lambda s: (s.is_matured, s.days_to_maturity))


# ==============================================================================
# HOLDINGS (STOCKS, MUTUAL FUNDS)
# ==============================================================================

@dataclass(frozen=True)
class HoldingFields:
    """Names of the fields a buy/sell record carries."""
    key: str
    name: str
    quantity: str
    price: str
    charges: str
    total_amount: str = "total_amount"
    transaction_type: str = "transaction_type"
    date: str = "date"


STOCK_FIELDS = HoldingFields(
    key="symbol",
    name="company_name",
    quantity="quantity",
    price="price",
    charges="brokerage_charges",
)

MUTUAL_FUND_FIELDS = HoldingFields(
    key="fund_name",
    name="fund_name",
    quantity="units",
    price="nav",
    charges="charges",
)


@dataclass
class _Position:
    name: str
    quantity: float = 0.0
    cost: float = 0.0
    last_price: float = 0.0
    last_date: Optional[datetime] = None
    buys: int = 0
    sells: int = 0

    @property
    def is_held(self) -> bool:
        return self.quantity > QUANTITY_EPSILON

    @property
    def current_value(self) -> float:
        return self.quantity * self.last_price


def _build_positions(transactions: Iterable[Any], fields: HoldingFields) -> Dict[str, _Position]:
    """
    Net each instrument's buys and sells.

    Buys add total amount plus charges to cost; sells subtract total amount
    minus charges. The price of the most recently dated transaction (first
    seen on ties) stands in for the current price.
    """
    positions: Dict[str, _Position] = {}

    for t in transactions:
        key = str(get_field(t, fields.key) or "")
        position = positions.get(key)
        if position is None:
            position = _Position(name=str(get_field(t, fields.name) or key))
            positions[key] = position

        quantity = _number(t, fields.quantity)
        total_amount = _number(t, fields.total_amount)
        charges = _number(t, fields.charges)
        kind = _enum_value(get_field(t, fields.transaction_type))

        if kind == "buy":
            position.quantity += quantity
            position.cost += total_amount + charges
            position.buys += 1
        elif kind == "sell":
            position.quantity -= quantity
            position.cost -= total_amount - charges
            position.sells += 1

        txn_date = _date_or_min(get_field(t, fields.date))
        if position.last_date is None or txn_date > position.last_date:
            position.last_date = txn_date
            position.last_price = _number(t, fields.price)

    return positions


def calculate_holdings_investment(transactions: Iterable[Any], fields: HoldingFields) -> InvestmentResult:
    transactions = list(transactions)
    positions = _build_positions(transactions, fields)
    held = [p for p in positions.values() if p.is_held]

    invested = sum(p.cost for p in held)
    current_value = sum(p.current_value for p in held)

    return _build_result(invested, current_value, {
        "held_instruments": len(held),
        "unique_instruments": len(positions),
        "total_transactions": len(transactions),
        "buy_transactions": sum(p.buys for p in positions.values()),
        "sell_transactions": sum(p.sells for p in positions.values()),
    })


def calculate_stock_investment(transactions: Iterable[Any]) -> InvestmentResult:
    return calculate_holdings_investment(transactions, STOCK_FIELDS)


def calculate_mutual_fund_investment(transactions: Iterable[Any]) -> InvestmentResult:
    return calculate_holdings_investment(transactions, MUTUAL_FUND_FIELDS)


def build_holdings(transactions: Iterable[Any], fields: HoldingFields) -> List[Holding]:
    """Per-instrument breakdown of held positions, largest current value first."""
    holdings = []
    for key, position in _build_positions(transactions, fields).items():
        if not position.is_held:
            continue
        current_value = position.current_value
        profit_loss = current_value - position.cost
        holdings.append(Holding(
            key=key,
            name=position.name,
            quantity=position.quantity,
            average_cost=position.cost / position.quantity,
            last_price=position.last_price,
            invested=position.cost,
            current_value=current_value,
            profit_loss=profit_loss,
            roi=calculate_roi(profit_loss, position.cost),
        ))

    return sorted(holdings, key=lambda h: h.current_value, reverse=True)
