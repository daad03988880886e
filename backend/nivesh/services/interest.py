"""
Interest primitives for fixed and recurring deposits.

Pure functions: every time-dependent calculation takes its reference date as an
argument, so results depend only on the inputs.
"""

import calendar
import math
from datetime import date, datetime, time, timezone
from typing import Union

from nivesh.models.fixed_deposit import InterestType
from nivesh.schemas.valuation import FDCalculationResult, RDMaturityResult


DateLike = Union[date, datetime, str]

SECONDS_PER_YEAR = 365.25 * 24 * 60 * 60
DAYS_PER_MONTH = 30.44

# Recurring deposits compound quarterly regardless of caller preference
RD_COMPOUNDING_FREQUENCY = 4
DEFAULT_COMPOUNDING_FREQUENCY = 4


def to_datetime(value: DateLike) -> datetime:
    """Normalise a date, datetime or ISO-8601 string to a naive datetime."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    return datetime.combine(value, time())


def to_date(value: DateLike) -> date:
    return to_datetime(value).date()


def years_between(start: DateLike, end: DateLike) -> float:
    """Elapsed time in years of 365.25 days. Negative when end precedes start."""
    return (to_datetime(end) - to_datetime(start)).total_seconds() / SECONDS_PER_YEAR


def add_months(start: DateLike, months: int) -> date:
    """
    Calendar month addition, clamped to the last day of the target month.

    Example:
        >>> add_months(date(2024, 1, 31), 1)
        datetime.date(2024, 2, 29)
    """
    start = to_date(start)
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def _monthly_interest(total_interest: float, time_years: float) -> float:
    if time_years <= 0:
        return 0.0
    return total_interest / (time_years * 12)


def _compound_factor(rate_per_annum: float, time_years: float, compounding_frequency: int) -> float:
    if compounding_frequency <= 0:
        raise ValueError(f"Compounding frequency must be positive, got {compounding_frequency}")
    return math.pow(1 + rate_per_annum / (100 * compounding_frequency), compounding_frequency * time_years)


def calculate_fd_simple_interest(
    principal: float,
    rate_per_annum: float,
    time_years: float
) -> FDCalculationResult:
    """
    Maturity under simple interest.

    M = P + P * r * t / 100, with r in percent per annum and t in years.
    The nominal rate is its own effective rate.
    """
    total_interest = principal * rate_per_annum * time_years / 100
    return FDCalculationResult(
        maturity_amount=principal + total_interest,
        total_interest=total_interest,
        monthly_interest=_monthly_interest(total_interest, time_years),
        effective_rate=rate_per_annum,
    )


def calculate_fd_compound_interest(
    principal: float,
    rate_per_annum: float,
    time_years: float,
    compounding_frequency: int = 1
) -> FDCalculationResult:
    """
    Maturity under compound interest.

    M = P * (1 + r / (100 * N)) ** (N * t), where N is the number of compounding
    periods per year (1 annual, 2 half-yearly, 4 quarterly, 12 monthly).

    Raises:
        ValueError: if compounding_frequency is not positive
    """
    maturity_amount = principal * _compound_factor(rate_per_annum, time_years, compounding_frequency)
    total_interest = maturity_amount - principal
    effective_rate = (_compound_factor(rate_per_annum, 1, compounding_frequency) - 1) * 100

    return FDCalculationResult(
        maturity_amount=maturity_amount,
        total_interest=total_interest,
        monthly_interest=_monthly_interest(total_interest, time_years),
        effective_rate=effective_rate,
    )


def calculate_fd_maturity(
    principal: float,
    rate_per_annum: float,
    duration_months: int,
    interest_type: InterestType = InterestType.compound,
    compounding_frequency: int = DEFAULT_COMPOUNDING_FREQUENCY
) -> FDCalculationResult:
    """Maturity for a deposit term given in months. Defaults to quarterly compounding."""
    time_years = duration_months / 12

    if interest_type == InterestType.simple:
        return calculate_fd_simple_interest(principal, rate_per_annum, time_years)
    return calculate_fd_compound_interest(principal, rate_per_annum, time_years, compounding_frequency)


def calculate_fd_accrued_value(
    principal: float,
    rate_per_annum: float,
    start_date: DateLike,
    current_date: DateLike,
    interest_type: InterestType = InterestType.compound,
    compounding_frequency: int = DEFAULT_COMPOUNDING_FREQUENCY
) -> float:
    """
    Value of a deposit at current_date, as if cashed out then.

    No accrual happens for zero or negative elapsed time.
    """
    elapsed_years = years_between(start_date, current_date)

    if elapsed_years <= 0:
        return principal

    if interest_type == InterestType.simple:
        return principal + principal * rate_per_annum * elapsed_years / 100
    return principal * _compound_factor(rate_per_annum, elapsed_years, compounding_frequency)


def _installment_sum(monthly_amount: float, interest_rate: float, installments: int) -> float:
    # Installment k earns for (installments - k + 1) months
    total = 0.0
    for month in range(1, installments + 1):
        time_years = (installments - month + 1) / 12
        total += monthly_amount * _compound_factor(interest_rate, time_years, RD_COMPOUNDING_FREQUENCY)
    return total


def calculate_rd_maturity(
    monthly_amount: float,
    interest_rate: float,
    duration_months: int
) -> RDMaturityResult:
    """
    Maturity of a recurring deposit.

    Each monthly installment is a separate lump deposit compounding quarterly
    from its own deposit month until maturity: the first earns for the full
    term, the last for one month.
    """
    total_invested = monthly_amount * duration_months
    maturity_amount = _installment_sum(monthly_amount, interest_rate, duration_months)

    return RDMaturityResult(
        total_invested=total_invested,
        maturity_amount=maturity_amount,
        total_interest=maturity_amount - total_invested,
    )


def months_elapsed(start_date: DateLike, as_of: DateLike, duration_months: int) -> int:
    """
    Installments paid into an RD by as_of, counting the booking month.

    Capped at the term and never negative.
    """
    days = (to_datetime(as_of) - to_datetime(start_date)).total_seconds() / 86400
    months = math.floor(days / DAYS_PER_MONTH) + 1
    return max(0, min(months, duration_months))


def calculate_rd_accrued_value(monthly_amount: float, interest_rate: float, months_paid: int) -> float:
    """Value of the installments made so far, each compounded for its own elapsed time."""
    return _installment_sum(monthly_amount, interest_rate, months_paid)
