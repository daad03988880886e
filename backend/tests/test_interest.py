"""Tests for deposit interest primitives."""

import pytest
from datetime import date, datetime

from nivesh.models.fixed_deposit import InterestType
from nivesh.services.interest import (
    add_months,
    calculate_fd_accrued_value,
    calculate_fd_compound_interest,
    calculate_fd_maturity,
    calculate_fd_simple_interest,
    calculate_rd_accrued_value,
    calculate_rd_maturity,
    months_elapsed,
    to_date,
    years_between,
)


class TestSimpleInterest:
    """Test simple interest maturity."""

    def test_one_year(self):
        result = calculate_fd_simple_interest(100000, 7, 1)
        assert result.maturity_amount == pytest.approx(107000)
        assert result.total_interest == pytest.approx(7000)
        assert result.monthly_interest == pytest.approx(7000 / 12)
        assert result.effective_rate == 7

    def test_zero_time_has_no_monthly_interest(self):
        """Zero term should not divide by zero."""
        result = calculate_fd_simple_interest(100000, 7, 0)
        assert result.maturity_amount == 100000
        assert result.monthly_interest == 0


class TestCompoundInterest:
    """Test compound interest maturity."""

    def test_quarterly_one_year(self):
        """100000 at 7% compounded quarterly for a year."""
        result = calculate_fd_compound_interest(100000, 7, 1, 4)
        assert result.maturity_amount == pytest.approx(107185.90, abs=0.01)
        assert result.total_interest == pytest.approx(7185.90, abs=0.01)
        assert result.effective_rate == pytest.approx(7.1859, abs=1e-4)

    def test_annual_matches_simple_for_one_year(self):
        compound = calculate_fd_compound_interest(100000, 7, 1, 1)
        simple = calculate_fd_simple_interest(100000, 7, 1)
        assert compound.maturity_amount == pytest.approx(simple.maturity_amount)

    def test_more_frequent_compounding_pays_more(self):
        """Maturity grows with compounding frequency for a positive rate."""
        amounts = [
            calculate_fd_compound_interest(50000, 8, 3, n).maturity_amount
            for n in (1, 2, 4, 12)
        ]
        assert amounts == sorted(amounts)
        assert len(set(amounts)) == 4

    def test_zero_rate_returns_principal(self):
        result = calculate_fd_compound_interest(25000, 0, 5, 4)
        assert result.maturity_amount == pytest.approx(25000)
        assert result.total_interest == pytest.approx(0)

    def test_zero_time_returns_principal(self):
        """Zero term matures at the principal with no monthly interest."""
        result = calculate_fd_compound_interest(100000, 7, 0, 1)
        assert result.maturity_amount == 100000
        assert result.total_interest == 0
        assert result.monthly_interest == 0

    def test_invalid_frequency(self):
        """Non-positive compounding frequency should raise."""
        with pytest.raises(ValueError):
            calculate_fd_compound_interest(100000, 7, 1, 0)


class TestFDMaturity:
    """Test maturity for terms in months."""

    def test_defaults_to_quarterly_compound(self):
        result = calculate_fd_maturity(100000, 7, 12)
        assert result.maturity_amount == pytest.approx(107185.90, abs=0.01)

    def test_simple_interest_type(self):
        result = calculate_fd_maturity(100000, 6, 6, InterestType.simple)
        assert result.maturity_amount == pytest.approx(103000)

    def test_monthly_compounding(self):
        result = calculate_fd_maturity(100000, 12, 12, InterestType.compound, 12)
        assert result.maturity_amount == pytest.approx(112682.50, abs=0.01)


class TestFDAccruedValue:
    """Test live accrual between two dates."""

    def test_no_elapsed_time_returns_principal(self):
        value = calculate_fd_accrued_value(100000, 7, date(2024, 1, 1), date(2024, 1, 1))
        assert value == 100000

    def test_current_before_start_returns_principal(self):
        value = calculate_fd_accrued_value(100000, 7, date(2024, 6, 1), date(2024, 1, 1))
        assert value == 100000

    def test_close_to_maturity_after_one_year(self):
        """A year of accrual should land near the one-year maturity amount."""
        value = calculate_fd_accrued_value(100000, 7, date(2023, 1, 1), date(2024, 1, 1))
        maturity = calculate_fd_maturity(100000, 7, 12).maturity_amount
        assert value == pytest.approx(maturity, rel=1e-3)

    def test_simple_accrual(self):
        value = calculate_fd_accrued_value(
            100000, 7, date(2023, 1, 1), date(2024, 1, 1), InterestType.simple
        )
        assert value == pytest.approx(100000 + 7000 * 365 / 365.25)

    def test_accepts_iso_strings(self):
        value = calculate_fd_accrued_value(100000, 7, "2023-01-01", "2023-07-01T00:00:00Z")
        assert 100000 < value < 104000


class TestRDMaturity:
    """Test recurring deposit maturity per installment."""

    def test_three_months(self):
        result = calculate_rd_maturity(5000, 6, 3)
        assert result.total_invested == 15000
        assert result.maturity_amount == pytest.approx(15149.75, abs=0.01)
        assert result.total_interest == pytest.approx(149.75, abs=0.01)

    def test_every_installment_earns(self):
        """Maturity exceeds what was paid in for a positive rate."""
        result = calculate_rd_maturity(1000, 7, 24)
        assert result.total_invested == 24000
        assert result.maturity_amount > result.total_invested

    def test_zero_rate(self):
        result = calculate_rd_maturity(2000, 0, 12)
        assert result.maturity_amount == pytest.approx(24000)

    def test_accrued_value_of_no_installments(self):
        assert calculate_rd_accrued_value(5000, 6, 0) == 0

    def test_accrued_value_for_full_term_matches_maturity(self):
        assert calculate_rd_accrued_value(5000, 6, 3) == pytest.approx(
            calculate_rd_maturity(5000, 6, 3).maturity_amount
        )


class TestMonthsElapsed:
    """Test installment counting."""

    def test_booking_day_counts_first_installment(self):
        assert months_elapsed(date(2024, 1, 1), date(2024, 1, 1), 12) == 1

    def test_partial_month(self):
        # 45 days is one full 30.44-day month plus the booking month
        assert months_elapsed(date(2024, 1, 1), date(2024, 2, 15), 12) == 2

    def test_capped_at_term(self):
        assert months_elapsed(date(2020, 1, 1), date(2024, 1, 1), 12) == 12

    def test_future_start_is_zero(self):
        assert months_elapsed(date(2024, 3, 1), date(2024, 1, 1), 12) == 0


class TestDates:
    """Test date helpers."""

    def test_add_months_normal(self):
        assert add_months(date(2024, 1, 15), 12) == date(2025, 1, 15)

    def test_add_months_end_of_month(self):
        """31st should clamp to the last day of a shorter month."""
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
        assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)

    def test_add_months_year_rollover(self):
        assert add_months(date(2024, 11, 15), 3) == date(2025, 2, 15)

    def test_add_months_from_string(self):
        assert add_months("2024-06-30", 6) == date(2024, 12, 30)

    def test_years_between_leap_year(self):
        assert years_between(date(2024, 1, 1), date(2025, 1, 1)) == pytest.approx(366 / 365.25)

    def test_to_date_from_aware_datetime(self):
        assert to_date("2024-03-01T02:00:00+05:30") == date(2024, 2, 29)

    def test_to_date_from_datetime(self):
        assert to_date(datetime(2024, 5, 1, 18, 30)) == date(2024, 5, 1)
