"""Tests for deposit calculator endpoints."""

import pytest


class TestCalculatorsAPI:
    """Test what-if calculators."""

    def test_fd_defaults(self, client):
        response = client.post("/api/v1/calculators/fd", json={
            "principal": 100000,
            "interest_rate": 7,
            "duration_months": 12,
        })
        assert response.status_code == 200
        data = response.json()
        assert data["maturity_amount"] == pytest.approx(107185.90, abs=0.01)
        assert data["effective_rate"] == pytest.approx(7.1859, abs=1e-4)
        assert data["maturity_date"] is None

    def test_fd_simple_with_start_date(self, client):
        response = client.post("/api/v1/calculators/fd", json={
            "principal": 50000,
            "interest_rate": 6,
            "duration_months": 24,
            "interest_type": "simple",
            "start_date": "2024-02-29",
        })
        data = response.json()
        assert data["maturity_amount"] == pytest.approx(56000)
        assert data["monthly_interest"] == pytest.approx(250)
        assert data["maturity_date"] == "2026-02-28"

    def test_fd_invalid(self, client):
        response = client.post("/api/v1/calculators/fd", json={
            "principal": -1,
            "interest_rate": 7,
            "duration_months": 12,
        })
        assert response.status_code == 422

    def test_rd(self, client):
        response = client.post("/api/v1/calculators/rd", json={
            "monthly_amount": 5000,
            "interest_rate": 6,
            "duration_months": 3,
            "start_date": "2024-01-01",
        })
        assert response.status_code == 200
        data = response.json()
        assert data["total_invested"] == 15000
        assert data["maturity_amount"] == pytest.approx(15149.75, abs=0.01)
        assert data["maturity_date"] == "2024-04-01"
