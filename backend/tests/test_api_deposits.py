"""Tests for fixed and recurring deposit API endpoints."""

import pytest


FD = {
    "date": "2024-01-01",
    "amount": 100000,
    "bank_name": "State Bank of India",
    "interest_rate": 7,
    "duration_months": 12,
}

RD = {
    "date": "2024-01-01",
    "monthly_amount": 5000,
    "bank_name": "HDFC Bank",
    "interest_rate": 6,
    "duration_months": 3,
}


class TestFixedDepositsAPI:
    """Test fixed deposit endpoints."""

    def test_create_derives_maturity(self, client):
        response = client.post("/api/v1/fixed-deposits", json=FD)
        assert response.status_code == 201
        data = response.json()
        assert data["maturity_date"] == "2025-01-01"
        assert data["maturity_amount"] == pytest.approx(107185.90)
        assert data["interest_type"] == "compound"
        assert data["compounding_frequency"] == 4

    def test_rejects_unsupported_frequency(self, client):
        response = client.post("/api/v1/fixed-deposits", json={**FD, "compounding_frequency": 3})
        assert response.status_code == 422

    def test_list(self, client, sample_fd):
        response = client.get("/api/v1/fixed-deposits")
        assert response.json()["total"] == 1

    def test_get_missing(self, client):
        response = client.get("/api/v1/fixed-deposits/missing")
        assert response.status_code == 404

    def test_update_recomputes(self, client, sample_fd):
        response = client.put(
            f"/api/v1/fixed-deposits/{sample_fd.id}",
            json={**FD, "interest_type": "simple"}
        )
        assert response.status_code == 200
        assert response.json()["maturity_amount"] == pytest.approx(107000)

    def test_delete(self, client, sample_fd):
        response = client.delete(f"/api/v1/fixed-deposits/{sample_fd.id}")
        assert response.status_code == 204
        assert client.get("/api/v1/fixed-deposits").json()["total"] == 0

    def test_valuation_matured(self, client, sample_fd):
        response = client.get("/api/v1/fixed-deposits/valuation", params={"as_of": "2025-02-01"})
        assert response.status_code == 200
        data = response.json()
        assert data["current_value"] == pytest.approx(107185.90)
        assert data["additional_info"]["matured_count"] == 1

    def test_valuation_active(self, client, sample_fd):
        response = client.get("/api/v1/fixed-deposits/valuation", params={"as_of": "2024-07-01"})
        data = response.json()
        assert 100000 < data["current_value"] < 107185.90
        assert data["additional_info"]["active_count"] == 1


class TestRecurringDepositsAPI:
    """Test recurring deposit endpoints."""

    def test_create_derives_snapshot(self, client):
        response = client.post("/api/v1/recurring-deposits", json=RD)
        assert response.status_code == 201
        data = response.json()
        assert data["maturity_date"] == "2024-04-01"
        assert data["total_invested"] == 15000
        assert data["maturity_amount"] == pytest.approx(15149.75)

    def test_get(self, client, sample_rd):
        response = client.get(f"/api/v1/recurring-deposits/{sample_rd.id}")
        assert response.status_code == 200
        assert response.json()["bank_name"] == "HDFC Bank"

    def test_update_missing(self, client):
        response = client.put("/api/v1/recurring-deposits/missing", json=RD)
        assert response.status_code == 404

    def test_delete_missing(self, client):
        response = client.delete("/api/v1/recurring-deposits/missing")
        assert response.status_code == 404

    def test_valuation_midway(self, client, sample_rd):
        response = client.get("/api/v1/recurring-deposits/valuation", params={"as_of": "2024-02-15"})
        assert response.status_code == 200
        data = response.json()
        assert data["invested"] == 10000
        assert data["current_value"] == pytest.approx(10074.75, abs=0.01)

    def test_valuation_bad_date(self, client):
        response = client.get("/api/v1/recurring-deposits/valuation", params={"as_of": "soon"})
        assert response.status_code == 422


class TestDepositStatusAPI:
    """Test per-deposit maturity and progress endpoints."""

    def test_fixed_deposit_status(self, client, sample_fd):
        response = client.get("/api/v1/fixed-deposits/status", params={"as_of": "2024-12-01"})
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        item = data["items"][0]
        assert item["id"] == sample_fd.id
        assert item["maturity_date"] == "2025-01-01"
        assert item["days_to_maturity"] == 31
        assert item["is_matured"] is False
        assert 100000 < item["current_value"] < 107185.90
        assert item["installments_paid"] is None

    def test_fixed_deposit_status_after_maturity(self, client, sample_fd):
        response = client.get("/api/v1/fixed-deposits/status", params={"as_of": "2025-03-01"})
        item = response.json()["items"][0]
        assert item["days_to_maturity"] == 0
        assert item["is_matured"] is True
        assert item["current_value"] == pytest.approx(107185.90)

    def test_recurring_deposit_status(self, client, sample_rd):
        response = client.get("/api/v1/recurring-deposits/status", params={"as_of": "2024-02-15"})
        assert response.status_code == 200
        item = response.json()["items"][0]
        assert item["installments_paid"] == 2
        assert item["completion_percent"] == pytest.approx(200 / 3)
        assert item["days_to_maturity"] == 46
        assert item["bank_name"] == sample_rd.bank_name

    def test_status_empty(self, client):
        response = client.get("/api/v1/recurring-deposits/status")
        assert response.json() == {"items": [], "total": 0}

    def test_average_rate_in_valuation(self, client, sample_fd):
        response = client.get("/api/v1/fixed-deposits/valuation", params={"as_of": "2024-07-01"})
        assert response.json()["additional_info"]["average_interest_rate"] == pytest.approx(7)
