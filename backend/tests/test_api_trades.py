"""Tests for stock and mutual fund API endpoints."""

import pytest


BUY = {
    "date": "2024-03-01",
    "symbol": "TCS",
    "company_name": "Tata Consultancy Services",
    "quantity": 2,
    "price": 3900,
    "transaction_type": "buy",
    "brokerage_charges": 20,
}

FUND_BUY = {
    "date": "2024-05-15",
    "fund_name": "SBI Blue Chip Fund",
    "units": 100,
    "nav": 80,
    "transaction_type": "buy",
}


class TestStocksAPI:
    """Test stock transaction endpoints."""

    def test_create_computes_total(self, client):
        response = client.post("/api/v1/stocks", json=BUY)
        assert response.status_code == 201
        data = response.json()
        assert data["total_amount"] == 7800
        assert data["transaction_type"] == "buy"

    def test_rejects_unknown_type(self, client):
        response = client.post("/api/v1/stocks", json={**BUY, "transaction_type": "gift"})
        assert response.status_code == 422

    def test_list(self, client, sample_stock_trades):
        data = client.get("/api/v1/stocks").json()
        assert data["total"] == 2
        # Newest first
        assert data["items"][0]["transaction_type"] == "sell"

    def test_valuation(self, client, sample_stock_trades):
        response = client.get("/api/v1/stocks/valuation")
        assert response.status_code == 200
        data = response.json()
        assert data["invested"] == pytest.approx(535)
        assert data["current_value"] == pytest.approx(720)
        assert data["profit_loss"] == pytest.approx(185)

    def test_holdings(self, client, sample_stock_trades):
        client.post("/api/v1/stocks", json=BUY)
        data = client.get("/api/v1/stocks/holdings").json()
        assert data["total"] == 2
        assert [h["key"] for h in data["items"]] == ["TCS", "INFY"]
        assert data["items"][1]["quantity"] == 6

    def test_update_and_delete(self, client, sample_stock_trades):
        sell = sample_stock_trades[1]
        response = client.put(f"/api/v1/stocks/{sell.id}", json={
            **BUY,
            "symbol": "INFY",
            "company_name": "Infosys",
            "date": "2024-02-01",
            "quantity": 10,
            "price": 120,
            "transaction_type": "sell",
        })
        assert response.status_code == 200
        assert response.json()["total_amount"] == 1200

        # Position fully sold
        assert client.get("/api/v1/stocks/holdings").json()["total"] == 0

        response = client.delete(f"/api/v1/stocks/{sell.id}")
        assert response.status_code == 204

    def test_get_missing(self, client):
        assert client.get("/api/v1/stocks/missing").status_code == 404


class TestMutualFundsAPI:
    """Test mutual fund transaction endpoints."""

    def test_create(self, client):
        response = client.post("/api/v1/mutual-funds", json=FUND_BUY)
        assert response.status_code == 201
        data = response.json()
        assert data["total_amount"] == 8000
        assert data["charges"] == 0
        assert data["scheme_code"] is None

    def test_valuation_and_holdings(self, client):
        client.post("/api/v1/mutual-funds", json=FUND_BUY)
        client.post("/api/v1/mutual-funds", json={**FUND_BUY, "date": "2024-08-01", "units": 20, "nav": 90,
                                                  "transaction_type": "sell"})

        valuation = client.get("/api/v1/mutual-funds/valuation").json()
        assert valuation["invested"] == pytest.approx(8000 - 1800)
        assert valuation["current_value"] == pytest.approx(80 * 90)

        holdings = client.get("/api/v1/mutual-funds/holdings").json()
        assert holdings["items"][0]["name"] == "SBI Blue Chip Fund"
        assert holdings["items"][0]["last_price"] == 90

    def test_delete_missing(self, client):
        assert client.delete("/api/v1/mutual-funds/missing").status_code == 404
