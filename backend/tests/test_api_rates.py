"""Tests for metal rate endpoints."""


class TestRatesAPI:
    """Test current rate endpoints."""

    def test_list_defaults(self, client):
        response = client.get("/api/v1/rates")
        assert response.status_code == 200
        items = {r["metal"]: r for r in response.json()["items"]}
        assert items["gold"]["value"] == 7500
        assert items["gold"]["is_default"] is True
        assert items["silver"]["value"] == 90

    def test_update(self, client):
        response = client.put("/api/v1/rates/silver", json={"value": 95})
        assert response.status_code == 200
        assert response.json()["is_default"] is False

        response = client.get("/api/v1/rates/silver")
        assert response.json()["value"] == 95

    def test_update_rejects_zero(self, client):
        response = client.put("/api/v1/rates/gold", json={"value": 0})
        assert response.status_code == 422

    def test_rates_are_per_user(self, client):
        client.put("/api/v1/rates/gold", json={"value": 6900})
        response = client.get("/api/v1/rates/gold", headers={"X-User-Id": "other"})
        assert response.json()["is_default"] is True
