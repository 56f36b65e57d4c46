"""Read-side API tests: dashboard, inventory, sales, expenses, search."""


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


class TestDashboardApi:
    def test_dashboard(self, client):
        response = client.get("/api/dashboard")
        assert response.status_code == 200

        data = response.json()
        assert data["stats"] == {
            "total_vehicles": 3,
            "current_stock": 2,
            "available_count": 1,
            "total_invested": 111700,
            "total_profit": 12000,
        }
        assert data["monthly_activity"][0] == {
            "month": "2024-01",
            "label": "Jan 24",
            "purchases": 1,
            "sales": 0,
        }
        assert data["monthly_activity"][-1]["month"] == "2024-06"


class TestInventoryApi:
    def test_filters(self, client):
        response = client.get("/api/inventory", params={"status": "Workshop"})
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        item = data["items"][0]
        assert item["vehicle"]["id"] == "v3"
        assert item["vehicle"]["sale"] is None
        assert item["financials"]["total_spent"] == 71200

    def test_date_and_search(self, client):
        response = client.get("/api/inventory", params={"q": "activa", "date": "2024-03-05"})
        data = response.json()
        assert [i["vehicle"]["id"] for i in data["items"]] == ["v1"]
        assert data["items"][0]["vehicle"]["sale"]["buyer_name"] == "Anil"
        assert data["items"][0]["financials"]["profit"] == 12000

    def test_bad_status(self, client):
        assert client.get("/api/inventory", params={"status": "Lost"}).status_code == 422


class TestSalesApi:
    def test_default_window_from_rules(self, client):
        data = client.get("/api/sales").json()
        assert len(data["monthly_sales"]) == 6
        assert data["summary"] == {"sale_count": 1, "total_profit": 12000}
        assert data["peak_month"] == "2024-03"

    def test_window_param(self, client):
        data = client.get("/api/sales", params={"window_months": 2}).json()
        assert [b["label"] for b in data["monthly_sales"]] == ["May", "Jun"]
        assert data["peak_month"] is None

    def test_window_must_be_positive(self, client):
        assert client.get("/api/sales", params={"window_months": 0}).status_code == 422


class TestExpenseReportApi:
    def test_preset(self, client):
        data = client.get("/api/expenses", params={"mode": "week"}).json()
        assert data["window_label"] == "This Week"
        assert data["total_amount"] == 1700

    def test_range_implies_custom(self, client):
        params = {"mode": "month", "start": "2024-01-01", "end": "2024-01-31"}
        data = client.get("/api/expenses", params=params).json()
        assert data["window_label"] == "Custom Range"
        assert data["total_amount"] == 2000

    def test_unknown_mode(self, client):
        assert client.get("/api/expenses", params={"mode": "decade"}).status_code == 400


class TestSearchApi:
    def test_groups(self, client):
        data = client.get("/api/search", params={"q": "Honda"}).json()
        assert data["term"] == "honda"
        assert data["total"] == 2
        assert data["counts_by_status"] == {"Workshop": 1, "Sold": 1}
        assert data["results"][0]["route_hint"] == "/inventory"

    def test_blank(self, client):
        data = client.get("/api/search", params={"q": "  "}).json()
        assert data["total"] == 0
        assert data["results"] == []
