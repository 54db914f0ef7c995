"""HTTP tests for the tracker API using a temp data folder."""

import pytest
from fastapi.testclient import TestClient

from api.tracker.app import app

pytestmark = pytest.mark.no_db


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("VISITS_DATA_DIR", str(tmp_path))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def seeded(client):
    client.post("/api/customer", json={"name": "Alice Smith", "email": "alice@example.com"})
    client.post("/api/hotel", json={"name": "Grand Plaza", "location": "Tel Aviv", "rating": 4.5})
    for day in (1, 8, 15, 22):
        client.post(
            "/api/visitation",
            json={"customerId": 1, "hotelId": 1, "visitDate": f"2024-10-{day:02d}T10:00:00"},
        )
    return client


# ---------------------------------------------------------------------------
# Customers
# ---------------------------------------------------------------------------


def test_welcome_counts(seeded):
    resp = seeded.get("/api/customer/welcome")

    assert resp.status_code == 200
    assert resp.json()["dataStatus"] == {"customersCount": 1, "hotelsCount": 1, "visitationsCount": 4}


def test_customer_crud(client):
    resp = client.post("/api/customer", json={"name": "Bob", "email": "bob@example.com"})
    assert resp.status_code == 201
    body = resp.json()
    assert body["id"] == 1
    assert body["totalPurchases"] == 0

    resp = client.put("/api/customer/1", json={"name": "Bobby", "email": "bob@example.com", "totalPurchases": 4})
    assert resp.json()["name"] == "Bobby"

    assert client.get("/api/customer/1").json()["totalPurchases"] == 4
    assert client.delete("/api/customer/1").status_code == 204
    assert client.get("/api/customer/1").status_code == 404


def test_customer_validation(client):
    resp = client.post("/api/customer", json={"name": "", "email": "x@example.com"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Customer name is required"


def test_register_keeps_date(client):
    resp = client.post(
        "/api/customer/register",
        json={"name": "Early", "email": "e@example.com", "registrationDate": "2021-03-01T00:00:00Z"},
    )

    assert resp.status_code == 201
    assert resp.json()["registrationDate"].startswith("2021-03-01")


# ---------------------------------------------------------------------------
# Hotels and visitations
# ---------------------------------------------------------------------------


def test_hotel_delete_blocked_by_visits(seeded):
    resp = seeded.delete("/api/hotel/1")

    assert resp.status_code == 400
    assert "4 visitation(s)" in resp.json()["detail"]


def test_visitation_requires_existing_references(client):
    resp = client.post("/api/visitation", json={"customerId": 1, "hotelId": 1})

    assert resp.status_code == 400
    assert resp.json()["detail"] == "Customer with ID 1 not found"


def test_visitation_queries(seeded):
    assert len(seeded.get("/api/visitation").json()) == 4
    assert len(seeded.get("/api/visitation/customer/1").json()) == 4
    assert seeded.get("/api/visitation/hotel/2").json() == []
    assert seeded.get("/api/visitation/3").json()["visitDate"] == "2024-10-15T10:00:00"
    assert seeded.get("/api/visitation/99").status_code == 404


# ---------------------------------------------------------------------------
# Loyalty
# ---------------------------------------------------------------------------


def test_monthly_loyalty(seeded):
    resp = seeded.get("/api/loyalty/monthly", params={"month": 10, "year": 2024})

    assert resp.status_code == 200
    body = resp.json()
    assert body["month"] == "October"
    assert body["totalLoyalCustomers"] == 1
    pattern = body["loyalCustomers"][0]
    assert pattern["customerName"] == "Alice Smith"
    assert pattern["hotelName"] == "Grand Plaza"
    assert pattern["dayOfWeek"] == "Tuesday"
    assert pattern["visitCount"] == 4
    assert pattern["visitDates"] == ["2024-10-01", "2024-10-08", "2024-10-15", "2024-10-22"]
    assert pattern["firstVisit"] == "2024-10-01"
    assert pattern["lastVisit"] == "2024-10-22"
    assert pattern["isLoyal"] is True


@pytest.mark.parametrize("params,detail", [
    ({"month": 13, "year": 2024}, "Month must be between 1 and 12"),
    ({"month": 0, "year": 2024}, "Month must be between 1 and 12"),
    ({"month": 5, "year": 2031}, "Year must be between 2020 and 2030"),
])
def test_monthly_rejects_bad_period(client, params, detail):
    resp = client.get("/api/loyalty/monthly", params=params)

    assert resp.status_code == 400
    assert resp.json()["detail"] == detail


def test_all_months(seeded):
    resp = seeded.get("/api/loyalty/all")

    assert resp.status_code == 200
    assert [(p["month"], p["year"]) for p in resp.json()] == [("October", 2024)]


def test_loyalty_analytics_matches_monthly(seeded):
    analytics = seeded.get("/api/customer/loyalty-analytics", params={"month": 10, "year": 2024}).json()
    monthly = seeded.get("/api/loyalty/monthly", params={"month": 10, "year": 2024}).json()

    assert analytics["loyaltyPatterns"] == monthly["loyalCustomers"]
    assert analytics["loyaltyPatterns"][0]["customerEmail"] == "alice@example.com"
    assert analytics["criteria"]


def test_loyalty_analytics_invalid_month(client):
    resp = client.get("/api/customer/loyalty-analytics", params={"month": 14, "year": 2024})
    assert resp.status_code == 400


def test_monthly_with_mixed_timezone_visit_dates(client):
    client.post("/api/customer", json={"name": "Alice Smith", "email": "alice@example.com"})
    client.post("/api/hotel", json={"name": "Grand Plaza"})
    for stamp in ("2024-10-01T10:00:00", "2024-10-08T10:00:00Z", "2024-10-15T12:00:00+02:00", "2024-10-22T10:00:00"):
        assert client.post("/api/visitation", json={"customerId": 1, "hotelId": 1, "visitDate": stamp}).status_code == 201
    # a visit without a date is recorded as "now"
    assert client.post("/api/visitation", json={"customerId": 1, "hotelId": 1}).status_code == 201

    resp = client.get("/api/loyalty/monthly", params={"month": 10, "year": 2024})

    assert resp.status_code == 200
    assert resp.json()["loyalCustomers"][0]["visitDates"] == ["2024-10-01", "2024-10-08", "2024-10-15", "2024-10-22"]
    assert client.get("/api/visitation/2").json()["visitDate"] == "2024-10-08T10:00:00"
    assert client.get("/api/loyalty/all").status_code == 200
