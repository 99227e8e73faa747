import random

import pytest
from fastapi.testclient import TestClient

from vacation_planner.config import settings
from vacation_planner.core.database import async_session
from vacation_planner.main import app, build_planner
from vacation_planner.services.availability import AvailabilityService
from vacation_planner.services.trip_repository import TripRepository

API = settings.API_V1_STR

PLAN_REQUEST = {
    "budget": 3000,
    "currency": "USD",
    "start_date": "2025-06-01",
    "end_date": "2025-06-05",
    "theme": "Adventure",
    "group_size": 2,
    "starting_point": "New York City, USA",
}

@pytest.fixture(scope="module")
def client():
    with TestClient(app) as test_client:
        # Offline price sources and mock availability regardless of local .env keys
        app.state.planner = build_planner(
            settings.model_copy(update={
                "AVIATIONSTACK_API_KEY": None,
                "AMADEUS_CLIENT_ID": None,
                "HOTELS_API_KEY": None,
                "BOOKING_API_KEY": None,
            }),
            repository=TripRepository(async_session),
            rng=random.Random(42)
        )
        app.state.availability = AvailabilityService()
        yield test_client

@pytest.fixture
def trip(client):
    response = client.post(f"{API}/trips/plan", json=PLAN_REQUEST)
    assert response.status_code == 200
    return response.json()

def test_root_and_health(client):
    assert client.get("/").json()["version"] == settings.VERSION

    health = client.get("/health").json()
    assert health["status"] == "healthy"
    assert health["database"] == True

def test_plan_trip(trip):
    assert isinstance(trip["id"], int)
    assert trip["destination"] == "Queenstown, New Zealand"
    assert trip["budget_breakdown"]["transportation"] == pytest.approx(1200.0)
    assert trip["preferences"]["trip_duration_days"] == 5
    assert [d["day"] for d in trip["daily_itineraries"]] == [1, 2, 3, 4, 5]
    assert trip["accommodation"]["name"] == "Budget Lodge"
    assert trip["accommodation"]["nights"] == 4

def test_plan_with_reversed_dates_is_rejected(client):
    request = {**PLAN_REQUEST, "start_date": "2025-06-05", "end_date": "2025-06-01"}
    assert client.post(f"{API}/trips/plan", json=request).status_code == 422

def test_plan_without_theme_is_rejected(client):
    request = {key: value for key, value in PLAN_REQUEST.items() if key != "theme"}
    assert client.post(f"{API}/trips/plan", json=request).status_code == 422

def test_current_and_get(client, trip):
    assert client.get(f"{API}/trips/current").json()["id"] == trip["id"]

    fetched = client.get(f"{API}/trips/{trip['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["destination"] == trip["destination"]

def test_list_contains_trip(client, trip):
    ids = [t["id"] for t in client.get(f"{API}/trips").json()]
    assert trip["id"] in ids

def test_save_and_delete(client, trip):
    saved = client.post(f"{API}/trips/{trip['id']}/save")
    assert saved.status_code == 200
    assert saved.json()["id"] == trip["id"]

    assert client.delete(f"{API}/trips/{trip['id']}").status_code == 200
    assert client.get(f"{API}/trips/{trip['id']}").status_code == 404
    assert client.delete(f"{API}/trips/{trip['id']}").status_code == 404
    assert client.get(f"{API}/trips/current").status_code == 404

def test_unknown_trip(client):
    assert client.get(f"{API}/trips/999999").status_code == 404
    assert client.post(f"{API}/trips/999999/save").status_code == 404
    assert client.get(f"{API}/export/pdf/999999").status_code == 404
    assert client.get(f"{API}/booking/availability/999999").status_code == 404

def test_destinations(client):
    recommended = client.get(
        f"{API}/destinations/recommend", params={"theme": "relaxation", "start_date": "2025-08-01"}
    ).json()
    assert recommended["theme"] == "Relaxation"
    assert recommended["destination"] == "Bali, Indonesia"
    assert recommended["month"] == 8

    by_theme = client.get(f"{API}/destinations/by-theme/food and culture").json()
    assert by_theme["theme"] == "Food & Culture"
    assert by_theme["destinations"][0] == "Tokyo, Japan"

    by_month = client.get(f"{API}/destinations/by-month/12").json()
    assert "Sydney, Australia" in by_month["destinations"]

    assert client.get(f"{API}/destinations/by-month/13").status_code == 422

def test_book_trip(client, trip):
    response = client.post(f"{API}/booking/book", json={
        "trip_id": trip["id"],
        "traveler_name": "Ada Lovelace",
        "email": "ada@example.com",
        "phone": "+44 20 7946 0000",
        "payment_last4": "4242",
    })

    assert response.status_code == 200
    body = response.json()
    assert body["success"] == True
    assert body["flight_confirmation"].startswith("FL-")
    assert body["hotel_confirmation"].startswith("HT-")

def test_book_current_trip_without_id(client, trip):
    response = client.post(f"{API}/booking/book", json={
        "traveler_name": "Ada Lovelace",
        "email": "ada@example.com",
        "phone": "555-0100",
        "payment_last4": "1234",
    })
    assert response.json()["success"] == True

def test_book_without_id_before_any_plan(client):
    app.state.planner.current_plan = None

    response = client.post(f"{API}/booking/book", json={
        "traveler_name": "Ada Lovelace",
        "email": "ada@example.com",
        "phone": "555-0100",
        "payment_last4": "1234",
    })
    assert response.status_code == 404
    assert response.json()["detail"] == "No trip has been planned yet"

def test_booking_validation(client, trip):
    request = {
        "trip_id": trip["id"],
        "traveler_name": "Ada Lovelace",
        "email": "not-an-email",
        "phone": "555-0100",
        "payment_last4": "12",
    }
    assert client.post(f"{API}/booking/book", json=request).status_code == 422

    request.update(email="ada@example.com", payment_last4="1234", trip_id=999999)
    assert client.post(f"{API}/booking/book", json=request).status_code == 404

def test_availability(client, trip):
    body = client.get(f"{API}/booking/availability/{trip['id']}").json()

    assert body["trip_id"] == trip["id"]
    assert body["is_available"] == True
    # Queenstown is neither a popular nor a sparse mock route; June is peak hotel season
    assert body["flight"]["status"] == "AVAILABLE"
    assert body["hotel"]["status"] == "LIMITED"

def test_exports(client, trip):
    pdf = client.get(f"{API}/export/pdf/{trip['id']}")
    assert pdf.status_code == 200
    assert pdf.headers["content-type"] == "application/pdf"
    assert pdf.content.startswith(b"%PDF")

    excel = client.get(f"{API}/export/excel/{trip['id']}")
    assert excel.status_code == 200
    assert f"trip_{trip['id']}.xlsx" in excel.headers["content-disposition"]
