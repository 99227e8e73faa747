from datetime import date

import httpx
import pytest

from vacation_planner.data.catalog import HotelInfo
from vacation_planner.schemas.trip import Accommodation
from vacation_planner.services.hotel_service import HotelService, preferred_category, stay_nights
from vacation_planner.services.price_sources import HotelPriceSource


class StubHotelSource(HotelPriceSource):
    name = "stub"

    def __init__(self, offer=None, error=None):
        self.offer = offer
        self.error = error
        self.seen = None

    async def search(self, client, destination, check_in_date, check_out_date, max_per_night, category):
        self.seen = (max_per_night, category)
        if self.error is not None:
            raise self.error
        return self.offer


@pytest.fixture
def service():
    return HotelService()

def test_stay_nights():
    assert stay_nights(date(2025, 7, 10), date(2025, 7, 17)) == 7
    assert stay_nights(date(2025, 7, 10), date(2025, 7, 10)) == 1

def test_preferred_category():
    assert preferred_category(2) == "Budget"
    assert preferred_category(3) == "Budget"
    assert preferred_category(4) == "Mid-range"

@pytest.mark.asyncio
async def test_unknown_destination_uses_generic_catalog(service):
    hotel = await service.find_best_hotel(
        "Queenstown, New Zealand", date(2025, 6, 1), date(2025, 6, 5), 2, 900.0
    )

    assert hotel.name == "Budget Lodge"
    assert hotel.cost_per_night == 80.0
    assert hotel.address == "Outskirts, Queenstown, New Zealand"
    assert hotel.provider == "Mock Hotel Provider"
    assert hotel.amenities["category"] == "Budget"
    assert hotel.nights == 4

@pytest.mark.asyncio
async def test_large_group_gets_mid_range(service):
    hotel = await service.find_best_hotel(
        "Paris, France", date(2025, 7, 10), date(2025, 7, 17), 4, 2000.0
    )

    assert hotel.name == "Eiffel View Inn"
    assert hotel.nights == 7
    assert hotel.total_cost == pytest.approx(180.0 * 7)

@pytest.mark.asyncio
async def test_cheapest_hotel_when_nothing_fits(service):
    hotel = await service.find_best_hotel(
        "Paris, France", date(2025, 7, 10), date(2025, 7, 17), 2, 350.0
    )

    assert hotel.name == "Paris Budget Stay"
    assert hotel.cost_per_night == 90.0

@pytest.mark.asyncio
async def test_highest_rated_candidate_wins():
    service = HotelService(catalog={
        "Testville": (
            HotelInfo("Ok Inn", "Budget", 50.0, 3.0, "North"),
            HotelInfo("Great Inn", "Budget", 70.0, 4.5, "South"),
            HotelInfo("Pricey Inn", "Budget", 500.0, 5.0, "East"),
        )
    })

    hotel = await service.find_best_hotel("Testville", date(2025, 3, 1), date(2025, 3, 3), 2, 200.0)

    assert hotel.name == "Great Inn"

@pytest.mark.asyncio
async def test_source_offer_is_used():
    offer = Accommodation(
        name="API Hotel", address="Rue de Test", cost_per_night=99.0, provider="Booking.com - Paris, France"
    )
    source = StubHotelSource(offer=offer)
    service = HotelService([source])

    hotel = await service.find_best_hotel("Paris, France", date(2025, 7, 10), date(2025, 7, 17), 5, 1400.0)

    assert hotel.name == "API Hotel"
    assert source.seen == (200.0, "Mid-range")

@pytest.mark.asyncio
async def test_failing_source_falls_back_to_catalog():
    source = StubHotelSource(error=httpx.ReadTimeout("slow"))
    service = HotelService([source])

    hotel = await service.find_best_hotel("Rome, Italy", date(2025, 3, 1), date(2025, 3, 4), 2, 900.0)

    assert hotel.name == "Roma Budget Rooms"
    assert hotel.provider == "Mock Hotel Provider"

def test_estimate_accommodation_price(service):
    check_in, check_out = date(2025, 7, 10), date(2025, 7, 17)

    assert service.estimate_accommodation_price("Paris, France", check_in, check_out, 4) == pytest.approx(1260.0)
    assert service.estimate_accommodation_price("Paris, France", check_in, check_out, 1) == pytest.approx(1050.0)
    assert service.estimate_accommodation_price("Atlantis", check_in, check_in, 2) == pytest.approx(150.0)
