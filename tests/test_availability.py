import asyncio
from datetime import date

import httpx
import pytest
import pytest_asyncio

from vacation_planner.schemas.booking import AvailabilityResult, AvailabilityStatus
from vacation_planner.services.activity_service import ActivityService
from vacation_planner.services.availability import AvailabilityService, classify
from vacation_planner.services.price_sources import AmadeusFlightSource, BookingComSource
from vacation_planner.services.trip_planner import TripPlannerService


@pytest_asyncio.fixture
async def paris_plan(rng, make_preferences):
    planner = TripPlannerService(activities=ActivityService(rng=rng))
    return await planner.plan_trip(make_preferences(
        destination="Paris, France",
        start_date=date(2025, 7, 10),
        end_date=date(2025, 7, 17),
    ))


def live_service(handler, timeout=5.0):
    return AvailabilityService(
        AmadeusFlightSource("id", "secret", "http://amadeus.test"),
        BookingComSource("key", "https://booking.test/v1"),
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        timeout=timeout,
    )


@pytest.mark.parametrize("count, limited_below, status", [
    (0, 5, AvailabilityStatus.UNAVAILABLE),
    (4, 5, AvailabilityStatus.LIMITED),
    (5, 5, AvailabilityStatus.AVAILABLE),
    (9, 10, AvailabilityStatus.LIMITED),
    (10, 10, AvailabilityStatus.AVAILABLE),
])
def test_classify(count, limited_below, status):
    result = classify(count, limited_below, "hotels")

    assert result.status == status
    assert result.available_count == count

@pytest.mark.asyncio
async def test_mock_checks_without_credentials(paris_plan):
    service = AvailabilityService()

    flight = await service.check_flight_availability(paris_plan)
    hotel = await service.check_hotel_availability(paris_plan)

    assert flight.status == AvailabilityStatus.AVAILABLE
    assert flight.available_count == 15
    # July is peak season
    assert hotel.status == AvailabilityStatus.LIMITED
    assert hotel.available_count == 5

@pytest.mark.asyncio
async def test_each_callback_sees_checking_then_result(paris_plan):
    flights, hotels = [], []
    service = AvailabilityService()

    flight, hotel = await service.check_trip_availability(paris_plan, flights.append, hotels.append)

    assert [r.status for r in flights] == [AvailabilityStatus.CHECKING, AvailabilityStatus.AVAILABLE]
    assert [r.status for r in hotels] == [AvailabilityStatus.CHECKING, AvailabilityStatus.LIMITED]
    assert flights[-1] is flight
    assert hotels[-1] is hotel

@pytest.mark.asyncio
async def test_live_counts(paris_plan):
    def handler(request):
        if request.url.path.endswith("/oauth2/token"):
            return httpx.Response(200, json={"access_token": "t", "expires_in": 600})
        if request.url.path.endswith("/flight-offers"):
            assert request.url.params["max"] == "10"
            return httpx.Response(200, json={"data": [{}] * 3})
        assert request.url.params["order_by"] == "popularity"
        return httpx.Response(200, json={"result": [{}] * 12})

    service = live_service(handler)
    flights, hotels = [], []
    flight, hotel = await service.check_trip_availability(paris_plan, flights.append, hotels.append)

    assert flight.status == AvailabilityStatus.LIMITED
    assert flight.available_count == 3
    assert hotel.status == AvailabilityStatus.AVAILABLE
    assert hotel.available_count == 12

@pytest.mark.asyncio
async def test_api_failure_reports_error(paris_plan):
    def handler(request):
        return httpx.Response(500)

    service = live_service(handler)
    flight = await service.check_flight_availability(paris_plan)
    hotel = await service.check_hotel_availability(paris_plan)

    assert flight.status == AvailabilityStatus.ERROR
    assert hotel.status == AvailabilityStatus.ERROR

@pytest.mark.asyncio
async def test_destination_without_booking_id_reports_error(rng, make_preferences):
    planner = TripPlannerService(activities=ActivityService(rng=rng))
    plan = await planner.plan_trip(make_preferences(destination="Atlantis"))

    def handler(request):
        raise AssertionError("no request expected")

    hotel = await live_service(handler).check_hotel_availability(plan)

    assert hotel.status == AvailabilityStatus.ERROR
    assert "Atlantis" in hotel.message

@pytest.mark.asyncio
async def test_slow_check_times_out_without_blocking_the_other(paris_plan):
    class SlowFlights(AvailabilityService):
        async def check_flight_availability(self, plan):
            await asyncio.sleep(1.0)
            return AvailabilityResult(status=AvailabilityStatus.AVAILABLE, message="late")

    flights, hotels = [], []
    service = SlowFlights(timeout=0.05)
    flight, hotel = await service.check_trip_availability(paris_plan, flights.append, hotels.append)

    assert flight.status == AvailabilityStatus.ERROR
    assert hotel.status == AvailabilityStatus.LIMITED
    assert len(flights) == 2
    assert len(hotels) == 2

@pytest.mark.asyncio
async def test_failing_callback_cancels_the_other_check(paris_plan):
    hotel_started = asyncio.Event()
    hotel_cancelled = asyncio.Event()

    class HangingHotels(AvailabilityService):
        async def check_flight_availability(self, plan):
            await hotel_started.wait()
            return await super().check_flight_availability(plan)

        async def check_hotel_availability(self, plan):
            hotel_started.set()
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                hotel_cancelled.set()
                raise

    def on_flight(result):
        if result.status != AvailabilityStatus.CHECKING:
            raise RuntimeError("listener failed")

    service = HangingHotels(timeout=30.0)
    with pytest.raises(RuntimeError):
        await service.check_trip_availability(paris_plan, on_flight, lambda result: None)

    await asyncio.wait_for(hotel_cancelled.wait(), 1.0)
