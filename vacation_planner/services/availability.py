"""
Availability Service
Checks live flight and hotel availability for a planned trip.

Flights are counted with Amadeus and hotels with Booking.com. Without
credentials a check answers from a fixed table instead.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Callable, Optional, Tuple

import httpx

from vacation_planner.config import Settings
from vacation_planner.data.catalog import BOOKING_DESTINATION_IDS
from vacation_planner.schemas.booking import AvailabilityResult, AvailabilityStatus
from vacation_planner.schemas.trip import TripPlan
from vacation_planner.services.price_sources import (
    SOURCE_ERRORS,
    AmadeusFlightSource,
    BookingComSource,
    PriceSourceError,
    airport_code,
)

logger = logging.getLogger(__name__)

AvailabilityCallback = Callable[[AvailabilityResult], None]

# Fewer options than this count as limited availability
FLIGHT_LIMITED_BELOW = 5
HOTEL_LIMITED_BELOW = 10

FLIGHT_OFFER_LIMIT = 10

POPULAR_FLIGHT_ROUTES = ("paris", "london", "tokyo")
SPARSE_FLIGHT_ROUTES = ("sydney", "rome")
PEAK_HOTEL_MONTHS = range(6, 9)


def classify(count: int, limited_below: int, kind: str) -> AvailabilityResult:
    if count == 0:
        return AvailabilityResult(
            status=AvailabilityStatus.UNAVAILABLE,
            message=f"No {kind} available for selected dates",
        )
    if count < limited_below:
        return AvailabilityResult(
            status=AvailabilityStatus.LIMITED,
            message=f"Limited {kind} available ({count} options)",
            available_count=count,
        )
    return AvailabilityResult(
        status=AvailabilityStatus.AVAILABLE,
        message=f"Multiple {kind} available ({count} options)",
        available_count=count,
    )


def mock_flight_availability(plan: TripPlan) -> AvailabilityResult:
    destination = plan.destination.lower()
    if any(city in destination for city in POPULAR_FLIGHT_ROUTES):
        return AvailabilityResult(
            status=AvailabilityStatus.AVAILABLE,
            message="Multiple flights available (Mock: 15+ options)",
            available_count=15,
        )
    if any(city in destination for city in SPARSE_FLIGHT_ROUTES):
        return AvailabilityResult(
            status=AvailabilityStatus.LIMITED,
            message="Limited flights available (Mock: 3 options)",
            available_count=3,
        )
    return AvailabilityResult(
        status=AvailabilityStatus.AVAILABLE,
        message="Flights available (Mock: 8 options)",
        available_count=8,
    )


def mock_hotel_availability(plan: TripPlan) -> AvailabilityResult:
    check_in = plan.start_date
    if plan.accommodation is not None and plan.accommodation.check_in_date is not None:
        check_in = plan.accommodation.check_in_date

    if check_in.month in PEAK_HOTEL_MONTHS:
        return AvailabilityResult(
            status=AvailabilityStatus.LIMITED,
            message="Limited hotels available during peak season (Mock: 5 options)",
            available_count=5,
        )
    return AvailabilityResult(
        status=AvailabilityStatus.AVAILABLE,
        message="Multiple hotels available (Mock: 25+ options)",
        available_count=25,
    )


class AvailabilityService:
    def __init__(
        self,
        flight_source: Optional[AmadeusFlightSource] = None,
        hotel_source: Optional[BookingComSource] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 15.0,
    ):
        self.flight_source = flight_source
        self.hotel_source = hotel_source
        self.client = client
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings, client: Optional[httpx.AsyncClient] = None):
        flight_source = None
        if settings.AMADEUS_CLIENT_ID and settings.AMADEUS_CLIENT_SECRET:
            flight_source = AmadeusFlightSource(
                settings.AMADEUS_CLIENT_ID, settings.AMADEUS_CLIENT_SECRET, settings.AMADEUS_BASE_URL
            )

        hotel_source = None
        if settings.BOOKING_API_KEY:
            hotel_source = BookingComSource(settings.BOOKING_API_KEY, settings.BOOKING_BASE_URL)

        return cls(flight_source, hotel_source, client=client, timeout=settings.AVAILABILITY_TIMEOUT)

    @asynccontextmanager
    async def _http(self):
        if self.client is not None:
            yield self.client
            return
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            yield client

    async def check_flight_availability(self, plan: TripPlan) -> AvailabilityResult:
        if self.flight_source is None:
            return mock_flight_availability(plan)

        transport = plan.transportation
        if transport is None:
            return AvailabilityResult(
                status=AvailabilityStatus.ERROR, message="No transportation information"
            )

        try:
            origin_code = airport_code(transport.origin)
            destination_code = airport_code(transport.destination)
            if origin_code is None or destination_code is None:
                raise PriceSourceError(
                    f"No airport code for {transport.origin} -> {transport.destination}"
                )

            async with self._http() as client:
                offers = await self.flight_source.flight_offers(
                    client, origin_code, destination_code, transport.departure_date,
                    max_results=FLIGHT_OFFER_LIMIT
                )
        except SOURCE_ERRORS as e:
            logger.warning("Flight availability check failed: %s", e)
            return AvailabilityResult(
                status=AvailabilityStatus.ERROR,
                message=f"Unable to check flight availability: {e}",
            )

        return classify(len(offers), FLIGHT_LIMITED_BELOW, "flights")

    async def check_hotel_availability(self, plan: TripPlan) -> AvailabilityResult:
        if self.hotel_source is None:
            return mock_hotel_availability(plan)

        accommodation = plan.accommodation
        if accommodation is None or accommodation.check_in_date is None or accommodation.check_out_date is None:
            return AvailabilityResult(
                status=AvailabilityStatus.ERROR, message="No accommodation information"
            )

        try:
            destination_id = BOOKING_DESTINATION_IDS.get(plan.destination)
            if destination_id is None:
                raise PriceSourceError(f"No Booking.com destination id for {plan.destination}")

            async with self._http() as client:
                hotels = await self.hotel_source.hotel_results(
                    client, destination_id, accommodation.check_in_date,
                    accommodation.check_out_date, order_by="popularity"
                )
        except SOURCE_ERRORS as e:
            logger.warning("Hotel availability check failed: %s", e)
            return AvailabilityResult(
                status=AvailabilityStatus.ERROR,
                message=f"Unable to check hotel availability: {e}",
            )

        return classify(len(hotels), HOTEL_LIMITED_BELOW, "hotels")

    async def _report(self, kind: str, check, callback: AvailabilityCallback) -> AvailabilityResult:
        callback(AvailabilityResult(
            status=AvailabilityStatus.CHECKING, message=f"Checking {kind} availability..."
        ))

        try:
            result = await asyncio.wait_for(check, self.timeout)
        except asyncio.TimeoutError:
            logger.warning("%s availability check timed out after %.1fs", kind.title(), self.timeout)
            result = AvailabilityResult(
                status=AvailabilityStatus.ERROR,
                message=f"Timed out checking {kind} availability",
            )

        callback(result)
        return result

    async def check_trip_availability(
        self,
        plan: TripPlan,
        on_flight: AvailabilityCallback,
        on_hotel: AvailabilityCallback
    ) -> Tuple[AvailabilityResult, AvailabilityResult]:
        """
        Run the flight and hotel checks concurrently.

        Each callback first receives a CHECKING result and then the final
        one. A check that exceeds the timeout reports ERROR. An exception
        from a callback cancels the other check and propagates.
        """
        flight_task = asyncio.create_task(
            self._report("flight", self.check_flight_availability(plan), on_flight)
        )
        hotel_task = asyncio.create_task(
            self._report("hotel", self.check_hotel_availability(plan), on_hotel)
        )
        try:
            flight, hotel = await asyncio.gather(flight_task, hotel_task)
        except Exception:
            # A failing callback must not leave the other check running
            for task in (flight_task, hotel_task):
                task.cancel()
            raise
        return flight, hotel
