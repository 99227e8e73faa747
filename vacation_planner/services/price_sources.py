"""
External flight and hotel price sources

Each source wraps one third-party API. A search returns an offer or None;
network, HTTP and parsing problems surface as exceptions and the calling
service decides how to fall back.
"""

import asyncio
import logging
import time
from datetime import date
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, TypeVar

import httpx

from vacation_planner.config import Settings
from vacation_planner.data.catalog import AIRPORT_CODES, BOOKING_DESTINATION_IDS, CARRIER_NAMES
from vacation_planner.schemas.trip import Accommodation, Transportation
from vacation_planner.services.pricing import estimate_flight_price, estimate_hotel_price

logger = logging.getLogger(__name__)

# Refresh the Amadeus token this many seconds before it expires
TOKEN_EXPIRY_MARGIN = 30


class PriceSourceError(Exception):
    """A source answered, but not with something usable (e.g. no auth token)"""


Offer = TypeVar("Offer")
Source = TypeVar("Source")

SOURCE_ERRORS = (
    httpx.HTTPError,
    PriceSourceError,
    asyncio.TimeoutError,
    ValueError,
    KeyError,
    TypeError,
    AttributeError,
)


def airport_code(location: str) -> Optional[str]:
    return AIRPORT_CODES.get(location)


def carrier_name(code: str) -> str:
    return CARRIER_NAMES.get(code, code)


class FlightPriceSource:
    name = "flight-source"

    async def search(
        self,
        client: httpx.AsyncClient,
        origin: str,
        destination: str,
        departure_date: date,
        return_date: date,
        max_budget: float,
        today: Optional[date] = None
    ) -> Optional[Transportation]:
        """`today` anchors any heuristic pricing; None means the current date"""
        raise NotImplementedError


class HotelPriceSource:
    name = "hotel-source"

    async def search(
        self,
        client: httpx.AsyncClient,
        destination: str,
        check_in_date: date,
        check_out_date: date,
        max_per_night: float,
        category: Optional[str]
    ) -> Optional[Accommodation]:
        raise NotImplementedError


class AviationStackFlightSource(FlightPriceSource):
    """
    AviationStack only publishes schedules, so the airline comes from the
    API and the fare from the pricing heuristic.
    """
    name = "aviationstack"

    def __init__(self, api_key: str, base_url: str):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    async def search(self, client, origin, destination, departure_date, return_date, max_budget, today=None):
        origin_code = airport_code(origin)
        destination_code = airport_code(destination)
        if origin_code is None or destination_code is None:
            return None

        response = await client.get(
            f"{self.base_url}/flights",
            params={
                "access_key": self.api_key,
                "dep_iata": origin_code,
                "arr_iata": destination_code,
                "limit": 5,
            },
        )
        response.raise_for_status()
        flights = response.json().get("data") or []
        if not flights:
            return None

        airline = (flights[0].get("airline") or {}).get("name") or "Unknown Airline"
        price = estimate_flight_price(destination, departure_date, today=today)
        if price > max_budget:
            return None

        return Transportation(
            type="Flight",
            origin=origin,
            destination=destination,
            departure_date=departure_date,
            return_date=return_date,
            provider=airline,
            cost=price,
        )


class AmadeusFlightSource(FlightPriceSource):
    """Amadeus flight offers, authenticated with OAuth client credentials"""
    name = "amadeus"

    def __init__(self, client_id: str, client_secret: str, base_url: str):
        self.client_id = client_id
        self.client_secret = client_secret
        self.base_url = base_url.rstrip("/")
        self._token: Optional[str] = None
        self._token_expires_at = 0.0

    async def access_token(self, client: httpx.AsyncClient) -> str:
        if self._token and time.monotonic() < self._token_expires_at:
            return self._token

        response = await client.post(
            f"{self.base_url}/v1/security/oauth2/token",
            data={
                "grant_type": "client_credentials",
                "client_id": self.client_id,
                "client_secret": self.client_secret,
            },
        )
        response.raise_for_status()
        payload = response.json()

        token = payload.get("access_token")
        if not token:
            raise PriceSourceError("Amadeus token response had no access_token")

        expires_in = float(payload.get("expires_in", 0))
        self._token = token
        self._token_expires_at = time.monotonic() + max(expires_in - TOKEN_EXPIRY_MARGIN, 0)
        return token

    async def flight_offers(
        self,
        client: httpx.AsyncClient,
        origin_code: str,
        destination_code: str,
        departure_date: date,
        return_date: Optional[date] = None,
        max_results: int = 5
    ) -> List[Dict[str, Any]]:
        token = await self.access_token(client)
        params = {
            "originLocationCode": origin_code,
            "destinationLocationCode": destination_code,
            "departureDate": departure_date.isoformat(),
            "adults": 1,
            "max": max_results,
        }
        if return_date is not None:
            params["returnDate"] = return_date.isoformat()

        response = await client.get(
            f"{self.base_url}/v2/shopping/flight-offers",
            params=params,
            headers={"Authorization": f"Bearer {token}"},
        )
        response.raise_for_status()
        return response.json().get("data") or []

    async def search(self, client, origin, destination, departure_date, return_date, max_budget, today=None):
        origin_code = airport_code(origin)
        destination_code = airport_code(destination)
        if origin_code is None or destination_code is None:
            return None

        offers = await self.flight_offers(
            client, origin_code, destination_code, departure_date, return_date
        )

        for offer in offers:
            price = offer.get("price") or {}
            if "total" not in price:
                continue
            total = float(price["total"])
            if total > max_budget:
                continue

            airline = "Unknown Airline"
            itineraries = offer.get("itineraries") or []
            if itineraries:
                segments = itineraries[0].get("segments") or []
                if segments and segments[0].get("carrierCode"):
                    airline = carrier_name(segments[0]["carrierCode"])

            return Transportation(
                type="Flight",
                origin=origin,
                destination=destination,
                departure_date=departure_date,
                return_date=return_date,
                provider=airline,
                cost=total,
            )

        return None


class HotelsComSource(HotelPriceSource):
    """
    Hotels.com search via RapidAPI. The listing has names but no usable
    rates, so the nightly price comes from the pricing heuristic.
    """
    name = "hotels.com"

    def __init__(self, api_key: str, base_url: str):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    async def search(self, client, destination, check_in_date, check_out_date, max_per_night, category):
        response = await client.get(
            f"{self.base_url}/v1/hotels/search",
            params={
                "destination": destination,
                "checkin": check_in_date.isoformat(),
                "checkout": check_out_date.isoformat(),
                "adults": 2,
                "rooms": 1,
            },
            headers={
                "X-RapidAPI-Key": self.api_key,
                "X-RapidAPI-Host": httpx.URL(self.base_url).host,
            },
        )
        response.raise_for_status()

        price = estimate_hotel_price(destination, category, check_in_date)
        if price > max_per_night:
            return None

        hotels = response.json().get("data") or []
        if not hotels:
            return None

        hotel = hotels[0]
        return Accommodation(
            name=hotel.get("name") or "Unknown Hotel",
            type=category or "Hotel",
            address=hotel.get("address") or destination,
            cost_per_night=price,
            rating=4.0,
            provider="Hotels.com",
            amenities={"category": category} if category else {},
            check_in_date=check_in_date,
            check_out_date=check_out_date,
        )


class BookingComSource(HotelPriceSource):
    """Booking.com search via RapidAPI; uses the listed gross price"""
    name = "booking.com"

    def __init__(self, api_key: str, base_url: str):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    def _headers(self) -> Dict[str, str]:
        return {
            "X-RapidAPI-Key": self.api_key,
            "X-RapidAPI-Host": httpx.URL(self.base_url).host,
        }

    async def hotel_results(
        self,
        client: httpx.AsyncClient,
        destination_id: int,
        check_in_date: date,
        check_out_date: date,
        order_by: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        params = {
            "dest_id": destination_id,
            "checkin_date": check_in_date.isoformat(),
            "checkout_date": check_out_date.isoformat(),
            "adults_number": 2,
            "room_number": 1,
            "units": "metric",
        }
        if order_by:
            params["order_by"] = order_by

        response = await client.get(
            f"{self.base_url}/hotels/search",
            params=params,
            headers=self._headers(),
        )
        response.raise_for_status()
        return response.json().get("result") or []

    async def search(self, client, destination, check_in_date, check_out_date, max_per_night, category):
        destination_id = BOOKING_DESTINATION_IDS.get(destination)
        if destination_id is None:
            return None

        results = await self.hotel_results(client, destination_id, check_in_date, check_out_date)

        for hotel in results:
            gross = (hotel.get("price_breakdown") or {}).get("gross_price")
            if gross is None:
                continue
            per_night = float(gross)
            if per_night > max_per_night:
                continue

            return Accommodation(
                name=hotel.get("hotel_name") or "Unknown Hotel",
                type=category or "Hotel",
                address=hotel.get("address") or destination,
                cost_per_night=per_night,
                rating=float(hotel.get("review_score") or 0.0),
                provider=f"Booking.com - {destination}",
                amenities={"category": category} if category else {},
                check_in_date=check_in_date,
                check_out_date=check_out_date,
            )

        return None


def flight_sources_from_settings(settings: Settings) -> List[FlightPriceSource]:
    """Configured flight sources, free API first"""
    sources: List[FlightPriceSource] = []
    if settings.AVIATIONSTACK_API_KEY:
        sources.append(AviationStackFlightSource(
            settings.AVIATIONSTACK_API_KEY, settings.AVIATIONSTACK_BASE_URL
        ))
    if settings.AMADEUS_CLIENT_ID and settings.AMADEUS_CLIENT_SECRET:
        sources.append(AmadeusFlightSource(
            settings.AMADEUS_CLIENT_ID, settings.AMADEUS_CLIENT_SECRET, settings.AMADEUS_BASE_URL
        ))
    return sources


def hotel_sources_from_settings(settings: Settings) -> List[HotelPriceSource]:
    """Configured hotel sources, free API first"""
    sources: List[HotelPriceSource] = []
    if settings.HOTELS_API_KEY:
        sources.append(HotelsComSource(settings.HOTELS_API_KEY, settings.HOTELS_BASE_URL))
    if settings.BOOKING_API_KEY:
        sources.append(BookingComSource(settings.BOOKING_API_KEY, settings.BOOKING_BASE_URL))
    return sources


async def first_offer(
    sources: Sequence[Source],
    search: Callable[[Source, httpx.AsyncClient], Awaitable[Optional[Offer]]],
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = 10.0
) -> Optional[Offer]:
    """
    Ask each source in order and return the first offer.

    A source that fails or times out counts as having no offer.
    """
    if not sources:
        return None

    close_client = False
    if client is None:
        client = httpx.AsyncClient(timeout=timeout)
        close_client = True

    try:
        for source in sources:
            try:
                offer = await asyncio.wait_for(search(source, client), timeout)
            except SOURCE_ERRORS as e:
                logger.warning("%s lookup failed: %s", source.name, e)
                continue

            if offer is not None:
                logger.info("Using offer from %s", source.name)
                return offer

            logger.debug("%s returned no usable offer", source.name)

        return None
    finally:
        if close_client:
            await client.aclose()
