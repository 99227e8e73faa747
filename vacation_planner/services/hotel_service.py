"""
Hotel Pricing Service
Asks the configured hotel APIs first and falls back to the static catalog
"""

import logging
from datetime import date
from typing import Mapping, Optional, Sequence

import httpx

from vacation_planner.data.catalog import DESTINATION_HOTELS, GENERIC_HOTELS, HotelInfo
from vacation_planner.schemas.trip import Accommodation
from vacation_planner.services import pricing
from vacation_planner.services.price_sources import HotelPriceSource, first_offer

logger = logging.getLogger(__name__)

LARGE_GROUP_SIZE = 4
LARGE_GROUP_CATEGORY = "Mid-range"
SMALL_GROUP_CATEGORY = "Budget"

# Each traveller beyond two adds 10% to the room price
GROUP_SURCHARGE = 0.1


def stay_nights(check_in_date: date, check_out_date: date) -> int:
    """Nights billed for a stay; a same-day stay counts as one"""
    return max((check_out_date - check_in_date).days, 1)


def preferred_category(group_size: int) -> str:
    if group_size >= LARGE_GROUP_SIZE:
        return LARGE_GROUP_CATEGORY
    return SMALL_GROUP_CATEGORY


def select_catalog_hotel(
    hotels: Sequence[HotelInfo],
    category: str,
    max_per_night: float
) -> HotelInfo:
    """
    Highest-rated hotel of the category within the nightly ceiling,
    otherwise the cheapest hotel in the catalog.
    """
    candidates = [
        hotel for hotel in hotels
        if hotel.category == category and hotel.price_per_night <= max_per_night
    ]
    if candidates:
        return max(candidates, key=lambda hotel: hotel.rating)
    return min(hotels, key=lambda hotel: hotel.price_per_night)


class HotelService:
    def __init__(
        self,
        sources: Sequence[HotelPriceSource] = (),
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
        catalog: Mapping[str, Sequence[HotelInfo]] = DESTINATION_HOTELS,
    ):
        self.sources = list(sources)
        self.client = client
        self.timeout = timeout
        self.catalog = catalog

    async def find_best_hotel(
        self,
        destination: str,
        check_in_date: date,
        check_out_date: date,
        group_size: int,
        max_total_budget: float
    ) -> Accommodation:
        """
        Best hotel for the stay; never raises.

        The total budget is spread over the nights to get a nightly
        ceiling. Groups of four or more look for mid-range rooms.
        """
        nights = stay_nights(check_in_date, check_out_date)
        max_per_night = max_total_budget / nights
        category = preferred_category(group_size)

        async def search(source, client):
            return await source.search(
                client, destination, check_in_date, check_out_date, max_per_night, category
            )

        offer = await first_offer(self.sources, search, self.client, self.timeout)
        if offer is not None:
            return offer

        hotels = self.catalog.get(destination) or GENERIC_HOTELS
        hotel = select_catalog_hotel(hotels, category, max_per_night)
        logger.info(
            "Selected catalog hotel %s in %s at %.2f/night",
            hotel.name, destination, hotel.price_per_night
        )

        return Accommodation(
            name=hotel.name,
            type=hotel.category,
            address=f"{hotel.location}, {destination}",
            cost_per_night=hotel.price_per_night,
            rating=hotel.rating,
            provider="Mock Hotel Provider",
            amenities={"category": hotel.category, "location": hotel.location},
            check_in_date=check_in_date,
            check_out_date=check_out_date,
        )

    def estimate_accommodation_price(
        self,
        destination: str,
        check_in_date: date,
        check_out_date: date,
        group_size: int
    ) -> float:
        """Whole-stay estimate from the destination base rate and group size"""
        group_factor = max(1.0, 1.0 + (group_size - 2) * GROUP_SURCHARGE)
        nights = stay_nights(check_in_date, check_out_date)
        return pricing.hotel_base_price(destination) * group_factor * nights
