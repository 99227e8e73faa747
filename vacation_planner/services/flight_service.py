"""
Flight Pricing Service
Asks the configured flight APIs first and falls back to the pricing heuristic
"""

import logging
import random
from datetime import date
from typing import Callable, Optional, Sequence

import httpx

from vacation_planner.data.catalog import AIRLINES
from vacation_planner.schemas.trip import Transportation
from vacation_planner.services import pricing
from vacation_planner.services.price_sources import FlightPriceSource, first_offer

logger = logging.getLogger(__name__)


class FlightService:
    """
    Finds a flight within a budget.

    `today` and `rng` are injectable so a plan can be reproduced.
    """

    def __init__(
        self,
        sources: Sequence[FlightPriceSource] = (),
        rng: Optional[random.Random] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
        today: Callable[[], date] = date.today,
    ):
        self.sources = list(sources)
        self.rng = rng or random.Random()
        self.client = client
        self.timeout = timeout
        self.today = today

    async def find_best_flight(
        self,
        origin: str,
        destination: str,
        departure_date: date,
        return_date: date,
        max_budget: float
    ) -> Transportation:
        """
        Best flight for the route; never raises.

        External offers are only accepted within `max_budget`. The heuristic
        fallback caps its price to 95% of the budget when it would exceed it.
        """
        async def search(source, client):
            return await source.search(
                client, origin, destination, departure_date, return_date, max_budget,
                today=self.today()
            )

        offer = await first_offer(self.sources, search, self.client, self.timeout)
        if offer is not None:
            return offer

        price = pricing.cap_to_budget(
            self.estimate_flight_price(destination, departure_date),
            max_budget
        )
        logger.info("Estimated flight %s -> %s at %.2f", origin, destination, price)

        return Transportation(
            type="Flight",
            origin=origin,
            destination=destination,
            departure_date=departure_date,
            return_date=return_date,
            provider=self.rng.choice(AIRLINES),
            cost=price,
        )

    def estimate_flight_price(self, destination: str, departure_date: date) -> float:
        """Heuristic price before any budget cap"""
        return pricing.estimate_flight_price(destination, departure_date, today=self.today())
