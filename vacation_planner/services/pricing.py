"""
Pricing heuristics for flights and hotels

Prices start from a per-destination base and are scaled by how far ahead
the trip is booked, the season and, for hotels, the hotel category.
"""

from datetime import date
from typing import Optional

from vacation_planner.data.catalog import (
    DEFAULT_FLIGHT_BASE_PRICE,
    DEFAULT_HOTEL_BASE_PRICE,
    FLIGHT_BASE_PRICES,
    HOTEL_BASE_PRICES,
    HOTEL_CATEGORY_FACTORS,
    PEAK_MONTHS,
)

FLIGHT_PEAK_FACTOR = 1.3
HOTEL_PEAK_FACTOR = 1.4

MIN_ADVANCE_FACTOR = 0.7
MAX_ADVANCE_FACTOR = 1.5

# Share of the ceiling charged when a price would exceed it
BUDGET_CAP_RATIO = 0.95


def advance_booking_factor(departure_date: date, today: Optional[date] = None) -> float:
    """
    Late bookings cost more: 2.0 - days_until_departure / 30,
    clamped to [0.7, 1.5]
    """
    today = today or date.today()
    days_until_departure = (departure_date - today).days
    factor = 2.0 - days_until_departure / 30.0
    return max(MIN_ADVANCE_FACTOR, min(MAX_ADVANCE_FACTOR, factor))


def seasonal_factor(travel_date: date, peak_factor: float = FLIGHT_PEAK_FACTOR) -> float:
    """Peak months (June-August, December) are more expensive"""
    return peak_factor if travel_date.month in PEAK_MONTHS else 1.0


def flight_base_price(destination: str) -> float:
    return FLIGHT_BASE_PRICES.get(destination, DEFAULT_FLIGHT_BASE_PRICE)


def hotel_base_price(destination: str) -> float:
    return HOTEL_BASE_PRICES.get(destination, DEFAULT_HOTEL_BASE_PRICE)


def hotel_category_factor(category: Optional[str]) -> float:
    """Luxury 2.0, Mid-range 1.0, Budget 0.6; anything else 1.0"""
    if not category:
        return 1.0
    return HOTEL_CATEGORY_FACTORS.get(category.strip().lower(), 1.0)


def estimate_flight_price(
    destination: str,
    departure_date: date,
    today: Optional[date] = None,
    base_price: Optional[float] = None
) -> float:
    """Uncapped heuristic flight price"""
    base = flight_base_price(destination) if base_price is None else base_price
    return base * advance_booking_factor(departure_date, today) * seasonal_factor(departure_date)


def cap_to_budget(price: float, max_budget: float) -> float:
    """Prices over the ceiling are lowered to 95% of it, never rejected"""
    if price > max_budget:
        return max_budget * BUDGET_CAP_RATIO
    return price


def estimate_hotel_price(
    destination: str,
    category: Optional[str],
    check_in_date: date
) -> float:
    """Heuristic nightly rate for a hotel category at a destination"""
    return (
        hotel_base_price(destination)
        * hotel_category_factor(category)
        * seasonal_factor(check_in_date, HOTEL_PEAK_FACTOR)
    )
