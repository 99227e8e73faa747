"""
Booking Service
Mock flight and hotel booking that hands out confirmation codes
"""

import logging
import uuid
from datetime import datetime
from typing import Dict, Optional, Union

from vacation_planner.schemas.booking import BookingResult
from vacation_planner.schemas.trip import TripPlan

logger = logging.getLogger(__name__)

FLIGHT_CODE_PREFIX = "FL"
HOTEL_CODE_PREFIX = "HT"


def confirmation_code(prefix: str) -> str:
    """PREFIX-XXXXXXXX with eight uppercase hex characters"""
    return f"{prefix}-{uuid.uuid4().hex[:8].upper()}"


class BookingService:
    def check_availability(self, trip_id: Union[int, str]) -> Dict[str, object]:
        """Every trip is bookable in the mock"""
        return {
            "trip_id": trip_id,
            "is_available": True,
            "message": "Trip is available for booking",
            "last_checked": datetime.now().isoformat(),
        }

    def book_trip(
        self,
        plan: Optional[TripPlan],
        traveler_name: Optional[str],
        email: Optional[str],
        phone: Optional[str],
        payment_last4: Optional[str]
    ) -> BookingResult:
        """
        Book flight and hotel for a plan

        Always succeeds when a plan is given.
        """
        if plan is None:
            return BookingResult(success=False, message="No trip plan available to book.")

        flight_code = self.book_flight(plan)
        hotel_code = self.book_hotel(plan)
        logger.info("Booked trip to %s: %s / %s", plan.destination, flight_code, hotel_code)

        message = (
            f"Booking confirmed for {traveler_name or 'Traveler'}. "
            f"Flight: {flight_code}, Hotel: {hotel_code}. "
            f"Payment ****{payment_last4 or '0000'}"
        )
        return BookingResult(
            success=True,
            flight_confirmation=flight_code,
            hotel_confirmation=hotel_code,
            message=message,
        )

    def book_flight(self, plan: TripPlan) -> str:
        return confirmation_code(FLIGHT_CODE_PREFIX)

    def book_hotel(self, plan: TripPlan) -> str:
        return confirmation_code(HOTEL_CODE_PREFIX)
