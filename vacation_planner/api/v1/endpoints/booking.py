"""
Booking API Endpoints
"""

import logging
from fastapi import APIRouter, Depends, HTTPException

from vacation_planner.api.deps import get_availability, get_booking, get_planner
from vacation_planner.schemas.booking import BookingRequest, BookingResult, TripAvailability
from vacation_planner.services.availability import AvailabilityService
from vacation_planner.services.booking import BookingService
from vacation_planner.services.trip_planner import TripPlannerService

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/book", response_model=BookingResult)
async def book_trip(
    request: BookingRequest,
    planner: TripPlannerService = Depends(get_planner),
    booking: BookingService = Depends(get_booking)
):
    """
    Book flight and hotel for a trip (the current plan if no id is given)
    """
    if request.trip_id is not None:
        plan = await planner.get_trip(request.trip_id)
        if not plan:
            raise HTTPException(status_code=404, detail="Trip not found")
    else:
        plan = planner.current_plan
        if plan is None:
            raise HTTPException(status_code=404, detail="No trip has been planned yet")

    return booking.book_trip(
        plan,
        request.traveler_name,
        request.email,
        request.phone,
        request.payment_last4
    )

@router.get("/availability/{trip_id}", response_model=TripAvailability)
async def check_availability(
    trip_id: int,
    planner: TripPlannerService = Depends(get_planner),
    availability: AvailabilityService = Depends(get_availability),
    booking: BookingService = Depends(get_booking)
):
    """
    Check live flight and hotel availability for a trip
    """
    plan = await planner.get_trip(trip_id)
    if not plan:
        raise HTTPException(status_code=404, detail="Trip not found")

    flight, hotel = await availability.check_trip_availability(
        plan,
        on_flight=lambda result: logger.debug("Flight availability %s: %s", result.status.value, result.message),
        on_hotel=lambda result: logger.debug("Hotel availability %s: %s", result.status.value, result.message)
    )
    bookable = booking.check_availability(trip_id)

    return TripAvailability(
        trip_id=trip_id,
        is_available=bookable["is_available"],
        message=bookable["message"],
        flight=flight,
        hotel=hotel
    )
