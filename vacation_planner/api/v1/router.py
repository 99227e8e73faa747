"""
API v1 Router
"""

from fastapi import APIRouter
from vacation_planner.api.v1.endpoints import trips, destinations, booking, export

api_router = APIRouter()

api_router.include_router(
    trips.router,
    prefix="/trips",
    tags=["trips"]
)

api_router.include_router(
    destinations.router,
    prefix="/destinations",
    tags=["destinations"]
)

api_router.include_router(
    booking.router,
    prefix="/booking",
    tags=["booking"]
)

api_router.include_router(
    export.router,
    prefix="/export",
    tags=["export"]
)
