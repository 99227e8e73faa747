"""
FastAPI Dependencies
"""

from fastapi import Request

from vacation_planner.services.availability import AvailabilityService
from vacation_planner.services.booking import BookingService
from vacation_planner.services.export_service import ExportService
from vacation_planner.services.trip_planner import TripPlannerService

def get_planner(request: Request) -> TripPlannerService:
    """Trip planner created at startup"""
    return request.app.state.planner

def get_availability(request: Request) -> AvailabilityService:
    return request.app.state.availability

def get_booking() -> BookingService:
    return BookingService()

def get_exporter() -> ExportService:
    return ExportService()
