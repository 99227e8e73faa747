"""
Booking and availability pydantic schemas
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from enum import Enum

class AvailabilityStatus(str, Enum):
    CHECKING = "CHECKING"
    AVAILABLE = "AVAILABLE"
    LIMITED = "LIMITED"
    UNAVAILABLE = "UNAVAILABLE"
    ERROR = "ERROR"

class AvailabilityResult(BaseModel):
    status: AvailabilityStatus
    message: str
    available_count: int = 0
    last_checked: datetime = Field(default_factory=datetime.now)

    class Config:
        frozen = True

class TripAvailability(BaseModel):
    trip_id: int
    is_available: bool
    message: str
    flight: AvailabilityResult
    hotel: AvailabilityResult

class BookingRequest(BaseModel):
    trip_id: Optional[int] = Field(default=None, description="Defaults to the current plan")
    traveler_name: str = Field(..., min_length=1)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    phone: str = Field(..., min_length=3)
    payment_last4: str = Field(..., pattern=r"^\d{4}$")

class BookingResult(BaseModel):
    success: bool
    flight_confirmation: Optional[str] = None
    hotel_confirmation: Optional[str] = None
    message: str
    timestamp: datetime = Field(default_factory=datetime.now)
