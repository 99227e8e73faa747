"""
Trip planning pydantic schemas
"""

import re
from datetime import date, time
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, computed_field, field_validator, model_validator

# Share of the total budget for each category
TRANSPORTATION_SHARE = 0.40
ACCOMMODATION_SHARE = 0.30
FOOD_SHARE = 0.15
ACTIVITIES_SHARE = 0.10
MISC_SHARE = 0.05

NOON = time(12, 0)
EVENING = time(18, 0)

_CLOCK_RE = re.compile(r"^(\d{1,2})(?::(\d{2}))?\s*(AM|PM)?$")


def parse_clock(value: str) -> time:
    """
    Parse a free-text clock string such as "09:00", "9", "9:30 pm" or "12 AM".

    Raises:
        ValueError: if the string is not a recognisable clock time
    """
    match = _CLOCK_RE.match(value.strip().upper())
    if not match:
        raise ValueError(f"Unrecognised time: {value!r}")

    hour = int(match.group(1))
    minute = int(match.group(2) or 0)
    meridiem = match.group(3)

    if meridiem == "PM" and hour != 12:
        hour += 12
    elif meridiem == "AM" and hour == 12:
        hour = 0

    return time(hour, minute)


class BudgetBreakdown(BaseModel):
    transportation: float = 0.0
    accommodation: float = 0.0
    food: float = 0.0
    activities: float = 0.0
    misc: float = 0.0
    total: float = 0.0
    currency: str = "USD"

    @classmethod
    def from_total(cls, total: float, currency: str = "USD") -> "BudgetBreakdown":
        """Split a total budget using the fixed category percentages"""
        return cls(
            transportation=total * TRANSPORTATION_SHARE,
            accommodation=total * ACCOMMODATION_SHARE,
            food=total * FOOD_SHARE,
            activities=total * ACTIVITIES_SHARE,
            misc=total * MISC_SHARE,
            total=total,
            currency=currency,
        )

    @classmethod
    def from_categories(
        cls,
        transportation: float,
        accommodation: float,
        food: float,
        activities: float,
        misc: float,
        currency: str = "USD",
    ) -> "BudgetBreakdown":
        """Build from explicit category values; the total is their sum"""
        return cls(
            transportation=transportation,
            accommodation=accommodation,
            food=food,
            activities=activities,
            misc=misc,
            total=transportation + accommodation + food + activities + misc,
            currency=currency,
        )

    @computed_field
    @property
    def total_cost(self) -> float:
        return self.transportation + self.accommodation + self.food + self.activities + self.misc

    @computed_field
    @property
    def remaining(self) -> float:
        # Cent precision, so float noise in the split never reads as overspending
        return round(self.total - self.total_cost, 2)

    @computed_field
    @property
    def within_budget(self) -> bool:
        return self.remaining >= 0


class TripPreferences(BaseModel):
    budget: float = Field(..., ge=0)
    currency: str = Field(default="USD", min_length=3, max_length=3)
    destination: Optional[str] = None
    start_date: date
    end_date: date
    theme: str
    group_size: int = Field(..., gt=0)
    starting_point: str

    @field_validator("destination")
    @classmethod
    def blank_destination_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value.strip()

    @field_validator("currency")
    @classmethod
    def upper_currency(cls, value: str) -> str:
        return value.upper()

    @model_validator(mode="after")
    def check_dates(self) -> "TripPreferences":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

    @computed_field
    @property
    def trip_duration_days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    @property
    def budget_per_day(self) -> float:
        days = self.trip_duration_days
        return self.budget / days if days > 0 else 0.0

    @property
    def budget_breakdown(self) -> BudgetBreakdown:
        return BudgetBreakdown.from_total(self.budget, self.currency)


class Transportation(BaseModel):
    type: str = "Flight"
    origin: str
    destination: str
    departure_date: date
    return_date: date
    provider: str
    cost: float

    class Config:
        frozen = True


class Accommodation(BaseModel):
    name: str
    type: str = "Hotel"
    address: str
    cost_per_night: float
    rating: float = 0.0
    provider: str
    amenities: Dict[str, Any] = Field(default_factory=dict)
    check_in_date: Optional[date] = None
    check_out_date: Optional[date] = None

    @computed_field
    @property
    def nights(self) -> int:
        if self.check_in_date is None or self.check_out_date is None:
            return 0
        return max((self.check_out_date - self.check_in_date).days, 0)

    @computed_field
    @property
    def total_cost(self) -> float:
        return self.cost_per_night * max(self.nights, 1)


class Activity(BaseModel):
    name: str
    type: str = "Activity"
    location: str = ""
    description: str = ""
    cost: float = Field(default=0.0, ge=0)
    duration_minutes: int = 120
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    rating: float = 0.0


class DailyItinerary(BaseModel):
    day: int = Field(..., ge=1)
    date: date
    morning_activities: List[Activity] = Field(default_factory=list)
    afternoon_activities: List[Activity] = Field(default_factory=list)
    evening_activities: List[Activity] = Field(default_factory=list)
    daily_budget: float = 0.0
    daily_cost: float = 0.0

    def add_activity(self, activity: Activity) -> None:
        """
        Put an activity in the slot matching its start time.

        No start time goes to the morning; a time that cannot be parsed
        goes to the evening.
        """
        if not activity.start_time or not activity.start_time.strip():
            self.morning_activities.append(activity)
            return

        try:
            start = parse_clock(activity.start_time)
        except ValueError:
            self.evening_activities.append(activity)
            return

        if start < NOON:
            self.morning_activities.append(activity)
        elif start < EVENING:
            self.afternoon_activities.append(activity)
        else:
            self.evening_activities.append(activity)

    @property
    def all_activities(self) -> List[Activity]:
        return self.morning_activities + self.afternoon_activities + self.evening_activities

    @property
    def total_cost(self) -> float:
        return sum(activity.cost for activity in self.all_activities)


class TripPlan(BaseModel):
    id: Optional[int] = None
    preferences: TripPreferences
    destination: str
    transportation: Optional[Transportation] = None
    accommodation: Optional[Accommodation] = None
    daily_itineraries: List[DailyItinerary] = Field(default_factory=list)
    budget_breakdown: BudgetBreakdown
    created_date: date = Field(default_factory=date.today)

    def add_daily_itinerary(self, itinerary: DailyItinerary) -> None:
        self.daily_itineraries.append(itinerary)

    @property
    def start_date(self) -> date:
        return self.preferences.start_date

    @property
    def end_date(self) -> date:
        return self.preferences.end_date

    @property
    def theme(self) -> str:
        return self.preferences.theme

    @property
    def group_size(self) -> int:
        return self.preferences.group_size

    @property
    def currency(self) -> str:
        return self.budget_breakdown.currency

    @property
    def total_budget(self) -> float:
        return self.budget_breakdown.total

