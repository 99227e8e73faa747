"""
Trip Planner Service
Builds a complete trip plan from traveller preferences and keeps track of
the most recently planned trip
"""

import logging
from datetime import timedelta
from typing import List, Optional

from vacation_planner.schemas.trip import DailyItinerary, TripPlan, TripPreferences
from vacation_planner.services.activity_service import ActivityService
from vacation_planner.services.budget_allocator import allocate_budget, daily_allowances
from vacation_planner.services.flight_service import FlightService
from vacation_planner.services.hotel_service import HotelService
from vacation_planner.services.recommendation import RecommendationService
from vacation_planner.services.trip_repository import TripRepository

logger = logging.getLogger(__name__)

# Morning and afternoon each get this share of the daily activity budget
SLOT_ACTIVITY_SHARE = 0.4
ACTIVITIES_PER_SLOT = 2


class TripPlannerService:
    """
    Runs the planning pipeline:
    destination -> budget split -> flight and hotel -> daily itineraries

    The repository is optional. Without one (or while the database is
    down) plans only live in the current-plan slot.
    """

    def __init__(
        self,
        recommendations: Optional[RecommendationService] = None,
        flights: Optional[FlightService] = None,
        hotels: Optional[HotelService] = None,
        activities: Optional[ActivityService] = None,
        repository: Optional[TripRepository] = None,
    ):
        self.recommendations = recommendations or RecommendationService()
        self.flights = flights or FlightService()
        self.hotels = hotels or HotelService()
        self.activities = activities or ActivityService()
        self.repository = repository
        self.current_plan: Optional[TripPlan] = None

    async def plan_trip(self, preferences: TripPreferences) -> TripPlan:
        """Plan a trip, make it the current plan and try to persist it"""
        destination = preferences.destination or self.recommendations.recommend_destination(
            preferences.theme, preferences.start_date
        )
        logger.info(
            "Planning %d-day %s trip to %s",
            preferences.trip_duration_days, preferences.theme, destination
        )

        plan = TripPlan(
            preferences=preferences,
            destination=destination,
            budget_breakdown=allocate_budget(preferences.budget, preferences.currency),
        )

        plan.transportation = await self.flights.find_best_flight(
            origin=preferences.starting_point,
            destination=destination,
            departure_date=preferences.start_date,
            return_date=preferences.end_date,
            max_budget=plan.budget_breakdown.transportation,
        )
        plan.accommodation = await self.hotels.find_best_hotel(
            destination=destination,
            check_in_date=preferences.start_date,
            check_out_date=preferences.end_date,
            group_size=preferences.group_size,
            max_total_budget=plan.budget_breakdown.accommodation,
        )

        for itinerary in self.build_itineraries(plan):
            plan.add_daily_itinerary(itinerary)

        self.current_plan = plan

        if self.repository is not None:
            trip_id = await self.repository.save(plan)
            if trip_id is None:
                logger.warning("Trip to %s kept in memory only", destination)
            else:
                plan.id = trip_id

        return plan

    def build_itineraries(self, plan: TripPlan) -> List[DailyItinerary]:
        """One itinerary per trip day, starting on the trip start date"""
        days = plan.preferences.trip_duration_days
        allowances = daily_allowances(plan.budget_breakdown, days)
        activity_budget = allowances["activities"]
        food_budget = allowances["food"]

        itineraries = []
        for offset in range(days):
            morning = self.activities.find_activities(
                plan.destination, "Sightseeing",
                activity_budget * SLOT_ACTIVITY_SHARE, ACTIVITIES_PER_SLOT
            )
            afternoon = self.activities.find_activities(
                plan.destination, "Activity",
                activity_budget * SLOT_ACTIVITY_SHARE, ACTIVITIES_PER_SLOT
            )
            evening = self.activities.find_activities(
                plan.destination, "Food", food_budget, ACTIVITIES_PER_SLOT
            )

            itinerary = DailyItinerary(
                day=offset + 1,
                date=plan.start_date + timedelta(days=offset),
                morning_activities=morning,
                afternoon_activities=afternoon,
                evening_activities=evening,
                daily_budget=activity_budget + food_budget,
            )
            itinerary.daily_cost = itinerary.total_cost
            itineraries.append(itinerary)

        return itineraries

    async def get_trip(self, trip_id: int) -> Optional[TripPlan]:
        if self.current_plan is not None and self.current_plan.id == trip_id:
            return self.current_plan
        if self.repository is None:
            return None
        return await self.repository.load(trip_id)

    async def list_trips(self) -> List[TripPlan]:
        if self.repository is not None:
            trips = await self.repository.list_all()
            if trips:
                return trips
        return [self.current_plan] if self.current_plan is not None else []

    async def save_trip(self, trip_id: int) -> Optional[TripPlan]:
        """Store a known plan again; None if it cannot be found or stored"""
        plan = await self.get_trip(trip_id)
        if plan is None or self.repository is None:
            return None

        saved_id = await self.repository.save(plan)
        if saved_id is None:
            return None

        plan.id = saved_id
        return plan

    async def delete_trip(self, trip_id: int) -> bool:
        deleted = False
        if self.current_plan is not None and self.current_plan.id == trip_id:
            self.current_plan = None
            deleted = True

        if self.repository is not None:
            deleted = await self.repository.delete(trip_id) or deleted

        if deleted:
            logger.info("Deleted trip %s", trip_id)
        return deleted
