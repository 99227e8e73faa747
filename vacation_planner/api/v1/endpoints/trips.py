"""
Trip Planning API Endpoints
"""

from fastapi import APIRouter, Depends, HTTPException
from typing import List

from vacation_planner.api.deps import get_planner
from vacation_planner.schemas.trip import TripPlan, TripPreferences
from vacation_planner.services.trip_planner import TripPlannerService

router = APIRouter()

@router.post("/plan", response_model=TripPlan)
async def plan_trip(
    preferences: TripPreferences,
    planner: TripPlannerService = Depends(get_planner)
):
    """
    Plan a trip from preferences

    The plan becomes the current plan. It has no id when the database
    is unavailable.
    """
    return await planner.plan_trip(preferences)

@router.get("", response_model=List[TripPlan])
async def list_trips(planner: TripPlannerService = Depends(get_planner)):
    """
    Get all saved trips, or the current plan when nothing is stored
    """
    return await planner.list_trips()

@router.get("/current", response_model=TripPlan)
async def get_current_trip(planner: TripPlannerService = Depends(get_planner)):
    """
    Get the most recently planned trip
    """
    if planner.current_plan is None:
        raise HTTPException(status_code=404, detail="No trip has been planned yet")
    return planner.current_plan

@router.get("/{trip_id}", response_model=TripPlan)
async def get_trip(
    trip_id: int,
    planner: TripPlannerService = Depends(get_planner)
):
    plan = await planner.get_trip(trip_id)
    if not plan:
        raise HTTPException(status_code=404, detail="Trip not found")
    return plan

@router.post("/{trip_id}/save", response_model=TripPlan)
async def save_trip(
    trip_id: int,
    planner: TripPlannerService = Depends(get_planner)
):
    """
    Store a trip again
    """
    if not await planner.get_trip(trip_id):
        raise HTTPException(status_code=404, detail="Trip not found")

    plan = await planner.save_trip(trip_id)
    if not plan:
        raise HTTPException(status_code=503, detail="Trip storage is unavailable")
    return plan

@router.delete("/{trip_id}")
async def delete_trip(
    trip_id: int,
    planner: TripPlannerService = Depends(get_planner)
):
    if not await planner.delete_trip(trip_id):
        raise HTTPException(status_code=404, detail="Trip not found")
    return {"message": "Trip deleted successfully"}
