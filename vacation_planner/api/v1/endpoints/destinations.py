"""
Destination Recommendation API Endpoints
"""

from datetime import date
from fastapi import APIRouter, Depends, Path, Query
from typing import Optional

from vacation_planner.api.deps import get_planner
from vacation_planner.services.recommendation import normalize_theme
from vacation_planner.services.trip_planner import TripPlannerService

router = APIRouter()

@router.get("/recommend")
async def recommend_destination(
    theme: str = Query(..., description="Travel theme, e.g. Adventure or food and culture"),
    start_date: Optional[date] = Query(None, description="Defaults to today"),
    planner: TripPlannerService = Depends(get_planner)
):
    """
    Recommend a destination for a theme and travel date
    """
    start_date = start_date or date.today()
    recommendations = planner.recommendations

    return {
        "theme": normalize_theme(theme),
        "month": start_date.month,
        "destination": recommendations.recommend_destination(theme, start_date),
        "alternatives": recommendations.recommend_destinations(theme, start_date)
    }

@router.get("/by-theme/{theme}")
async def destinations_by_theme(
    theme: str,
    planner: TripPlannerService = Depends(get_planner)
):
    return {
        "theme": normalize_theme(theme),
        "destinations": planner.recommendations.destinations_by_theme(theme)
    }

@router.get("/by-month/{month}")
async def destinations_by_month(
    month: int = Path(..., ge=1, le=12),
    planner: TripPlannerService = Depends(get_planner)
):
    return {
        "month": month,
        "destinations": planner.recommendations.destinations_by_month(month)
    }
