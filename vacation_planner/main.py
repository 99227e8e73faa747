"""
Vacation Planner FastAPI Application
"""

import logging
import random
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from vacation_planner.config import Settings, settings
from vacation_planner.api.v1.router import api_router
from vacation_planner.core.database import async_session, init_db
from vacation_planner.core.logging import setup_logging
from vacation_planner.services.activity_service import ActivityService
from vacation_planner.services.availability import AvailabilityService
from vacation_planner.services.flight_service import FlightService
from vacation_planner.services.hotel_service import HotelService
from vacation_planner.services.price_sources import (
    flight_sources_from_settings,
    hotel_sources_from_settings,
)
from vacation_planner.services.recommendation import RecommendationService
from vacation_planner.services.trip_planner import TripPlannerService
from vacation_planner.services.trip_repository import TripRepository

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Vacation Planning API: destinations, itineraries, booking and exports",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router
app.include_router(api_router, prefix=settings.API_V1_STR)

def build_planner(
    config: Settings,
    repository: Optional[TripRepository] = None,
    rng: Optional[random.Random] = None
) -> TripPlannerService:
    """Wire the planning pipeline from settings"""
    rng = rng or random.Random()
    return TripPlannerService(
        recommendations=RecommendationService(),
        flights=FlightService(
            flight_sources_from_settings(config), rng=rng, timeout=config.EXTERNAL_API_TIMEOUT
        ),
        hotels=HotelService(
            hotel_sources_from_settings(config), timeout=config.EXTERNAL_API_TIMEOUT
        ),
        activities=ActivityService(rng=rng),
        repository=repository,
    )

@app.on_event("startup")
async def startup_event():
    """Initialize on startup"""
    setup_logging(settings.LOG_LEVEL)
    logger.info("Starting %s v%s", settings.PROJECT_NAME, settings.VERSION)

    # Create database tables
    repository = None
    try:
        await init_db()
        repository = TripRepository(async_session)
        logger.info("Database initialized")
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Database unavailable, running in offline mode: %s", e)

    app.state.planner = build_planner(settings, repository)
    app.state.availability = AvailabilityService.from_settings(settings)

    logger.info("Application started successfully")

@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down...")

@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "docs": "/docs",
        "health": "/health"
    }

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    planner = getattr(app.state, "planner", None)
    return {
        "status": "healthy",
        "database": planner is not None and planner.repository is not None
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "vacation_planner.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
