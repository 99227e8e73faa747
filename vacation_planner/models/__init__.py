"""Database models initialization."""

# Import all models to ensure they're registered with SQLAlchemy
from .trip import TripPlanRecord

__all__ = [
    "TripPlanRecord"
]
