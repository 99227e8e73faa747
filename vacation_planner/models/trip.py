from sqlalchemy import Column, Integer, String, Float, Date, DateTime, JSON
from datetime import datetime
from vacation_planner.core.database import Base

class TripPlanRecord(Base):
    __tablename__ = "trip_plans"

    id = Column(Integer, primary_key=True, index=True)

    destination = Column(String(200), nullable=False)
    theme = Column(String(50), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    total_budget = Column(Float, nullable=False)
    currency = Column(String(3), default="USD")

    # Full TripPlan as JSON, without its id
    document = Column(JSON, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
