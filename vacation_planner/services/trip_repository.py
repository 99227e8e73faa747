"""
Trip Repository
Stores trip plans as JSON documents. Database problems are logged and
reported as "nothing found" so planning keeps working offline.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from vacation_planner.models.trip import TripPlanRecord
from vacation_planner.schemas.trip import TripPlan

logger = logging.getLogger(__name__)

STORAGE_ERRORS = (SQLAlchemyError, OSError)


def _document(plan: TripPlan) -> dict:
    return plan.model_dump(mode="json", exclude={"id"})


def _apply(record: TripPlanRecord, plan: TripPlan) -> None:
    record.destination = plan.destination
    record.theme = plan.theme
    record.start_date = plan.start_date
    record.end_date = plan.end_date
    record.total_budget = plan.total_budget
    record.currency = plan.currency
    record.document = _document(plan)


def _to_plan(record: TripPlanRecord) -> TripPlan:
    return TripPlan.model_validate({**record.document, "id": record.id})


class TripRepository:
    def __init__(self, session_factory):
        self.session_factory = session_factory

    async def save(self, plan: TripPlan) -> Optional[int]:
        """
        Insert the plan, or update it when it already has a stored id.
        Returns the id, or None when the database is unavailable.
        """
        try:
            async with self.session_factory() as session:
                record = None
                if plan.id is not None:
                    record = await session.get(TripPlanRecord, plan.id)

                if record is None:
                    record = TripPlanRecord()
                    session.add(record)

                _apply(record, plan)
                await session.commit()
                await session.refresh(record)
                return record.id
        except STORAGE_ERRORS as e:
            logger.error("Could not save trip plan to %s: %s", plan.destination, e)
            return None

    async def load(self, trip_id: int) -> Optional[TripPlan]:
        try:
            async with self.session_factory() as session:
                record = await session.get(TripPlanRecord, trip_id)
                if record is None:
                    return None
                return _to_plan(record)
        except STORAGE_ERRORS as e:
            logger.error("Could not load trip plan %s: %s", trip_id, e)
            return None

    async def list_all(self) -> List[TripPlan]:
        try:
            async with self.session_factory() as session:
                result = await session.execute(
                    select(TripPlanRecord).order_by(TripPlanRecord.created_at.desc(), TripPlanRecord.id.desc())
                )
                return [_to_plan(record) for record in result.scalars().all()]
        except STORAGE_ERRORS as e:
            logger.error("Could not list trip plans: %s", e)
            return []

    async def delete(self, trip_id: int) -> bool:
        try:
            async with self.session_factory() as session:
                record = await session.get(TripPlanRecord, trip_id)
                if record is None:
                    return False
                await session.delete(record)
                await session.commit()
                return True
        except STORAGE_ERRORS as e:
            logger.error("Could not delete trip plan %s: %s", trip_id, e)
            return False
