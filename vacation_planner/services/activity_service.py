"""
Activity Selection Service
Finds activities at a destination that fit a budget
"""

import logging
import random
from typing import List, Mapping, Optional, Sequence

from vacation_planner.data.catalog import (
    DEFAULT_ACTIVITY_THEME,
    DESTINATION_ACTIVITIES,
    GENERIC_ACTIVITIES,
    ActivityInfo,
)
from vacation_planner.schemas.trip import Activity

logger = logging.getLogger(__name__)

DEFAULT_DURATION_MINUTES = 120
DEFAULT_ACTIVITY_COST = 50.0

# Activities may cost up to 50% more than their share of the budget
BUDGET_FLEXIBILITY = 1.5


class ActivityService:
    """
    Selects activities from the static catalog.

    The random source is injectable so selections can be reproduced.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        catalog: Mapping[str, Mapping[str, Sequence[ActivityInfo]]] = DESTINATION_ACTIVITIES,
    ):
        self.rng = rng or random.Random()
        self.catalog = catalog

    def _resolve_bucket(
        self,
        destination: str,
        theme: str,
        fill_empty: bool = True
    ) -> List[ActivityInfo]:
        """
        Activities for a destination and theme

        Unknown destinations use the generic catalog and unknown themes use
        sightseeing. With `fill_empty` an empty bucket falls back to generic
        sightseeing.
        """
        buckets = self.catalog.get(destination, GENERIC_ACTIVITIES)
        key = (theme or "").strip().lower()
        activities = buckets.get(key, buckets.get(DEFAULT_ACTIVITY_THEME, ()))

        if not activities and fill_empty:
            activities = GENERIC_ACTIVITIES[DEFAULT_ACTIVITY_THEME]

        return list(activities)

    def find_activities(
        self,
        destination: str,
        theme: str,
        max_budget: float,
        count: int = 2
    ) -> List[Activity]:
        """
        Select up to `count` activities whose price fits the budget

        Each activity gets an equal share of `max_budget`, with a 50%
        allowance. When nothing qualifies the cheapest activities are used.
        """
        if count <= 0:
            return []

        activities = self._resolve_bucket(destination, theme)
        budget_per_activity = max_budget / count

        affordable = [
            info for info in activities
            if info.price <= budget_per_activity * BUDGET_FLEXIBILITY
        ]

        if not affordable:
            logger.debug(
                "No %s activity in %s within %.2f, using cheapest options",
                theme, destination, budget_per_activity
            )
            affordable = sorted(activities, key=lambda info: info.price)[:count]

        self.rng.shuffle(affordable)
        selected = affordable[:count]

        activity_type = (theme or DEFAULT_ACTIVITY_THEME).strip().title()
        return [
            Activity(
                name=info.name,
                type=activity_type,
                location=destination,
                description=info.description,
                cost=info.price,
                duration_minutes=DEFAULT_DURATION_MINUTES,
                rating=info.rating,
            )
            for info in selected
        ]

    def estimate_activity_cost(self, destination: str, theme: str) -> float:
        """Average price of one activity for a destination and theme"""
        activities = self._resolve_bucket(destination, theme, fill_empty=False)
        if not activities:
            return DEFAULT_ACTIVITY_COST
        return sum(info.price for info in activities) / len(activities)

    def estimate_activities_cost(
        self,
        destination: str,
        theme: str,
        days: int,
        activities_per_day: int
    ) -> float:
        """Estimated activity spend for a whole trip"""
        return self.estimate_activity_cost(destination, theme) * days * activities_per_day
