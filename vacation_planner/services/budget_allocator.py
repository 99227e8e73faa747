"""
Budget Allocator Service
Splits a total trip budget into spending categories
"""

from typing import Dict

from vacation_planner.schemas.trip import (
    ACCOMMODATION_SHARE,
    ACTIVITIES_SHARE,
    BudgetBreakdown,
    FOOD_SHARE,
    MISC_SHARE,
    TRANSPORTATION_SHARE,
)

CATEGORY_SHARES: Dict[str, float] = {
    "transportation": TRANSPORTATION_SHARE,
    "accommodation": ACCOMMODATION_SHARE,
    "food": FOOD_SHARE,
    "activities": ACTIVITIES_SHARE,
    "misc": MISC_SHARE,
}


def allocate_budget(total: float, currency: str = "USD") -> BudgetBreakdown:
    """
    Allocate a total budget across categories

    Allocation:
    - transportation: 40%
    - accommodation: 30%
    - food: 15%
    - activities: 10%
    - misc: 5%

    Zero or negative totals are passed through unclamped.
    """
    return BudgetBreakdown.from_total(total, currency)


def daily_allowances(breakdown: BudgetBreakdown, days: int) -> Dict[str, float]:
    """Per-day activity and food budgets for a trip of `days` days"""
    if days <= 0:
        raise ValueError(f"Trip must last at least one day, got {days}")

    return {
        "activities": breakdown.activities / days,
        "food": breakdown.food / days,
    }
