import random
from datetime import date

import pytest

from vacation_planner.schemas.trip import TripPreferences


def _preferences(**overrides) -> TripPreferences:
    values = {
        "budget": 3000.0,
        "currency": "USD",
        "start_date": date(2025, 6, 1),
        "end_date": date(2025, 6, 5),
        "theme": "Adventure",
        "group_size": 2,
        "starting_point": "New York City, USA",
    }
    values.update(overrides)
    return TripPreferences(**values)


@pytest.fixture
def make_preferences():
    return _preferences


@pytest.fixture
def preferences():
    return _preferences()


@pytest.fixture
def rng():
    return random.Random(42)
