import pytest
from datetime import date

from vacation_planner.data.catalog import SEASONAL_DESTINATIONS, THEME_DESTINATIONS
from vacation_planner.services.recommendation import RecommendationService, normalize_theme

@pytest.fixture
def service():
    return RecommendationService()

def test_adventure_in_june_falls_back_to_first_theme_entry(service):
    assert service.recommend_destination("Adventure", date(2025, 6, 1)) == "Queenstown, New Zealand"

def test_intersection_wins_over_first_theme_entry(service):
    # Relaxation and August share Bali, Maldives and Santorini; Bali is first in the theme list
    assert service.recommend_destination("Relaxation", date(2025, 8, 10)) == "Bali, Indonesia"

def test_theme_list_is_scanned_first(service):
    # City Exploration lists London before Paris; April season contains Paris only
    assert service.recommend_destination("City Exploration", date(2025, 4, 1)) == "Paris, France"

def test_lookup_is_case_insensitive(service):
    assert service.destinations_by_theme("ADVENTURE") == list(THEME_DESTINATIONS["Adventure"])

def test_human_phrasings(service):
    assert normalize_theme("food and culture") == "Food & Culture"
    assert normalize_theme(" city ") == "City Exploration"
    assert service.destinations_by_theme("food")[0] == "Tokyo, Japan"

def test_unknown_theme_uses_season(service):
    assert service.destinations_by_theme("Underwater Basket Weaving") == []
    assert service.recommend_destination("Underwater Basket Weaving", date(2025, 12, 24)) == "Aspen, Colorado"

def test_empty_tables_use_default():
    service = RecommendationService(theme_destinations={}, seasonal_destinations={})
    assert service.recommend_destination("Adventure", date(2025, 1, 1)) == "Paris, France"

def test_month_is_clamped(service):
    assert service.destinations_by_month(0) == list(SEASONAL_DESTINATIONS[1])
    assert service.destinations_by_month(13) == list(SEASONAL_DESTINATIONS[12])

@pytest.mark.parametrize("theme", list(THEME_DESTINATIONS))
@pytest.mark.parametrize("month", range(1, 13))
def test_shared_destination_is_recommended(service, theme, month):
    themed = service.destinations_by_theme(theme)
    seasonal = service.destinations_by_month(month)
    chosen = service.recommend_destination(theme, date(2025, month, 1))

    if set(themed) & set(seasonal):
        assert chosen in themed and chosen in seasonal
    assert chosen == service.recommend_destination(theme, date(2025, month, 1))

def test_recommend_destinations_merges_without_duplicates(service):
    destinations = service.recommend_destinations("Relaxation", date(2025, 8, 1))

    assert destinations[0] == "Bali, Indonesia"
    assert len(destinations) == len(set(destinations))
    assert "Edinburgh, Scotland" in destinations
