"""
Destination Recommendation Service
Rule-based matching of a travel theme and month to a destination
"""

from datetime import date
from typing import List, Mapping, Optional, Sequence

from vacation_planner.data.catalog import (
    DEFAULT_DESTINATION,
    SEASONAL_DESTINATIONS,
    THEME_ALIASES,
    THEME_DESTINATIONS,
)


def normalize_theme(theme: Optional[str]) -> str:
    """
    Map a user phrasing ("food and culture", "city") to a canonical theme.
    Unknown themes are returned trimmed but otherwise unchanged.
    """
    if theme is None:
        return ""
    cleaned = theme.strip()
    return THEME_ALIASES.get(cleaned.lower(), cleaned)


class RecommendationService:
    """
    Recommends destinations from the theme and seasonal tables
    """

    def __init__(
        self,
        theme_destinations: Mapping[str, Sequence[str]] = THEME_DESTINATIONS,
        seasonal_destinations: Mapping[int, Sequence[str]] = SEASONAL_DESTINATIONS,
        default_destination: str = DEFAULT_DESTINATION,
    ):
        # Case-insensitive view over the theme table
        self._themes = {key.lower(): tuple(value) for key, value in theme_destinations.items()}
        self._seasons = seasonal_destinations
        self.default_destination = default_destination

    def destinations_by_theme(self, theme: Optional[str]) -> List[str]:
        canonical = normalize_theme(theme)
        return list(self._themes.get(canonical.lower(), ()))

    def destinations_by_month(self, month: int) -> List[str]:
        month = max(1, min(12, month))
        return list(self._seasons.get(month, ()))

    def recommend_destination(self, theme: Optional[str], start_date: date) -> str:
        """
        Pick one destination for a theme and travel date

        Order of preference:
        1. First theme destination that is also in season (theme list scanned
           outer, season list inner; first match wins)
        2. First theme destination
        3. First seasonal destination
        4. The default destination
        """
        themed = self.destinations_by_theme(theme)
        seasonal = self.destinations_by_month(start_date.month)

        for candidate in themed:
            for in_season in seasonal:
                if candidate == in_season:
                    return candidate

        if themed:
            return themed[0]

        if seasonal:
            return seasonal[0]

        return self.default_destination

    def recommend_destinations(self, theme: Optional[str], start_date: date) -> List[str]:
        """Themed then seasonal destinations, de-duplicated, order preserved"""
        combined = list(dict.fromkeys(
            self.destinations_by_theme(theme) + self.destinations_by_month(start_date.month)
        ))
        if not combined:
            combined.append(self.recommend_destination(theme, start_date))
        return combined
