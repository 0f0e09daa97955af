"""
Season resolver wiring.
"""

from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.liturgical_day import LiturgicalDayRepository
from app.rule.liturgical import (CachedSeasonResolver, ComputedSeasonResolver, FallbackSeasonResolver,
                                 SeasonResolver, )


def build_season_resolver(session: Session, cache_enabled: bool | None = None) -> SeasonResolver:
    """Database cache with computation fallback, or computation only."""
    if cache_enabled is None:
        cache_enabled = settings.LITURGICAL_CACHE_ENABLED
    computed = ComputedSeasonResolver()
    if not cache_enabled:
        return computed
    return FallbackSeasonResolver(CachedSeasonResolver(LiturgicalDayRepository(session)), computed)
