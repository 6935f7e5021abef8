# services/resolver_factory.py
from typing import Optional

from config import get_settings
from core.cache import MemoCache
from services.resolver import PlaceDistanceResolver

_resolver: Optional[PlaceDistanceResolver] = None


def build_resolver(settings=None) -> PlaceDistanceResolver:
    """Wire the public Nominatim + OSRM adapters from settings."""
    from adapters.online.nominatim_adapter import NominatimGeocoder
    from adapters.online.osrm_adapter import OsrmRouter

    s = settings or get_settings()
    geocoder = NominatimGeocoder(
        base_url=s.NOMINATIM_URL,
        user_agent=s.GEOCODER_USER_AGENT,
        language=s.GEOCODER_LANGUAGE,
        country_codes=s.GEOCODER_COUNTRY_CODES,
        limit=s.GEOCODER_LIMIT,
        timeout=s.HTTP_TIMEOUT_S,
    )
    router = OsrmRouter(base_url=s.OSRM_URL, timeout=s.HTTP_TIMEOUT_S)
    return PlaceDistanceResolver(
        geocoder,
        router,
        min_query_length=s.MIN_QUERY_LENGTH,
        place_cache=MemoCache(ttl_seconds=s.CACHE_TTL_S, maxsize=s.CACHE_MAXSIZE),
        distance_cache=MemoCache(ttl_seconds=s.CACHE_TTL_S, maxsize=s.CACHE_MAXSIZE),
    )


def get_resolver() -> PlaceDistanceResolver:
    # Lazy init in case app lifespan didn't run
    global _resolver
    if _resolver is None:
        _resolver = build_resolver()
    return _resolver


def set_resolver(resolver: Optional[PlaceDistanceResolver]) -> None:
    """Swap the process-wide resolver (tests); None forces a rebuild."""
    global _resolver
    _resolver = resolver
