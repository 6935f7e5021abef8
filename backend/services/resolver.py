# services/resolver.py
from __future__ import annotations

import asyncio
import logging
import math
from typing import Dict, List, Optional

from core.cache import MemoCache
from core.exceptions import AppError
from core.interfaces import GeocodingAdapter, RoutingAdapter
from models.places import Place

logger = logging.getLogger(__name__)

PAIR_SEPARATOR = "::"


def normalize_name(name: Optional[str]) -> str:
    return (name or "").strip().casefold()


def pair_key(a: str, b: str) -> str:
    """Order-independent key: A->B and B->A share one distance entry."""
    return PAIR_SEPARATOR.join(sorted((normalize_name(a), normalize_name(b))))


def meters_to_km(meters: float) -> float:
    """Meters -> km, one decimal, halves rounded up."""
    return math.floor(meters / 100 + 0.5) / 10


class PlaceDistanceResolver:
    """
    City name -> coordinates -> driving distance, memoized twice:

    - place_cache: normalized name -> Place
    - distance_cache: symmetric pair key -> km

    Every public coroutine returns an empty/None result instead of raising;
    provider failures are logged and never cached.
    """

    def __init__(
        self,
        geocoder: GeocodingAdapter,
        router: RoutingAdapter,
        min_query_length: int = 3,
        place_cache: Optional[MemoCache] = None,
        distance_cache: Optional[MemoCache] = None,
    ):
        self.geocoder = geocoder
        self.router = router
        self.min_query_length = min_query_length
        self.place_cache = place_cache if place_cache is not None else MemoCache()
        self.distance_cache = (
            distance_cache if distance_cache is not None else MemoCache()
        )

    async def search_places(self, query: Optional[str]) -> List[Place]:
        query = (query or "").strip()
        if len(query) < self.min_query_length:
            return []

        try:
            records = await self.geocoder.search(query)
        except AppError as e:
            logger.warning("place search failed for %r: %s", query, e)
            return []
        except Exception:
            logger.exception("place search for %r crashed", query)
            return []

        places: List[Place] = []
        for rec in records:
            display_name = rec.label()
            if not display_name:
                continue
            place = Place(
                normalized_query_key=normalize_name(display_name),
                display_name=display_name,
                latitude=rec.lat,
                longitude=rec.lon,
            )
            # every candidate, so picking a suggestion later skips the network
            self.place_cache.set(place.normalized_query_key, place)
            places.append(place)
        return places

    async def resolve_place(self, name: Optional[str]) -> Optional[Place]:
        key = normalize_name(name)
        if not key:
            return None

        hit = self.place_cache.get(key)
        if hit is not None:
            logger.debug("place cache hit: %r", key)
            return hit

        candidates = await self.search_places(name)
        if not candidates:
            logger.info("no place found for %r", name)
            return None

        # provider relevance order: first is best
        best = candidates[0]
        if best.normalized_query_key != key:
            best = best.model_copy(update={"normalized_query_key": key})
        self.place_cache.set(key, best)
        return best

    async def resolve_route_distance(
        self, origin: Place, destination: Place
    ) -> Optional[float]:
        try:
            meters = await self.router.route_distance_m(origin, destination)
        except AppError as e:
            logger.warning(
                "route lookup failed %s -> %s: %s",
                origin.display_name,
                destination.display_name,
                e,
            )
            return None
        except Exception:
            logger.exception(
                "route lookup %s -> %s crashed",
                origin.display_name,
                destination.display_name,
            )
            return None

        if meters is None or meters < 0:
            logger.info(
                "no route between %s and %s",
                origin.display_name,
                destination.display_name,
            )
            return None
        return meters_to_km(meters)

    async def find_distance(
        self, origin: Optional[str], destination: Optional[str]
    ) -> Optional[float]:
        if not normalize_name(origin) or not normalize_name(destination):
            return None

        key = pair_key(origin, destination)
        return await self.distance_cache.aget_or_set(
            key, lambda: self._route_between_names(origin, destination)
        )

    async def _route_between_names(self, origin: str, destination: str) -> Optional[float]:
        logger.debug("distance cache miss: %r -> %r", origin, destination)
        try:
            origin_place, destination_place = await asyncio.gather(
                self.resolve_place(origin), self.resolve_place(destination)
            )
            if origin_place is None or destination_place is None:
                return None
            return await self.resolve_route_distance(origin_place, destination_place)
        except Exception:
            logger.exception("distance lookup %r -> %r crashed", origin, destination)
            return None

    def cache_stats(self) -> Dict[str, int]:
        return {"places": len(self.place_cache), "distances": len(self.distance_cache)}
