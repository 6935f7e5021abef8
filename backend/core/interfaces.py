from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional

from models.places import NominatimPlace, Place


class GeocodingAdapter(ABC):
    """Place-name search providers must implement this."""

    @abstractmethod
    async def search(self, query: str) -> List[NominatimPlace]: ...


class RoutingAdapter(ABC):
    """Driving-route providers must implement this.

    Returns the primary route length in meters, or None when the provider
    answered but found no route.
    """

    @abstractmethod
    async def route_distance_m(self, origin: Place, destination: Place) -> Optional[float]: ...
