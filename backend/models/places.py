# models/places.py
from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Place(BaseModel):
    """A geocoded place as kept in the resolver's place cache."""

    model_config = ConfigDict(frozen=True)

    normalized_query_key: str
    display_name: str
    latitude: float
    longitude: float


# --- Nominatim /search payload ---

# Locality fields, most specific first
LOCALITY_FIELDS = ("city", "town", "village", "municipality")


class NominatimAddress(BaseModel):
    model_config = ConfigDict(extra="ignore")

    city: Optional[str] = None
    town: Optional[str] = None
    village: Optional[str] = None
    municipality: Optional[str] = None
    state: Optional[str] = None


class NominatimPlace(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Nominatim sends decimal-degree strings; pydantic coerces them
    lat: float
    lon: float
    name: Optional[str] = None
    display_name: Optional[str] = None
    address: NominatimAddress = Field(default_factory=NominatimAddress)

    def locality(self) -> str:
        for field in LOCALITY_FIELDS:
            val = getattr(self.address, field)
            if val:
                return val
        return self.name or self.display_name or ""

    def label(self) -> str:
        """'<city> - <state>' when the state is known, else just the city."""
        city = self.locality()
        if not city:
            return ""
        state = self.address.state
        return f"{city} - {state}" if state else city


# --- OSRM /route payload ---


class OsrmRoute(BaseModel):
    model_config = ConfigDict(extra="ignore")

    distance: float  # meters


class OsrmRouteResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    code: str
    message: Optional[str] = None
    routes: List[OsrmRoute] = Field(default_factory=list)

    def primary_distance_m(self) -> Optional[float]:
        if self.code != "Ok" or not self.routes:
            return None
        return self.routes[0].distance
