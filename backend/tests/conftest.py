# backend/tests/conftest.py
import os
import sys
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

# Make /Project/backend importable as top-level
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

from core.exceptions import GeocodingRequestError, RouteRequestError
from core.interfaces import GeocodingAdapter, RoutingAdapter
from models.places import NominatimPlace, Place
from services.emissions.emissions_factory import get_calculator
from services.resolver import PlaceDistanceResolver, normalize_name
from services.resolver_factory import set_resolver

from main import app


def nominatim_record(city, state, lat, lon, field="city"):
    return {
        "lat": str(lat),
        "lon": str(lon),
        "name": city,
        "display_name": f"{city}, {state}, Brasil",
        "address": {field: city, "state": state},
    }


SAO_PAULO = nominatim_record("São Paulo", "São Paulo", -23.5506507, -46.6333824)
CAMPINAS = nominatim_record("Campinas", "São Paulo", -22.9056391, -47.0608831)
RIO = nominatim_record("Rio de Janeiro", "Rio de Janeiro", -22.9110137, -43.2093727)


class FakeGeocoder(GeocodingAdapter):
    """Answers from a dict keyed by normalized query; counts calls."""

    def __init__(self, answers: Optional[Dict[str, List[dict]]] = None, fail=False):
        self.answers = answers or {}
        self.fail = fail
        self.calls: List[str] = []

    async def search(self, query: str) -> List[NominatimPlace]:
        self.calls.append(query)
        if self.fail:
            raise GeocodingRequestError("geocoder down")
        raw = self.answers.get(normalize_name(query), [])
        return [NominatimPlace.model_validate(r) for r in raw]


class FakeRouter(RoutingAdapter):
    """Returns a fixed distance in meters (or None / an error); counts calls."""

    def __init__(self, meters: Optional[float] = 95_432.0, fail=False):
        self.meters = meters
        self.fail = fail
        self.calls: List[tuple] = []

    async def route_distance_m(self, origin: Place, destination: Place):
        self.calls.append((origin.display_name, destination.display_name))
        if self.fail:
            raise RouteRequestError("router down")
        return self.meters


@pytest.fixture
def geocoder():
    return FakeGeocoder(
        {
            "sao paulo": [SAO_PAULO],
            "são paulo": [SAO_PAULO],
            "campinas": [CAMPINAS],
            "rio": [RIO, SAO_PAULO],
        }
    )


@pytest.fixture
def router():
    return FakeRouter()


@pytest.fixture
def resolver(geocoder, router):
    return PlaceDistanceResolver(geocoder, router)


@pytest.fixture
def calc():
    return get_calculator()


@pytest.fixture(scope="session")
def client():
    # Use context manager so FastAPI lifespan (startup/shutdown) runs
    with TestClient(app) as c:
        yield c


@pytest.fixture
def api_resolver(resolver):
    """Install the fake-backed resolver behind the HTTP routes."""
    set_resolver(resolver)
    yield resolver
    set_resolver(None)
