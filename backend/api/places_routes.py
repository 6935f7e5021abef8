# api/places_routes.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api._resp import ok
from services.resolver import PlaceDistanceResolver
from services.resolver_factory import get_resolver

router = APIRouter(prefix="/places", tags=["places"])

MSG_FOUND = "✓ Distância encontrada: {distance} km"
MSG_NOT_FOUND = "Rota não encontrada. Por favor, insira a distância manualmente."


def _format_km(km: float) -> str:
    """100.0 -> "100", 95.4 -> "95.4"."""
    return str(int(km)) if km == int(km) else str(km)


@router.get("/search")
async def search_places(
    q: str = Query("", description="free-text city name"),
    resolver: PlaceDistanceResolver = Depends(get_resolver),
):
    places = await resolver.search_places(q)
    return ok([p.model_dump() for p in places])


@router.get("/distance")
async def find_distance(
    origin: str = Query(..., min_length=1),
    destination: str = Query(..., min_length=1),
    resolver: PlaceDistanceResolver = Depends(get_resolver),
):
    km: Optional[float] = await resolver.find_distance(origin, destination)
    found = km is not None
    return ok(
        {
            "origin": origin.strip(),
            "destination": destination.strip(),
            "distance_km": km,
            "found": found,
            "message": MSG_FOUND.format(distance=_format_km(km)) if found else MSG_NOT_FOUND,
        }
    )
