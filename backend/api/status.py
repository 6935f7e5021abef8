from fastapi import APIRouter, Depends

from services.resolver import PlaceDistanceResolver
from services.resolver_factory import get_resolver

router = APIRouter(prefix="/status", tags=["status"])


@router.get("/caches")
def caches(resolver: PlaceDistanceResolver = Depends(get_resolver)):
    return {"caches": resolver.cache_stats()}
