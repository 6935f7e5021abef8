import httpx
from typing import Optional

from pydantic import ValidationError

from core.interfaces import RoutingAdapter
from core.exceptions import RouteRequestError
from models.places import OsrmRouteResponse, Place


class OsrmRouter(RoutingAdapter):
    """
    OSRM /route service. Only the length of the primary route is used,
    so the geometry is switched off (overview=false).
    """

    def __init__(
        self,
        base_url: str = "https://router.project-osrm.org",
        profile: str = "driving",
        timeout: float = 15.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.profile = profile
        self.timeout = timeout

    def route_url(self, origin: Place, destination: Place) -> str:
        # OSRM expects lon,lat order
        path = ";".join(
            f"{p.longitude},{p.latitude}" for p in (origin, destination)
        )
        return f"{self.base_url}/route/v1/{self.profile}/{path}"

    async def route_distance_m(
        self, origin: Place, destination: Place
    ) -> Optional[float]:
        url = self.route_url(origin, destination)
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(url, params={"overview": "false"})
        except httpx.HTTPError as e:
            raise RouteRequestError(f"OSRM transport error: {e}") from e

        try:
            body = OsrmRouteResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise RouteRequestError(
                f"OSRM HTTP {resp.status_code}, malformed payload: {e}"
            ) from e

        # OSRM reports NoRoute/NoSegment as 4xx with a JSON body; that is an
        # answer, not a failure
        return body.primary_distance_m()
