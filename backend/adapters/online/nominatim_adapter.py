import httpx
from typing import List

from pydantic import TypeAdapter, ValidationError

from core.interfaces import GeocodingAdapter
from core.exceptions import GeocodingRequestError
from models.places import NominatimPlace

_PLACES = TypeAdapter(List[NominatimPlace])


class NominatimGeocoder(GeocodingAdapter):
    """
    OpenStreetMap Nominatim /search, restricted to settlements.
    https://nominatim.org/release-docs/latest/api/Search/
    """

    def __init__(
        self,
        base_url: str = "https://nominatim.openstreetmap.org",
        user_agent: str = "co2-trip-calculator/0.1",
        language: str = "pt-BR",
        country_codes: str = "br",
        limit: int = 5,
        timeout: float = 15.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.language = language
        self.country_codes = country_codes
        self.limit = limit
        self.timeout = timeout

    def _params(self, query: str) -> dict:
        return {
            "format": "json",
            "q": query,
            "countrycodes": self.country_codes,
            "addressdetails": 1,
            "limit": self.limit,
            "featuretype": "settlement",
        }

    async def search(self, query: str) -> List[NominatimPlace]:
        headers = {
            "Accept-Language": self.language,
            # Nominatim usage policy requires an identifying agent
            "User-Agent": self.user_agent,
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(
                    f"{self.base_url}/search",
                    params=self._params(query),
                    headers=headers,
                )
                resp.raise_for_status()
                data = resp.json()
            return _PLACES.validate_python(data)

        except httpx.HTTPStatusError as e:
            raise GeocodingRequestError(
                f"Nominatim HTTP {e.response.status_code}: {e.response.text}"
            ) from e
        except httpx.HTTPError as e:
            raise GeocodingRequestError(f"Nominatim transport error: {e}") from e
        except (ValueError, ValidationError) as e:
            # ValueError covers JSON decoding of a non-JSON body
            raise GeocodingRequestError(f"Nominatim returned a malformed payload: {e}") from e
