# backend/tests/test_adapters.py
import asyncio

import httpx
import pytest
import respx

from adapters.online.nominatim_adapter import NominatimGeocoder
from adapters.online.osrm_adapter import OsrmRouter
from conftest import CAMPINAS, SAO_PAULO
from core.exceptions import GeocodingRequestError, RouteRequestError
from models.places import Place

NOMINATIM = "https://nominatim.openstreetmap.org/search"
OSRM_ROUTE = r"https://router\.project-osrm\.org/route/v1/driving/.*"

SP = Place(
    normalized_query_key="são paulo",
    display_name="São Paulo - São Paulo",
    latitude=-23.55,
    longitude=-46.63,
)
CPS = Place(
    normalized_query_key="campinas",
    display_name="Campinas - São Paulo",
    latitude=-22.9,
    longitude=-47.06,
)


@respx.mock
def test_nominatim_search_query_shape():
    route = respx.get(NOMINATIM).mock(
        return_value=httpx.Response(200, json=[SAO_PAULO, CAMPINAS])
    )
    places = asyncio.run(NominatimGeocoder().search("São Paulo"))

    assert [p.label() for p in places] == ["São Paulo - São Paulo", "Campinas - São Paulo"]
    assert places[0].lat == pytest.approx(-23.5506507)

    req = route.calls.last.request
    params = req.url.params
    assert params["format"] == "json"
    assert params["q"] == "São Paulo"
    assert params["countrycodes"] == "br"
    assert params["addressdetails"] == "1"
    assert params["limit"] == "5"
    assert params["featuretype"] == "settlement"
    assert req.headers["Accept-Language"] == "pt-BR"
    assert req.headers["User-Agent"]


@respx.mock
def test_nominatim_http_error_is_typed():
    respx.get(NOMINATIM).mock(return_value=httpx.Response(503, text="busy"))
    with pytest.raises(GeocodingRequestError):
        asyncio.run(NominatimGeocoder().search("Campinas"))


@respx.mock
def test_nominatim_transport_error_is_typed():
    respx.get(NOMINATIM).mock(side_effect=httpx.ConnectError("offline"))
    with pytest.raises(GeocodingRequestError):
        asyncio.run(NominatimGeocoder().search("Campinas"))


@respx.mock
def test_nominatim_malformed_payload_is_typed():
    respx.get(NOMINATIM).mock(return_value=httpx.Response(200, json=[{"name": "no coords"}]))
    with pytest.raises(GeocodingRequestError):
        asyncio.run(NominatimGeocoder().search("Campinas"))


@respx.mock
def test_osrm_distance_and_url():
    route = respx.get(url__regex=OSRM_ROUTE).mock(
        return_value=httpx.Response(
            200, json={"code": "Ok", "routes": [{"distance": 95432.1, "duration": 4100}]}
        )
    )
    meters = asyncio.run(OsrmRouter().route_distance_m(SP, CPS))
    assert meters == pytest.approx(95432.1)

    url = route.calls.last.request.url
    assert url.path == "/route/v1/driving/-46.63,-23.55;-47.06,-22.9"
    assert url.params["overview"] == "false"


@pytest.mark.parametrize(
    "status,body",
    [
        (200, {"code": "Ok", "routes": []}),
        (400, {"code": "NoRoute", "message": "Impossible route between points"}),
    ],
)
@respx.mock
def test_osrm_no_route_is_none(status, body):
    respx.get(url__regex=OSRM_ROUTE).mock(return_value=httpx.Response(status, json=body))
    assert asyncio.run(OsrmRouter().route_distance_m(SP, CPS)) is None


@respx.mock
def test_osrm_bad_gateway_is_typed():
    respx.get(url__regex=OSRM_ROUTE).mock(return_value=httpx.Response(502, text="<html>"))
    with pytest.raises(RouteRequestError):
        asyncio.run(OsrmRouter().route_distance_m(SP, CPS))


@respx.mock
def test_osrm_transport_error_is_typed():
    respx.get(url__regex=OSRM_ROUTE).mock(side_effect=httpx.ReadTimeout("slow"))
    with pytest.raises(RouteRequestError):
        asyncio.run(OsrmRouter().route_distance_m(SP, CPS))
