import httpx
import pytest

from app.core.config import settings
from app.services import geocoding
from app.services.geocoding import GeocodingError, forward_geocode

_RealClient = httpx.Client


def _mock_mapbox(monkeypatch, handler):
    def client_factory(**kwargs):
        return _RealClient(transport=httpx.MockTransport(handler), **kwargs)

    monkeypatch.setattr(geocoding.httpx, "Client", client_factory)


@pytest.fixture
def mapbox_token(monkeypatch):
    monkeypatch.setattr(settings, "MAPBOX_ACCESS_TOKEN", "pk.test")


def test_forward_geocode_returns_best_match(monkeypatch, mapbox_token):
    seen = {}

    def handler(request):
        seen["url"] = request.url
        return httpx.Response(
            200,
            json={"features": [{"center": [77.6404618023456, 12.9715987012345], "place_name": "Indiranagar, Bengaluru"}]},
        )

    _mock_mapbox(monkeypatch, handler)
    result = forward_geocode("100 Feet Road, Indiranagar")
    assert result == {
        "latitude": 12.971598701,
        "longitude": 77.640461802,
        "place_name": "Indiranagar, Bengaluru",
    }
    assert seen["url"].params["access_token"] == "pk.test"
    assert "100%20Feet%20Road" in str(seen["url"])


def test_forward_geocode_no_features(monkeypatch, mapbox_token):
    _mock_mapbox(monkeypatch, lambda request: httpx.Response(200, json={"features": []}))
    assert forward_geocode("nowhere") is None


def test_forward_geocode_upstream_error(monkeypatch, mapbox_token):
    _mock_mapbox(monkeypatch, lambda request: httpx.Response(401, json={"message": "Not Authorized"}))
    with pytest.raises(GeocodingError):
        forward_geocode("anywhere")


def test_geocode_endpoint(client, monkeypatch, mapbox_token):
    monkeypatch.setattr(
        "app.routers.geocode.forward_geocode",
        lambda address: {"latitude": 18.5204, "longitude": 73.8567, "place_name": address},
    )
    r = client.get("/api/geocode", params={"address": " Pune "})
    assert r.status_code == 200
    assert r.json() == {"latitude": 18.5204, "longitude": 73.8567, "place_name": "Pune"}


def test_geocode_endpoint_not_configured(client, monkeypatch):
    monkeypatch.setattr(settings, "MAPBOX_ACCESS_TOKEN", "")
    assert client.get("/api/geocode", params={"address": "Pune"}).status_code == 503


def test_geocode_endpoint_no_match_and_upstream_failure(client, monkeypatch, mapbox_token):
    monkeypatch.setattr("app.routers.geocode.forward_geocode", lambda address: None)
    assert client.get("/api/geocode", params={"address": "Atlantis"}).status_code == 404

    def boom(address):
        raise GeocodingError("Could not reach geocoding service")

    monkeypatch.setattr("app.routers.geocode.forward_geocode", boom)
    r = client.get("/api/geocode", params={"address": "Pune"})
    assert r.status_code == 502
    assert r.json() == {"error": "Could not reach geocoding service"}


def test_slash_in_address_stays_in_one_path_segment(monkeypatch, mapbox_token):
    seen = {}

    def handler(request):
        seen["path"] = request.url.raw_path.decode()
        return httpx.Response(200, json={"features": []})

    _mock_mapbox(monkeypatch, handler)
    assert forward_geocode("12/3 MG Road") is None
    assert seen["path"].split("?")[0].endswith("/12%2F3%20MG%20Road.json")
