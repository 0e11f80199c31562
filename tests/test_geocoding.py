import httpx
import pytest

from delivery_router.config import settings
from delivery_router.models.domain import Position
from delivery_router.services.geocoding import Geocoder, geocode_or_default

DEFAULT = Position(12.9716, 77.5946)


def _geocoder_with(monkeypatch: pytest.MonkeyPatch, handler) -> Geocoder:
    geocoder = Geocoder(base_url="http://geo.test", country_codes="in")
    monkeypatch.setattr(
        geocoder,
        "_get_client",
        lambda: httpx.Client(transport=httpx.MockTransport(handler)),
    )
    return geocoder


def test_geocode_returns_first_match(monkeypatch: pytest.MonkeyPatch):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json=[{"lat": "12.9758", "lon": "77.6065"}, {"lat": "0", "lon": "0"}])

    geocoder = _geocoder_with(monkeypatch, handler)

    assert geocoder.geocode("121, MG Road, Bangalore") == Position(12.9758, 77.6065)
    assert seen["params"]["q"] == "121, MG Road, Bangalore"
    assert seen["params"]["countrycodes"] == "in"


def test_geocode_without_match_returns_none(monkeypatch: pytest.MonkeyPatch):
    geocoder = _geocoder_with(monkeypatch, lambda request: httpx.Response(200, json=[]))

    assert geocoder.geocode("nowhere at all") is None
    assert geocoder.geocode("   ") is None


def test_geocode_or_default_falls_back_on_service_errors(monkeypatch: pytest.MonkeyPatch):
    geocoder = _geocoder_with(monkeypatch, lambda request: httpx.Response(500))

    position, resolved = geocode_or_default("42, Richmond Road", DEFAULT, geocoder)

    assert position == DEFAULT
    assert resolved is False


def test_geocode_or_default_uses_match(monkeypatch: pytest.MonkeyPatch):
    geocoder = _geocoder_with(monkeypatch, lambda request: httpx.Response(200, json=[{"lat": "1.5", "lon": "2.5"}]))

    assert geocode_or_default("somewhere", DEFAULT, geocoder) == (Position(1.5, 2.5), True)


def test_geocode_or_default_without_configured_service(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "geocoder_base_url", None)

    assert geocode_or_default("42, Richmond Road", DEFAULT) == (DEFAULT, False)
