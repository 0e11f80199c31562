import httpx
import pytest

from delivery_router.config import settings
from delivery_router.services.routing import osrm_client as osrm_module
from delivery_router.services.routing.osrm_client import OSRMClient, decode_polyline

ENCODED = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"


def _client_with(monkeypatch: pytest.MonkeyPatch, handler, **kwargs) -> OSRMClient:
    client = OSRMClient(base_url="http://osrm.test/", backoff_seconds=0.0, **kwargs)
    monkeypatch.setattr(client, "_get_client", lambda: httpx.Client(transport=httpx.MockTransport(handler)))
    return client


def test_decode_polyline():
    coordinates = decode_polyline(ENCODED)

    assert coordinates == [
        pytest.approx((38.5, -120.2)),
        pytest.approx((40.7, -120.95)),
        pytest.approx((43.252, -126.453)),
    ]
    assert decode_polyline("") == []


def test_route_formats_lon_lat_and_returns_payload(monkeypatch: pytest.MonkeyPatch):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["overview"] = request.url.params["overview"]
        return httpx.Response(200, json={"code": "Ok", "routes": [{"geometry": ENCODED, "distance": 1200.0}]})

    client = _client_with(monkeypatch, handler)
    data = client.route([(12.9716, 77.5946), (12.9647, 77.6082)])

    assert seen["path"] == "/route/v1/driving/77.5946,12.9716;77.6082,12.9647"
    assert seen["overview"] == "full"
    assert data["routes"][0]["distance"] == 1200.0


def test_route_retries_server_errors(monkeypatch: pytest.MonkeyPatch):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if len(calls) == 1:
            return httpx.Response(503)
        return httpx.Response(200, json={"code": "Ok", "routes": []})

    client = _client_with(monkeypatch, handler, max_retries=1)

    assert client.route([(0.0, 0.0), (0.0, 1.0)])["code"] == "Ok"
    assert len(calls) == 2


def test_route_does_not_retry_client_errors(monkeypatch: pytest.MonkeyPatch):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(400, json={"code": "InvalidQuery"})

    client = _client_with(monkeypatch, handler, max_retries=2)

    with pytest.raises(httpx.HTTPStatusError):
        client.route([(0.0, 0.0), (0.0, 1.0)])
    assert len(calls) == 1


def test_route_rejects_non_ok_code(monkeypatch: pytest.MonkeyPatch):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"code": "NoRoute", "message": "Impossible route"})

    client = _client_with(monkeypatch, handler, max_retries=0)

    with pytest.raises(ValueError, match="Impossible route"):
        client.route([(0.0, 0.0), (0.0, 1.0)])


def test_route_network_failure_raises_connection_error(monkeypatch: pytest.MonkeyPatch):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = _client_with(monkeypatch, handler, max_retries=0)

    with pytest.raises(ConnectionError):
        client.route([(0.0, 0.0), (0.0, 1.0)])


def test_route_needs_two_coordinates():
    with pytest.raises(ValueError):
        OSRMClient(base_url="http://osrm.test").route([(0.0, 0.0)])


def test_client_requires_base_url(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "osrm_base_url", None)

    with pytest.raises(ValueError, match="not configured"):
        OSRMClient()
    assert osrm_module.check_health() is False
