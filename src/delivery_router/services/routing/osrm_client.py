"""HTTP client for fetching road geometry from OSRM.

Road geometry is used to draw the already-sequenced route on a map. It never
feeds back into sequencing decisions.
"""

from __future__ import annotations

import logging
import time
from typing import Sequence

import httpx

from ...config import settings

logger = logging.getLogger(__name__)


class OSRMClient:
    def __init__(
        self,
        base_url: str | None = None,
        profile: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_seconds: float | None = None,
    ) -> None:
        self.base_url = base_url or settings.osrm_base_url
        if not self.base_url:
            raise ValueError("OSRM base URL is not configured.")
        self.base_url = self.base_url.rstrip("/")
        self.profile = profile or settings.osrm_profile
        self.timeout = timeout if timeout is not None else settings.osrm_timeout_seconds
        self.max_retries = max_retries if max_retries is not None else settings.osrm_max_retries
        self.backoff_seconds = backoff_seconds if backoff_seconds is not None else settings.osrm_backoff_seconds

    def _get_client(self) -> httpx.Client:
        return httpx.Client(timeout=httpx.Timeout(self.timeout, connect=5.0))

    def route(self, coordinates: Sequence[tuple[float, float]]) -> dict:
        """Get route geometry between coordinates using OSRM route endpoint.

        Args:
            coordinates: Sequence of (lat, lon) tuples for the route waypoints

        Returns:
            OSRM response dictionary; ``routes[0]["geometry"]`` holds the
            encoded polyline and ``routes[0]["legs"]`` the per-leg distances.
        """
        if len(coordinates) < 2:
            raise ValueError("At least two coordinates are required for OSRM route.")

        # OSRM expects "lon,lat;lon,lat;..."
        coordinate_str = ";".join(f"{lon},{lat}" for lat, lon in coordinates)
        params = {
            "overview": "full",
            "geometries": "polyline",
            "steps": "false",
        }
        url = f"{self.base_url}/route/v1/{self.profile}/{coordinate_str}"

        client = self._get_client()
        try:
            attempt = 0
            while True:
                try:
                    response = client.get(url, params=params)
                    response.raise_for_status()
                    data = response.json()

                    if data.get("code") != "Ok":
                        error_msg = data.get("message", "Unknown OSRM route error")
                        raise ValueError(f"OSRM route request failed: {error_msg}")

                    return data
                except httpx.HTTPStatusError as e:
                    # 4xx (NoRoute, InvalidQuery) will not change on retry
                    attempt += 1
                    if e.response.status_code < 500 or attempt > self.max_retries:
                        raise
                    time.sleep(self.backoff_seconds * attempt)
                except httpx.TimeoutException as e:
                    attempt += 1
                    if attempt > self.max_retries:
                        logger.warning(f"OSRM route request timed out after {self.max_retries} retries: {e}")
                        raise
                    wait_time = self.backoff_seconds * (2 ** (attempt - 1))
                    logger.debug(f"OSRM route timeout, retrying in {wait_time:.1f}s (attempt {attempt}/{self.max_retries})")
                    time.sleep(wait_time)
                except (httpx.NetworkError, OSError) as e:
                    attempt += 1
                    if attempt > self.max_retries:
                        raise ConnectionError(
                            f"Failed to connect to OSRM service at {self.base_url}: {e}"
                        ) from e
                    wait_time = self.backoff_seconds * (2 ** (attempt - 1))
                    logger.debug(f"OSRM network error, retrying in {wait_time:.1f}s (attempt {attempt}/{self.max_retries}): {e}")
                    time.sleep(wait_time)
        finally:
            client.close()


def decode_polyline(polyline: str, precision: int = 5) -> list[tuple[float, float]]:
    """Decode an encoded polyline string to a list of (lat, lon) coordinates.

    OSRM uses Google's polyline encoding format for route geometry.
    """
    coordinates = []
    index = 0
    lat = 0
    lon = 0
    factor = 10 ** precision

    def _next_value() -> int:
        nonlocal index
        shift = 0
        result = 0
        while True:
            b = ord(polyline[index]) - 63
            index += 1
            result |= (b & 0x1f) << shift
            shift += 5
            if b < 0x20:
                break
        return ~(result >> 1) if (result & 1) else (result >> 1)

    while index < len(polyline):
        lat += _next_value()
        lon += _next_value()
        coordinates.append((lat / factor, lon / factor))

    return coordinates


def check_health(base_url: str | None = None) -> bool:
    """Check OSRM service health with a minimal two-point route request."""
    base = base_url or settings.osrm_base_url
    if not base:
        return False
    try:
        test_coords = "77.5946,12.9716;77.6082,12.9647"
        url = f"{base.rstrip('/')}/route/v1/{settings.osrm_profile}/{test_coords}"
        response = httpx.get(url, params={"overview": "false"}, timeout=5.0)
        response.raise_for_status()
        return response.json().get("code") == "Ok"
    except (httpx.HTTPError, ValueError):
        return False
