"""Address geocoding against a Nominatim-compatible search endpoint."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from ..config import settings
from ..models.domain import Position

logger = logging.getLogger(__name__)


class Geocoder:
    def __init__(
        self,
        base_url: str | None = None,
        user_agent: str | None = None,
        country_codes: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = base_url or settings.geocoder_base_url
        if not self.base_url:
            raise ValueError("Geocoder base URL is not configured.")
        self.base_url = self.base_url.rstrip("/")
        self.user_agent = user_agent or settings.geocoder_user_agent
        self.country_codes = country_codes if country_codes is not None else settings.geocoder_country_codes
        self.timeout = timeout if timeout is not None else settings.geocoder_timeout_seconds

    def _get_client(self) -> httpx.Client:
        return httpx.Client(timeout=self.timeout, headers={"User-Agent": self.user_agent})

    def geocode(self, address: str) -> Optional[Position]:
        """Resolve ``address`` to a position, or None when nothing matches.

        Raises:
            ConnectionError: the geocoding service could not be reached.
        """
        if not address or not address.strip():
            return None

        params = {"q": address.strip(), "format": "json", "limit": 1}
        if self.country_codes:
            params["countrycodes"] = self.country_codes

        client = self._get_client()
        try:
            response = client.get(f"{self.base_url}/search", params=params)
            response.raise_for_status()
            results = response.json()
        except httpx.HTTPStatusError as e:
            raise ConnectionError(
                f"Geocoding service returned HTTP {e.response.status_code} for '{address}'"
            ) from e
        except httpx.HTTPError as e:
            raise ConnectionError(f"Failed to reach geocoding service at {self.base_url}: {e}") from e
        finally:
            client.close()

        if not results:
            return None
        try:
            first = results[0]
            return Position(latitude=float(first["lat"]), longitude=float(first["lon"]))
        except (KeyError, TypeError, ValueError, IndexError) as e:
            logger.warning(f"Unexpected geocoder payload for '{address}': {e}")
            return None


def geocode_or_default(
    address: str,
    default: Position,
    geocoder: Geocoder | None = None,
) -> tuple[Position, bool]:
    """Geocode ``address`` falling back to ``default``.

    Returns the position and whether it came from the geocoder. Failures are
    never fatal: the caller always gets a concrete position.
    """
    try:
        client = geocoder or Geocoder()
        position = client.geocode(address)
    except (ValueError, ConnectionError) as e:
        logger.warning(f"Geocoding unavailable for '{address}', using default position: {e}")
        return default, False

    if position is None:
        logger.info(f"No geocoding match for '{address}', using default position")
        return default, False
    return position, True
