"""Application configuration and settings management."""

from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="DR_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Delivery Route Optimizer API"
    api_prefix: str = "/api"
    default_start_latitude: float = Field(
        default=12.9716,
        description="Latitude used when the caller has no live position (Bangalore city centre).",
    )
    default_start_longitude: float = Field(
        default=77.5946,
        description="Longitude used when the caller has no live position (Bangalore city centre).",
    )
    use_spanning_tree: bool = Field(
        default=True,
        description="Build the minimum spanning tree over the candidate graph and report its weight.",
    )
    osrm_base_url: Optional[str] = Field(
        default=None,
        description="Base URL for the OSRM routing service used for road geometry (e.g., http://localhost:5000).",
    )
    osrm_profile: Literal["driving", "cycling", "walking"] = Field(
        default="driving",
        description="OSRM profile to use when fetching road geometry.",
    )
    osrm_timeout_seconds: float = Field(default=10.0, gt=0.0)
    osrm_max_retries: int = Field(default=2, ge=0)
    osrm_backoff_seconds: float = Field(default=0.5, ge=0.0)
    geocoder_base_url: Optional[str] = Field(
        default="https://nominatim.openstreetmap.org",
        description="Base URL of a Nominatim-compatible geocoding service. Unset to disable geocoding.",
    )
    geocoder_user_agent: str = Field(default="DeliveryRouter-Geocoder/1.0")
    geocoder_country_codes: Optional[str] = Field(
        default="in",
        description="Comma-separated ISO country codes used to narrow geocoding results.",
    )
    geocoder_timeout_seconds: float = Field(default=7.0, gt=0.0)
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:8080",
            "http://127.0.0.1:8080",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            # Try JSON first
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            # Try comma-separated
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
