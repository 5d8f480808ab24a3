"""Application configuration loaded from environment variables."""

import os
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Settings:
    """Application settings populated from environment variables."""

    osrm_base_url: str
    osrm_profile: str
    match_profile: str
    graphhopper_base_url: str
    graphhopper_profile: str
    graphhopper_api_key: str | None
    elevation_base_url: str
    nominatim_base_url: str
    user_agent: str
    accept_language: str
    request_timeout_seconds: float
    max_elevation_samples: int

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables.

        Returns:
            A frozen Settings instance with values from the environment.
        """
        return cls(
            osrm_base_url=os.getenv("OSRM_BASE_URL", "https://router.project-osrm.org").rstrip("/"),
            osrm_profile=os.getenv("OSRM_PROFILE", "walking"),
            match_profile=os.getenv("MATCH_PROFILE", "foot"),
            graphhopper_base_url=os.getenv(
                "GRAPHHOPPER_BASE_URL", "https://graphhopper.com/api/1"
            ).rstrip("/"),
            graphhopper_profile=os.getenv("GRAPHHOPPER_PROFILE", "foot"),
            graphhopper_api_key=os.getenv("GRAPHHOPPER_API_KEY") or None,
            elevation_base_url=os.getenv(
                "ELEVATION_BASE_URL", "https://api.open-elevation.com"
            ).rstrip("/"),
            nominatim_base_url=os.getenv(
                "NOMINATIM_BASE_URL", "https://nominatim.openstreetmap.org"
            ).rstrip("/"),
            user_agent=os.getenv(
                "USER_AGENT", "OpenRando/0.1 (https://github.com/IchikyOtsu/OpenRando)"
            ),
            accept_language=os.getenv("ACCEPT_LANGUAGE", "fr"),
            request_timeout_seconds=float(os.getenv("REQUEST_TIMEOUT_SECONDS", "10")),
            max_elevation_samples=int(os.getenv("MAX_ELEVATION_SAMPLES", "150")),
        )
