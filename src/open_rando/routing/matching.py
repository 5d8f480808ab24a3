"""Single-call OSRM passthroughs: nearest-point snapping and trace matching."""

import logging
from collections.abc import Sequence

import requests
from pydantic import ValidationError

from open_rando.config import Settings
from open_rando.exceptions import (
    InvalidWaypointsError,
    NoMatchingFoundError,
    NoSnapFoundError,
    ProviderError,
)
from open_rando.http import get_json
from open_rando.routing.schemas import LineString, SnappedPoint, Waypoint

logger = logging.getLogger(__name__)

PROVIDER_NAME = "osrm"


class MatchingService:
    """Snaps points and traces onto the OSRM road network."""

    def __init__(self, settings: Settings, session: requests.Session) -> None:
        self._settings = settings
        self._session = session

    def snap(self, latitude: float, longitude: float) -> SnappedPoint:
        """Return the nearest routable point to a coordinate.

        Raises:
            ProviderError: If the OSRM call fails.
            NoSnapFoundError: If OSRM returns no waypoint.
        """
        url = (
            f"{self._settings.osrm_base_url}/nearest/v1/"
            f"{self._settings.osrm_profile}/{longitude},{latitude}"
        )
        data = get_json(
            self._session,
            PROVIDER_NAME,
            url,
            params={"number": 1},
            timeout=self._settings.request_timeout_seconds,
        )

        try:
            snapped_lon, snapped_lat = data["waypoints"][0]["location"]
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise NoSnapFoundError(latitude, longitude) from exc

        return SnappedPoint(lat=snapped_lat, lon=snapped_lon)

    def match(self, points: Sequence[Waypoint]) -> LineString:
        """Match a (latitude, longitude) trace to the road network.

        Raises:
            InvalidWaypointsError: If fewer than two points are given.
            ProviderError: If the OSRM call fails.
            NoMatchingFoundError: If OSRM returns no matching.
        """
        if len(points) < 2:
            raise InvalidWaypointsError("at least two points are required")

        coordinates = ";".join(f"{lon},{lat}" for lat, lon in points)
        url = (
            f"{self._settings.osrm_base_url}/match/v1/"
            f"{self._settings.match_profile}/{coordinates}"
        )
        data = get_json(
            self._session,
            PROVIDER_NAME,
            url,
            params={"geometries": "geojson", "overview": "full", "steps": "false"},
            timeout=self._settings.request_timeout_seconds,
        )

        matchings = data.get("matchings") if isinstance(data, dict) else None
        if not matchings:
            raise NoMatchingFoundError()

        try:
            return LineString.model_validate(matchings[0]["geometry"])
        except (KeyError, TypeError, ValidationError) as exc:
            raise ProviderError(PROVIDER_NAME, "matching has no usable geometry") from exc
