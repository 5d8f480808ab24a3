"""Routing provider clients that resolve one segment between two waypoints.

Every client issues exactly one HTTP request per segment and reports either
a :class:`SegmentResult` or a :class:`Failure`. Retries are left to the
caller's fallback chain.
"""

import logging
import math
from typing import Any, Literal, Protocol

import requests
from pydantic import ValidationError

from open_rando.config import Settings
from open_rando.exceptions import ProviderError
from open_rando.http import get_json
from open_rando.results import Failure
from open_rando.routing.schemas import SegmentResult, Waypoint

logger = logging.getLogger(__name__)

CoordinateOrder = Literal["lonlat", "latlon"]


class RouteProvider(Protocol):
    """Capability shared by every routing provider in the fallback chain."""

    name: str
    native_order: CoordinateOrder

    def route_segment(self, a: Waypoint, b: Waypoint) -> SegmentResult | Failure:
        """Route between two (latitude, longitude) waypoints.

        Coordinates of a successful result are in ``native_order``.
        """
        ...


def _parse_line(provider: str, raw: Any) -> list[tuple[float, float]]:
    """Keep the first two ordinates of every vertex, dropping altitude."""
    if not isinstance(raw, list) or len(raw) < 2:
        raise ProviderError(provider, "geometry has fewer than two coordinates")
    try:
        line = [(float(vertex[0]), float(vertex[1])) for vertex in raw]
    except (TypeError, ValueError, IndexError, KeyError) as exc:
        raise ProviderError(provider, "geometry contains malformed coordinates") from exc
    if not all(math.isfinite(lon) and math.isfinite(lat) for lon, lat in line):
        raise ProviderError(provider, "geometry contains non-finite coordinates")
    return line


def _as_meters(provider: str, value: Any, *, scale: float = 1.0) -> float:
    if value is None:
        return 0.0
    try:
        number = float(value) * scale
    except (TypeError, ValueError) as exc:
        raise ProviderError(provider, f"non-numeric value {value!r}") from exc
    if not math.isfinite(number):
        raise ProviderError(provider, f"non-finite value {value!r}")
    return max(number, 0.0)


def _segment(provider: str, **fields: Any) -> SegmentResult:
    try:
        return SegmentResult(source=provider, **fields)
    except ValidationError as exc:
        raise ProviderError(provider, f"invalid segment: {exc}") from exc


class OsrmProvider:
    """Primary provider backed by the OSRM ``route`` service."""

    name = "osrm"
    native_order: CoordinateOrder = "lonlat"

    def __init__(self, settings: Settings, session: requests.Session) -> None:
        self._settings = settings
        self._session = session

    def route_segment(self, a: Waypoint, b: Waypoint) -> SegmentResult | Failure:
        try:
            return self._fetch(a, b)
        except ProviderError as exc:
            logger.warning(
                "Routing provider failed",
                extra={"provider": self.name, "error": str(exc)},
            )
            return Failure(source=self.name, reason=str(exc))

    def _fetch(self, a: Waypoint, b: Waypoint) -> SegmentResult:
        url = (
            f"{self._settings.osrm_base_url}/route/v1/{self._settings.osrm_profile}/"
            f"{a[1]},{a[0]};{b[1]},{b[0]}"
        )
        data = get_json(
            self._session,
            self.name,
            url,
            params={"overview": "full", "geometries": "geojson"},
            timeout=self._settings.request_timeout_seconds,
        )

        routes = data.get("routes") if isinstance(data, dict) else None
        if not isinstance(routes, list) or not routes:
            raise ProviderError(self.name, "no route found")

        route = routes[0]
        if not isinstance(route, dict):
            raise ProviderError(self.name, "route is not an object")
        try:
            raw_coordinates = route["geometry"]["coordinates"]
        except (KeyError, TypeError) as exc:
            raise ProviderError(self.name, "route has no geometry") from exc

        return _segment(
            self.name,
            coordinates=_parse_line(self.name, raw_coordinates),
            distance=_as_meters(self.name, route.get("distance")),
            duration=_as_meters(self.name, route.get("duration")),
        )


class GraphHopperProvider:
    """Secondary provider backed by the GraphHopper ``route`` endpoint."""

    name = "graphhopper"
    native_order: CoordinateOrder = "lonlat"

    def __init__(self, settings: Settings, session: requests.Session) -> None:
        self._settings = settings
        self._session = session

    def route_segment(self, a: Waypoint, b: Waypoint) -> SegmentResult | Failure:
        try:
            return self._fetch(a, b)
        except ProviderError as exc:
            logger.warning(
                "Routing provider failed",
                extra={"provider": self.name, "error": str(exc)},
            )
            return Failure(source=self.name, reason=str(exc))

    def _fetch(self, a: Waypoint, b: Waypoint) -> SegmentResult:
        params: list[tuple[str, str]] = [
            ("point", f"{a[0]},{a[1]}"),
            ("point", f"{b[0]},{b[1]}"),
            ("profile", self._settings.graphhopper_profile),
            ("points_encoded", "false"),
            ("instructions", "false"),
        ]
        if self._settings.graphhopper_api_key:
            params.append(("key", self._settings.graphhopper_api_key))

        data = get_json(
            self._session,
            self.name,
            f"{self._settings.graphhopper_base_url}/route",
            params=params,
            timeout=self._settings.request_timeout_seconds,
        )

        paths = data.get("paths") if isinstance(data, dict) else None
        if not isinstance(paths, list) or not paths:
            raise ProviderError(self.name, "no path found")

        path = paths[0]
        if not isinstance(path, dict):
            raise ProviderError(self.name, "path is not an object")
        try:
            raw_coordinates = path["points"]["coordinates"]
        except (KeyError, TypeError) as exc:
            raise ProviderError(self.name, "path has no points") from exc

        return _segment(
            self.name,
            coordinates=_parse_line(self.name, raw_coordinates),
            distance=_as_meters(self.name, path.get("distance")),
            # GraphHopper reports time in milliseconds
            duration=_as_meters(self.name, path.get("time"), scale=0.001),
        )
