"""Pydantic schemas for route composition and the routing API."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# (latitude, longitude), as supplied by the caller.
Waypoint = tuple[float, float]
# (longitude, latitude), GeoJSON order.
Coordinate = tuple[float, float]


class SegmentResult(BaseModel):
    """Routed path between two consecutive waypoints."""

    model_config = ConfigDict(frozen=True)

    coordinates: list[Coordinate]
    distance: float = Field(ge=0)
    duration: float = Field(ge=0)
    source: str


class ComposedRoute(BaseModel):
    """Stitched route across all waypoints with trip totals."""

    model_config = ConfigDict(frozen=True)

    coordinates: list[Coordinate]
    distance: float = Field(ge=0)
    duration: float = Field(ge=0)
    elevation_gain: float = Field(ge=0)
    points_count: int


class LineString(BaseModel):
    """GeoJSON LineString geometry."""

    type: Literal["LineString"] = "LineString"
    coordinates: list[Coordinate]


class RouteRequest(BaseModel):
    """Request body for the route composition endpoint."""

    points: list[Waypoint] = Field(default_factory=list)


class RouteResponse(BaseModel):
    """Response body for the route composition endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    geometry: LineString
    distance: float
    duration: float
    elevation_gain: float = Field(alias="elevationGain")
    points_count: int = Field(alias="pointsCount")

    @classmethod
    def from_route(cls, route: ComposedRoute) -> "RouteResponse":
        return cls(
            geometry=LineString(coordinates=route.coordinates),
            distance=route.distance,
            duration=route.duration,
            elevation_gain=route.elevation_gain,
            points_count=route.points_count,
        )


class SnapRequest(BaseModel):
    """Request body for the point snapping endpoint."""

    lat: float
    lon: float


class SnappedPoint(BaseModel):
    """Nearest routable point returned by the snapping endpoint."""

    lat: float
    lon: float


class MapMatchRequest(BaseModel):
    """Request body for the map-matching endpoint."""

    points: list[Waypoint] = Field(default_factory=list)


class MapMatchResponse(BaseModel):
    """Matched geometry returned by the map-matching endpoint."""

    geometry: LineString
