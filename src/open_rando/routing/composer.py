"""Composition of a full route from an ordered list of waypoints."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from functools import reduce
from itertools import chain, pairwise

from open_rando.elevation.client import ElevationClient, elevation_gain
from open_rando.exceptions import InvalidWaypointsError
from open_rando.results import Failure
from open_rando.routing.schemas import ComposedRoute, Coordinate, SegmentResult, Waypoint
from open_rando.routing.segment import SegmentRouter

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StitchState:
    """Running totals while segments are folded into one path.

    ``parts`` holds each segment's contribution; they are joined once when
    :attr:`coordinates` is read.
    """

    parts: tuple[tuple[Coordinate, ...], ...] = ()
    distance: float = 0.0
    duration: float = 0.0

    @property
    def coordinates(self) -> tuple[Coordinate, ...]:
        return tuple(chain.from_iterable(self.parts))


def stitch(state: StitchState, segment: SegmentResult) -> StitchState:
    """Append ``segment`` to ``state``.

    Every segment after the first starts where the previous one ended, so
    its first vertex is dropped.
    """
    coordinates = segment.coordinates if not state.parts else segment.coordinates[1:]
    return StitchState(
        parts=(*state.parts, tuple(coordinates)),
        distance=state.distance + segment.distance,
        duration=state.duration + segment.duration,
    )


class RouteComposer:
    """Routes every leg of a trip and aggregates distance, duration and ascent."""

    def __init__(self, router: SegmentRouter, elevation_client: ElevationClient) -> None:
        self._router = router
        self._elevation_client = elevation_client

    def compose(self, waypoints: Sequence[Waypoint]) -> ComposedRoute:
        """Build one continuous route through ``waypoints`` in order.

        Args:
            waypoints: At least two (latitude, longitude) pairs.

        Returns:
            The stitched route with its totals.

        Raises:
            InvalidWaypointsError: If fewer than two waypoints are given.
        """
        if len(waypoints) < 2:
            raise InvalidWaypointsError()

        segments = (self._router.route_segment(a, b) for a, b in pairwise(waypoints))
        state = reduce(stitch, segments, StitchState())
        coordinates = list(state.coordinates)

        logger.info(
            "Route composed",
            extra={
                "waypoints": len(waypoints),
                "vertices": len(coordinates),
                "distance": state.distance,
            },
        )

        return ComposedRoute(
            coordinates=coordinates,
            distance=state.distance,
            duration=state.duration,
            elevation_gain=self._elevation_gain(coordinates),
            points_count=len(waypoints),
        )

    def _elevation_gain(self, coordinates: list[Coordinate]) -> float:
        samples = self._elevation_client.elevations(coordinates)
        if isinstance(samples, Failure):
            logger.warning("Elevation unavailable, reporting zero gain")
            return 0.0
        return elevation_gain(samples)
