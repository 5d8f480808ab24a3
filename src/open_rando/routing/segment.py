"""Per-segment routing with an ordered provider fallback chain."""

import logging
from collections.abc import Sequence

from open_rando.geodesy import WALKING_SPEED_MPS, distance_meters, estimate_duration
from open_rando.results import Failure
from open_rando.routing.providers import CoordinateOrder, RouteProvider
from open_rando.routing.schemas import SegmentResult, Waypoint

logger = logging.getLogger(__name__)

STRAIGHT_LINE = "straight_line"


def straight_line_segment(a: Waypoint, b: Waypoint) -> SegmentResult:
    """Synthesize a two-vertex segment in (latitude, longitude) order."""
    distance = distance_meters(a, b)
    return SegmentResult(
        coordinates=[a, b],
        distance=distance,
        duration=estimate_duration(distance, WALKING_SPEED_MPS),
        source=STRAIGHT_LINE,
    )


def to_lonlat(segment: SegmentResult, order: CoordinateOrder) -> SegmentResult:
    """Return ``segment`` with its coordinates in (longitude, latitude) order."""
    if order == "lonlat":
        return segment
    return segment.model_copy(
        update={"coordinates": [(second, first) for first, second in segment.coordinates]}
    )


class SegmentRouter:
    """Routes one pair of waypoints, trying each provider in turn.

    The straight line between the endpoints is the last resort, so
    :meth:`route_segment` always returns a result.
    """

    def __init__(self, providers: Sequence[RouteProvider]) -> None:
        self._providers = tuple(providers)

    @property
    def providers(self) -> tuple[RouteProvider, ...]:
        return self._providers

    def route_segment(self, a: Waypoint, b: Waypoint) -> SegmentResult:
        """Route from ``a`` to ``b``.

        Args:
            a: Start waypoint as (latitude, longitude).
            b: End waypoint as (latitude, longitude).

        Returns:
            A SegmentResult in (longitude, latitude) order tagged with the
            provider that produced it.
        """
        for provider in self._providers:
            outcome = provider.route_segment(a, b)
            if isinstance(outcome, Failure):
                continue
            logger.debug("Segment routed", extra={"provider": provider.name})
            return to_lonlat(outcome, provider.native_order)

        logger.info(
            "All routing providers failed, using straight line",
            extra={"start": a, "end": b},
        )
        return to_lonlat(straight_line_segment(a, b), "latlon")
