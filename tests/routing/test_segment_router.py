"""Tests for the per-segment fallback chain."""

import pytest

from open_rando.geodesy import distance_meters
from open_rando.results import Failure
from open_rando.routing.schemas import SegmentResult, Waypoint
from open_rando.routing.segment import (
    STRAIGHT_LINE,
    SegmentRouter,
    straight_line_segment,
    to_lonlat,
)

START = (48.85, 2.35)
END = (48.86, 2.36)


class FakeProvider:
    """Provider returning a canned outcome and recording its calls."""

    def __init__(
        self, name: str, outcome: SegmentResult | Failure, native_order: str = "lonlat"
    ) -> None:
        self.name = name
        self.native_order = native_order
        self.outcome = outcome
        self.calls: list[tuple[Waypoint, Waypoint]] = []

    def route_segment(self, a: Waypoint, b: Waypoint) -> SegmentResult | Failure:
        self.calls.append((a, b))
        return self.outcome


def routed(source: str) -> SegmentResult:
    return SegmentResult(
        coordinates=[(2.35, 48.85), (2.352, 48.853), (2.36, 48.86)],
        distance=1500.0,
        duration=1100.0,
        source=source,
    )


class TestSegmentRouter:
    def test_uses_primary_when_it_succeeds(self) -> None:
        primary = FakeProvider("primary", routed("primary"))
        secondary = FakeProvider("secondary", routed("secondary"))

        result = SegmentRouter([primary, secondary]).route_segment(START, END)

        assert result.source == "primary"
        assert primary.calls == [(START, END)]
        assert secondary.calls == []

    def test_falls_back_to_secondary(self) -> None:
        primary = FakeProvider("primary", Failure("primary", "down"))
        secondary = FakeProvider("secondary", routed("secondary"))

        result = SegmentRouter([primary, secondary]).route_segment(START, END)

        assert result.source == "secondary"
        assert len(primary.calls) == 1
        assert len(secondary.calls) == 1

    def test_falls_back_to_straight_line_when_all_fail(self) -> None:
        primary = FakeProvider("primary", Failure("primary", "down"))
        secondary = FakeProvider("secondary", Failure("secondary", "no path"))

        result = SegmentRouter([primary, secondary]).route_segment(START, END)

        assert result.source == STRAIGHT_LINE
        assert result.coordinates == [(2.35, 48.85), (2.36, 48.86)]
        assert result.distance == pytest.approx(distance_meters(START, END))
        assert result.duration == pytest.approx(result.distance / 1.25)

    def test_straight_line_without_providers(self) -> None:
        result = SegmentRouter([]).route_segment(START, END)

        assert result.source == STRAIGHT_LINE
        assert result.coordinates == [(2.35, 48.85), (2.36, 48.86)]

    def test_normalizes_lat_lon_provider_output(self) -> None:
        lat_lon = SegmentResult(
            coordinates=[(48.85, 2.35), (48.86, 2.36)],
            distance=10.0,
            duration=8.0,
            source="latlon",
        )
        provider = FakeProvider("latlon", lat_lon, native_order="latlon")

        result = SegmentRouter([provider]).route_segment(START, END)

        assert result.coordinates == [(2.35, 48.85), (2.36, 48.86)]
        assert result.distance == 10.0

    def test_exposes_providers_in_order(self) -> None:
        primary = FakeProvider("primary", routed("primary"))
        secondary = FakeProvider("secondary", routed("secondary"))

        router = SegmentRouter([primary, secondary])

        assert [provider.name for provider in router.providers] == ["primary", "secondary"]


class TestStraightLineSegment:
    def test_keeps_raw_endpoints(self) -> None:
        segment = straight_line_segment(START, END)

        assert segment.coordinates == [START, END]
        assert segment.source == STRAIGHT_LINE

    def test_zero_length_segment(self) -> None:
        segment = straight_line_segment(START, START)

        assert segment.distance == 0.0
        assert segment.duration == 0.0


class TestToLonLat:
    def test_lonlat_is_unchanged(self) -> None:
        segment = routed("osrm")

        assert to_lonlat(segment, "lonlat") is segment

    def test_latlon_is_swapped(self) -> None:
        segment = straight_line_segment(START, END)

        swapped = to_lonlat(segment, "latlon")

        assert swapped.coordinates == [(2.35, 48.85), (2.36, 48.86)]
        assert swapped.distance == segment.distance
        assert swapped.source == segment.source
