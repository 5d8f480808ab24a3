"""Client for a batched Open-Elevation style lookup service."""

import logging
import math
from collections.abc import Sequence

import requests
from pydantic import ValidationError

from open_rando.config import Settings
from open_rando.elevation.schemas import ElevationSample, LookupResponse
from open_rando.exceptions import ElevationLookupError, ProviderError
from open_rando.http import get_json
from open_rando.results import Failure
from open_rando.routing.schemas import Coordinate

logger = logging.getLogger(__name__)

PROVIDER_NAME = "open-elevation"


def sample_indices(count: int, max_samples: int) -> range:
    """Indices kept when downsampling ``count`` coordinates at a fixed stride.

    Index 0 is always kept and at most ``max_samples`` indices are returned.
    The stride is rounded up so this bound holds even where flooring
    ``count / max_samples`` would exceed it.
    """
    if max_samples < 1:
        raise ValueError(f"max_samples must be at least 1, got {max_samples}")
    stride = max(1, math.ceil(count / max_samples))
    return range(0, count, stride)


def elevation_gain(samples: Sequence[ElevationSample]) -> float:
    """Cumulative ascent: the sum of positive consecutive differences."""
    return sum(
        max(current.elevation - previous.elevation, 0.0)
        for previous, current in zip(samples, samples[1:])
    )


class ElevationClient:
    """Looks up elevations for a downsampled route in a single request."""

    def __init__(self, settings: Settings, session: requests.Session) -> None:
        self._settings = settings
        self._session = session

    def elevations(self, coordinates: Sequence[Coordinate]) -> list[ElevationSample] | Failure:
        """Fetch elevations along ``coordinates``.

        Args:
            coordinates: Stitched route in (longitude, latitude) order.

        Returns:
            One sample per kept coordinate, in route order, or a Failure
            when the lookup could not be completed.
        """
        indices = sample_indices(len(coordinates), self._settings.max_elevation_samples)
        if not indices:
            return []

        try:
            elevations = self._lookup([coordinates[i] for i in indices])
        except (ProviderError, ElevationLookupError) as exc:
            logger.warning(
                "Elevation lookup failed",
                extra={"provider": PROVIDER_NAME, "error": str(exc)},
            )
            return Failure(source=PROVIDER_NAME, reason=str(exc))

        return [
            ElevationSample(index=index, elevation=elevation)
            for index, elevation in zip(indices, elevations)
        ]

    def _lookup(self, points: list[Coordinate]) -> list[float]:
        locations = "|".join(f"{lat},{lon}" for lon, lat in points)
        data = get_json(
            self._session,
            PROVIDER_NAME,
            f"{self._settings.elevation_base_url}/api/v1/lookup",
            params={"locations": locations},
            timeout=self._settings.request_timeout_seconds,
        )

        try:
            lookup = LookupResponse.model_validate(data)
        except ValidationError as exc:
            raise ElevationLookupError(f"Malformed elevation response: {exc}") from exc

        if len(lookup.results) != len(points):
            raise ElevationLookupError(
                f"Expected {len(points)} elevations, got {len(lookup.results)}"
            )
        return [result.elevation for result in lookup.results]
