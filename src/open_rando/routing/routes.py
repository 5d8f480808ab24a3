"""API routes for route composition, snapping and map-matching."""

import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status

from open_rando.exceptions import (
    InvalidWaypointsError,
    NoMatchingFoundError,
    NoSnapFoundError,
    ProviderError,
)
from open_rando.routing.composer import RouteComposer
from open_rando.routing.matching import MatchingService
from open_rando.routing.schemas import (
    MapMatchRequest,
    MapMatchResponse,
    RouteRequest,
    RouteResponse,
    SnappedPoint,
    SnapRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["routing"])


def get_route_composer(request: Request) -> RouteComposer:
    """FastAPI dependency that retrieves the RouteComposer from app state."""
    composer: RouteComposer = request.app.state.route_composer
    return composer


def get_matching_service(request: Request) -> MatchingService:
    """FastAPI dependency that retrieves the MatchingService from app state."""
    service: MatchingService = request.app.state.matching_service
    return service


def _provider_exception(exc: ProviderError) -> HTTPException:
    return HTTPException(
        status_code=exc.status_code or status.HTTP_502_BAD_GATEWAY,
        detail=str(exc),
    )


@router.post("/route", response_model=RouteResponse, summary="Compose a route")
async def compose_route(
    body: RouteRequest,
    composer: Annotated[RouteComposer, Depends(get_route_composer)],
) -> RouteResponse:
    """Route through the given (latitude, longitude) waypoints in order.

    Args:
        body: The ordered waypoints.
        composer: Injected RouteComposer instance.

    Returns:
        The stitched GeoJSON geometry with distance, duration and elevation gain.
    """
    loop = asyncio.get_running_loop()
    try:
        route = await loop.run_in_executor(None, composer.compose, body.points)
    except InvalidWaypointsError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc

    return RouteResponse.from_route(route)


@router.post("/snap", response_model=SnappedPoint, summary="Snap a point to the road network")
async def snap(
    body: SnapRequest,
    service: Annotated[MatchingService, Depends(get_matching_service)],
) -> SnappedPoint:
    loop = asyncio.get_running_loop()
    try:
        return await loop.run_in_executor(None, service.snap, body.lat, body.lon)
    except ProviderError as exc:
        raise _provider_exception(exc) from exc
    except NoSnapFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc


@router.post("/mapmatch", response_model=MapMatchResponse, summary="Match a trace to roads")
async def map_match(
    body: MapMatchRequest,
    service: Annotated[MatchingService, Depends(get_matching_service)],
) -> MapMatchResponse:
    loop = asyncio.get_running_loop()
    try:
        geometry = await loop.run_in_executor(None, service.match, body.points)
    except InvalidWaypointsError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    except ProviderError as exc:
        raise _provider_exception(exc) from exc
    except NoMatchingFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc

    return MapMatchResponse(geometry=geometry)
