"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import requests
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from open_rando.config import Settings
from open_rando.elevation.client import ElevationClient
from open_rando.places.routes import router as places_router
from open_rando.places.service import GeocodeService
from open_rando.routing.composer import RouteComposer
from open_rando.routing.matching import MatchingService
from open_rando.routing.providers import GraphHopperProvider, OsrmProvider
from open_rando.routing.routes import router as routing_router
from open_rando.routing.segment import SegmentRouter

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)


def build_route_composer(settings: Settings, session: requests.Session) -> RouteComposer:
    """Wire the routing fallback chain and elevation client together."""
    router = SegmentRouter(
        [
            OsrmProvider(settings, session),
            GraphHopperProvider(settings, session),
        ]
    )
    return RouteComposer(router, ElevationClient(settings, session))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application startup and shutdown.

    Creates the shared HTTP session and the services on startup and closes
    the session on teardown.
    """
    settings = Settings.from_env()
    session = requests.Session()
    app.state.route_composer = build_route_composer(settings, session)
    app.state.matching_service = MatchingService(settings, session)
    app.state.geocode_service = GeocodeService(settings, session)
    logger.info("Routing services initialized")
    yield
    session.close()
    logger.info("Routing services shut down")


app = FastAPI(title="OpenRando API", lifespan=lifespan)
app.include_router(routing_router)
app.include_router(places_router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report unexpected failures as a server error carrying their message."""
    logger.exception("Unhandled error", extra={"path": request.url.path})
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )
