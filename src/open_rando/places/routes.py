"""API routes for place search."""

import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from open_rando.exceptions import ProviderError
from open_rando.places.schemas import GeocodeResponse
from open_rando.places.service import GeocodeService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["places"])


def get_geocode_service(request: Request) -> GeocodeService:
    """FastAPI dependency that retrieves the GeocodeService from app state."""
    service: GeocodeService = request.app.state.geocode_service
    return service


@router.get("/geocode", response_model=GeocodeResponse, summary="Search for places")
async def geocode(
    service: Annotated[GeocodeService, Depends(get_geocode_service)],
    q: Annotated[str | None, Query()] = None,
) -> GeocodeResponse | JSONResponse:
    """Search places by free text.

    Provider errors never fail the request: the response is an empty result
    list, carrying the upstream status when there is one.
    """
    loop = asyncio.get_running_loop()
    try:
        places = await loop.run_in_executor(None, service.search, q)
    except ProviderError as exc:
        logger.warning("Geocode lookup failed", extra={"error": str(exc)})
        return JSONResponse(
            status_code=exc.status_code or status.HTTP_200_OK,
            content={"results": []},
        )

    return GeocodeResponse(results=places)
