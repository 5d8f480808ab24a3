"""Pydantic schemas for place search."""

from pydantic import BaseModel, ConfigDict, Field


class Place(BaseModel):
    """A normalized place search result."""

    model_config = ConfigDict(populate_by_name=True)

    display_name: str
    lat: float
    lon: float
    boundingbox: tuple[float, float, float, float] | None = None
    type: str | None = None
    place_class: str | None = Field(default=None, alias="class")


class GeocodeResponse(BaseModel):
    """Response schema for the geocode endpoint."""

    results: list[Place]
