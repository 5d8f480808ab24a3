"""Pydantic schemas for elevation samples and the elevation provider."""

from pydantic import BaseModel, ConfigDict, Field


class ElevationResult(BaseModel):
    """Elevation data for a single coordinate pair, as the provider returns it."""

    latitude: float
    longitude: float
    elevation: float = Field(allow_inf_nan=False)


class LookupResponse(BaseModel):
    """Response schema of the elevation provider's lookup endpoint."""

    results: list[ElevationResult]


class ElevationSample(BaseModel):
    """Elevation at one index of the stitched coordinate sequence."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0)
    elevation: float
