from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

DirectionToken = Literal["N", "NE", "E", "SE", "S", "SW", "W", "NW", "unknown"]


class GeoPointSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)


class StopSchema(BaseModel):
    stop_id: str
    name: str
    location: GeoPointSchema
    direction: DirectionToken


class StopDirectionSchema(BaseModel):
    stop_id: str
    direction: DirectionToken


class StopDirectionsResponseSchema(BaseModel):
    directions: dict[str, DirectionToken]
