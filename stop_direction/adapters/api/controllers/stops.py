from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from stop_direction.adapters.api.dependencies import get_stop_direction_service
from stop_direction.adapters.api.schemas.stops import (
    GeoPointSchema,
    StopDirectionSchema,
    StopDirectionsResponseSchema,
    StopSchema,
)
from stop_direction.app.services.stop_direction_service import StopDirectionService

router = APIRouter(prefix="/stops", tags=["stops"])


# Registered before /{stop_id} so "directions" is not taken for a stop id.
@router.get("/directions", response_model=StopDirectionsResponseSchema)
def list_directions(
    stop_id: list[str] = Query(default=[]),
    service: StopDirectionService = Depends(get_stop_direction_service),
) -> StopDirectionsResponseSchema:
    directions = service.resolve_directions(stop_id)
    return StopDirectionsResponseSchema(
        directions={sid: d.value for sid, d in directions.items()}
    )


@router.get("/{stop_id}", response_model=StopSchema)
def get_stop(
    stop_id: str,
    service: StopDirectionService = Depends(get_stop_direction_service),
) -> StopSchema:
    described = service.describe_stop(stop_id)
    if described is None:
        raise HTTPException(status_code=404, detail="Stop not found")
    stop = described.stop
    return StopSchema(
        stop_id=stop.id,
        name=stop.name,
        location=GeoPointSchema(lat=stop.location.lat, lon=stop.location.lon),
        direction=described.direction.value,
    )


@router.get("/{stop_id}/direction", response_model=StopDirectionSchema)
def get_stop_direction(
    stop_id: str,
    service: StopDirectionService = Depends(get_stop_direction_service),
) -> StopDirectionSchema:
    direction = service.resolve_direction(stop_id)
    return StopDirectionSchema(stop_id=stop_id, direction=direction.value)
