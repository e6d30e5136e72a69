from __future__ import annotations

import httpx
import pytest

from stop_direction.adapters.api.dependencies import get_stop_direction_service
from stop_direction.app.services.stop_direction_service import StopDirectionService
from stop_direction.domain.models import GeoPoint, Stop, StopTimeEntry
from stop_direction.main import app


class _FakeTransitDataStore:
    def __init__(self) -> None:
        self.stops = {
            "2000": Stop(
                id="2000", name="Plaza", location=GeoPoint(lat=28.1, lon=-15.4)
            ),
            "2001": Stop(
                id="2001", name="Mercado", location=GeoPoint(lat=28.1, lon=-15.41)
            ),
        }
        self.trips = {
            "T1": (
                StopTimeEntry(trip_id="T1", stop_id="2000", stop_sequence=1),
                StopTimeEntry(trip_id="T1", stop_id="2001", stop_sequence=2),
            )
        }

    def get_stop_by_id(self, stop_id: str) -> Stop | None:
        return self.stops.get(stop_id)

    def get_trips_serving_stop(self, stop_id: str) -> tuple[str, ...]:
        return tuple(
            trip_id
            for trip_id, entries in self.trips.items()
            if any(e.stop_id == stop_id for e in entries)
        )

    def get_stop_time_sequence(self, trip_id: str) -> tuple[StopTimeEntry, ...]:
        return self.trips.get(trip_id, ())


def _override() -> StopDirectionService:
    return StopDirectionService(transit_data_store=_FakeTransitDataStore())


async def _get(path: str, override=_override, **kwargs) -> httpx.Response:
    app.dependency_overrides[get_stop_direction_service] = override
    try:
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(
            transport=transport, base_url="http://test"
        ) as client:
            return await client.get(path, **kwargs)
    finally:
        app.dependency_overrides.clear()


@pytest.mark.unit
@pytest.mark.anyio
async def test_get_stop_returns_direction() -> None:
    resp = await _get("/stops/2000")

    assert resp.status_code == 200
    assert resp.json() == {
        "stop_id": "2000",
        "name": "Plaza",
        "location": {"lat": 28.1, "lon": -15.4},
        "direction": "W",
    }


@pytest.mark.unit
@pytest.mark.anyio
async def test_get_stop_404_for_unknown_stop() -> None:
    resp = await _get("/stops/nonexistent_stop_xyz")

    assert resp.status_code == 404
    assert resp.json()["detail"] == "Stop not found"


@pytest.mark.unit
@pytest.mark.anyio
async def test_terminal_stop_direction_is_unknown() -> None:
    resp = await _get("/stops/2001/direction")

    assert resp.status_code == 200
    assert resp.json() == {"stop_id": "2001", "direction": "unknown"}


@pytest.mark.unit
@pytest.mark.anyio
async def test_unknown_stop_direction_is_unknown_not_404() -> None:
    resp = await _get("/stops/nonexistent_stop_xyz/direction")

    assert resp.status_code == 200
    assert resp.json()["direction"] == "unknown"


@pytest.mark.unit
@pytest.mark.anyio
async def test_batch_directions() -> None:
    resp = await _get(
        "/stops/directions", params=[("stop_id", "2000"), ("stop_id", "x")]
    )

    assert resp.status_code == 200
    assert resp.json() == {"directions": {"2000": "W", "x": "unknown"}}


@pytest.mark.unit
@pytest.mark.anyio
async def test_health() -> None:
    resp = await _get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.unit
@pytest.mark.anyio
async def test_overrides_are_cleared_when_the_request_fails() -> None:
    def _broken() -> StopDirectionService:
        raise RuntimeError("GTFS feed unavailable")

    with pytest.raises(RuntimeError):
        await _get("/stops/2000", override=_broken)

    assert app.dependency_overrides == {}
