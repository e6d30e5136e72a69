from __future__ import annotations

import os

from stop_direction.adapters.persistence.in_memory_transit_data_store import (
    InMemoryTransitDataStore,
)
from stop_direction.adapters.persistence.local_gtfs_repository import (
    LocalGtfsRepository,
)
from stop_direction.app.services.direction_policies import policy_from_name
from stop_direction.app.services.stop_direction_service import StopDirectionService


def get_stop_direction_service() -> StopDirectionService:
    gtfs_repo = LocalGtfsRepository()
    store = InMemoryTransitDataStore.from_repository(gtfs_repo)

    # Allow switching the multi-trip policy via env without changing code.
    policy = policy_from_name(os.getenv("DIRECTION_POLICY"))

    return StopDirectionService(transit_data_store=store, policy=policy)
