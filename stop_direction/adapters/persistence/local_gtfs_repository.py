from __future__ import annotations

import csv
import io
import logging
import os
import zipfile
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterator

from stop_direction.app.ports.output import IGtfsRepository
from stop_direction.domain.exceptions.transit_data import (
    GtfsFeedNotFound,
    GtfsParseError,
)
from stop_direction.domain.models import GeoPoint, Stop
from stop_direction.domain.models.gtfs import GtfsFeed, StopTimeEntry

logger = logging.getLogger(__name__)


def _clean(row: dict[str, str | None], key: str) -> str:
    return (row.get(key) or "").strip()


@dataclass(slots=True)
class LocalGtfsRepository(IGtfsRepository):
    """Loads a GTFS feed from a directory of .txt files or a .zip archive.

    Env vars:
      - GTFS_PATH: directory or .zip containing stops.txt and stop_times.txt
    """

    base_path: str | Path | None = None

    def _base(self) -> Path:
        value = self.base_path or os.getenv("GTFS_PATH") or "data/gtfs"
        return Path(value)

    @contextmanager
    def _open_table(self, name: str) -> Iterator[IO[str]]:
        base = self._base()
        if base.suffix.lower() == ".zip":
            if not base.is_file():
                raise GtfsFeedNotFound(f"GTFS archive not found: {base}")
            with zipfile.ZipFile(base) as zf:
                if name not in zf.namelist():
                    raise GtfsFeedNotFound(f"{name} missing from {base}")
                with zf.open(name) as raw:
                    # utf-8-sig: some agencies ship a BOM.
                    yield io.TextIOWrapper(raw, encoding="utf-8-sig", newline="")
            return

        path = base / name
        if not path.exists():
            raise GtfsFeedNotFound(f"GTFS file not found: {path}")
        with path.open("r", encoding="utf-8-sig", newline="") as fp:
            yield fp

    def load_feed(self) -> GtfsFeed:
        stops_by_id: dict[str, Stop] = {}
        with self._open_table("stops.txt") as fp:
            for line_no, row in enumerate(csv.DictReader(fp), start=2):
                stop_id = _clean(row, "stop_id")
                if not stop_id:
                    continue
                # Stations and entrances may legitimately omit coordinates.
                if not _clean(row, "stop_lat") and not _clean(row, "stop_lon"):
                    logger.debug("Skipping stop %s without coordinates", stop_id)
                    continue
                try:
                    location = GeoPoint(
                        lat=float(_clean(row, "stop_lat")),
                        lon=float(_clean(row, "stop_lon")),
                    )
                except ValueError as exc:
                    raise GtfsParseError(
                        f"stops.txt line {line_no}: bad coordinates for stop {stop_id}"
                    ) from exc
                name = _clean(row, "stop_name") or stop_id
                stops_by_id[stop_id] = Stop(id=stop_id, name=name, location=location)

        grouped: dict[str, list[StopTimeEntry]] = {}
        with self._open_table("stop_times.txt") as fp:
            for line_no, row in enumerate(csv.DictReader(fp), start=2):
                trip_id = _clean(row, "trip_id")
                stop_id = _clean(row, "stop_id")
                if not trip_id or not stop_id:
                    continue
                try:
                    seq = int(_clean(row, "stop_sequence"))
                except ValueError as exc:
                    raise GtfsParseError(
                        f"stop_times.txt line {line_no}: bad stop_sequence"
                        f" for trip {trip_id}"
                    ) from exc
                grouped.setdefault(trip_id, []).append(
                    StopTimeEntry(trip_id=trip_id, stop_id=stop_id, stop_sequence=seq)
                )

        stop_times_by_trip: dict[str, tuple[StopTimeEntry, ...]] = {}
        for trip_id, entries in grouped.items():
            entries.sort(key=lambda e: e.stop_sequence)
            stop_times_by_trip[trip_id] = tuple(entries)

        logger.info(
            "Loaded GTFS feed from %s: %d stops, %d trips with stop times",
            self._base(),
            len(stops_by_id),
            len(stop_times_by_trip),
        )

        return GtfsFeed(
            stops_by_id=stops_by_id,
            stop_times_by_trip=stop_times_by_trip,
        )
