from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass, field

from src.app.ports.output import IStationRepository
from src.domain.models import Station


@dataclass(slots=True)
class InMemoryStationRepository(IStationRepository):
    """Process-local station store with auto-increment ids."""

    _stations: dict[int, Station] = field(default_factory=dict)
    _ids: itertools.count = field(default_factory=lambda: itertools.count(1))
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def next_id(self) -> int:
        with self._lock:
            return next(self._ids)

    def save(self, station: Station) -> Station:
        if station.id is None:
            raise ValueError("Station must have an id before it is saved")
        with self._lock:
            self._stations[station.id] = station
        return station

    def get(self, station_id: int) -> Station | None:
        return self._stations.get(station_id)

    def list_all(self) -> list[Station]:
        with self._lock:
            return sorted(self._stations.values(), key=lambda s: s.id or 0)

    def delete(self, station_id: int) -> None:
        with self._lock:
            self._stations.pop(station_id, None)
