from __future__ import annotations

from dataclasses import dataclass

from .station import Station


@dataclass(frozen=True, slots=True)
class PathResult:
    """Stations from source to target (inclusive) and the summed distance."""

    stations: tuple[Station, ...]
    distance: int

    @property
    def source(self) -> Station:
        return self.stations[0]

    @property
    def target(self) -> Station:
        return self.stations[-1]

    @property
    def station_names(self) -> list[str]:
        return [s.name for s in self.stations]
