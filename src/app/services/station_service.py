from __future__ import annotations

import logging
from dataclasses import dataclass

from src.app.ports.output import ILineRepository, IStationRepository
from src.domain.exceptions.records import StationInUseError, StationRecordNotFoundError
from src.domain.models import Station

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StationService:
    station_repository: IStationRepository
    line_repository: ILineRepository

    def create_station(self, *, name: str) -> Station:
        station = Station(name=name.strip(), id=self.station_repository.next_id())
        self.station_repository.save(station)
        logger.info("Created station %s (%s)", station.id, station.name)
        return station

    def list_stations(self) -> list[Station]:
        return self.station_repository.list_all()

    def get_station(self, *, station_id: int) -> Station:
        station = self.station_repository.get(station_id)
        if station is None:
            raise StationRecordNotFoundError(f"Station not found: {station_id}")
        return station

    def delete_station(self, *, station_id: int) -> None:
        with self.line_repository.lock():
            station = self.get_station(station_id=station_id)
            in_use = [
                line.name
                for line in self.line_repository.list_all()
                if line.sections.contains_station(station)
            ]
            if in_use:
                raise StationInUseError(
                    f"Station {station.name} is still used by: {', '.join(in_use)}"
                )
            self.station_repository.delete(station_id)
        logger.info("Deleted station %s (%s)", station.id, station.name)
