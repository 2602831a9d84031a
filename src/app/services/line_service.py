from __future__ import annotations

import logging
from dataclasses import dataclass

from src.app.ports.output import ILineRepository, IStationRepository
from src.domain.exceptions.records import (
    DuplicateLineError,
    LineNotFoundError,
    StationRecordNotFoundError,
)
from src.domain.models import Line, Station

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LineService:
    """Use cases for lines and their sections.

    Every mutation runs under the line repository lock, so two edits of the
    same line never interleave and graph assembly sees whole edits only.
    Station lookups happen under the same lock that station deletion takes,
    so a line never ends up holding a station that was deleted meanwhile.
    """

    line_repository: ILineRepository
    station_repository: IStationRepository

    def create_line(
        self,
        *,
        name: str,
        color: str,
        up_station_id: int,
        down_station_id: int,
        distance: int,
    ) -> Line:
        with self.line_repository.lock():
            up_station = self._station(up_station_id)
            down_station = self._station(down_station_id)
            if self.line_repository.find_by_name(name) is not None:
                raise DuplicateLineError(f"Line already exists: {name}")

            line = Line(name=name, color=color, id=self.line_repository.next_id())
            line.add_section(up_station, down_station, distance)
            self.line_repository.save(line)

        logger.info(
            "Created line %s (%s): %s -> %s (%s)",
            line.id,
            line.name,
            up_station.name,
            down_station.name,
            distance,
        )
        return line

    def list_lines(self) -> list[Line]:
        return self.line_repository.list_all()

    def get_line(self, *, line_id: int) -> Line:
        line = self.line_repository.get(line_id)
        if line is None:
            raise LineNotFoundError(f"Line not found: {line_id}")
        return line

    def update_line(self, *, line_id: int, name: str, color: str) -> Line:
        with self.line_repository.lock():
            line = self.get_line(line_id=line_id)
            other = self.line_repository.find_by_name(name)
            if other is not None and other is not line:
                raise DuplicateLineError(f"Line already exists: {name}")
            line.update(name=name, color=color)
            self.line_repository.save(line)
        return line

    def delete_line(self, *, line_id: int) -> None:
        with self.line_repository.lock():
            self.get_line(line_id=line_id)
            self.line_repository.delete(line_id)
        logger.info("Deleted line %s", line_id)

    def add_section(
        self,
        *,
        line_id: int,
        up_station_id: int,
        down_station_id: int,
        distance: int,
    ) -> Line:
        with self.line_repository.lock():
            up_station = self._station(up_station_id)
            down_station = self._station(down_station_id)
            line = self.get_line(line_id=line_id)
            line.add_section(up_station, down_station, distance)
            self.line_repository.save(line)

        logger.info(
            "Added section to line %s: %s -> %s (%s)",
            line.name,
            up_station.name,
            down_station.name,
            distance,
        )
        return line

    def remove_station(self, *, line_id: int, station_id: int) -> Line:
        with self.line_repository.lock():
            station = self._station(station_id)
            line = self.get_line(line_id=line_id)
            line.remove_station(station)
            self.line_repository.save(line)

        logger.info("Removed station %s from line %s", station.name, line.name)
        return line

    def _station(self, station_id: int) -> Station:
        station = self.station_repository.get(station_id)
        if station is None:
            raise StationRecordNotFoundError(f"Station not found: {station_id}")
        return station
