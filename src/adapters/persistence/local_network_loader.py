from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path

from src.app.ports.output import ILineRepository, IStationRepository
from src.domain.models import Line, Station

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LocalNetworkLoader:
    """Seeds the repositories from a directory of CSV .txt files.

    Files (header row required):
      - stations.txt: station_id, station_name
      - lines.txt: line_id, line_name, line_color
      - sections.txt: line_id, up_station_id, down_station_id, distance

    Sections are applied in file order through the same insertion rules as
    the API, so each row must extend or split the line built so far.
    Nothing is saved until every row has been applied.
    """

    base_path: str | Path

    def load_into(
        self,
        *,
        station_repository: IStationRepository,
        line_repository: ILineRepository,
    ) -> None:
        base = Path(self.base_path)

        stations_by_key: dict[str, Station] = {}
        with (base / "stations.txt").open("r", encoding="utf-8", newline="") as fp:
            reader = csv.DictReader(fp)
            for row in reader:
                key = (row.get("station_id") or "").strip()
                if not key:
                    continue
                name = (row.get("station_name") or key).strip()
                stations_by_key[key] = Station(
                    name=name, id=station_repository.next_id()
                )

        lines_by_key: dict[str, Line] = {}
        with (base / "lines.txt").open("r", encoding="utf-8", newline="") as fp:
            reader = csv.DictReader(fp)
            for row in reader:
                key = (row.get("line_id") or "").strip()
                if not key:
                    continue
                lines_by_key[key] = Line(
                    name=(row.get("line_name") or key).strip(),
                    color=(row.get("line_color") or "").strip(),
                    id=line_repository.next_id(),
                )

        sections_path = base / "sections.txt"
        if sections_path.exists():
            with sections_path.open("r", encoding="utf-8", newline="") as fp:
                reader = csv.DictReader(fp)
                for row in reader:
                    where = f"{sections_path}:{reader.line_num}"
                    line_key = (row.get("line_id") or "").strip()
                    up_key = (row.get("up_station_id") or "").strip()
                    down_key = (row.get("down_station_id") or "").strip()
                    try:
                        line = lines_by_key[line_key]
                        up_station = stations_by_key[up_key]
                        down_station = stations_by_key[down_key]
                    except KeyError as exc:
                        raise ValueError(
                            f"Unknown id {exc.args[0]!r} at {where}"
                        ) from exc
                    raw_distance = (row.get("distance") or "").strip()
                    try:
                        distance = int(raw_distance)
                    except ValueError as exc:
                        raise ValueError(
                            f"Invalid distance {raw_distance!r} at {where}"
                        ) from exc
                    line.add_section(up_station, down_station, distance)

        for station in stations_by_key.values():
            station_repository.save(station)

        with line_repository.lock():
            for line in lines_by_key.values():
                if len(line.sections) == 0:
                    logger.warning("Skipping line without sections: %s", line.name)
                    continue
                line_repository.save(line)

        logger.info(
            "Loaded network from %s: %d stations, %d lines",
            base,
            len(stations_by_key),
            len(lines_by_key),
        )
