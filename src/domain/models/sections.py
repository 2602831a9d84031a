from __future__ import annotations

from typing import Iterable, Iterator

import networkx as nx

from src.domain.algorithms.graph_builder import build_graph
from src.domain.exceptions.sections import (
    LastSectionRemovalError,
    SectionAlreadyExistsError,
    SectionNotConnectedError,
    StationNotInLineError,
)

from .section import Section
from .station import Station


class Sections:
    """All sections of one line, kept as a single simple path.

    The stored list is unordered; travel order is rebuilt from the up/down
    links whenever it is needed. Every successful mutation bumps `version`
    so derived graphs can be cached per line.
    """

    __slots__ = ("_sections", "_version")

    def __init__(self, sections: Iterable[Section] = ()) -> None:
        self._sections: list[Section] = list(sections)
        self._version = 0

    @classmethod
    def empty(cls) -> Sections:
        return cls()

    @classmethod
    def from_sections(cls, sections: Iterable[Section]) -> Sections:
        # Callers are trusted to pass a valid simple path.
        return cls(sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self) -> Iterator[Section]:
        return iter(tuple(self._sections))

    def __repr__(self) -> str:
        names = " -> ".join(s.name for s in self.get_stations())
        return f"Sections({names})"

    @property
    def sections(self) -> tuple[Section, ...]:
        return tuple(self._sections)

    @property
    def version(self) -> int:
        return self._version

    @property
    def total_distance(self) -> int:
        return sum(s.distance for s in self._sections)

    def contains_station(self, station: Station) -> bool:
        return any(station in s.get_stations() for s in self._sections)

    def get_stations(self) -> list[Station]:
        if not self._sections:
            return []

        by_up = {s.up_station: s for s in self._sections}
        by_down = {s.down_station: s for s in self._sections}

        # Walk upstream to the terminus that has no incoming section.
        start = self._sections[0].up_station
        visited = {start}
        while start in by_down:
            start = by_down[start].up_station
            if start in visited:
                break
            visited.add(start)

        stations = [start]
        current = start
        while current in by_up and len(stations) <= len(self._sections):
            current = by_up[current].down_station
            stations.append(current)
        return stations

    def add_station(self, section: Section) -> None:
        stations = self.get_stations()

        if stations:
            self._check_can_add(section, set(stations))
            target = self._find_by_up(section.up_station) or self._find_by_down(
                section.down_station
            )
            if target is not None:
                # divide_by validates before mutating, so a rejected split
                # leaves the collection untouched.
                target.divide_by(section)

        self._sections.append(section)
        self._version += 1

    def remove_station(self, station: Station) -> None:
        if len(self._sections) <= 1:
            raise LastSectionRemovalError(
                "A line must keep at least one section"
            )

        upstream = self._find_by_down(station)
        downstream = self._find_by_up(station)
        if upstream is None and downstream is None:
            raise StationNotInLineError(f"Station is not on this line: {station.name}")

        if upstream is not None and downstream is not None:
            self._sections.append(Section.combine(upstream, downstream))

        for section in (upstream, downstream):
            if section is not None:
                self._sections.remove(section)
        self._version += 1

    def make_graph(self) -> nx.MultiGraph:
        return build_graph([self])

    def _check_can_add(self, section: Section, stations: set[Station]) -> None:
        up_exists = section.up_station in stations
        down_exists = section.down_station in stations

        if up_exists and down_exists:
            raise SectionAlreadyExistsError(
                "Both stations are already on the line: "
                f"{section.up_station.name}, {section.down_station.name}"
            )
        if not up_exists and not down_exists:
            raise SectionNotConnectedError(
                "Neither station is on the line: "
                f"{section.up_station.name}, {section.down_station.name}"
            )

    def _find_by_up(self, station: Station) -> Section | None:
        return next((s for s in self._sections if s.has_up_station(station)), None)

    def _find_by_down(self, station: Station) -> Section | None:
        return next((s for s in self._sections if s.has_down_station(station)), None)
