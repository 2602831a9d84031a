from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import networkx as nx

from src.app.ports.output import ILineRepository, IStationRepository
from src.domain.algorithms.graph_builder import build_graph
from src.domain.algorithms.path_finder import PathFinder
from src.domain.exceptions.records import StationRecordNotFoundError
from src.domain.models import PathResult, Station

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PathService:
    """Shortest-path queries over every line of the network.

    The combined graph is cached under a key made of each line's id and
    sections version; any edit to any line (or adding/removing a line)
    changes the key and forces a rebuild.
    """

    line_repository: ILineRepository
    station_repository: IStationRepository
    path_finder: PathFinder = field(default_factory=PathFinder)
    cache_enabled: bool = True

    _graph_key: tuple[tuple[Any, int], ...] | None = field(
        default=None, init=False, repr=False
    )
    _graph: nx.MultiGraph | None = field(default=None, init=False, repr=False)

    def find_path(self, *, source_id: int, target_id: int) -> PathResult:
        source = self._station(source_id)
        target = self._station(target_id)
        return self.path_finder.find_path(self.network_graph(), source, target)

    def network_graph(self) -> nx.MultiGraph:
        with self.line_repository.lock():
            lines = self.line_repository.list_all()
            key = tuple((line.id, line.sections.version) for line in lines)

            cached = self._graph
            if self.cache_enabled and cached is not None and key == self._graph_key:
                return cached

            graph = build_graph(line.sections for line in lines)
            if self.cache_enabled:
                self._graph_key = key
                self._graph = graph

        logger.debug(
            "Rebuilt network graph: %d stations, %d sections",
            graph.number_of_nodes(),
            graph.number_of_edges(),
        )
        return graph

    def _station(self, station_id: int) -> Station:
        station = self.station_repository.get(station_id)
        if station is None:
            raise StationRecordNotFoundError(f"Station not found: {station_id}")
        return station
