from __future__ import annotations

from typing import TYPE_CHECKING, Any

import networkx as nx

from src.domain.exceptions.routing import NoPathFound, StationNotFoundError
from src.domain.models.path import PathResult

if TYPE_CHECKING:
    from src.domain.models.station import Station


def _label(station: Any) -> str:
    return str(getattr(station, "name", station))


def find_shortest_path(graph: nx.Graph, source: Station, target: Station) -> PathResult:
    """Shortest path by summed section distance (Dijkstra).

    A query whose source is its target returns that single station with
    distance 0. Between parallel edges the lightest one is used.
    """

    for station in (source, target):
        if station not in graph:
            raise StationNotFoundError(
                f"Station is not on any line: {_label(station)}"
            )

    try:
        distance, nodes = nx.single_source_dijkstra(
            graph, source, target, weight="weight"
        )
    except nx.NetworkXNoPath as exc:
        raise NoPathFound(
            f"No route between {_label(source)} and {_label(target)}"
        ) from exc

    return PathResult(stations=tuple(nodes), distance=int(distance))


class PathFinder:
    """Stateless shortest-path finder; one instance may serve concurrent queries."""

    def find_path(
        self, graph: nx.Graph, source: Station, target: Station
    ) -> PathResult:
        return find_shortest_path(graph, source, target)
