from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

import networkx as nx

if TYPE_CHECKING:
    from src.domain.models.section import Section
    from src.domain.models.sections import Sections


def add_sections(graph: nx.MultiGraph, sections: Iterable[Section]) -> None:
    """Add one weighted edge per section (and its two stations) to `graph`."""

    for section in sections:
        graph.add_node(section.up_station)
        graph.add_node(section.down_station)
        graph.add_edge(
            section.up_station,
            section.down_station,
            weight=section.distance,
            line=section.line,
        )


def build_graph(collections: Iterable[Sections]) -> nx.MultiGraph:
    """Build the read-only network graph from every line's sections.

    Edges are undirected: a section can be ridden in either direction.
    Parallel sections between the same stations stay separate edges.
    """

    graph = nx.MultiGraph()
    for sections in collections:
        add_sections(graph, sections)
    return nx.freeze(graph)
