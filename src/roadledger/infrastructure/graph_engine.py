"""GraphEngine — lazy-built NetworkX graph from a NetworkView.

Built per view, never cached across mutations: a new view means a new
engine. Only the export commands need it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

import networkx as nx

if TYPE_CHECKING:
    from roadledger.domain.view import NetworkView

_Graph: TypeAlias = nx.Graph


class GraphEngine:
    """Undirected NetworkX graph over city indices."""

    def __init__(self, view: NetworkView) -> None:
        self._view = view
        self._graph: _Graph | None = None

    @property
    def graph(self) -> _Graph:
        """Return the graph, building it from the view on first access."""
        if self._graph is None:
            self._graph = self._build()
        return self._graph

    def _build(self) -> _Graph:
        """Add every city first (so isolated cities appear), then every road."""
        g: _Graph = nx.Graph()
        for city in self._view.cities:
            g.add_node(city.index, name=city.name)
        for road in self._view.iter_roads():
            g.add_edge(road.first.index, road.second.index, budget=road.budget)
        return g
