"""ExportService — road network export via NetworkX.

Read-only: exports never write snapshot files.
"""

from __future__ import annotations

import json

import networkx as nx

from roadledger.domain.types import ErrorCode
from roadledger.infrastructure.graph_engine import GraphEngine
from roadledger.services.base import BaseService
from roadledger.services.result import ServiceError, ServiceResult

GRAPH_FORMATS = ("dot", "json")


def _dot_escape(label: str) -> str:
    """Escape a DOT quoted string: backslashes first, then quotes and newlines."""
    return label.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


class ExportService(BaseService):
    """Exports the current network in graph formats."""

    def export_graph(self, *, fmt: str = "dot") -> ServiceResult:
        """Export the road network.

        Formats:
        - ``dot``: Graphviz DOT language (undirected ``--`` edges)
        - ``json``: D3-compatible ``{"nodes": [...], "links": [...]}``

        Returns the content as a string in ``data["content"]``.
        """
        fmt = fmt.lower()
        if fmt not in GRAPH_FORMATS:
            return ServiceResult(
                ok=False,
                op="export_graph",
                error=ServiceError(
                    code=str(ErrorCode.INVALID_FORMAT),
                    message=f"Unknown graph format: {fmt}",
                    detail={"format": fmt, "valid": list(GRAPH_FORMATS)},
                ),
            )

        g = GraphEngine(self._network.view()).graph
        content = self._to_dot(g) if fmt == "dot" else self._to_d3_json(g)
        return ServiceResult(
            ok=True,
            op="export_graph",
            data={
                "format": fmt,
                "content": content,
                "node_count": g.number_of_nodes(),
                "edge_count": g.number_of_edges(),
            },
        )

    @staticmethod
    def _to_dot(g: nx.Graph) -> str:
        lines = ["graph roads {", "  node [shape=box];"]
        for index, attrs in g.nodes(data=True):
            safe_name = _dot_escape(str(attrs.get("name", index)))
            lines.append(f'  {index} [label="{safe_name}"];')
        for u, v, attrs in g.edges(data=True):
            lines.append(f'  {u} -- {v} [label="{attrs.get("budget", 0.0):g}"];')
        lines.append("}")
        return "\n".join(lines) + "\n"

    @staticmethod
    def _to_d3_json(g: nx.Graph) -> str:
        nodes = [
            {"id": index, "name": attrs.get("name", "")} for index, attrs in g.nodes(data=True)
        ]
        links = [
            {"source": u, "target": v, "budget": attrs.get("budget", 0.0)}
            for u, v, attrs in g.edges(data=True)
        ]
        return json.dumps({"nodes": nodes, "links": links}, indent=2) + "\n"
