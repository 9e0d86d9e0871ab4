"""
Snapshot serialization for FlowDiagram objects.

A snapshot is a plain dictionary with three keys::

    {"options": {...}, "nodes": [...], "edges": [...]}

Keys use camelCase (``sourceId``, ``backgroundColor``) so snapshots can be
exchanged with other tools. Loading a snapshot re-inserts the stored
entities verbatim: edge endpoints are trusted and not checked against the
loaded nodes (use ``flowdiagram.core.analysis.validate`` for that).
"""

import json
import logging
from typing import Any, Dict

from flowdiagram.core.ir import DiagramOptions, Edge, FlowDiagram, Node

logger = logging.getLogger(__name__)


class JsonSerializer:
    """Serializes and deserializes FlowDiagram snapshots to/from JSON."""

    @staticmethod
    def node_to_dict(node: Node) -> Dict[str, Any]:
        return {
            "id": node.id,
            "label": node.label,
            "type": node.type,
            "position": node.position.to_dict() if node.position is not None else None,
            "style": node.style.to_dict(),
            "data": node.data,
        }

    @staticmethod
    def edge_to_dict(edge: Edge) -> Dict[str, Any]:
        return {
            "id": edge.id,
            "sourceId": edge.source_id,
            "targetId": edge.target_id,
            "label": edge.label,
            "style": edge.style.to_dict(),
            "data": edge.data,
        }

    @staticmethod
    def to_dict(diagram: FlowDiagram) -> Dict[str, Any]:
        return {
            "options": diagram.options.to_dict(),
            "nodes": [JsonSerializer.node_to_dict(node) for node in diagram.nodes],
            "edges": [JsonSerializer.edge_to_dict(edge) for edge in diagram.edges],
        }

    @staticmethod
    def to_json(diagram: FlowDiagram, indent: int = 2) -> str:
        return json.dumps(JsonSerializer.to_dict(diagram), indent=indent)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> FlowDiagram:
        diagram = FlowDiagram(DiagramOptions.from_dict(data.get("options") or {}))

        for node_data in data.get("nodes", []):
            diagram._restore_node(Node(
                node_id=node_data["id"],
                label=node_data.get("label", ""),
                node_type=node_data.get("type"),
                position=node_data.get("position"),
                style=node_data.get("style"),
                data=node_data.get("data"),
            ))

        for edge_data in data.get("edges", []):
            diagram._restore_edge(Edge(
                edge_id=edge_data["id"],
                source_id=edge_data["sourceId"],
                target_id=edge_data["targetId"],
                label=edge_data.get("label"),
                style=edge_data.get("style"),
                data=edge_data.get("data"),
            ))

        logger.debug(f"Loaded snapshot '{diagram.title}' with {diagram.node_count} nodes, {diagram.edge_count} edges")
        return diagram

    @staticmethod
    def from_json(json_str: str) -> FlowDiagram:
        data = json.loads(json_str)
        return JsonSerializer.from_dict(data)
