"""Diagnostics and whole-diagram operations built on the FlowDiagram API."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Set, Union

from flowdiagram.core.ir import FlowDiagram, Position
from flowdiagram.core.serialization import JsonSerializer

logger = logging.getLogger(__name__)


@dataclass
class ValidationReport:
    is_valid: bool
    errors: List[str] = field(default_factory=list)


def validate(diagram: Union[FlowDiagram, Mapping[str, Any]]) -> ValidationReport:
    """
    Collect structural problems in a diagram without changing it.

    Reports edges whose source or target node is missing, and node or edge
    ids that occur more than once. A raw snapshot mapping can be checked as
    well; duplicate ids can only show up there because a loaded store keys
    entities by id.
    """
    if isinstance(diagram, FlowDiagram):
        snapshot = JsonSerializer.to_dict(diagram)
    else:
        snapshot = diagram
    nodes = snapshot.get("nodes") or []
    edges = snapshot.get("edges") or []
    node_ids = {node.get("id") for node in nodes}
    errors: List[str] = []

    for edge in edges:
        if edge.get("sourceId") not in node_ids:
            errors.append(f"Edge {edge.get('id')} references non-existent source node {edge.get('sourceId')}")
        if edge.get("targetId") not in node_ids:
            errors.append(f"Edge {edge.get('id')} references non-existent target node {edge.get('targetId')}")

    for kind, entities in (("node", nodes), ("edge", edges)):
        seen: Set[str] = set()
        for entity in entities:
            entity_id = entity.get("id")
            if entity_id in seen:
                errors.append(f"Duplicate {kind} ID: {entity_id}")
            seen.add(entity_id)

    return ValidationReport(is_valid=not errors, errors=errors)


def find_cycles(diagram: FlowDiagram) -> List[List[str]]:
    """
    Return the node id paths of the cycles met by a depth-first walk.

    Walks start from each unvisited node in store order and follow edges in
    edge order. The walk keeps its own stack, so long chains are fine.
    """
    children: Dict[str, List[str]] = {node.id: [] for node in diagram.nodes}
    for edge in diagram.edges:
        if edge.source_id in children and edge.target_id in children:
            children[edge.source_id].append(edge.target_id)

    visited: Set[str] = set()
    cycles: List[List[str]] = []

    for root in children:
        if root in visited:
            continue
        visited.add(root)
        path = [root]
        on_path = {root}
        stack = [iter(children[root])]
        while stack:
            child = next(stack[-1], None)
            if child is None:
                stack.pop()
                on_path.discard(path.pop())
            elif child in on_path:
                cycles.append(path[path.index(child):])
            elif child not in visited:
                visited.add(child)
                path.append(child)
                on_path.add(child)
                stack.append(iter(children[child]))
    return cycles


def clone(diagram: FlowDiagram) -> FlowDiagram:
    return JsonSerializer.from_dict(JsonSerializer.to_dict(diagram))


def merge(
    first: FlowDiagram,
    second: FlowDiagram,
    connect_ends: bool = False,
    offset: Optional[Position] = None,
) -> FlowDiagram:
    """
    Combine two diagrams into a new one.

    The result starts as a copy of ``first``; nodes of ``second`` are added
    with fresh ids (shifted by ``offset`` when they carry a position) and its
    edges are re-pointed at those ids. With ``connect_ends`` the first node
    of ``first`` without outgoing edges is linked to the first node copied
    from ``second`` without incoming edges.
    """
    merged = clone(first)
    offset = offset or Position(0, 0)
    sinks = [node.id for node in first.nodes if not first.get_connected_nodes(node.id).outgoing]

    id_map: Dict[str, str] = {}
    for node in second.nodes:
        position = None
        if node.position is not None:
            position = Position(node.position.x + offset.x, node.position.y + offset.y)
        id_map[node.id] = merged.add_node(
            node.label,
            type=node.type,
            position=position,
            style=node.style.to_dict(),
            data=node.data,
        )

    for edge in second.edges:
        if edge.source_id not in id_map or edge.target_id not in id_map:
            logger.warning(f"Skipping dangling edge {edge.id} while merging")
            continue
        merged.add_edge(
            id_map[edge.source_id],
            id_map[edge.target_id],
            label=edge.label,
            style=edge.style.to_dict(),
            data=edge.data,
        )

    if connect_ends:
        sources = [id_map[node.id] for node in second.nodes if not second.get_connected_nodes(node.id).incoming]
        if sinks and sources:
            merged.add_edge(sinks[0], sources[0])
        else:
            logger.warning("connect_ends requested but no sink/source pair was found")

    return merged
