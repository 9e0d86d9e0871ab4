"""
Hierarchical (level-based) layout.

Nodes are assigned to levels by a breadth-first walk that starts from every
root (node without incoming edges) at once, then each level is laid out as a
centred horizontal row.
"""

import logging
from collections import deque
from typing import Dict, List

from flowdiagram.core.ir import FlowDiagram, Position

logger = logging.getLogger(__name__)

LEVEL_HEIGHT = 150
NODE_SPACING = 200
TOP_OFFSET = 50


def assign_levels(diagram: FlowDiagram) -> Dict[str, int]:
    """
    Map node ids to their BFS level.

    A node reachable along several paths keeps the level it was first
    dequeued with (roots in store order, children in edge order). Nodes that
    no root can reach, such as the members of a cycle with no entry, are not
    visited and end up at level 0 next to the roots.
    """
    nodes = diagram.nodes
    edges = diagram.edges
    has_incoming = {edge.target_id for edge in edges}
    children: Dict[str, List[str]] = {node.id: [] for node in nodes}
    for edge in edges:
        if edge.source_id in children and edge.target_id in children:
            children[edge.source_id].append(edge.target_id)

    levels: Dict[str, int] = {}
    queue = deque((node.id, 0) for node in nodes if node.id not in has_incoming)
    while queue:
        node_id, level = queue.popleft()
        if node_id in levels:
            continue
        levels[node_id] = level
        for child_id in children[node_id]:
            if child_id not in levels:
                queue.append((child_id, level + 1))

    stranded = [node.id for node in nodes if node.id not in levels]
    if stranded:
        logger.debug(f"{len(stranded)} node(s) unreachable from any root placed at level 0")
    for node_id in stranded:
        levels[node_id] = 0
    return levels


def hierarchical_layout(diagram: FlowDiagram) -> Dict[str, int]:
    """Position nodes in rows by level and return the level mapping."""
    levels = assign_levels(diagram)

    rows: Dict[int, List[str]] = {}
    for node in diagram.nodes:
        rows.setdefault(levels[node.id], []).append(node.id)

    center_x = diagram.options.width / 2
    for level, row in rows.items():
        y = level * LEVEL_HEIGHT + TOP_OFFSET
        for index, node_id in enumerate(row):
            x = (index - (len(row) - 1) / 2) * NODE_SPACING + center_x
            diagram.update_node(node_id, position=Position(x, y))

    return levels


__all__ = ["assign_levels", "hierarchical_layout"]
