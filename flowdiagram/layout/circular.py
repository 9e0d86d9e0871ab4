"""
Circular layout.

Places all nodes evenly around a circle centred in the canvas, in store order.
"""

import math

from flowdiagram.core.ir import FlowDiagram, Position

MARGIN = 100


def circular_layout(diagram: FlowDiagram) -> None:
    nodes = diagram.nodes
    n = len(nodes)
    if n == 0:
        return

    cx = diagram.options.width / 2
    cy = diagram.options.height / 2
    radius = min(cx, cy) - MARGIN

    for index, node in enumerate(nodes):
        angle = 2 * math.pi * index / n
        diagram.update_node(
            node.id,
            position=Position(cx + radius * math.cos(angle), cy + radius * math.sin(angle)),
        )


__all__ = ["circular_layout"]
