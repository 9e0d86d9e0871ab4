"""Grid layout: row-major placement into a square-ish grid."""

import math

from flowdiagram.core.ir import FlowDiagram, Position

CELL_SPACING = 150
ORIGIN = (50, 50)


def grid_layout(diagram: FlowDiagram) -> None:
    nodes = diagram.nodes
    if not nodes:
        return

    columns = math.ceil(math.sqrt(len(nodes)))
    for index, node in enumerate(nodes):
        row, col = divmod(index, columns)
        diagram.update_node(
            node.id,
            position=Position(ORIGIN[0] + col * CELL_SPACING, ORIGIN[1] + row * CELL_SPACING),
        )


__all__ = ["grid_layout"]
