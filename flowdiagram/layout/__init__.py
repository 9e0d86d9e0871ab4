"""
Automatic layout algorithms.

- hierarchical: BFS levels from root nodes, rows centred on the canvas (default)
- circular: nodes evenly spaced on a circle
- grid: row-major placement into a square-ish grid

Every algorithm overwrites the position of every node and is a pure
function of the current nodes, edges and canvas size.
"""

import logging
from enum import Enum
from typing import Callable, Dict, Union

from flowdiagram.core.errors import UnsupportedLayoutError
from flowdiagram.core.ir import FlowDiagram
from flowdiagram.layout.circular import circular_layout
from flowdiagram.layout.grid import grid_layout
from flowdiagram.layout.hierarchical import assign_levels, hierarchical_layout

logger = logging.getLogger(__name__)


class LayoutAlgorithm(str, Enum):
    HIERARCHICAL = "hierarchical"
    CIRCULAR = "circular"
    GRID = "grid"


_LAYOUTS: Dict[LayoutAlgorithm, Callable[[FlowDiagram], object]] = {
    LayoutAlgorithm.HIERARCHICAL: hierarchical_layout,
    LayoutAlgorithm.CIRCULAR: circular_layout,
    LayoutAlgorithm.GRID: grid_layout,
}


def apply_layout(diagram: FlowDiagram, algorithm: Union[str, LayoutAlgorithm] = LayoutAlgorithm.HIERARCHICAL) -> None:
    """Run a layout algorithm over the whole diagram.

    Raises:
        UnsupportedLayoutError: If ``algorithm`` names no known layout.
    """
    try:
        algorithm = LayoutAlgorithm(algorithm)
    except ValueError:
        choices = ", ".join(a.value for a in LayoutAlgorithm)
        raise UnsupportedLayoutError(f"Unknown layout: {algorithm}. Use: {choices}") from None

    if diagram.is_empty:
        return
    _LAYOUTS[algorithm](diagram)
    logger.debug(f"Applied {algorithm.value} layout to {diagram.node_count} node(s)")


__all__ = [
    "LayoutAlgorithm",
    "apply_layout",
    "assign_levels",
    "circular_layout",
    "grid_layout",
    "hierarchical_layout",
]
