"""
flowdiagram frontend modules for building and importing diagrams.

- FlowBuilder: Imperative API for manual diagram construction
- shapes: Constructors for linear, branching, converging, decision-tree and process flows
- parser: Import from snapshots, JSON text or the plain-text summary
"""

from .builder import FlowBuilder
from .parser import ParsedDiagram, load_diagram, parse_diagram_data, parse_text_format
from .shapes import (
    create_branching_flow,
    create_converging_flow,
    create_decision_tree,
    create_linear_flow,
    create_process_flow,
)

__all__ = [
    "FlowBuilder",
    "ParsedDiagram",
    "load_diagram",
    "parse_diagram_data",
    "parse_text_format",
    "create_branching_flow",
    "create_converging_flow",
    "create_decision_tree",
    "create_linear_flow",
    "create_process_flow",
]
