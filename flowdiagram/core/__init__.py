"""Core data structures for flowdiagram diagrams."""

from .errors import (
    FlowDiagramError,
    UnknownNodeError,
    UnrecognizedFormatError,
    UnsupportedFormatError,
    UnsupportedLayoutError,
)
from .ir import (
    NODE_TYPES,
    DiagramOptions,
    Edge,
    EdgeStyle,
    FlowDiagram,
    Neighbors,
    Node,
    NodeStyle,
    Position,
)
from .serialization import JsonSerializer
from .analysis import ValidationReport, clone, find_cycles, merge, validate

__all__ = [
    "NODE_TYPES",
    "DiagramOptions",
    "Edge",
    "EdgeStyle",
    "FlowDiagram",
    "Neighbors",
    "Node",
    "NodeStyle",
    "Position",
    "JsonSerializer",
    "ValidationReport",
    "clone",
    "find_cycles",
    "merge",
    "validate",
    "FlowDiagramError",
    "UnknownNodeError",
    "UnrecognizedFormatError",
    "UnsupportedFormatError",
    "UnsupportedLayoutError",
]
