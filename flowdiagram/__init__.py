"""
flowdiagram - build flow diagrams programmatically, lay them out and render them.

Main APIs:
- FlowDiagram: In-memory graph store (nodes, edges, options)
- FlowBuilder and the create_* helpers: Convenience construction
- auto_layout / apply_layout: Hierarchical, circular and grid layouts
- render: One entry point for every output format

Backends:
- SvgExporter: Vector drawing with auto-fitted canvas
- HtmlExporter: SVG embedded in a themed HTML page
- MermaidExporter: Mermaid.js flowchart syntax
- GraphvizExporter: Graphviz DOT source
- JsonExporter: Structured data with metadata
- TextExporter: Plain-text summary (importable again)
"""

from flowdiagram.core.ir import DiagramOptions, Edge, EdgeStyle, FlowDiagram, Node, NodeStyle, Position
from flowdiagram.core.errors import (
    FlowDiagramError,
    UnknownNodeError,
    UnrecognizedFormatError,
    UnsupportedFormatError,
    UnsupportedLayoutError,
)
from flowdiagram.core.serialization import JsonSerializer
from flowdiagram.core.analysis import ValidationReport, clone, find_cycles, merge, validate
from flowdiagram.layout import LayoutAlgorithm, apply_layout
from flowdiagram.frontend import (
    FlowBuilder,
    create_branching_flow,
    create_converging_flow,
    create_decision_tree,
    create_linear_flow,
    create_process_flow,
    load_diagram,
    parse_diagram_data,
)
from flowdiagram.backend import (
    GraphvizExporter,
    HtmlExporter,
    JsonExporter,
    MermaidExporter,
    Orientation,
    OutputFormat,
    RenderOptions,
    SvgExporter,
    TextExporter,
    Theme,
    render,
)

__all__ = [
    # Core
    "FlowDiagram",
    "Node",
    "Edge",
    "Position",
    "NodeStyle",
    "EdgeStyle",
    "DiagramOptions",
    "JsonSerializer",
    "ValidationReport",
    "clone",
    "find_cycles",
    "merge",
    "validate",
    # Errors
    "FlowDiagramError",
    "UnknownNodeError",
    "UnrecognizedFormatError",
    "UnsupportedFormatError",
    "UnsupportedLayoutError",
    # Layout
    "LayoutAlgorithm",
    "apply_layout",
    # Frontends
    "FlowBuilder",
    "create_branching_flow",
    "create_converging_flow",
    "create_decision_tree",
    "create_linear_flow",
    "create_process_flow",
    "load_diagram",
    "parse_diagram_data",
    # Backends
    "GraphvizExporter",
    "HtmlExporter",
    "JsonExporter",
    "MermaidExporter",
    "SvgExporter",
    "TextExporter",
    "Orientation",
    "OutputFormat",
    "RenderOptions",
    "Theme",
    "render",
]
