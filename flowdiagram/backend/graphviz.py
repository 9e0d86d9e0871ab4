import graphviz

from flowdiagram.backend.options import Orientation
from flowdiagram.core.ir import FlowDiagram


class GraphvizExporter:
    """Exports a FlowDiagram to Graphviz/Dot format or renders it."""

    # Node type to shape mapping
    _SHAPES = {
        "start": "ellipse",
        "end": "ellipse",
        "decision": "diamond",
        "condition": "diamond",
        "parallel": "parallelogram",
    }
    _DEFAULT_SHAPE = "box"

    @staticmethod
    def to_digraph(diagram: FlowDiagram, orientation: Orientation = Orientation.VERTICAL) -> graphviz.Digraph:
        """
        Converts a FlowDiagram to a graphviz.Digraph object.

        Node styles are carried over as fill/outline colours. Positions are
        not: Graphviz runs its own layout.
        """
        dot = graphviz.Digraph(name=diagram.title, comment=diagram.title)
        dot.attr(rankdir="LR" if orientation == Orientation.HORIZONTAL else "TB")

        for node in diagram.nodes:
            attrs = {"shape": GraphvizExporter._SHAPES.get(node.type or "", GraphvizExporter._DEFAULT_SHAPE)}
            if node.style.background_color:
                attrs["style"] = "filled"
                attrs["fillcolor"] = node.style.background_color
            if node.style.border_color:
                attrs["color"] = node.style.border_color
            dot.node(node.id, label=node.label, **attrs)

        for edge in diagram.edges:
            attrs = {}
            if edge.style.color:
                attrs["color"] = edge.style.color
            if edge.style.line_style in ("dashed", "dotted"):
                attrs["style"] = edge.style.line_style
            dot.edge(edge.source_id, edge.target_id, label=edge.label or "", **attrs)

        return dot

    @staticmethod
    def to_dot(diagram: FlowDiagram, orientation: Orientation = Orientation.VERTICAL) -> str:
        """Returns the DOT source string for the diagram."""
        return GraphvizExporter.to_digraph(diagram, orientation).source
