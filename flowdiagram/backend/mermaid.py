import re

from flowdiagram.core.ir import FlowDiagram


class MermaidExporter:
    """Exports a FlowDiagram to Mermaid.js flowchart syntax."""

    # Mermaid shape brackets by node type; anything not listed is a rectangle.
    _SHAPES = {
        "decision": ("{{", "}}"),  # Hexagon
        "end": ("[(", ")]"),       # Cylinder
        "start": ("[", "]"),
    }
    _DEFAULT_SHAPE = ("[", "]")

    @staticmethod
    def _sanitize_id(node_id: str) -> str:
        """Mermaid ids may only contain letters, digits and underscores."""
        return re.sub(r"[^A-Za-z0-9]", "_", node_id)

    @staticmethod
    def _sanitize_label(text: str) -> str:
        return text.replace('"', '\\"')

    @staticmethod
    def _format_node(node_id: str, label: str, node_type: str) -> str:
        left, right = MermaidExporter._SHAPES.get(node_type, MermaidExporter._DEFAULT_SHAPE)
        return f"{node_id}{left}{label}{right}"

    @staticmethod
    def to_mermaid(diagram: FlowDiagram, direction: str = "TD") -> str:
        """
        Convert a diagram to Mermaid syntax.

        One declaration line per node, then one arrow line per edge, in store
        order. Labeled edges use the ``A -->|label| B`` form.

        Args:
            diagram: The diagram to convert
            direction: Graph direction (TD, LR, etc.)
        """
        lines = [f"graph {direction}"]

        for node in diagram.nodes:
            node_id = MermaidExporter._sanitize_id(node.id)
            label = MermaidExporter._sanitize_label(node.label)
            lines.append("    " + MermaidExporter._format_node(node_id, label, node.type or "default"))

        for edge in diagram.edges:
            source = MermaidExporter._sanitize_id(edge.source_id)
            target = MermaidExporter._sanitize_id(edge.target_id)
            label = f"|{edge.label}|" if edge.label else ""
            lines.append(f"    {source} -->{label} {target}")

        return "\n".join(lines) + "\n"
