"""
Plain-text summary of a diagram.

Layout::

    Flow Diagram: <title>
    Nodes: <n>, Edges: <m>

    Nodes:
      - <nodeId>: <label> (<type>)

    Edges:
      - <sourceLabel> -> <targetLabel> (<edgeLabel>)

The ``(<type>)`` and ``(<edgeLabel>)`` suffixes are left out when empty.
Edge endpoints are written as node labels (falling back to the raw id for
a dangling endpoint); ``flowdiagram.frontend.parser`` reads this layout back.
"""

from flowdiagram.core.ir import FlowDiagram


class TextExporter:
    """Exports a FlowDiagram to the plain-text summary layout."""

    @staticmethod
    def to_text(diagram: FlowDiagram) -> str:
        lines = [
            f"Flow Diagram: {diagram.title}",
            f"Nodes: {diagram.node_count}, Edges: {diagram.edge_count}",
            "",
            "Nodes:",
        ]
        for node in diagram.nodes:
            suffix = f" ({node.type})" if node.type else ""
            lines.append(f"  - {node.id}: {node.label}{suffix}")

        lines.append("")
        lines.append("Edges:")
        for edge in diagram.edges:
            source = diagram.get_node(edge.source_id)
            target = diagram.get_node(edge.target_id)
            source_label = source.label if source and source.label else edge.source_id
            target_label = target.label if target and target.label else edge.target_id
            suffix = f" ({edge.label})" if edge.label else ""
            lines.append(f"  - {source_label} -> {target_label}{suffix}")

        return "\n".join(lines) + "\n"
