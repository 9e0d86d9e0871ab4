"""Imperative FlowBuilder for manual diagram construction."""

from typing import Any, Dict, Optional

from flowdiagram.core.ir import DiagramOptions, FlowDiagram


class FlowBuilder:
    """
    Imperative API for building diagrams by adding typed nodes and edges.

    Example:
        builder = FlowBuilder("My Flow")
        start = builder.start("Begin")
        proc = builder.action("Do something")
        end = builder.end("Done")
        builder.connect(start, proc)
        builder.connect(proc, end)
        diagram = builder.build(layout="hierarchical")
    """

    def __init__(self, title: str = "Flow Diagram"):
        self.diagram = FlowDiagram(DiagramOptions(title=title))
        self.last_node: Optional[str] = None

    def _add(self, label: str, node_type: str, description: Optional[str], style: Optional[Dict[str, Any]]) -> str:
        data = {"description": description} if description else {}
        node_id = self.diagram.add_node(label, type=node_type, data=data, style=style)
        self.last_node = node_id
        return node_id

    def start(self, label: str = "Start", description: Optional[str] = None, style: Optional[Dict[str, Any]] = None) -> str:
        return self._add(label, "start", description, style)

    def action(self, label: str, description: Optional[str] = None, style: Optional[Dict[str, Any]] = None) -> str:
        return self._add(label, "process", description, style)

    def decision(self, label: str, description: Optional[str] = None, style: Optional[Dict[str, Any]] = None) -> str:
        return self._add(label, "decision", description, style)

    def end(self, label: str = "End", description: Optional[str] = None, style: Optional[Dict[str, Any]] = None) -> str:
        return self._add(label, "end", description, style)

    def connect(self, source: str, target: str, label: Optional[str] = None) -> str:
        return self.diagram.add_edge(source, target, label=label)

    def then(self, label: str, node_type: str = "process", edge_label: Optional[str] = None) -> str:
        """Add a node and connect the previously added node to it."""
        previous = self.last_node
        node_id = self._add(label, node_type, None, None)
        if previous is not None:
            self.connect(previous, node_id, label=edge_label)
        return node_id

    def build(self, layout: Optional[str] = None) -> FlowDiagram:
        if layout:
            self.diagram.auto_layout(layout)
        return self.diagram
