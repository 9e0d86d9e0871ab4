"""Structured-data (JSON) output: the full diagram plus descriptive metadata."""

import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from flowdiagram.backend.options import RenderOptions
from flowdiagram.core.ir import FlowDiagram
from flowdiagram.core.serialization import JsonSerializer


class JsonExporter:
    """
    Exports a FlowDiagram as JSON for downstream tools.

    Unlike the snapshot written by ``JsonSerializer`` this carries the title
    at the top level and a ``metadata`` block (counts, generation time,
    requested format and theme). ``nodes`` and ``edges`` use the snapshot
    record layout, so ``parse_diagram_data`` can load the output back.
    """

    @staticmethod
    def to_dict(diagram: FlowDiagram, options: Optional[RenderOptions] = None) -> Dict[str, Any]:
        options = options or RenderOptions(format="json")
        snapshot = JsonSerializer.to_dict(diagram)
        return {
            "title": diagram.title,
            "nodes": snapshot["nodes"],
            "edges": snapshot["edges"],
            "metadata": {
                "nodeCount": diagram.node_count,
                "edgeCount": diagram.edge_count,
                "generatedAt": datetime.now(timezone.utc).isoformat(),
                "format": options.format.value,
                "theme": options.theme.value,
            },
        }

    @staticmethod
    def to_json(diagram: FlowDiagram, options: Optional[RenderOptions] = None, indent: int = 2) -> str:
        return json.dumps(JsonExporter.to_dict(diagram, options), indent=indent)
