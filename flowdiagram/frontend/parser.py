"""
Import of diagram data from snapshots, JSON text or the text summary.

``parse_diagram_data`` only recognises the input; ``load_diagram`` applies
the recognised nodes and edges to a diagram through the normal store API.

The text summary names edge endpoints by node label. Labels are mapped back
to ids in the order the node lines appear, so when two nodes share a label
the one listed last wins.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from flowdiagram.core.errors import UnrecognizedFormatError
from flowdiagram.core.ir import FlowDiagram

logger = logging.getLogger(__name__)

_NODE_LINE = re.compile(r"^- (\w+): (.+?)(?: \(([^()]*)\))?$")
_EDGE_LINE = re.compile(r"^- (.+?) -> (.+?)(?: \(([^()]*)\))?$")
_FORMATS = ("auto", "json", "text")


@dataclass
class ParsedDiagram:
    """Node and edge records recovered from external data (wire-key dicts)."""

    nodes: List[Dict[str, Any]] = field(default_factory=list)
    edges: List[Dict[str, Any]] = field(default_factory=list)
    options: Optional[Dict[str, Any]] = None
    title: Optional[str] = None


def _from_mapping(data: Mapping[str, Any]) -> Optional[ParsedDiagram]:
    if "nodes" not in data and "edges" not in data:
        return None
    options = data.get("options")
    title = data.get("title") or (options or {}).get("title")
    return ParsedDiagram(
        nodes=list(data.get("nodes") or []),
        edges=list(data.get("edges") or []),
        options=dict(options) if options else None,
        title=title,
    )


def parse_text_format(text: str) -> ParsedDiagram:
    """
    Parse the layout written by ``TextExporter``.

    Node lines without a ``(type)`` suffix get the type ``process``. Edge
    endpoints are resolved through the labels seen in the Nodes section;
    an endpoint matching no label is kept verbatim. A trailing ``(...)`` on
    an edge line is read as part of the target when that yields a known
    node label, otherwise as the edge label. Type and edge-label suffixes
    cannot themselves contain parentheses.

    Raises:
        UnrecognizedFormatError: If the text has no title line and no
            Nodes/Edges section.
    """
    parsed = ParsedDiagram()
    section = None
    recognised = False
    label_to_id: Dict[str, str] = {}

    for line in text.splitlines():
        stripped = line.strip()

        if stripped.startswith("Flow Diagram:"):
            parsed.title = stripped[len("Flow Diagram:"):].strip() or None
            recognised = True
            continue
        if stripped in ("Nodes:", "Edges:"):
            section = stripped[:-1].lower()
            recognised = True
            continue
        if not stripped.startswith("-"):
            continue

        if section == "nodes":
            match = _NODE_LINE.match(stripped)
            if match:
                node_id, label, node_type = match.groups()
                label = label.strip()
                parsed.nodes.append({"id": node_id, "label": label, "type": node_type or "process"})
                label_to_id[label] = node_id
        elif section == "edges":
            match = _EDGE_LINE.match(stripped)
            if match:
                source, target, edge_label = match.groups()
                full_target = f"{target.strip()} ({edge_label})"
                if edge_label is not None and full_target in label_to_id:
                    target, edge_label = full_target, None
                parsed.edges.append({
                    "sourceId": label_to_id.get(source.strip(), source.strip()),
                    "targetId": label_to_id.get(target.strip(), target.strip()),
                    "label": edge_label,
                })

    if not recognised:
        raise UnrecognizedFormatError(
            "Unable to parse diagram data. Expected JSON with nodes/edges or text format."
        )
    return parsed


def parse_diagram_data(data: Union[str, Mapping[str, Any]], fmt: str = "auto") -> ParsedDiagram:
    """
    Recognise diagram data given as a mapping, JSON text or text summary.

    Args:
        data: A snapshot-like mapping, or a string holding JSON or the text summary.
        fmt: ``auto`` tries JSON then text; ``json`` or ``text`` force one.

    Raises:
        UnrecognizedFormatError: If the data matches none of the accepted shapes.
    """
    if fmt not in _FORMATS:
        raise ValueError(f"Unknown input format: {fmt}. Use: {', '.join(_FORMATS)}")

    if isinstance(data, Mapping):
        parsed = _from_mapping(data)
        if parsed is not None:
            return parsed
    elif isinstance(data, str):
        if fmt in ("auto", "json"):
            try:
                loaded = json.loads(data)
            except json.JSONDecodeError:
                loaded = None
            if isinstance(loaded, Mapping):
                parsed = _from_mapping(loaded)
                if parsed is not None:
                    return parsed
        if fmt in ("auto", "text"):
            return parse_text_format(data)

    raise UnrecognizedFormatError("Unable to parse diagram data. Expected JSON with nodes/edges or text format.")


def load_diagram(parsed: ParsedDiagram, diagram: Optional[FlowDiagram] = None, merge: bool = False) -> FlowDiagram:
    """
    Apply parsed records to a diagram and return it.

    Without a target diagram a new one is created from the parsed options.
    With a target and ``merge=False`` its content is replaced; with
    ``merge=True`` nodes whose label already exists are updated in place
    and the rest are added. Store ids are always generated afresh; edges are
    re-pointed through the parsed ids (or labels) and skipped when an
    endpoint cannot be resolved.
    """
    if diagram is None:
        diagram = FlowDiagram(parsed.options)
    elif not merge:
        for node in diagram.nodes:
            diagram.remove_node(node.id)
    if parsed.title and not merge:
        diagram.options.title = parsed.title

    existing = {node.label: node.id for node in diagram.nodes} if merge else {}
    id_map: Dict[str, str] = {}

    for record in parsed.nodes:
        label = record.get("label") or record.get("name") or "Unnamed"
        fields = {name: record[name] for name in ("position", "style", "data") if record.get(name) is not None}
        if merge and label in existing:
            node_id = existing[label]
            if record.get("type"):
                fields["type"] = record["type"]
            diagram.update_node(node_id, **fields)
        else:
            node_id = diagram.add_node(label, type=record.get("type") or "process", **fields)
        id_map[record.get("id") or label] = node_id

    for record in parsed.edges:
        source = id_map.get(record.get("sourceId"), record.get("sourceId"))
        target = id_map.get(record.get("targetId"), record.get("targetId"))
        if diagram.get_node(source) is None or diagram.get_node(target) is None:
            logger.warning(f"Skipping edge {source} -> {target}: endpoint not found")
            continue
        fields = {name: record[name] for name in ("label", "style", "data") if record.get(name) is not None}
        diagram.add_edge(source, target, **fields)

    logger.debug(f"Loaded {len(parsed.nodes)} node record(s), {len(parsed.edges)} edge record(s) into '{diagram.title}'")
    return diagram
