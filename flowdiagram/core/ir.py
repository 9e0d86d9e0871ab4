import logging
import re
from dataclasses import dataclass, fields, replace
from typing import Any, ClassVar, Dict, List, Mapping, NamedTuple, Optional, Tuple, Union

from flowdiagram.core.errors import UnknownNodeError

logger = logging.getLogger(__name__)

# Type tags that carry layout/rendering meaning. Anything else is kept as-is.
NODE_TYPES = ("start", "end", "process", "decision", "condition", "action", "parallel")

_NODE_FIELDS = ("label", "type", "position", "style", "data")
_EDGE_FIELDS = ("source_id", "target_id", "label", "style", "data")
_NODE_ID_RE = re.compile(r"^node_(\d+)$")
_EDGE_ID_RE = re.compile(r"^edge_(\d+)$")


@dataclass
class Position:
    x: float = 0.0
    y: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Position":
        return cls(x=data.get("x", 0.0), y=data.get("y", 0.0))


PositionLike = Union[Position, Mapping[str, Any], Tuple[float, float]]


class _WireRecord:
    """Dataclass mixin mapping snake_case attributes to camelCase wire keys."""

    _WIRE_KEYS: ClassVar[Dict[str, str]] = {}

    def to_dict(self) -> Dict[str, Any]:
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                result[self._WIRE_KEYS.get(f.name, f.name)] = value
        return result

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]):
        if data is None:
            return cls()
        if isinstance(data, cls):
            return replace(data)
        values = {}
        for f in fields(cls):
            key = cls._WIRE_KEYS.get(f.name, f.name)
            if key in data:
                values[f.name] = data[key]
            elif f.name in data:
                values[f.name] = data[f.name]
        return cls(**values)


@dataclass
class NodeStyle(_WireRecord):
    """Per-node presentation overrides. Unset fields fall back to the theme."""

    _WIRE_KEYS: ClassVar[Dict[str, str]] = {
        "background_color": "backgroundColor",
        "border_color": "borderColor",
        "border_width": "borderWidth",
        "border_radius": "borderRadius",
        "font_size": "fontSize",
        "font_family": "fontFamily",
    }

    color: Optional[str] = None
    background_color: Optional[str] = None
    border_color: Optional[str] = None
    border_width: Optional[float] = None
    border_radius: Optional[float] = None
    font_size: Optional[float] = None
    font_family: Optional[str] = None
    width: Optional[float] = None
    height: Optional[float] = None


@dataclass
class EdgeStyle(_WireRecord):
    """Per-edge presentation overrides."""

    _WIRE_KEYS: ClassVar[Dict[str, str]] = {
        "line_style": "style",
        "arrow_size": "arrowSize",
    }

    color: Optional[str] = None
    width: Optional[float] = None
    line_style: Optional[str] = None  # solid, dashed or dotted
    arrow_size: Optional[float] = None


@dataclass
class DiagramOptions(_WireRecord):
    """Diagram-wide configuration read by the layout engine and renderers."""

    _WIRE_KEYS: ClassVar[Dict[str, str]] = {
        "background_color": "backgroundColor",
        "grid_size": "gridSize",
        "snap_to_grid": "snapToGrid",
    }

    title: str = "Flow Diagram"
    description: Optional[str] = None
    width: float = 800
    height: float = 600
    background_color: str = "#ffffff"
    grid_size: float = 20
    snap_to_grid: bool = True


def _coerce_position(value: Optional[PositionLike]) -> Optional[Position]:
    if value is None or isinstance(value, Position):
        return value
    if isinstance(value, Mapping):
        return Position.from_dict(value)
    x, y = value
    return Position(x, y)


class Node:
    """A labeled vertex of a flow diagram."""

    def __init__(
        self,
        node_id: str,
        label: str,
        node_type: Optional[str] = "default",
        position: Optional[PositionLike] = None,
        style: Union[NodeStyle, Mapping[str, Any], None] = None,
        data: Optional[Dict[str, Any]] = None,
    ):
        self.id = node_id
        self.label = label
        self.type = node_type
        self.position = _coerce_position(position)
        self.style = NodeStyle.from_dict(style)
        self.data = dict(data or {})

    def _set_field(self, name: str, value: Any) -> None:
        if name == "position":
            value = _coerce_position(value)
        elif name == "style":
            value = NodeStyle.from_dict(value)
        elif name == "data":
            value = dict(value or {})
        setattr(self, name, value)

    def __repr__(self):
        return f"<Node id={self.id} label='{self.label}' type={self.type}>"


class Edge:
    """A directed connection between two nodes."""

    def __init__(
        self,
        edge_id: str,
        source_id: str,
        target_id: str,
        label: Optional[str] = None,
        style: Union[EdgeStyle, Mapping[str, Any], None] = None,
        data: Optional[Dict[str, Any]] = None,
    ):
        self.id = edge_id
        self.source_id = source_id
        self.target_id = target_id
        self.label = label
        self.style = EdgeStyle.from_dict(style)
        self.data = dict(data or {})

    def _set_field(self, name: str, value: Any) -> None:
        if name == "style":
            value = EdgeStyle.from_dict(value)
        elif name == "data":
            value = dict(value or {})
        setattr(self, name, value)

    def touches(self, node_id: str) -> bool:
        return self.source_id == node_id or self.target_id == node_id

    def __repr__(self):
        return f"<Edge {self.id}: {self.source_id} -> {self.target_id} label='{self.label}'>"


class Neighbors(NamedTuple):
    incoming: List[Node]
    outgoing: List[Node]


def _check_fields(given: Mapping[str, Any], allowed: Tuple[str, ...], kind: str) -> None:
    unknown = sorted(set(given) - set(allowed))
    if unknown:
        raise TypeError(f"Unknown {kind} field(s): {', '.join(unknown)}")


class FlowDiagram:
    """
    In-memory store for the nodes and edges of one diagram.

    Ids are generated by the store (``node_<n>``, ``edge_<n>``) and are never
    handed out twice, even after the entity they named has been removed.
    Every edge created through the store references nodes that existed at
    creation time; removing a node removes every edge touching it.

    Example:
        diagram = FlowDiagram(DiagramOptions(title="Checkout"))
        a = diagram.add_node("Cart", type="start")
        b = diagram.add_node("Pay")
        diagram.add_edge(a, b, label="next")
        diagram.auto_layout()
    """

    def __init__(self, options: Union[DiagramOptions, Mapping[str, Any], None] = None):
        self.options = DiagramOptions.from_dict(options)
        self._nodes: Dict[str, Node] = {}
        self._edges: Dict[str, Edge] = {}
        self._next_node_id = 1
        self._next_edge_id = 1

    # Nodes

    def add_node(self, label: str, **attrs: Any) -> str:
        """Add a node and return its generated id.

        Accepted fields: ``type``, ``position``, ``style``, ``data``. Fields
        that are not given get defaults (position ``(0, 0)``, type
        ``"default"``, empty style and data).
        """
        _check_fields(attrs, _NODE_FIELDS[1:], "node")
        values: Dict[str, Any] = {"type": "default", "position": Position(0, 0), "style": None, "data": None}
        values.update(attrs)

        node_id = f"node_{self._next_node_id}"
        self._next_node_id += 1
        self._nodes[node_id] = Node(
            node_id,
            label,
            node_type=values["type"],
            position=values["position"],
            style=values["style"],
            data=values["data"],
        )
        return node_id

    def get_node(self, node_id: str) -> Optional[Node]:
        return self._nodes.get(node_id)

    def update_node(self, node_id: str, **updates: Any) -> bool:
        """Replace the given fields of a node. Returns False for an unknown id."""
        _check_fields(updates, _NODE_FIELDS, "node")
        node = self._nodes.get(node_id)
        if node is None:
            return False
        for name, value in updates.items():
            node._set_field(name, value)
        return True

    def remove_node(self, node_id: str) -> bool:
        """Remove a node and every edge where it is the source or target."""
        if node_id not in self._nodes:
            return False
        doomed = [edge.id for edge in self._edges.values() if edge.touches(node_id)]
        for edge_id in doomed:
            del self._edges[edge_id]
        del self._nodes[node_id]
        if doomed:
            logger.debug(f"Removed {node_id} and {len(doomed)} connected edge(s)")
        return True

    @property
    def nodes(self) -> List[Node]:
        return list(self._nodes.values())

    # Edges

    def add_edge(self, source_id: str, target_id: str, **attrs: Any) -> str:
        """Connect two existing nodes and return the new edge id.

        Accepted fields: ``label``, ``style``, ``data``.

        Raises:
            UnknownNodeError: If either endpoint is not a node of this diagram.
        """
        _check_fields(attrs, _EDGE_FIELDS[2:], "edge")
        for endpoint in (source_id, target_id):
            if endpoint not in self._nodes:
                raise UnknownNodeError(endpoint)

        edge_id = f"edge_{self._next_edge_id}"
        self._next_edge_id += 1
        self._edges[edge_id] = Edge(edge_id, source_id, target_id, **attrs)
        return edge_id

    def get_edge(self, edge_id: str) -> Optional[Edge]:
        return self._edges.get(edge_id)

    def update_edge(self, edge_id: str, **updates: Any) -> bool:
        """Replace the given fields of an edge. Returns False for an unknown id.

        Raises:
            UnknownNodeError: If a new endpoint is not a node of this diagram.
        """
        _check_fields(updates, _EDGE_FIELDS, "edge")
        edge = self._edges.get(edge_id)
        if edge is None:
            return False
        for name in ("source_id", "target_id"):
            if name in updates and updates[name] not in self._nodes:
                raise UnknownNodeError(updates[name])
        for name, value in updates.items():
            edge._set_field(name, value)
        return True

    def remove_edge(self, edge_id: str) -> bool:
        return self._edges.pop(edge_id, None) is not None

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges.values())

    # Queries

    def get_node_edges(self, node_id: str) -> List[Edge]:
        return [edge for edge in self._edges.values() if edge.touches(node_id)]

    def get_connected_nodes(self, node_id: str) -> Neighbors:
        incoming: List[Node] = []
        outgoing: List[Node] = []
        for edge in self._edges.values():
            if edge.source_id == node_id and edge.target_id in self._nodes:
                outgoing.append(self._nodes[edge.target_id])
            if edge.target_id == node_id and edge.source_id in self._nodes:
                incoming.append(self._nodes[edge.source_id])
        return Neighbors(incoming, outgoing)

    def auto_layout(self, algorithm: str = "hierarchical") -> None:
        """Position every node with one of the built-in layout algorithms."""
        from flowdiagram.layout import apply_layout

        apply_layout(self, algorithm)

    # Trusted re-insertion used when loading snapshots. No endpoint checks.

    def _restore_node(self, node: Node) -> None:
        self._nodes[node.id] = node
        match = _NODE_ID_RE.match(node.id)
        if match:
            self._next_node_id = max(self._next_node_id, int(match.group(1)) + 1)

    def _restore_edge(self, edge: Edge) -> None:
        self._edges[edge.id] = edge
        match = _EDGE_ID_RE.match(edge.id)
        if match:
            self._next_edge_id = max(self._next_edge_id, int(match.group(1)) + 1)

    @property
    def title(self) -> str:
        return self.options.title or "Flow Diagram"

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def is_empty(self) -> bool:
        return not self._nodes

    def __repr__(self):
        return f"<FlowDiagram '{self.title}' nodes={self.node_count} edges={self.edge_count}>"
