"""
Shared geometry for the drawing backends (SVG and HTML).

Turns a positioned diagram into boxes and segments in canvas coordinates:

1. Node sizes are estimated from the label text unless the node style pins
   an explicit width/height.
2. A horizontal orientation swaps every node's x/y so levels run left to
   right instead of top to bottom.
3. The canvas is fitted around all node boxes with a padding margin and a
   minimum size, and every coordinate is shifted so nothing is clipped.
4. Edges become straight centre-to-centre segments with a triangular
   arrowhead at the target end.

Text metrics are estimates: no font is loaded.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from flowdiagram.core.ir import Edge, FlowDiagram, Node

logger = logging.getLogger(__name__)

DEFAULT_FONT_SIZE = 14
DEFAULT_FONT_FAMILY = "Arial, sans-serif"
CHAR_WIDTH_FACTOR = 0.55
MONOSPACE_CHAR_WIDTH_FACTOR = 0.6

MIN_NODE_WIDTH = 100
MIN_NODE_HEIGHT = 50
NODE_PADDING_X = 40
NODE_PADDING_Y = 20
WRAP_INSET = 20
LINE_PITCH_EXTRA = 8

CANVAS_PADDING = 100
MIN_CANVAS_WIDTH = 800
MIN_CANVAS_HEIGHT = 600

DEFAULT_ARROW_SIZE = 10

Point = Tuple[float, float]


def fmt(value: float) -> str:
    """Format a coordinate for markup: at most two decimals, no trailing zeros."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def char_width(font_size: float = DEFAULT_FONT_SIZE, font_family: str = DEFAULT_FONT_FAMILY) -> float:
    factor = MONOSPACE_CHAR_WIDTH_FACTOR if "monospace" in font_family else CHAR_WIDTH_FACTOR
    return font_size * factor


def estimate_text_width(text: str, font_size: float = DEFAULT_FONT_SIZE, font_family: str = DEFAULT_FONT_FAMILY) -> float:
    return len(text) * char_width(font_size, font_family)


def wrap_label(label: str, width: float, font_size: float = DEFAULT_FONT_SIZE,
               font_family: str = DEFAULT_FONT_FAMILY) -> List[str]:
    """
    Greedily wrap a label into lines that fit a node of the given width.

    Words are added to the current line while it stays within the per-line
    character budget; a word that would overflow starts a new line. A single
    word longer than the budget gets a line of its own.
    """
    budget = max(1, math.floor((width - WRAP_INSET) / char_width(font_size, font_family)))
    lines: List[str] = []
    current = ""
    for word in label.split(" "):
        candidate = f"{current} {word}" if current else word
        if len(candidate) <= budget or not current:
            current = candidate
        else:
            lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines


def _font(node: Node) -> Tuple[float, str]:
    return (node.style.font_size or DEFAULT_FONT_SIZE, node.style.font_family or DEFAULT_FONT_FAMILY)


def node_dimensions(node: Node) -> Tuple[float, float]:
    """Width and height of a node box, from its style or its label."""
    font_size, font_family = _font(node)
    label = node.label or ""

    width = max(MIN_NODE_WIDTH, estimate_text_width(label, font_size, font_family) + NODE_PADDING_X)
    if node.style.width:
        width = node.style.width

    line_count = max(1, len(wrap_label(label, width, font_size, font_family)))
    height = max(MIN_NODE_HEIGHT, line_count * (font_size + LINE_PITCH_EXTRA) + NODE_PADDING_Y)
    if node.style.height:
        height = node.style.height
    return width, height


@dataclass
class NodeBox:
    """A node placed on the canvas; ``x``/``y`` is the box centre."""

    node: Node
    x: float
    y: float
    width: float
    height: float
    lines: List[str] = field(default_factory=list)
    font_size: float = DEFAULT_FONT_SIZE
    font_family: str = DEFAULT_FONT_FAMILY


@dataclass
class EdgeSegment:
    edge: Edge
    start: Point
    end: Point
    arrow: List[Point]
    label_anchor: Optional[Point] = None


@dataclass
class Canvas:
    width: float
    height: float
    nodes: List[NodeBox] = field(default_factory=list)
    edges: List[EdgeSegment] = field(default_factory=list)


def arrowhead(start: Point, end: Point, size: float) -> Optional[List[Point]]:
    """Triangle with its tip at ``end`` pointing along ``start -> end``."""
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    length = math.hypot(dx, dy)
    if length == 0:
        return None
    ux, uy = dx / length, dy / length
    x2, y2 = end
    return [
        (x2, y2),
        (x2 - size * ux + size * 0.5 * uy, y2 - size * uy - size * 0.5 * ux),
        (x2 - size * ux - size * 0.5 * uy, y2 - size * uy + size * 0.5 * ux),
    ]


def compute_canvas(diagram: FlowDiagram, horizontal: bool = False, show_labels: bool = True) -> Canvas:
    """Lay the diagram out on a fitted canvas. Unpositioned nodes are skipped."""
    centers = {}
    sizes = {}
    for node in diagram.nodes:
        if node.position is None:
            continue
        x, y = node.position.x, node.position.y
        centers[node.id] = (y, x) if horizontal else (x, y)
        sizes[node.id] = node_dimensions(node)

    if not centers:
        return Canvas(MIN_CANVAS_WIDTH, MIN_CANVAS_HEIGHT)

    min_x = min(centers[i][0] - sizes[i][0] / 2 for i in centers)
    max_x = max(centers[i][0] + sizes[i][0] / 2 for i in centers)
    min_y = min(centers[i][1] - sizes[i][1] / 2 for i in centers)
    max_y = max(centers[i][1] + sizes[i][1] / 2 for i in centers)

    canvas = Canvas(
        width=max(MIN_CANVAS_WIDTH, max_x - min_x + CANVAS_PADDING * 2),
        height=max(MIN_CANVAS_HEIGHT, max_y - min_y + CANVAS_PADDING * 2),
    )
    offset_x = CANVAS_PADDING - min_x
    offset_y = CANVAS_PADDING - min_y
    shifted = {i: (cx + offset_x, cy + offset_y) for i, (cx, cy) in centers.items()}

    for edge in diagram.edges:
        if edge.source_id not in shifted or edge.target_id not in shifted:
            continue
        start, end = shifted[edge.source_id], shifted[edge.target_id]
        arrow = arrowhead(start, end, edge.style.arrow_size or DEFAULT_ARROW_SIZE)
        if arrow is None:
            logger.debug(f"Skipping zero-length edge {edge.id}")
            continue
        anchor = None
        if edge.label and show_labels:
            anchor = ((start[0] + end[0]) / 2, (start[1] + end[1]) / 2)
        canvas.edges.append(EdgeSegment(edge, start, end, arrow, anchor))

    for node in diagram.nodes:
        if node.id not in shifted:
            continue
        width, height = sizes[node.id]
        font_size, font_family = _font(node)
        x, y = shifted[node.id]
        canvas.nodes.append(NodeBox(
            node=node,
            x=x,
            y=y,
            width=width,
            height=height,
            lines=wrap_label(node.label or "", width, font_size, font_family),
            font_size=font_size,
            font_family=font_family,
        ))

    return canvas
