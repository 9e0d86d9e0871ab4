"""SVG backend for flow diagrams.

Draws the diagram directly from node positions; no external layout tool is
involved. Run a layout first (``diagram.auto_layout()``) unless the nodes
already carry positions.

Example:
    >>> from flowdiagram import FlowDiagram, SvgExporter
    >>> diagram = FlowDiagram()
    >>> a = diagram.add_node("Step 1")
    >>> b = diagram.add_node("Step 2")
    >>> _ = diagram.add_edge(a, b)
    >>> diagram.auto_layout()
    >>> svg_string = SvgExporter.to_svg(diagram)
"""

import logging
from typing import List, Optional
from xml.sax.saxutils import escape

from flowdiagram.backend.geometry import DEFAULT_FONT_FAMILY, Canvas, EdgeSegment, NodeBox, compute_canvas, fmt
from flowdiagram.backend.options import Palette, RenderOptions
from flowdiagram.core.ir import FlowDiagram

logger = logging.getLogger(__name__)

__all__ = ["SvgExporter"]

_ENTITIES = {'"': "&quot;", "'": "&apos;"}
_DASHES = {"dashed": "6,4", "dotted": "2,3"}
EDGE_LABEL_FONT_SIZE = 12
DEFAULT_BORDER_RADIUS = 5
DEFAULT_STROKE_WIDTH = 2


def escape_xml(text: str) -> str:
    """Escape the five XML special characters."""
    return escape(str(text), _ENTITIES)


class SvgExporter:
    """Exports a FlowDiagram to a standalone SVG document."""

    @staticmethod
    def _grid(canvas: Canvas, pitch: float, color: str) -> List[str]:
        parts = ['  <g class="grid">']
        step = pitch if pitch and pitch > 0 else 20
        x = 0.0
        while x < canvas.width:
            parts.append(f'    <line x1="{fmt(x)}" y1="0" x2="{fmt(x)}" y2="{fmt(canvas.height)}" stroke="{color}" stroke-width="1"/>')
            x += step
        y = 0.0
        while y < canvas.height:
            parts.append(f'    <line x1="0" y1="{fmt(y)}" x2="{fmt(canvas.width)}" y2="{fmt(y)}" stroke="{color}" stroke-width="1"/>')
            y += step
        parts.append("  </g>")
        return parts

    @staticmethod
    def _edge(segment: EdgeSegment, palette: Palette) -> List[str]:
        style = segment.edge.style
        color = escape_xml(style.color or palette.edge)
        (x1, y1), (x2, y2) = segment.start, segment.end
        dash = _DASHES.get(style.line_style or "")
        dash_attr = f' stroke-dasharray="{dash}"' if dash else ""
        points = " ".join(f"{fmt(px)},{fmt(py)}" for px, py in segment.arrow)

        parts = [
            f'    <line x1="{fmt(x1)}" y1="{fmt(y1)}" x2="{fmt(x2)}" y2="{fmt(y2)}" '
            f'stroke="{color}" stroke-width="{fmt(style.width or DEFAULT_STROKE_WIDTH)}"{dash_attr}/>',
            f'    <polygon points="{points}" fill="{color}"/>',
        ]
        if segment.label_anchor is not None:
            lx, ly = segment.label_anchor
            parts.append(
                f'    <text x="{fmt(lx)}" y="{fmt(ly)}" text-anchor="middle" fill="{palette.text}" '
                f'font-size="{EDGE_LABEL_FONT_SIZE}">{escape_xml(segment.edge.label)}</text>'
            )
        return parts

    @staticmethod
    def _node(box: NodeBox, palette: Palette, show_labels: bool) -> List[str]:
        style = box.node.style
        rx = fmt(style.border_radius or DEFAULT_BORDER_RADIUS)
        fill = escape_xml(style.background_color or palette.node)
        stroke = escape_xml(style.border_color or palette.edge)
        stroke_width = fmt(style.border_width or DEFAULT_STROKE_WIDTH)

        parts = [
            f'    <g class="node" data-id="{escape_xml(box.node.id)}">',
            f'      <rect x="{fmt(box.x - box.width / 2)}" y="{fmt(box.y - box.height / 2)}" '
            f'width="{fmt(box.width)}" height="{fmt(box.height)}" rx="{rx}" ry="{rx}" '
            f'fill="{fill}" stroke="{stroke}" stroke-width="{stroke_width}"/>',
        ]
        if show_labels:
            line_height = box.font_size + 4
            start_y = box.y - (len(box.lines) - 1) * line_height / 2
            color = escape_xml(style.color or palette.text)
            family = escape_xml(box.font_family or DEFAULT_FONT_FAMILY)
            for index, line in enumerate(box.lines):
                text_y = start_y + index * line_height + box.font_size / 3
                parts.append(
                    f'      <text x="{fmt(box.x)}" y="{fmt(text_y)}" text-anchor="middle" fill="{color}" '
                    f'font-size="{fmt(box.font_size)}" font-family="{family}">{escape_xml(line)}</text>'
                )
        parts.append("    </g>")
        return parts

    @staticmethod
    def to_svg(diagram: FlowDiagram, options: Optional[RenderOptions] = None) -> str:
        """
        Convert a diagram to an SVG string.

        Edges are emitted before nodes so node shapes are drawn on top.

        Args:
            diagram: The diagram to draw. Nodes without a position are left out.
            options: Theme, orientation, labels and grid settings.
        """
        options = options or RenderOptions()
        palette = options.palette
        canvas = compute_canvas(diagram, horizontal=options.horizontal, show_labels=options.show_labels)
        background = options.background(diagram.options.background_color)

        width, height = fmt(canvas.width), fmt(canvas.height)
        parts = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" viewBox="0 0 {width} {height}">',
            f'  <rect width="100%" height="100%" fill="{escape_xml(background)}"/>',
        ]
        if options.show_grid:
            parts.extend(SvgExporter._grid(canvas, diagram.options.grid_size, palette.grid))

        parts.append('  <g class="edges">')
        for segment in canvas.edges:
            parts.extend(SvgExporter._edge(segment, palette))
        parts.append("  </g>")

        parts.append('  <g class="nodes">')
        for box in canvas.nodes:
            parts.extend(SvgExporter._node(box, palette, options.show_labels))
        parts.append("  </g>")
        parts.append("</svg>")

        skipped = diagram.node_count - len(canvas.nodes)
        if skipped:
            logger.warning(f"{skipped} node(s) without a position were not drawn")
        return "\n".join(parts)
