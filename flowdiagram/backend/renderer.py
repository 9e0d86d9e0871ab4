"""Format dispatch: one entry point for every output format."""

import logging
from typing import Callable, Dict, Optional, Union

from flowdiagram.backend.data import JsonExporter
from flowdiagram.backend.graphviz import GraphvizExporter
from flowdiagram.backend.html import HtmlExporter
from flowdiagram.backend.mermaid import MermaidExporter
from flowdiagram.backend.options import OutputFormat, RenderOptions
from flowdiagram.backend.svg import SvgExporter
from flowdiagram.core.ir import FlowDiagram

logger = logging.getLogger(__name__)

_RENDERERS: Dict[OutputFormat, Callable[[FlowDiagram, RenderOptions], str]] = {
    OutputFormat.SVG: SvgExporter.to_svg,
    OutputFormat.HTML: HtmlExporter.to_html,
    OutputFormat.JSON: JsonExporter.to_json,
    OutputFormat.MERMAID: lambda diagram, options: MermaidExporter.to_mermaid(diagram),
    OutputFormat.DOT: lambda diagram, options: GraphvizExporter.to_dot(diagram, options.orientation),
}


def render(diagram: FlowDiagram, options: Union[RenderOptions, str, None] = None) -> str:
    """
    Render a diagram in the requested format.

    Args:
        diagram: A diagram whose nodes carry positions (for svg/html).
        options: A ``RenderOptions`` bundle or just a format name.

    Raises:
        UnsupportedFormatError: If the format is not one of ``OutputFormat``.
    """
    if options is None:
        options = RenderOptions()
    elif not isinstance(options, RenderOptions):
        options = RenderOptions(format=options)

    output = _RENDERERS[options.format](diagram, options)
    logger.debug(f"Rendered '{diagram.title}' as {options.format.value} ({len(output)} chars)")
    return output
