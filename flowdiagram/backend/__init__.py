"""Backend exporters for flow diagrams."""

from flowdiagram.backend.data import JsonExporter
from flowdiagram.backend.graphviz import GraphvizExporter
from flowdiagram.backend.html import HtmlExporter
from flowdiagram.backend.mermaid import MermaidExporter
from flowdiagram.backend.options import OutputFormat, Orientation, RenderOptions, Theme
from flowdiagram.backend.renderer import render
from flowdiagram.backend.svg import SvgExporter
from flowdiagram.backend.text import TextExporter

__all__ = [
    "GraphvizExporter",
    "HtmlExporter",
    "JsonExporter",
    "MermaidExporter",
    "SvgExporter",
    "TextExporter",
    "OutputFormat",
    "Orientation",
    "RenderOptions",
    "Theme",
    "render",
]
