import json
from datetime import datetime

import pytest

from flowdiagram.backend import (
    GraphvizExporter,
    HtmlExporter,
    JsonExporter,
    MermaidExporter,
    Orientation,
    OutputFormat,
    RenderOptions,
    SvgExporter,
    TextExporter,
    Theme,
    render,
)
from flowdiagram.core.errors import UnsupportedFormatError
from flowdiagram.core.ir import DiagramOptions, FlowDiagram
from flowdiagram.frontend.shapes import create_linear_flow


@pytest.fixture
def laid_out(linear_diagram):
    linear_diagram.auto_layout()
    return linear_diagram


# SVG


def test_svg_structure(laid_out):
    svg = SvgExporter.to_svg(laid_out)

    assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg"')
    assert svg.endswith("</svg>")
    assert svg.count('<g class="node"') == 3
    assert svg.count("<polygon") == 2
    assert svg.index('<g class="edges">') < svg.index('<g class="nodes">')
    assert ">done</text>" in svg
    assert 'fill="#ffffff"' in svg


def test_svg_escapes_labels():
    diagram = FlowDiagram()
    diagram.add_node("a<b>&\"c'")

    svg = SvgExporter.to_svg(diagram)

    assert "a&lt;b&gt;&amp;&quot;c&apos;" in svg
    assert "a<b>" not in svg


def test_svg_dark_theme(laid_out):
    svg = SvgExporter.to_svg(laid_out, RenderOptions(theme="dark"))

    assert 'fill="#1a1a1a"' in svg
    assert 'fill="#2d2d2d"' in svg
    assert 'fill="#ffffff"' in svg  # text colour


def test_svg_light_theme_uses_diagram_background():
    diagram = FlowDiagram(DiagramOptions(background_color="#fafafa"))
    diagram.add_node("A")

    assert 'fill="#fafafa"' in SvgExporter.to_svg(diagram)


def test_svg_grid_and_labels_toggle(laid_out):
    with_grid = SvgExporter.to_svg(laid_out, RenderOptions(show_grid=True))
    no_labels = SvgExporter.to_svg(laid_out, RenderOptions(show_labels=False))

    assert '<g class="grid">' in with_grid
    assert '<g class="grid">' not in SvgExporter.to_svg(laid_out)
    assert "<text" not in no_labels


def test_svg_node_style_overrides():
    diagram = FlowDiagram()
    diagram.add_node("Styled", style={"backgroundColor": "#abcdef", "borderRadius": 12, "fontSize": 20})

    svg = SvgExporter.to_svg(diagram)

    assert 'fill="#abcdef"' in svg
    assert 'rx="12"' in svg
    assert 'font-size="20"' in svg


def test_svg_dashed_edge():
    diagram = FlowDiagram()
    a = diagram.add_node("A", position=(0, 0))
    b = diagram.add_node("B", position=(0, 200))
    diagram.add_edge(a, b, style={"style": "dashed"})

    assert 'stroke-dasharray="6,4"' in SvgExporter.to_svg(diagram)


def test_svg_empty_diagram_is_valid_document():
    svg = SvgExporter.to_svg(FlowDiagram())

    assert 'width="800" height="600"' in svg
    assert '<g class="node"' not in svg


# HTML


def test_html_page(laid_out):
    html = HtmlExporter.to_html(laid_out)

    assert html.startswith("<!DOCTYPE html>")
    assert "<title>Linear</title>" in html
    assert '<h1 class="diagram-title">Linear</h1>' in html
    assert "<svg" in html


def test_html_escapes_title_and_follows_theme():
    diagram = FlowDiagram(DiagramOptions(title="R&D <flow>"))
    diagram.add_node("A")

    html = HtmlExporter.to_html(diagram, RenderOptions(format="html", theme="dark"))

    assert "<title>R&amp;D &lt;flow&gt;</title>" in html
    assert "background-color: #1a1a1a" in html


def test_html_page_background_matches_svg():
    diagram = FlowDiagram(DiagramOptions(background_color="#fafafa"))
    diagram.add_node("A")

    light = HtmlExporter.to_html(diagram)
    dark = HtmlExporter.to_html(diagram, RenderOptions(theme="dark"))

    assert "background-color: #fafafa" in light
    assert 'fill="#fafafa"' in light
    assert "background-color: #1a1a1a" in dark
    assert 'fill="#1a1a1a"' in dark


# Mermaid


def test_mermaid_linear_flow(linear_diagram):
    assert MermaidExporter.to_mermaid(linear_diagram) == (
        "graph TD\n"
        "    node_1[A]\n"
        "    node_2[B]\n"
        "    node_3[(C)]\n"
        "    node_1 --> node_2\n"
        "    node_2 -->|done| node_3\n"
    )


def test_mermaid_shapes_and_sanitizing():
    diagram = FlowDiagram()
    diagram.add_node('Say "hi"?', type="decision")

    output = MermaidExporter.to_mermaid(diagram, direction="LR")

    assert output.startswith("graph LR\n")
    assert 'node_1{{Say \\"hi\\"?}}' in output


def test_mermaid_render_of_linear_flow():
    diagram = create_linear_flow(["Start", "Middle", "End"])

    lines = render(diagram, "mermaid").splitlines()

    assert lines == [
        "graph TD",
        "    node_1[Start]",
        "    node_2[Middle]",
        "    node_3[End]",
        "    node_1 --> node_2",
        "    node_2 --> node_3",
    ]


def test_mermaid_sanitize_id():
    assert MermaidExporter._sanitize_id("my-node.1") == "my_node_1"


# Graphviz


def test_dot_source(decision_diagram):
    dot = GraphvizExporter.to_dot(decision_diagram)

    assert "digraph Checkout {" in dot
    assert "rankdir=TB" in dot
    assert "shape=ellipse" in dot
    assert "shape=diamond" in dot
    assert "node_1 -> node_2" in dot
    assert "label=Yes" in dot


def test_dot_horizontal_and_styles():
    diagram = FlowDiagram()
    a = diagram.add_node("A", style={"backgroundColor": "red"})
    b = diagram.add_node("B")
    diagram.add_edge(a, b, style={"style": "dotted"})

    dot = GraphvizExporter.to_dot(diagram, Orientation.HORIZONTAL)

    assert "rankdir=LR" in dot
    assert "fillcolor=red" in dot
    assert "style=dotted" in dot


# JSON and text


def test_json_export(linear_diagram):
    data = json.loads(JsonExporter.to_json(linear_diagram, RenderOptions(format="json", theme="dark")))

    assert data["title"] == "Linear"
    assert [node["label"] for node in data["nodes"]] == ["A", "B", "C"]
    assert data["edges"][1]["label"] == "done"
    metadata = data["metadata"]
    assert metadata["nodeCount"] == 3
    assert metadata["edgeCount"] == 2
    assert metadata["format"] == "json"
    assert metadata["theme"] == "dark"
    assert datetime.fromisoformat(metadata["generatedAt"]).utcoffset().total_seconds() == 0


def test_text_summary(linear_diagram):
    assert TextExporter.to_text(linear_diagram) == (
        "Flow Diagram: Linear\n"
        "Nodes: 3, Edges: 2\n"
        "\n"
        "Nodes:\n"
        "  - node_1: A (start)\n"
        "  - node_2: B (process)\n"
        "  - node_3: C (end)\n"
        "\n"
        "Edges:\n"
        "  - A -> B\n"
        "  - B -> C (done)\n"
    )


# Dispatch


@pytest.mark.parametrize("fmt", [f.value for f in OutputFormat])
def test_render_every_format(laid_out, fmt):
    output = render(laid_out, fmt)
    assert isinstance(output, str)
    assert output


def test_render_dispatches(laid_out):
    assert render(laid_out, "mermaid") == MermaidExporter.to_mermaid(laid_out)
    assert render(laid_out) == SvgExporter.to_svg(laid_out)
    options = RenderOptions(format=OutputFormat.DOT, orientation="horizontal")
    assert "rankdir=LR" in render(laid_out, options)


def test_unsupported_format(laid_out):
    with pytest.raises(UnsupportedFormatError) as excinfo:
        render(laid_out, "pdf")
    assert "Unsupported visualization format: pdf" in str(excinfo.value)


def test_render_options_coercion():
    options = RenderOptions(format="html", theme="dark", orientation="horizontal")
    assert options.format is OutputFormat.HTML
    assert options.theme is Theme.DARK
    assert options.horizontal
    with pytest.raises(ValueError):
        RenderOptions(theme="neon")
