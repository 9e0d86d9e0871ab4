import pytest

from flowdiagram.backend.geometry import (
    arrowhead,
    char_width,
    compute_canvas,
    estimate_text_width,
    fmt,
    node_dimensions,
    wrap_label,
)
from flowdiagram.core.ir import FlowDiagram, Node


def test_short_label_gets_minimum_box():
    assert node_dimensions(Node("n", "Hello")) == (100, 50)


def test_width_grows_with_label():
    widths = [node_dimensions(Node("n", "x" * size))[0] for size in (5, 20, 40, 80)]
    assert widths == sorted(widths)
    assert widths[-1] > widths[0]


def test_monospace_is_wider():
    assert char_width(14, "Courier, monospace") == pytest.approx(8.4)
    assert char_width(14) == pytest.approx(7.7)
    assert estimate_text_width("abcd", 10) == pytest.approx(22)


def test_wrap_label():
    assert wrap_label("aaaa bbbb cccc", 100) == ["aaaa bbbb", "cccc"]
    assert wrap_label("short", 100) == ["short"]
    assert wrap_label("averyveryverylongword tail", 100) == ["averyveryverylongword", "tail"]


def test_style_width_wraps_and_grows_height():
    node = Node("n", "aaaa bbbb cccc dddd", style={"width": 100})
    assert node_dimensions(node) == (100, 64)


def test_style_height_overrides():
    node = Node("n", "Hello", style={"width": 240, "height": 90})
    assert node_dimensions(node) == (240, 90)


def test_single_node_canvas():
    diagram = FlowDiagram()
    diagram.add_node("Hello", position=(0, 0))

    canvas = compute_canvas(diagram)

    assert (canvas.width, canvas.height) == (800, 600)
    box = canvas.nodes[0]
    assert (box.x, box.y) == (150, 125)
    assert (box.width, box.height) == (100, 50)
    assert box.lines == ["Hello"]


def test_canvas_grows_past_minimum():
    diagram = FlowDiagram()
    diagram.add_node("A", position=(0, 0))
    diagram.add_node("B", position=(1000, 0))

    canvas = compute_canvas(diagram)

    assert canvas.width == 1300
    assert canvas.height == 600


def test_horizontal_swaps_axes():
    diagram = FlowDiagram()
    a = diagram.add_node("A", position=(0, 0))
    b = diagram.add_node("B", position=(0, 200))
    diagram.add_edge(a, b, label="next")

    canvas = compute_canvas(diagram, horizontal=True)

    assert [(box.x, box.y) for box in canvas.nodes] == [(150, 125), (350, 125)]
    segment = canvas.edges[0]
    assert segment.start == (150, 125)
    assert segment.end == (350, 125)
    assert segment.label_anchor == (250, 125)


def test_edge_label_anchor_respects_show_labels():
    diagram = FlowDiagram()
    a = diagram.add_node("A", position=(0, 0))
    b = diagram.add_node("B", position=(0, 200))
    diagram.add_edge(a, b, label="next")

    canvas = compute_canvas(diagram, show_labels=False)

    assert canvas.edges[0].label_anchor is None


def test_unpositioned_nodes_and_zero_length_edges_are_skipped():
    diagram = FlowDiagram()
    a = diagram.add_node("A", position=(0, 0))
    b = diagram.add_node("B", position=(0, 0))
    c = diagram.add_node("C", position=None)
    diagram.add_edge(a, b)
    diagram.add_edge(a, c)

    canvas = compute_canvas(diagram)

    assert [box.node.id for box in canvas.nodes] == [a, b]
    assert canvas.edges == []


def test_arrowhead():
    assert arrowhead((0, 0), (10, 0), 10) == [(10, 0), (0, -5), (0, 5)]
    assert arrowhead((3, 3), (3, 3), 10) is None


@pytest.mark.parametrize(
    "value, expected",
    [(1.0, "1"), (2.5, "2.5"), (1.234, "1.23"), (100, "100"), (0, "0"), (-0.001, "0"), (-12.5, "-12.5")],
)
def test_fmt(value, expected):
    assert fmt(value) == expected
