import pytest

from flowdiagram.core.ir import DiagramOptions, FlowDiagram


@pytest.fixture
def linear_diagram():
    """A -> B -> C, not laid out."""
    diagram = FlowDiagram(DiagramOptions(title="Linear"))
    a = diagram.add_node("A", type="start")
    b = diagram.add_node("B", type="process")
    c = diagram.add_node("C", type="end")
    diagram.add_edge(a, b)
    diagram.add_edge(b, c, label="done")
    return diagram


@pytest.fixture
def decision_diagram():
    """A small branching chart with every shape-bearing node type."""
    diagram = FlowDiagram(DiagramOptions(title="Checkout"))
    start = diagram.add_node("Begin", type="start")
    check = diagram.add_node("Paid?", type="decision")
    ship = diagram.add_node("Ship", type="process")
    cancel = diagram.add_node("Cancel", type="process")
    done = diagram.add_node("Done", type="end")
    diagram.add_edge(start, check)
    diagram.add_edge(check, ship, label="Yes")
    diagram.add_edge(check, cancel, label="No")
    diagram.add_edge(ship, done)
    diagram.add_edge(cancel, done)
    diagram.auto_layout()
    return diagram
