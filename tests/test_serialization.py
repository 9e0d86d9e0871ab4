import json

from flowdiagram.core.ir import DiagramOptions, FlowDiagram, Position
from flowdiagram.core.serialization import JsonSerializer


def _node_fields(node):
    return (node.label, node.type, node.position, node.style, node.data)


def _edge_fields(edge):
    return (edge.source_id, edge.target_id, edge.label, edge.style, edge.data)


def test_json_roundtrip():
    diagram = FlowDiagram(DiagramOptions(title="Test", width=1024))
    a = diagram.add_node("S", type="start", style={"borderColor": "#123456"})
    b = diagram.add_node("P", data={"foo": "bar"}, position=Position(5, 7))
    diagram.add_edge(a, b, label="Go", style={"style": "dashed", "arrowSize": 4})

    json_str = JsonSerializer.to_json(diagram)

    data = json.loads(json_str)
    assert data["options"]["title"] == "Test"
    assert data["options"]["width"] == 1024
    assert len(data["nodes"]) == 2
    assert data["nodes"][0]["style"] == {"borderColor": "#123456"}
    assert data["edges"][0]["sourceId"] == a
    assert data["edges"][0]["style"] == {"style": "dashed", "arrowSize": 4}

    restored = JsonSerializer.from_json(json_str)
    assert restored.title == "Test"
    assert restored.node_count == diagram.node_count
    assert restored.edge_count == diagram.edge_count
    for node in diagram.nodes:
        assert _node_fields(restored.get_node(node.id)) == _node_fields(node)
    for edge in diagram.edges:
        assert _edge_fields(restored.get_edge(edge.id)) == _edge_fields(edge)


def test_roundtrip_after_layout(decision_diagram):
    restored = JsonSerializer.from_dict(JsonSerializer.to_dict(decision_diagram))

    for node in decision_diagram.nodes:
        assert restored.get_node(node.id).position == node.position


def test_missing_position_serializes_as_null():
    diagram = FlowDiagram()
    diagram.add_node("Unplaced", position=None)

    data = JsonSerializer.to_dict(diagram)

    assert data["nodes"][0]["position"] is None
    assert JsonSerializer.from_dict(data).get_node("node_1").position is None


def test_loading_trusts_dangling_edges():
    data = {
        "options": {"title": "Broken"},
        "nodes": [{"id": "node_1", "label": "A"}],
        "edges": [{"id": "edge_1", "sourceId": "node_1", "targetId": "node_9"}],
    }

    diagram = JsonSerializer.from_dict(data)

    assert diagram.edge_count == 1
    assert diagram.get_edge("edge_1").target_id == "node_9"


def test_loaded_diagram_continues_id_sequence():
    data = {
        "options": {},
        "nodes": [{"id": "node_5", "label": "A"}, {"id": "custom", "label": "B"}],
        "edges": [{"id": "edge_3", "sourceId": "node_5", "targetId": "custom"}],
    }

    diagram = JsonSerializer.from_dict(data)

    assert diagram.add_node("C") == "node_6"
    assert diagram.add_edge("node_5", "node_6") == "edge_4"
