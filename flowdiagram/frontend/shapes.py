"""
Constructors for common diagram shapes.

Each helper builds a new diagram through the public store API and runs the
hierarchical layout before returning it.
"""

from typing import Any, Mapping, Optional, Sequence, Tuple

from flowdiagram.core.ir import DiagramOptions, FlowDiagram

DECISION_STYLE = {"backgroundColor": "#e3f2fd", "borderColor": "#2196f3"}
CONDITION_STYLE = {"backgroundColor": "#fff3e0", "borderColor": "#ff9800"}
ACTION_STYLE = {"backgroundColor": "#e8f5e8", "borderColor": "#4caf50"}
PROCESS_STYLE = {"backgroundColor": "#f3e5f5", "borderColor": "#9c27b0"}
PARALLEL_STYLE = {"backgroundColor": "#e1f5fe", "borderColor": "#00bcd4"}


def _new_diagram(title: Optional[str]) -> FlowDiagram:
    return FlowDiagram(DiagramOptions(title=title) if title else None)


def create_linear_flow(labels: Sequence[str], title: Optional[str] = None) -> FlowDiagram:
    """A -> B -> C -> ..."""
    diagram = _new_diagram(title)
    node_ids = [diagram.add_node(label) for label in labels]
    for source, target in zip(node_ids, node_ids[1:]):
        diagram.add_edge(source, target)
    diagram.auto_layout("hierarchical")
    return diagram


def create_branching_flow(input_label: str, output_labels: Sequence[str], title: Optional[str] = None) -> FlowDiagram:
    """One input fanning out to every output."""
    diagram = _new_diagram(title)
    input_id = diagram.add_node(input_label)
    for label in output_labels:
        diagram.add_edge(input_id, diagram.add_node(label))
    diagram.auto_layout("hierarchical")
    return diagram


def create_converging_flow(input_labels: Sequence[str], output_label: str, title: Optional[str] = None) -> FlowDiagram:
    """Every input feeding one output."""
    diagram = _new_diagram(title)
    input_ids = [diagram.add_node(label) for label in input_labels]
    output_id = diagram.add_node(output_label)
    for input_id in input_ids:
        diagram.add_edge(input_id, output_id)
    diagram.auto_layout("hierarchical")
    return diagram


def create_decision_tree(
    root_label: str,
    decisions: Sequence[Tuple[str, str]],
    title: Optional[str] = None,
) -> FlowDiagram:
    """
    A decision node with one ``condition -> action`` branch per decision.

    Args:
        root_label: Label of the decision node.
        decisions: ``(condition, next_action)`` pairs.
    """
    diagram = _new_diagram(title)
    root_id = diagram.add_node(root_label, type="decision", style=DECISION_STYLE)
    condition_ids = [diagram.add_node(condition, type="condition", style=CONDITION_STYLE) for condition, _ in decisions]
    action_ids = [diagram.add_node(action, type="action", style=ACTION_STYLE) for _, action in decisions]

    for condition_id in condition_ids:
        diagram.add_edge(root_id, condition_id)
    for condition_id, action_id in zip(condition_ids, action_ids):
        diagram.add_edge(condition_id, action_id)

    diagram.auto_layout("hierarchical")
    return diagram


def create_process_flow(steps: Sequence[Mapping[str, Any]], title: Optional[str] = None) -> FlowDiagram:
    """
    Sequential process steps, optionally fanning out into parallel branches.

    Each step is a mapping with a ``name`` and an optional ``parallel`` list
    of branch labels. Steps are chained in order; parallel branches hang off
    their step as leaves.
    """
    diagram = _new_diagram(title)
    step_ids = []

    for step in steps:
        step_id = diagram.add_node(step["name"], type="process", style=PROCESS_STYLE)
        step_ids.append(step_id)
        for branch in step.get("parallel") or []:
            branch_id = diagram.add_node(branch, type="parallel", style=PARALLEL_STYLE)
            diagram.add_edge(step_id, branch_id)

    for current_id, next_id in zip(step_ids, step_ids[1:]):
        diagram.add_edge(current_id, next_id)

    diagram.auto_layout("hierarchical")
    return diagram
