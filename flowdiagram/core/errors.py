"""Exceptions raised by flowdiagram."""


class FlowDiagramError(Exception):
    """Base class for all flowdiagram errors."""


class UnknownNodeError(FlowDiagramError, ValueError):
    """An edge endpoint does not reference a node in the diagram."""

    def __init__(self, node_id: str):
        super().__init__(f"Node {node_id} does not exist.")
        self.node_id = node_id


class UnsupportedFormatError(FlowDiagramError, ValueError):
    """A render was requested in a format we cannot produce."""


class UnsupportedLayoutError(FlowDiagramError, ValueError):
    """An unknown layout algorithm was requested."""


class UnrecognizedFormatError(FlowDiagramError, ValueError):
    """Diagram data is neither a snapshot nor the text summary layout."""
