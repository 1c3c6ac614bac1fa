"""Exceptions raised while introspecting node classes."""


class NodeShapeError(Exception):
    """Base class for all nodeshape errors."""


class MissingMetadata(NodeShapeError, LookupError):
    """Raised when a node type or field set was never registered."""

    def __init__(self, type_id: str, kind: str = "node"):
        self.type_id = type_id
        self.kind = kind
        super().__init__(f"No {kind} metadata registered for '{type_id}'")


class CyclicStructure(NodeShapeError, ValueError):
    """Raised when a traversal re-enters an object already on its path."""

    def __init__(self, path: list[str]):
        self.path = path
        super().__init__(
            f"Reference cycle detected at '{'.'.join(path)}'"
        )
