"""Flow network model and its exceptions."""

from flowtrace.model.errors import (
    FlowConsistencyError,
    ValidationError,
    ValidationErrorKind,
)
from flowtrace.model.network import Edge, FlowNetwork, Node

__all__ = [
    "Edge",
    "FlowNetwork",
    "Node",
    "FlowConsistencyError",
    "ValidationError",
    "ValidationErrorKind",
]
