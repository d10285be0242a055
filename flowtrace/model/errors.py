"""Exceptions raised by the flow network model and the solver."""

from __future__ import annotations

from enum import Enum


class ValidationErrorKind(str, Enum):
    """Reason a network definition was rejected."""

    UNKNOWN_NODE = "unknown_node"
    DUPLICATE_NODE = "duplicate_node"
    DUPLICATE_EDGE = "duplicate_edge"
    NEGATIVE_CAPACITY = "negative_capacity"
    INVALID_CAPACITY = "invalid_capacity"
    SELF_LOOP = "self_loop"
    MISSING_TERMINAL = "missing_terminal"
    SAME_TERMINAL = "same_terminal"
    INVALID_NODE = "invalid_node"


class ValidationError(ValueError):
    """Raised when a network definition is malformed.

    Construction is all-or-nothing: when this is raised no network object
    exists. Callers can inspect ``kind`` to report the problem.

    Attributes:
        kind: Category of the violation.
    """

    def __init__(self, kind: ValidationErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class FlowConsistencyError(RuntimeError):
    """Raised when augmentation would break ``0 <= flow <= capacity``.

    Indicates a defect in path finding or augmentation, never bad user input.
    Trace generation is aborted; values are never clamped.
    """
