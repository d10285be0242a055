"""Base aliases and enums shared by the model and algorithms."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

#: Node identifier. Ids are plain strings so traces serialize without mapping.
NodeID = str

#: Ordered node ids from source to sink, both inclusive.
PathTuple = Tuple[NodeID, ...]


class StepKind(str, Enum):
    """Role of a recorded step within the trace."""

    INITIAL = "initial"
    PATH_FOUND = "path_found"
    AUGMENTED = "augmented"
    DONE = "done"

    @classmethod
    def from_string(cls, value: str) -> "StepKind":
        """Parse a serialized step kind.

        Raises:
            ValueError: If the string doesn't match any member value.
        """
        try:
            return cls(value.lower())
        except ValueError:
            valid = ", ".join(e.value for e in cls)
            raise ValueError(
                f"Invalid step kind '{value}'. Valid values are: {valid}"
            ) from None
