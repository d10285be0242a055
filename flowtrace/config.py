"""Configuration classes for FlowTrace components."""

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass
class TraceConfig:
    """Wording and limits used by the max-flow trace engine."""

    # Description templates. Available fields: iteration, path, bottleneck, max_flow
    initial_description: str = "Initial network with zero flow"
    path_found_description: str = (
        "Augmenting path {iteration}: found path {path} with capacity {bottleneck}"
    )
    augmented_description: str = (
        "Augmenting path {iteration}: augmented flow by {bottleneck}"
    )
    done_description: str = "Algorithm complete: maximum flow = {max_flow}"

    # Joins node ids when a path is rendered into a description
    path_separator: str = " → "

    # Abort with FlowConsistencyError after this many augmentations (None = unbounded)
    max_augmentations: Optional[int] = None

    def format_path(self, path: Sequence[str]) -> str:
        return self.path_separator.join(path)


# Global configuration instance
TRACE_CONFIG = TraceConfig()
