"""Trace container: the materialized, randomly indexable record of one run.

A ``Trace`` is what rendering and playback layers consume. It holds the
ordered steps, the final maximum flow and enough network metadata (nodes,
source, sink) to draw every step without access to the solver.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Tuple, Union, overload

from flowtrace.algorithms.min_cut import min_cut_from_step
from flowtrace.logging import get_logger
from flowtrace.model.network import Node
from flowtrace.types.base import NodeID, StepKind
from flowtrace.types.dto import MinCut, Step

logger = get_logger(__name__)


@dataclass(frozen=True)
class Trace:
    """Ordered, immutable sequence of max-flow steps.

    Indexing is O(1) and never re-runs the algorithm. Index 0 is the initial
    zero-flow state; the last index is the terminal state.

    Attributes:
        steps: Recorded steps in order.
        max_flow: Final maximum flow value.
        source: Source node id.
        sink: Sink node id.
        nodes: Network nodes, for renderers.
    """

    steps: Tuple[Step, ...]
    max_flow: int
    source: NodeID
    sink: NodeID
    nodes: Tuple[Node, ...] = ()

    @overload
    def __getitem__(self, index: int) -> Step: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Step, ...]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Step, Tuple[Step, ...]]:
        return self.steps[index]

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    @property
    def initial_step(self) -> Step:
        return self.steps[0]

    @property
    def final_step(self) -> Step:
        return self.steps[-1]

    @property
    def augmentations(self) -> int:
        """Number of augmenting paths applied."""
        return sum(1 for s in self.steps if s.kind is StepKind.AUGMENTED)

    def path_steps(self) -> Tuple[Step, ...]:
        """Steps that announce an augmenting path, in order."""
        return tuple(s for s in self.steps if s.kind is StepKind.PATH_FOUND)

    def min_cut(self) -> MinCut:
        """Minimum cut induced by the terminal flow."""
        return min_cut_from_step(
            self.final_step, [n.id for n in self.nodes], self.source
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-safe external trace shape."""
        return {
            "source": self.source,
            "sink": self.sink,
            "maxFlow": self.max_flow,
            "nodes": [n.to_dict() for n in self.nodes],
            "steps": [s.to_dict() for s in self.steps],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def save(self, path: Path) -> None:
        """Write the trace as JSON to ``path``."""
        path = Path(path)
        path.write_text(self.to_json(), encoding="utf-8")
        logger.info("Trace with %d steps written to %s", len(self.steps), path)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Trace":
        """Rebuild a trace from ``to_dict()`` output."""
        nodes = tuple(
            Node(id=n["id"], label=n.get("label") or "", attrs=dict(n.get("attrs") or {}))
            for n in data.get("nodes", [])
        )
        return cls(
            steps=tuple(Step.from_dict(s) for s in data["steps"]),
            max_flow=int(data["maxFlow"]),
            source=data["source"],
            sink=data["sink"],
            nodes=nodes,
        )

    @classmethod
    def load(cls, path: Path) -> "Trace":
        return cls.from_dict(json.loads(Path(path).read_text(encoding="utf-8")))
