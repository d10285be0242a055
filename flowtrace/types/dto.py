"""Immutable value types recorded in a trace.

Every object here is a frozen dataclass holding only scalars and tuples, so a
recorded step cannot alias the live network that produced it. Each type
exposes ``to_dict()`` returning JSON-safe primitives in the external trace
shape (``from``/``to`` keys, camelCase field names) and ``from_dict()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from flowtrace.types.base import NodeID, PathTuple, StepKind


@dataclass(frozen=True, slots=True)
class EdgeState:
    """Value snapshot of one network edge.

    Attributes:
        source: Tail node id.
        target: Head node id.
        capacity: Edge capacity.
        flow: Flow on the edge at snapshot time.
    """

    source: NodeID
    target: NodeID
    capacity: int
    flow: int

    @property
    def residual(self) -> int:
        """Unused forward capacity."""
        return self.capacity - self.flow

    @property
    def saturated(self) -> bool:
        return self.capacity > 0 and self.flow == self.capacity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": self.source,
            "to": self.target,
            "capacity": self.capacity,
            "flow": self.flow,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EdgeState":
        return cls(
            source=data["from"],
            target=data["to"],
            capacity=int(data["capacity"]),
            flow=int(data["flow"]),
        )


@dataclass(frozen=True, slots=True)
class ResidualEdge:
    """Arc of the residual graph.

    Forward arcs carry ``capacity - flow`` of the underlying edge. Backward
    arcs run opposite to the underlying edge and carry its ``flow``.

    Attributes:
        source: Tail node id of the arc.
        target: Head node id of the arc.
        capacity: Residual capacity, always positive.
        is_backward: True when the arc cancels flow on ``target -> source``.
    """

    source: NodeID
    target: NodeID
    capacity: int
    is_backward: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": self.source,
            "to": self.target,
            "capacity": self.capacity,
            "isBackward": self.is_backward,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResidualEdge":
        return cls(
            source=data["from"],
            target=data["to"],
            capacity=int(data["capacity"]),
            is_backward=bool(data["isBackward"]),
        )


@dataclass(frozen=True, slots=True)
class Step:
    """One immutable entry of a max-flow trace.

    Attributes:
        index: Position of the step in its trace.
        kind: Role of the step (initial, path found, augmented, done).
        iteration: Augmentation number, 0 for the initial and final steps.
        description: Human-readable description.
        edges: Snapshot of every edge with its flow.
        max_flow_so_far: Cumulative flow value at this step.
        path: Augmenting path for ``path_found`` steps, otherwise empty.
        bottleneck: Path bottleneck for ``path_found`` steps, otherwise None.
        residual_edges: Residual graph at this step.
    """

    index: int
    kind: StepKind
    iteration: int
    description: str
    edges: Tuple[EdgeState, ...]
    max_flow_so_far: int
    path: PathTuple = ()
    bottleneck: Optional[int] = None
    residual_edges: Tuple[ResidualEdge, ...] = ()

    def edge(self, source: NodeID, target: NodeID) -> Optional[EdgeState]:
        """Return the snapshot of edge ``source -> target`` if present."""
        for state in self.edges:
            if state.source == source and state.target == target:
                return state
        return None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "index": self.index,
            "kind": self.kind.value,
            "iteration": self.iteration,
            "description": self.description,
            "edges": [e.to_dict() for e in self.edges],
            "maxFlowSoFar": self.max_flow_so_far,
            "path": list(self.path),
            "residualEdges": [r.to_dict() for r in self.residual_edges],
        }
        if self.bottleneck is not None:
            data["bottleneck"] = self.bottleneck
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Step":
        bottleneck = data.get("bottleneck")
        return cls(
            index=int(data["index"]),
            kind=StepKind.from_string(data["kind"]),
            iteration=int(data.get("iteration", 0)),
            description=str(data["description"]),
            edges=tuple(EdgeState.from_dict(e) for e in data["edges"]),
            max_flow_so_far=int(data["maxFlowSoFar"]),
            path=tuple(data.get("path", ())),
            bottleneck=int(bottleneck) if bottleneck is not None else None,
            residual_edges=tuple(
                ResidualEdge.from_dict(r) for r in data.get("residualEdges", ())
            ),
        )


@dataclass(frozen=True)
class MinCut:
    """Minimum s-t cut derived from a maximum flow.

    Attributes:
        source_side: Nodes reachable from the source in the residual graph,
            in discovery order.
        sink_side: Remaining nodes, in network order.
        edges: Original edges crossing from the source side to the sink side.
        capacity: Total capacity of ``edges``; equals the maximum flow.
    """

    source_side: Tuple[NodeID, ...]
    sink_side: Tuple[NodeID, ...]
    edges: Tuple[EdgeState, ...]
    capacity: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sourceSide": list(self.source_side),
            "sinkSide": list(self.sink_side),
            "edges": [e.to_dict() for e in self.edges],
            "capacity": self.capacity,
        }
