"""Flow network model: Node, Edge and FlowNetwork.

The model holds topology and the current flow assignment only; algorithms live
in ``flowtrace.algorithms``. A ``FlowNetwork`` is validated completely in its
constructor, so a partially valid network is never observable.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from flowtrace.logging import get_logger
from flowtrace.model.errors import ValidationError, ValidationErrorKind
from flowtrace.types.base import NodeID
from flowtrace.types.dto import EdgeState

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class Node:
    """A network node.

    Attributes:
        id (str): Unique, stable identifier.
        label (str): Display label; defaults to the id.
        attrs (Mapping[str, Any]): Presentation metadata (e.g. ``x``/``y``).
            Stored as a read-only copy of what was passed in. Ignored by the
            algorithms.
    """

    id: NodeID
    label: str = ""
    attrs: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self) -> None:
        if not self.label:
            object.__setattr__(self, "label", str(self.id))
        # Nodes are shared by networks, their copies and traces
        object.__setattr__(self, "attrs", MappingProxyType(copy.deepcopy(dict(self.attrs))))

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "label": self.label, "attrs": copy.deepcopy(dict(self.attrs))}


@dataclass
class Edge:
    """A directed capacitated edge carrying integer flow.

    Attributes:
        source (str): Tail node id.
        target (str): Head node id.
        capacity (int): Non-negative capacity.
        flow (int): Current flow, kept within ``[0, capacity]`` by the augmenter.
    """

    source: NodeID
    target: NodeID
    capacity: int
    flow: int = 0

    @property
    def residual(self) -> int:
        return self.capacity - self.flow

    def state(self) -> EdgeState:
        """Return an immutable snapshot of this edge."""
        return EdgeState(self.source, self.target, self.capacity, self.flow)


NodeSpec = Union[Node, NodeID]
EdgeSpec = Union[Edge, Tuple[NodeID, NodeID, int]]


def _reject(kind: ValidationErrorKind, message: str) -> ValidationError:
    LOGGER.error("Invalid flow network: %s", message)
    return ValidationError(kind, message)


class FlowNetwork:
    """Directed capacitated network with one source and one sink.

    Nodes and edges keep their insertion order; path search relies on it for
    deterministic tie-breaking. At most one edge exists per ordered pair of
    nodes, while an antiparallel edge is an independent edge.

    Example:
        >>> net = FlowNetwork(["s", "a", "t"], [("s", "a", 3), ("a", "t", 2)], "s", "t")
        >>> net.edge("s", "a").capacity
        3
    """

    def __init__(
        self,
        nodes: Iterable[NodeSpec],
        edges: Iterable[EdgeSpec],
        source: Optional[NodeID],
        sink: Optional[NodeID],
    ) -> None:
        """Build and validate a network.

        Args:
            nodes: Node objects or bare node ids.
            edges: Edge objects or ``(source, target, capacity)`` tuples. Flow
                always starts at zero.
            source: Source node id.
            sink: Sink node id.

        Raises:
            ValidationError: On any malformed input; nothing is constructed.
        """
        node_map: Dict[NodeID, Node] = {}
        for spec in nodes:
            node = spec if isinstance(spec, Node) else Node(id=spec)
            if not isinstance(node.id, str) or not node.id:
                raise _reject(
                    ValidationErrorKind.INVALID_NODE,
                    f"Node id {node.id!r} must be a non-empty string",
                )
            if node.id in node_map:
                raise _reject(
                    ValidationErrorKind.DUPLICATE_NODE,
                    f"Node '{node.id}' is defined more than once",
                )
            node_map[node.id] = node

        if source is None or source not in node_map:
            raise _reject(
                ValidationErrorKind.MISSING_TERMINAL,
                f"Source node '{source}' is not in the network",
            )
        if sink is None or sink not in node_map:
            raise _reject(
                ValidationErrorKind.MISSING_TERMINAL,
                f"Sink node '{sink}' is not in the network",
            )
        if source == sink:
            raise _reject(
                ValidationErrorKind.SAME_TERMINAL,
                f"Source and sink must differ (both are '{source}')",
            )

        edge_list: List[Edge] = []
        index: Dict[Tuple[NodeID, NodeID], Edge] = {}
        for spec in edges:
            if isinstance(spec, Edge):
                u, v, capacity = spec.source, spec.target, spec.capacity
            else:
                u, v, capacity = spec
            if u not in node_map or v not in node_map:
                missing = u if u not in node_map else v
                raise _reject(
                    ValidationErrorKind.UNKNOWN_NODE,
                    f"Edge '{u}' -> '{v}' references unknown node '{missing}'",
                )
            if u == v:
                raise _reject(
                    ValidationErrorKind.SELF_LOOP,
                    f"Self-loop on node '{u}' is not allowed",
                )
            if isinstance(capacity, bool) or not isinstance(capacity, int):
                raise _reject(
                    ValidationErrorKind.INVALID_CAPACITY,
                    f"Edge '{u}' -> '{v}' capacity must be an integer, got {capacity!r}",
                )
            if capacity < 0:
                raise _reject(
                    ValidationErrorKind.NEGATIVE_CAPACITY,
                    f"Edge '{u}' -> '{v}' has negative capacity {capacity}",
                )
            if (u, v) in index:
                raise _reject(
                    ValidationErrorKind.DUPLICATE_EDGE,
                    f"Duplicate edge '{u}' -> '{v}'",
                )
            edge = Edge(u, v, capacity)
            index[(u, v)] = edge
            edge_list.append(edge)

        incident: Dict[NodeID, List[Edge]] = {node_id: [] for node_id in node_map}
        for edge in edge_list:
            incident[edge.source].append(edge)
            incident[edge.target].append(edge)

        self._nodes = node_map
        self._edges = edge_list
        self._index = index
        self._incident = incident
        self.source: NodeID = source
        self.sink: NodeID = sink

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FlowNetwork":
        """Build a network from the input contract shape.

        ``nodes`` is a list of ``{id, label?, attrs?}`` mappings or bare ids;
        ``edges`` is a list of ``{from, to, capacity}`` mappings.
        """
        nodes: List[Node] = []
        for entry in data.get("nodes", []):
            if isinstance(entry, Mapping):
                nodes.append(
                    Node(
                        id=entry["id"],
                        label=entry.get("label") or "",
                        attrs=dict(entry.get("attrs") or {}),
                    )
                )
            else:
                nodes.append(Node(id=entry))
        edges = [(e["from"], e["to"], e["capacity"]) for e in data.get("edges", [])]
        return cls(nodes, edges, data.get("source"), data.get("sink"))

    def to_dict(self) -> Dict[str, Any]:
        """Return the input contract shape (flows are not included)."""
        return {
            "source": self.source,
            "sink": self.sink,
            "nodes": [node.to_dict() for node in self._nodes.values()],
            "edges": [
                {"from": e.source, "to": e.target, "capacity": e.capacity}
                for e in self._edges
            ],
        }

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return tuple(self._nodes.values())

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    def node(self, node_id: NodeID) -> Node:
        return self._nodes[node_id]

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def edge(self, source: NodeID, target: NodeID) -> Optional[Edge]:
        """Return the edge ``source -> target`` or None."""
        return self._index.get((source, target))

    def incident_edges(self, node_id: NodeID) -> Tuple[Edge, ...]:
        """Edges entering or leaving ``node_id``, in insertion order."""
        return tuple(self._incident[node_id])

    def reset_flow(self) -> None:
        for edge in self._edges:
            edge.flow = 0

    def copy(self) -> "FlowNetwork":
        """Return a deep, independent copy including current flows."""
        clone = FlowNetwork(
            self._nodes.values(),
            [(e.source, e.target, e.capacity) for e in self._edges],
            self.source,
            self.sink,
        )
        for original, copied in zip(self._edges, clone._edges):
            copied.flow = original.flow
        return clone

    def edge_states(self) -> Tuple[EdgeState, ...]:
        """Immutable snapshot of every edge, in insertion order."""
        return tuple(edge.state() for edge in self._edges)

    def excess(self, node_id: NodeID) -> int:
        """Inflow minus outflow at ``node_id``."""
        total = 0
        for edge in self._incident[node_id]:
            if edge.target == node_id:
                total += edge.flow
            else:
                total -= edge.flow
        return total

    def flow_value(self) -> int:
        """Net flow leaving the source."""
        return -self.excess(self.source)

    def __repr__(self) -> str:
        return (
            f"FlowNetwork(nodes={len(self._nodes)}, edges={len(self._edges)}, "
            f"source={self.source!r}, sink={self.sink!r})"
        )
