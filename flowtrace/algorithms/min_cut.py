"""Minimum s-t cut extraction from a maximum flow."""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterable, List, Sequence, Union

from flowtrace.algorithms.residual import residual_edges
from flowtrace.model.network import Edge, FlowNetwork
from flowtrace.types.base import NodeID
from flowtrace.types.dto import EdgeState, MinCut, Step


def _reachable(
    edges: Sequence[Union[Edge, EdgeState]], source: NodeID
) -> List[NodeID]:
    adjacency: Dict[NodeID, List[NodeID]] = {}
    for arc in residual_edges(edges):
        adjacency.setdefault(arc.source, []).append(arc.target)

    seen = {source}
    order = [source]
    queue = deque([source])
    while queue:
        node_id = queue.popleft()
        for neighbor_id in adjacency.get(node_id, ()):
            if neighbor_id not in seen:
                seen.add(neighbor_id)
                order.append(neighbor_id)
                queue.append(neighbor_id)
    return order


def _cut_from_edges(
    edges: Sequence[Union[Edge, EdgeState]],
    nodes: Iterable[NodeID],
    source: NodeID,
) -> MinCut:
    source_side = _reachable(edges, source)
    side = set(source_side)
    crossing = tuple(
        EdgeState(e.source, e.target, e.capacity, e.flow)
        for e in edges
        if e.source in side and e.target not in side
    )
    return MinCut(
        source_side=tuple(source_side),
        sink_side=tuple(n for n in nodes if n not in side),
        edges=crossing,
        capacity=sum(e.capacity for e in crossing),
    )


def min_cut(network: FlowNetwork) -> MinCut:
    """Return the minimum cut induced by the current flow of ``network``.

    The source side is the set of nodes reachable from the source over
    residual arcs. The result is a minimum cut only when the flow is maximal,
    e.g. after ``trace_max_flow`` has run on the network.
    """
    return _cut_from_edges(
        network.edges, [n.id for n in network.nodes], network.source
    )


def min_cut_from_step(
    step: Step, nodes: Iterable[NodeID], source: NodeID
) -> MinCut:
    """Return the cut induced by the edge snapshot recorded in ``step``."""
    return _cut_from_edges(step.edges, nodes, source)
