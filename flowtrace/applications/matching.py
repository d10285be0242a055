"""Maximum bipartite matching reduced to unit-capacity max flow."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from flowtrace.algorithms.max_flow import trace_max_flow
from flowtrace.model.network import FlowNetwork, Node
from flowtrace.results.trace import Trace
from flowtrace.types.base import NodeID

MATCH_SOURCE = "__source__"
MATCH_SINK = "__sink__"


def bipartite_network(
    left: Sequence[NodeID],
    right: Sequence[NodeID],
    pairs: Iterable[Tuple[NodeID, NodeID]],
) -> FlowNetwork:
    """Build the unit-capacity flow network for a bipartite graph.

    The network has edges ``source -> l`` for every left node, ``l -> r`` for
    every allowed pair and ``r -> sink`` for every right node, all with
    capacity 1.

    Raises:
        ValueError: If a node id collides with the synthetic terminals or
            appears on both sides.
    """
    reserved = {MATCH_SOURCE, MATCH_SINK}
    clash = reserved.intersection(left) | reserved.intersection(right)
    if clash:
        raise ValueError(f"Node ids {sorted(clash)} are reserved")
    both = set(left).intersection(right)
    if both:
        raise ValueError(f"Nodes {sorted(both)} appear on both sides")

    nodes = [Node(MATCH_SOURCE, "Source")]
    nodes += [Node(n, attrs={"side": "left"}) for n in left]
    nodes += [Node(n, attrs={"side": "right"}) for n in right]
    nodes.append(Node(MATCH_SINK, "Sink"))

    edges = [(MATCH_SOURCE, n, 1) for n in left]
    edges += [(u, v, 1) for u, v in pairs]
    edges += [(n, MATCH_SINK, 1) for n in right]
    return FlowNetwork(nodes, edges, MATCH_SOURCE, MATCH_SINK)


def max_bipartite_matching(
    left: Sequence[NodeID],
    right: Sequence[NodeID],
    pairs: Iterable[Tuple[NodeID, NodeID]],
) -> Tuple[int, List[Tuple[NodeID, NodeID]], Trace]:
    """Find a maximum matching and the trace that produced it.

    Returns:
        ``(size, matches, trace)`` where ``matches`` lists the matched
        ``(left, right)`` pairs in the order the pairs were given.
    """
    network = bipartite_network(left, right, pairs)
    trace = trace_max_flow(network)
    left_ids = set(left)
    matches = [
        (e.source, e.target)
        for e in trace.final_step.edges
        if e.source in left_ids and e.target != MATCH_SINK and e.flow > 0
    ]
    return trace.max_flow, matches, trace
