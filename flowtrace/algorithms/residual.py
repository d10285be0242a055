"""Residual graph derivation."""

from __future__ import annotations

from typing import Iterable, Iterator, Tuple, Union

from flowtrace.model.network import Edge, FlowNetwork
from flowtrace.types.base import NodeID
from flowtrace.types.dto import EdgeState, ResidualEdge


def residual_arcs(edge: Union[Edge, EdgeState]) -> Iterator[ResidualEdge]:
    """Yield the forward arc, then the backward arc, of one edge when positive."""
    if edge.residual > 0:
        yield ResidualEdge(edge.source, edge.target, edge.residual, False)
    if edge.flow > 0:
        yield ResidualEdge(edge.target, edge.source, edge.flow, True)


def residual_edges(
    network: Union[FlowNetwork, Iterable[Union[Edge, EdgeState]]],
) -> Tuple[ResidualEdge, ...]:
    """Return every residual arc of ``network`` as a flat tuple.

    Pure: the network is not modified. Accepts a live ``FlowNetwork`` or any
    iterable of edges/edge snapshots, so a recorded step can be re-derived.

    Args:
        network: Network or edges to derive residual arcs from.

    Returns:
        Residual arcs in edge insertion order; for each edge the forward arc
        (``capacity - flow > 0``) precedes the backward arc (``flow > 0``).
    """
    edges = network.edges if isinstance(network, FlowNetwork) else network
    return tuple(arc for edge in edges for arc in residual_arcs(edge))


def hop_residual(network: FlowNetwork, u: NodeID, v: NodeID) -> int:
    """Residual capacity for moving flow from ``u`` to ``v``.

    Sum of the unused capacity on ``u -> v`` and the cancellable flow on the
    antiparallel edge ``v -> u``. Zero when neither edge exists.
    """
    total = 0
    forward = network.edge(u, v)
    if forward is not None:
        total += forward.capacity - forward.flow
    backward = network.edge(v, u)
    if backward is not None:
        total += backward.flow
    return total
