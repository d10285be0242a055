from __future__ import annotations

from collections import deque
from typing import Dict, Iterator, Optional

from flowtrace.model.network import FlowNetwork
from flowtrace.types.base import NodeID, PathTuple


def residual_neighbors(network: FlowNetwork, node_id: NodeID) -> Iterator[NodeID]:
    """Yield heads of residual arcs leaving ``node_id`` without materializing them.

    Incident edges are scanned in insertion order. An outgoing edge with unused
    capacity gives a forward arc; an incoming edge carrying flow gives a
    backward arc.
    """
    for edge in network.incident_edges(node_id):
        if edge.source == node_id:
            if edge.flow < edge.capacity:
                yield edge.target
        elif edge.flow > 0:
            yield edge.source


def find_augmenting_path(
    network: FlowNetwork,
    source: Optional[NodeID] = None,
    sink: Optional[NodeID] = None,
) -> Optional[PathTuple]:
    """
    Breadth-first search for a shortest augmenting path.

    The search stops as soon as the sink is dequeued and rebuilds the path from
    parent pointers. Each node is enqueued at most once.

    Args:
        network: Network with its current flow.
        source: Start node; defaults to ``network.source``.
        sink: Target node; defaults to ``network.sink``.

    Returns:
        Node ids from source to sink inclusive, or None when the sink is not
        reachable in the residual graph.
    """
    src = network.source if source is None else source
    dst = network.sink if sink is None else sink

    parent: Dict[NodeID, Optional[NodeID]] = {src: None}
    queue = deque([src])
    while queue:
        node_id = queue.popleft()
        if node_id == dst:
            path = [dst]
            prev = parent[dst]
            while prev is not None:
                path.append(prev)
                prev = parent[prev]
            path.reverse()
            return tuple(path)

        for neighbor_id in residual_neighbors(network, node_id):
            if neighbor_id not in parent:
                parent[neighbor_id] = node_id
                queue.append(neighbor_id)
    return None
