"""NetworkX graph conversion utilities.

Convert between ``networkx`` directed graphs and ``FlowNetwork``. Useful for
building networks with NetworkX generators and for cross-checking results
against ``networkx.maximum_flow_value``.

Example:
    >>> import networkx as nx
    >>> G = nx.DiGraph()
    >>> G.add_edge("s", "a", capacity=3)
    >>> G.add_edge("a", "t", capacity=2)
    >>> net = from_networkx(G, "s", "t")
    >>> net.edge("a", "t").capacity
    2
"""

from __future__ import annotations

import networkx as nx

from flowtrace.logging import get_logger
from flowtrace.model.network import FlowNetwork, Node
from flowtrace.types.base import NodeID

logger = get_logger(__name__)


def from_networkx(
    G: nx.DiGraph,
    source: NodeID,
    sink: NodeID,
    *,
    capacity_attr: str = "capacity",
    label_attr: str = "label",
) -> FlowNetwork:
    """Build a ``FlowNetwork`` from a directed NetworkX graph.

    Node ids are converted with ``str``; other node attributes are kept as
    ``Node.attrs``. Parallel edges of a multigraph are reported as duplicates
    by network validation.

    Args:
        G: Directed graph (``DiGraph`` or ``MultiDiGraph``).
        source: Source node (converted with ``str``).
        sink: Sink node (converted with ``str``).
        capacity_attr: Edge attribute holding the integer capacity.
        label_attr: Node attribute holding the display label.

    Raises:
        TypeError: If ``G`` is undirected.
        KeyError: If an edge lacks ``capacity_attr``.
        ValidationError: If the resulting network is invalid.
    """
    if not G.is_directed():
        raise TypeError("from_networkx() requires a directed graph")

    nodes = []
    for node_id, data in G.nodes(data=True):
        attrs = {k: v for k, v in data.items() if k != label_attr}
        nodes.append(Node(id=str(node_id), label=str(data.get(label_attr, "")), attrs=attrs))

    edges = []
    for u, v, data in G.edges(data=True):
        if capacity_attr not in data:
            raise KeyError(f"Edge {u!r} -> {v!r} has no '{capacity_attr}' attribute")
        edges.append((str(u), str(v), data[capacity_attr]))

    logger.debug(
        "Converting NetworkX graph with %d nodes and %d edges",
        G.number_of_nodes(),
        G.number_of_edges(),
    )
    return FlowNetwork(nodes, edges, str(source), str(sink))


def to_networkx(network: FlowNetwork) -> nx.DiGraph:
    """Return a ``DiGraph`` with ``capacity``/``flow`` edges and ``label`` nodes."""
    G = nx.DiGraph(source=network.source, sink=network.sink)
    for node in network.nodes:
        G.add_node(node.id, label=node.label, **node.attrs)
    for edge in network.edges:
        G.add_edge(edge.source, edge.target, capacity=edge.capacity, flow=edge.flow)
    return G
