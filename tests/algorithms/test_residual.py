from flowtrace.algorithms.residual import hop_residual, residual_edges
from flowtrace.types.dto import ResidualEdge


def test_zero_flow_has_only_forward_arcs(line1):
    assert residual_edges(line1) == (
        ResidualEdge("s", "a", 5, False),
        ResidualEdge("a", "t", 3, False),
    )


def test_partial_flow_gives_both_directions(line1):
    line1.edge("s", "a").flow = 2
    arcs = residual_edges(line1)
    assert arcs[:2] == (
        ResidualEdge("s", "a", 3, False),
        ResidualEdge("a", "s", 2, True),
    )


def test_saturated_edge_only_backward(line1):
    line1.edge("a", "t").flow = 3
    arcs = residual_edges(line1)
    assert ResidualEdge("t", "a", 3, True) in arcs
    assert all(not (a.source == "a" and a.target == "t") for a in arcs)


def test_zero_capacity_edge_has_no_arcs():
    from flowtrace.model.network import FlowNetwork

    net = FlowNetwork(["s", "t"], [("s", "t", 0)], "s", "t")
    assert residual_edges(net) == ()


def test_is_pure(line1):
    line1.edge("s", "a").flow = 1
    before = line1.edge_states()
    residual_edges(line1)
    assert line1.edge_states() == before


def test_accepts_edge_snapshots(line1):
    line1.edge("s", "a").flow = 1
    assert residual_edges(line1.edge_states()) == residual_edges(line1)


def test_hop_residual_combines_antiparallel_edges(antiparallel1):
    antiparallel1.edge("b", "a").flow = 2
    # a->b has 3 unused plus 2 cancellable on b->a
    assert hop_residual(antiparallel1, "a", "b") == 5
    assert hop_residual(antiparallel1, "b", "a") == 0
    assert hop_residual(antiparallel1, "s", "t") == 0
