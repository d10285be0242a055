from flowtrace.algorithms.bfs import find_augmenting_path, residual_neighbors


def test_line(line1):
    assert find_augmenting_path(line1) == ("s", "a", "t")


def test_classic_first_path_follows_insertion_order(classic):
    assert find_augmenting_path(classic, "s", "t") == ("s", "a", "c", "t")


def test_deterministic_across_copies(classic):
    assert find_augmenting_path(classic) == find_augmenting_path(classic.copy())


def test_saturated_edge_blocks_path(line1):
    line1.edge("s", "a").flow = 5
    line1.edge("a", "t").flow = 3
    assert find_augmenting_path(line1) is None


def test_disconnected_returns_none(disconnected1):
    assert find_augmenting_path(disconnected1) is None


def test_uses_backward_arcs(cancel1):
    for u, v in (("s", "a"), ("a", "b"), ("b", "t")):
        cancel1.edge(u, v).flow = 1
    assert find_augmenting_path(cancel1) == ("s", "c", "b", "a", "d", "e", "t")


def test_residual_neighbors_order(cancel1):
    cancel1.edge("a", "b").flow = 1
    # b: incoming a->b carries flow (backward to a), b->t has room, c->b is empty
    assert list(residual_neighbors(cancel1, "b")) == ["a", "t"]


def test_explicit_terminals(classic):
    # c is dequeued before b, so d is reached through c
    assert find_augmenting_path(classic, "a", "d") == ("a", "c", "d")
