import pytest

from flowtrace.model.errors import ValidationError, ValidationErrorKind
from flowtrace.model.network import Edge, FlowNetwork, Node


class TestConstruction:
    def test_nodes_and_edges_keep_insertion_order(self, classic):
        assert [n.id for n in classic.nodes] == ["s", "a", "b", "c", "d", "t"]
        assert [(e.source, e.target) for e in classic.edges][:3] == [
            ("s", "a"),
            ("s", "b"),
            ("a", "c"),
        ]

    def test_flow_starts_at_zero(self, classic):
        assert all(e.flow == 0 for e in classic.edges)

    def test_label_defaults_to_id(self):
        net = FlowNetwork(["s", Node("t", "Sink")], [("s", "t", 1)], "s", "t")
        assert net.node("s").label == "s"
        assert net.node("t").label == "Sink"

    def test_accepts_edge_objects(self):
        net = FlowNetwork(["s", "t"], [Edge("s", "t", 3, flow=2)], "s", "t")
        assert net.edge("s", "t").capacity == 3
        # Input flow is ignored; networks always start empty
        assert net.edge("s", "t").flow == 0

    def test_antiparallel_edges_are_independent(self, antiparallel1):
        assert antiparallel1.edge("a", "b").capacity == 3
        assert antiparallel1.edge("b", "a").capacity == 2

    def test_zero_capacity_is_allowed(self):
        net = FlowNetwork(["s", "t"], [("s", "t", 0)], "s", "t")
        assert net.edge("s", "t").capacity == 0


class TestValidation:
    """Each malformed definition is rejected with a specific kind."""

    @pytest.mark.parametrize(
        "nodes, edges, source, sink, kind",
        [
            (["s", "t"], [("s", "x", 1)], "s", "t", ValidationErrorKind.UNKNOWN_NODE),
            (["s", "t"], [("x", "t", 1)], "s", "t", ValidationErrorKind.UNKNOWN_NODE),
            (["s", "t"], [("s", "t", -1)], "s", "t", ValidationErrorKind.NEGATIVE_CAPACITY),
            (["s", "t"], [("s", "t", 1.5)], "s", "t", ValidationErrorKind.INVALID_CAPACITY),
            (["s", "t"], [("s", "t", True)], "s", "t", ValidationErrorKind.INVALID_CAPACITY),
            (["s", "t"], [("s", "s", 1)], "s", "t", ValidationErrorKind.SELF_LOOP),
            (
                ["s", "t"],
                [("s", "t", 1), ("s", "t", 2)],
                "s",
                "t",
                ValidationErrorKind.DUPLICATE_EDGE,
            ),
            (["s", "s", "t"], [], "s", "t", ValidationErrorKind.DUPLICATE_NODE),
            (["s", "t"], [], "x", "t", ValidationErrorKind.MISSING_TERMINAL),
            (["s", "t"], [], "s", None, ValidationErrorKind.MISSING_TERMINAL),
            (["s", "t"], [], "s", "s", ValidationErrorKind.SAME_TERMINAL),
            ([1, 2, 3], [(1, 2, 3), (2, 3, 2)], 1, 3, ValidationErrorKind.INVALID_NODE),
            ([Node(1), "t"], [], "t", 1, ValidationErrorKind.INVALID_NODE),
            (["s", "", "t"], [], "s", "t", ValidationErrorKind.INVALID_NODE),
        ],
    )
    def test_rejects(self, nodes, edges, source, sink, kind):
        with pytest.raises(ValidationError) as exc_info:
            FlowNetwork(nodes, edges, source, sink)
        assert exc_info.value.kind is kind

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            FlowNetwork(["s", "t"], [("s", "t", -1)], "s", "t")

    def test_rejection_is_logged(self, caplog):
        with caplog.at_level("ERROR", logger="flowtrace"):
            with pytest.raises(ValidationError):
                FlowNetwork(["s", "t"], [("s", "q", 1)], "s", "t")
        assert "unknown node 'q'" in caplog.text


class TestOperations:
    def test_edge_lookup(self, classic):
        assert classic.edge("a", "c").capacity == 6
        assert classic.edge("c", "a") is None

    def test_incident_edges(self, classic):
        pairs = [(e.source, e.target) for e in classic.incident_edges("b")]
        assert pairs == [("s", "b"), ("a", "b"), ("b", "d")]

    def test_reset_flow(self, line1):
        line1.edge("s", "a").flow = 3
        line1.reset_flow()
        assert line1.edge("s", "a").flow == 0

    def test_copy_is_independent(self, line1):
        line1.edge("s", "a").flow = 2
        clone = line1.copy()
        assert clone.edge("s", "a").flow == 2

        clone.edge("s", "a").flow = 5
        assert line1.edge("s", "a").flow == 2
        assert clone.edge("s", "a") is not line1.edge("s", "a")

    def test_edge_states_are_snapshots(self, line1):
        states = line1.edge_states()
        line1.edge("s", "a").flow = 3
        assert states[0].flow == 0

    def test_excess_and_flow_value(self, line1):
        line1.edge("s", "a").flow = 3
        line1.edge("a", "t").flow = 3
        assert line1.excess("a") == 0
        assert line1.excess("t") == 3
        assert line1.flow_value() == 3

    def test_dict_round_trip(self):
        data = {
            "source": "s",
            "sink": "t",
            "nodes": [
                {"id": "s", "label": "Source", "attrs": {"x": 1}},
                "t",
            ],
            "edges": [{"from": "s", "to": "t", "capacity": 4}],
        }
        net = FlowNetwork.from_dict(data)
        assert net.node("s").attrs == {"x": 1}
        again = FlowNetwork.from_dict(net.to_dict())
        assert again.to_dict() == net.to_dict()
        assert again.node("t").label == "t"

    def test_contains_and_repr(self, classic):
        assert "a" in classic
        assert "z" not in classic
        assert "edges=8" in repr(classic)
