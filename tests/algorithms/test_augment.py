import pytest

from flowtrace.algorithms.augment import augment_path, path_bottleneck
from flowtrace.model.errors import FlowConsistencyError


class TestBottleneck:
    def test_minimum_along_path(self, classic):
        assert path_bottleneck(classic, ("s", "a", "c", "t")) == 6

    def test_uses_backward_residual(self, cancel1):
        cancel1.edge("a", "b").flow = 1
        assert path_bottleneck(cancel1, ("c", "b", "a")) == 1

    def test_short_path_is_fault(self, classic):
        with pytest.raises(FlowConsistencyError):
            path_bottleneck(classic, ("s",))

    def test_missing_edge_is_fault(self, classic):
        with pytest.raises(FlowConsistencyError):
            path_bottleneck(classic, ("s", "t"))

    def test_saturated_hop_is_fault(self, line1):
        line1.edge("a", "t").flow = 3
        with pytest.raises(FlowConsistencyError):
            path_bottleneck(line1, ("s", "a", "t"))


class TestAugment:
    def test_forward_augmentation(self, classic):
        applied = augment_path(classic, ("s", "a", "c", "t"))
        assert applied == 6
        assert classic.edge("s", "a").flow == 6
        assert classic.edge("a", "c").flow == 6
        assert classic.edge("c", "t").flow == 6
        assert classic.edge("s", "b").flow == 0

    def test_backward_hop_cancels_flow(self, cancel1):
        for u, v in (("s", "a"), ("a", "b"), ("b", "t")):
            cancel1.edge(u, v).flow = 1
        augment_path(cancel1, ("s", "c", "b", "a", "d", "e", "t"))
        assert cancel1.edge("a", "b").flow == 0
        assert cancel1.edge("c", "b").flow == 1
        assert cancel1.edge("a", "d").flow == 1
        assert cancel1.flow_value() == 2

    def test_antiparallel_cancels_before_adding(self, antiparallel1):
        antiparallel1.edge("b", "a").flow = 2
        antiparallel1.edge("s", "a").flow = 0
        augment_path(antiparallel1, ("a", "b"), 3)
        assert antiparallel1.edge("b", "a").flow == 0
        assert antiparallel1.edge("a", "b").flow == 1

    def test_explicit_amount_over_capacity_is_fault(self, line1):
        with pytest.raises(FlowConsistencyError):
            augment_path(line1, ("s", "a", "t"), 4)

    def test_non_positive_amount_is_fault(self, line1):
        with pytest.raises(FlowConsistencyError):
            augment_path(line1, ("s", "a", "t"), 0)

    def test_no_forward_edge_is_fault(self, classic):
        with pytest.raises(FlowConsistencyError):
            augment_path(classic, ("c", "a"), 1)

    def test_fault_is_not_clamped(self, line1):
        with pytest.raises(FlowConsistencyError):
            augment_path(line1, ("s", "a"), 6)
        # The edge is left out of bounds for inspection, never silently clamped
        assert line1.edge("s", "a").flow == 6
