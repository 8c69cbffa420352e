"""Unit tests for cost aggregation."""

from netinspect.core.costs import add_cost_sets, cost_label, total_cost
from netinspect.core.loader import net_from_dict
from netinspect.core.types import (
    CostCategory,
    CostEntry,
    CostFrequency,
    ScalarCost,
    VectorCost,
)


def entry(category, frequency, value):
    return CostEntry(category=category, frequency=frequency, value=value)


class TestAddCostSets:
    def test_merges_matching_buckets(self):
        a = [entry("monetary", "once", 2)]
        b = [entry("monetary", "once", 3), entry("ergonomic", "once", 1)]
        merged = add_cost_sets(a, b)
        assert merged == [
            entry("ergonomic", "once", 1),
            entry("monetary", "once", 5),
        ]

    def test_fixed_bucket_order(self):
        merged = add_cost_sets(
            [entry("monetary", "extrapolated", 1), entry("ergonomic", "extrapolated", 1)],
            [entry("monetary", "once", 1)],
        )
        assert [(e.frequency, e.category) for e in merged] == [
            (CostFrequency.ONCE, CostCategory.MONETARY),
            (CostFrequency.EXTRAPOLATED, CostCategory.ERGONOMIC),
            (CostFrequency.EXTRAPOLATED, CostCategory.MONETARY),
        ]

    def test_zero_sums_dropped(self):
        assert add_cost_sets([entry("monetary", "once", 0)], []) == []
        assert add_cost_sets([], []) == []


class TestTotalCost:
    def test_scalar_net(self, net):
        assert total_cost(net) == ScalarCost(value=4.5)

    def test_vector_net(self, vector_net_data):
        net = net_from_dict(vector_net_data).unwrap()
        total = total_cost(net)
        assert isinstance(total, VectorCost)
        assert list(total.entries) == [
            entry("monetary", "once", 3),
            entry("ergonomic", "extrapolated", 0.5),
        ]


class TestCostLabel:
    def test_scalar(self):
        assert cost_label(ScalarCost(value=3.5)) == "3.5"
        assert cost_label(ScalarCost(value=2.0)) == "2"

    def test_vector(self):
        cost = VectorCost(entries=(entry("monetary", "once", 2),))
        assert cost_label(cost) == "monetary/once: 2"

    def test_empty_vector(self):
        assert cost_label(VectorCost()) == "0"
