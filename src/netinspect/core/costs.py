"""
Cost aggregation over the two cost schemas.

Scalar nets add plain numbers. Vector nets add per (frequency, category)
bucket, visited in a fixed order so totals always list the same way.
"""

from typing import Iterable, List, Union

from .types import (
    CostCategory,
    CostEntry,
    CostFrequency,
    CostSchema,
    PetriNet,
    ScalarCost,
    VectorCost,
)

_FREQUENCIES = (CostFrequency.ONCE, CostFrequency.EXTRAPOLATED)
_CATEGORIES = (CostCategory.ERGONOMIC, CostCategory.MONETARY)


def add_cost_sets(a: Iterable[CostEntry], b: Iterable[CostEntry]) -> List[CostEntry]:
    """
    Merge two vector costs bucket by bucket.

    Buckets whose sum is not positive are dropped.
    """
    entries = list(a) + list(b)
    result = []
    for frequency in _FREQUENCIES:
        for category in _CATEGORIES:
            total = sum(
                e.value for e in entries
                if e.frequency == frequency and e.category == category
            )
            if total > 0:
                result.append(CostEntry(category=category, frequency=frequency, value=total))
    return result


def total_cost(net: PetriNet) -> Union[ScalarCost, VectorCost]:
    """Sum of every transition's cost, in the net's own schema."""
    if net.cost_schema is CostSchema.SCALAR:
        return ScalarCost(value=sum(t.cost.value for t in net.transitions.values()))

    entries: List[CostEntry] = []
    for transition in net.transitions.values():
        entries = add_cost_sets(entries, transition.cost.entries)
    return VectorCost(entries=tuple(entries))


def cost_label(cost: Union[ScalarCost, VectorCost]) -> str:
    """Short text for a cost, e.g. ``"3.5"`` or ``"monetary/once: 2"``."""
    from ..graph.metadata import format_number

    if isinstance(cost, ScalarCost):
        return format_number(cost.value)
    if not cost.entries:
        return "0"
    return ", ".join(
        f"{e.category}/{e.frequency}: {format_number(e.value)}" for e in cost.entries
    )
