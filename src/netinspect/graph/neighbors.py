"""
Neighbor Resolver.

Splits a node's direct connections into incoming and outgoing edges, in the
direction tokens flow:

    place --(input)--> transition --(output)--> place

For a transition that is a straight read of its ``input``/``output`` maps.
For a place the roles invert: a transition that takes the place as *input*
is an **outgoing** neighbor of the place, and one that *outputs* into it is
an **incoming** neighbor.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, NamedTuple, Optional

from ..core.types import Node, PetriNet, Place, Signature, Transition


class Neighbor(NamedTuple):
    """The node on the other end of an edge, and that edge's signature.

    ``node`` is ``None`` only when the edge names a place missing from the
    net, which non-strict loading tolerates.
    """
    node: Optional[Node]
    signature: Signature


NeighborMap = Dict[str, Neighbor]


@dataclass(frozen=True)
class DirectedNeighbors:
    incoming: NeighborMap = field(default_factory=dict)
    outgoing: NeighborMap = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.incoming and not self.outgoing

    def neighbor_ids(self) -> List[str]:
        """Incoming ids, then outgoing ids not already listed."""
        ids = list(self.incoming)
        ids.extend(nid for nid in self.outgoing if nid not in self.incoming)
        return ids


def place_transitions(place_id: str, transitions: Iterable[Transition]) -> List[Transition]:
    """Transitions that consume or produce ``place_id``, in the given order."""
    return [
        transition for transition in transitions
        if place_id in transition.input or place_id in transition.output
    ]


def directed_neighbors(node_id: str, net: PetriNet) -> DirectedNeighbors:
    """
    Resolve the direct incoming and outgoing neighbors of a node.

    Unknown ids resolve to two empty maps.
    """
    transition = net.transitions.get(node_id)
    if transition is not None:
        return _transition_neighbors(transition, net)

    place = net.places.get(node_id)
    if place is not None:
        return _place_neighbors(place, net)

    return DirectedNeighbors()


def _transition_neighbors(transition: Transition, net: PetriNet) -> DirectedNeighbors:
    incoming = {
        place_id: Neighbor(net.places.get(place_id), signature)
        for place_id, signature in transition.input.items()
    }
    outgoing = {
        place_id: Neighbor(net.places.get(place_id), signature)
        for place_id, signature in transition.output.items()
    }
    return DirectedNeighbors(incoming=incoming, outgoing=outgoing)


def _place_neighbors(place: Place, net: PetriNet) -> DirectedNeighbors:
    incoming: NeighborMap = {}
    outgoing: NeighborMap = {}

    for transition in place_transitions(place.id, net.transitions.values()):
        # The place feeds this transition
        if place.id in transition.input:
            outgoing[transition.id] = Neighbor(transition, transition.input[place.id])
        # This transition feeds the place
        if place.id in transition.output:
            incoming[transition.id] = Neighbor(transition, transition.output[place.id])

    return DirectedNeighbors(incoming=incoming, outgoing=outgoing)
