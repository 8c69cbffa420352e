"""Unit tests for directed neighbor resolution."""

from netinspect.core.loader import net_from_dict
from netinspect.core.types import PetriNet, Signature
from netinspect.graph.neighbors import (
    DirectedNeighbors,
    Neighbor,
    directed_neighbors,
    place_transitions,
)


def minimal_net() -> PetriNet:
    return PetriNet.model_validate({
        "id": "n",
        "name": "minimal",
        "places": {"p1": {"id": "p1", "name": "P1", "tokens": "kg", "metaData": []}},
        "transitions": {
            "t1": {
                "id": "t1",
                "name": "T1",
                "metaData": [],
                "input": {"p1": {"type": "qty", "value": 5}},
                "output": {},
                "time": 0,
                "cost": 0,
            }
        },
        "initialMarking": {},
        "nameLookup": {},
    })


class TestMinimalScenario:
    def test_transition_view(self):
        net = minimal_net()
        result = directed_neighbors("t1", net)
        assert result.incoming == {
            "p1": Neighbor(net.places["p1"], Signature(type="qty", value=5))
        }
        assert result.outgoing == {}

    def test_place_view_inverts_roles(self):
        net = minimal_net()
        result = directed_neighbors("p1", net)
        assert result.incoming == {}
        assert result.outgoing == {
            "t1": Neighbor(net.transitions["t1"], Signature(type="qty", value=5))
        }


class TestTransitionNeighbors:
    def test_key_sets_match_edges(self, net):
        for transition in net.transitions.values():
            result = directed_neighbors(transition.id, net)
            assert list(result.incoming) == list(transition.input)
            assert list(result.outgoing) == list(transition.output)
            for place_id, (node, signature) in result.incoming.items():
                assert node is net.places[place_id]
                assert signature == transition.input[place_id]
            for place_id, (node, signature) in result.outgoing.items():
                assert signature == transition.output[place_id]


class TestPlaceNeighbors:
    def test_every_edge_seen_from_the_place(self, net):
        for transition in net.transitions.values():
            for place_id, signature in transition.input.items():
                outgoing = directed_neighbors(place_id, net).outgoing
                assert outgoing[transition.id] == Neighbor(transition, signature)
            for place_id, signature in transition.output.items():
                incoming = directed_neighbors(place_id, net).incoming
                assert incoming[transition.id] == Neighbor(transition, signature)

    def test_ore_feeds_smelt(self, net):
        result = directed_neighbors("ore", net)
        assert list(result.outgoing) == ["smelt"]
        assert result.incoming == {}

    def test_self_loop_appears_on_both_sides(self, net):
        result = directed_neighbors("ingot", net)
        assert list(result.incoming) == ["smelt", "refine"]
        assert list(result.outgoing) == ["refine"]
        assert result.neighbor_ids() == ["smelt", "refine"]

    def test_range_signature_preserved(self, net):
        (node, signature), = directed_neighbors("slag", net).incoming.values()
        assert node.id == "smelt"
        assert signature.bounds == (0, 1)

    def test_place_transitions(self, net):
        touching = place_transitions("ingot", net.transitions.values())
        assert [t.id for t in touching] == ["smelt", "refine"]
        assert place_transitions("nowhere", net.transitions.values()) == []


class TestEdgeCases:
    def test_unknown_id_is_empty(self, net):
        result = directed_neighbors("ghost", net)
        assert result == DirectedNeighbors()
        assert result.is_empty

    def test_metadata_only_id_is_empty(self, net):
        assert directed_neighbors("a1", net).is_empty

    def test_idempotent(self, net):
        for node in net.iter_nodes():
            assert directed_neighbors(node.id, net) == directed_neighbors(node.id, net)

    def test_dangling_edge_has_no_node(self, net_data):
        net_data["transitions"]["smelt"]["input"]["coal"] = {"type": "static", "value": 1}
        net = net_from_dict(net_data).unwrap()
        neighbor = directed_neighbors("smelt", net).incoming["coal"]
        assert neighbor.node is None
        assert neighbor.signature.value == 1
