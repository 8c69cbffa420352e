"""Shared fixtures: a small smelting net in both cost schemas."""

import copy
import json

import pytest

from netinspect.core.loader import net_from_dict
from netinspect.core.store import NetStore


SCALAR_NET = {
    "id": "net-1",
    "name": "Smelting",
    "places": {
        "ore": {
            "id": "ore",
            "name": "Iron Ore",
            "tokens": "kg",
            "metaData": [{"type": "agent", "value": "a1"}],
        },
        "ingot": {
            "id": "ingot",
            "name": "Ingot",
            "tokens": "kg",
            "metaData": [
                {"type": "target", "value": ["tg1", "a1"]},
                {"type": "weight", "value": 3},
            ],
        },
        "slag": {"id": "slag", "name": "Slag", "tokens": "sink", "metaData": []},
    },
    "transitions": {
        "smelt": {
            "id": "smelt",
            "name": "Smelt",
            "metaData": [{"type": "agent", "value": "a2"}],
            "input": {"ore": {"type": "static", "value": 2}},
            "output": {
                "ingot": {"type": "static", "value": 1},
                "slag": {"type": "range", "value": [0, 1]},
            },
            "time": 4,
            "cost": 3.5,
        },
        "refine": {
            "id": "refine",
            "name": "Refine",
            "metaData": [],
            "input": {"ingot": {"type": "static", "value": 1}},
            "output": {"ingot": {"type": "static", "value": 1}},
            "time": 1,
            "cost": 1,
        },
    },
    "initialMarking": {"ore": 5},
    "nameLookup": {
        "ore": "Iron Ore",
        "ingot": "Ingot",
        "slag": "Slag",
        "smelt": "Smelt",
        "refine": "Refine",
        "a1": "Robot",
        "a2": "Robot",
        "tg1": "Anvil",
    },
}


@pytest.fixture
def net_data():
    """Raw scalar-cost net document (a fresh copy per test)."""
    return copy.deepcopy(SCALAR_NET)


@pytest.fixture
def vector_net_data(net_data):
    """The same net using the category/frequency cost vectors."""
    net_data["transitions"]["smelt"]["cost"] = [
        {"category": "monetary", "frequency": "once", "value": 2},
        {"category": "ergonomic", "frequency": "extrapolated", "value": 0.5},
    ]
    net_data["transitions"]["refine"]["cost"] = [
        {"category": "monetary", "frequency": "once", "value": 1},
    ]
    return net_data


@pytest.fixture
def net(net_data):
    return net_from_dict(net_data).unwrap()


@pytest.fixture
def store(net):
    return NetStore(net)


@pytest.fixture
def net_file(tmp_path, net_data):
    path = tmp_path / "net.json"
    path.write_text(json.dumps(net_data))
    return path
