"""
Core data model, store and queries.

The net model and its errors are importable from here directly; the store,
loader and inspector live in their own modules.
"""

from .errors import (
    ConfigError,
    DanglingReferenceError,
    DuplicateNodeError,
    MalformedCostError,
    NetInspectError,
    NetNotLoadedError,
    NetValidationError,
)
from .types import (
    CostCategory,
    CostEntry,
    CostFrequency,
    CostSchema,
    MetaData,
    NodeKind,
    PetriNet,
    Place,
    ScalarCost,
    Signature,
    Transition,
    VectorCost,
)

__all__ = [
    "ConfigError",
    "CostCategory",
    "CostEntry",
    "CostFrequency",
    "CostSchema",
    "DanglingReferenceError",
    "DuplicateNodeError",
    "MalformedCostError",
    "MetaData",
    "NetInspectError",
    "NetNotLoadedError",
    "NetValidationError",
    "NodeKind",
    "PetriNet",
    "Place",
    "ScalarCost",
    "Signature",
    "Transition",
    "VectorCost",
]
