"""
Core type definitions for netinspect.

The models mirror the camelCase JSON written by the net generator
(``metaData``, ``initialMarking``, ``nameLookup``) and expose snake_case
attributes. Every model is frozen: a net is built once and only read after.

Cost comes in two schemas across generator versions. It is normalized here
into a tagged union (``ScalarCost`` | ``VectorCost``) so nothing downstream
has to inspect the raw shape.
"""

import logging
from enum import StrEnum
from typing import Annotated, Any, ClassVar, Dict, Iterator, List, Literal, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationError,
    ValidationInfo,
    field_serializer,
    field_validator,
    model_validator,
)

from .errors import (
    DanglingReferenceError,
    DuplicateNodeError,
    MalformedCostError,
    NetValidationError,
)

logger = logging.getLogger(__name__)

Number = Union[int, float]


class NodeKind(StrEnum):
    """The two sides of the bipartite net."""
    PLACE = "place"
    TRANSITION = "transition"


class CostCategory(StrEnum):
    ERGONOMIC = "ergonomic"
    MONETARY = "monetary"


class CostFrequency(StrEnum):
    ONCE = "once"
    EXTRAPOLATED = "extrapolated"


class CostSchema(StrEnum):
    """Which cost representation a whole net uses."""
    SCALAR = "scalar"
    VECTOR = "vector"


_FROZEN = ConfigDict(frozen=True, populate_by_name=True)


class Signature(BaseModel):
    """
    Weight attached to one transition-place edge.

    ``value`` is either a fixed quantity or an inclusive ``(min, max)`` range.
    """
    type: str
    value: Union[int, float, Tuple[Number, Number]]

    model_config = _FROZEN

    @model_validator(mode="after")
    def _check_range(self) -> "Signature":
        if isinstance(self.value, tuple) and self.value[0] > self.value[1]:
            raise ValueError(
                f"range minimum {self.value[0]} exceeds maximum {self.value[1]}"
            )
        return self

    @property
    def is_range(self) -> bool:
        return isinstance(self.value, tuple)

    @property
    def bounds(self) -> Tuple[Number, Number]:
        """Return ``(min, max)``; a fixed quantity is its own range."""
        if isinstance(self.value, tuple):
            return self.value
        return (self.value, self.value)


# Strict members: a JSON true/false is rejected instead of read as 1/0
MetaScalar = Union[StrictStr, StrictInt, StrictFloat]
MetaValue = Union[MetaScalar, List[MetaScalar]]


class MetaData(BaseModel):
    """
    Typed annotation on a node.

    String values are entity ids resolved through the net's name lookup;
    numbers are literal values.
    """
    type: str
    value: Optional[MetaValue] = None

    model_config = _FROZEN

    def as_list(self) -> List[Union[str, Number]]:
        """Flatten ``value`` into a list (empty when absent)."""
        if self.value is None:
            return []
        if isinstance(self.value, list):
            return list(self.value)
        return [self.value]


class CostEntry(BaseModel):
    """One component of a vector cost."""
    category: CostCategory
    frequency: CostFrequency
    value: float

    model_config = _FROZEN


class ScalarCost(BaseModel):
    kind: Literal["scalar"] = "scalar"
    value: float = 0.0

    model_config = _FROZEN


class VectorCost(BaseModel):
    kind: Literal["vector"] = "vector"
    entries: Tuple[CostEntry, ...] = ()

    model_config = _FROZEN


Cost = Annotated[Union[ScalarCost, VectorCost], Field(discriminator="kind")]


def coerce_cost(raw: Any, node_id: str) -> Union[ScalarCost, VectorCost]:
    """
    Normalize a raw ``cost`` field into the tagged union.

    Accepts a number (scalar schema), a list of ``{category, frequency, value}``
    objects (vector schema), an already tagged dict or model, or ``None``.

    Raises:
        MalformedCostError: If the value fits neither schema.
    """
    if isinstance(raw, (ScalarCost, VectorCost)):
        return raw
    if raw is None:
        return ScalarCost()
    if isinstance(raw, bool):
        raise MalformedCostError(
            node_id, "cost", "expected a number or a list of cost entries, got bool"
        )
    if isinstance(raw, (int, float)):
        return ScalarCost(value=raw)

    try:
        if isinstance(raw, list):
            return VectorCost(entries=tuple(CostEntry.model_validate(e) for e in raw))
        if isinstance(raw, dict) and raw.get("kind") == "scalar":
            return ScalarCost.model_validate(raw)
        if isinstance(raw, dict) and raw.get("kind") == "vector":
            return VectorCost.model_validate(raw)
    except ValidationError as e:
        first = e.errors()[0]
        raise MalformedCostError(
            node_id, "cost", f"invalid cost entry: {first['msg']}"
        ) from e

    raise MalformedCostError(
        node_id,
        "cost",
        f"expected a number or a list of cost entries, got {type(raw).__name__}",
    )


class Place(BaseModel):
    """A resource/state node."""
    kind: ClassVar[NodeKind] = NodeKind.PLACE

    id: str
    name: str
    tokens: str = ""
    meta_data: List[MetaData] = Field(default_factory=list, alias="metaData")

    model_config = _FROZEN

    def __hash__(self):
        return hash(self.id)


class Transition(BaseModel):
    """An action node consuming ``input`` places and producing ``output`` places."""
    kind: ClassVar[NodeKind] = NodeKind.TRANSITION

    id: str
    name: str
    meta_data: List[MetaData] = Field(default_factory=list, alias="metaData")
    input: Dict[str, Signature] = Field(default_factory=dict)
    output: Dict[str, Signature] = Field(default_factory=dict)
    time: float = 0.0
    cost: Cost = Field(default_factory=ScalarCost)

    model_config = _FROZEN

    @field_validator("cost", mode="before")
    @classmethod
    def _coerce_cost(cls, raw: Any, info: ValidationInfo) -> Any:
        return coerce_cost(raw, info.data.get("id", "<unknown>"))

    @field_serializer("cost")
    def _dump_cost(self, cost: Union[ScalarCost, VectorCost]) -> Any:
        # Write back the generator's raw shape, not the tagged form.
        if isinstance(cost, ScalarCost):
            return cost.value
        return [entry.model_dump(mode="json") for entry in cost.entries]

    def __hash__(self):
        return hash(self.id)


Node = Union[Place, Transition]


class PetriNet(BaseModel):
    """
    The whole net, loaded once and then treated as read-only.

    Edge/marking keys that name a missing place are logged and kept; the
    views show them by raw id. Validation context key ``strict_references``
    (default False) makes them fatal instead.
    """
    id: str
    name: str
    places: Dict[str, Place] = Field(default_factory=dict)
    transitions: Dict[str, Transition] = Field(default_factory=dict)
    initial_marking: Dict[str, int] = Field(default_factory=dict, alias="initialMarking")
    name_lookup: Dict[str, str] = Field(default_factory=dict, alias="nameLookup")

    model_config = _FROZEN

    @field_validator("initial_marking")
    @classmethod
    def _check_marking(cls, marking: Dict[str, int]) -> Dict[str, int]:
        for place_id, count in marking.items():
            if count < 0:
                raise NetValidationError(
                    place_id, "initialMarking", f"negative token count {count}"
                )
        return marking

    @model_validator(mode="after")
    def _check_integrity(self, info: ValidationInfo) -> "PetriNet":
        strict = False
        if info.context:
            strict = info.context.get("strict_references", False)

        for key, place in self.places.items():
            if key != place.id:
                raise NetValidationError(
                    key, "places", f"keyed as {key!r} but declares id {place.id!r}"
                )
        for key, transition in self.transitions.items():
            if key != transition.id:
                raise NetValidationError(
                    key, "transitions", f"keyed as {key!r} but declares id {transition.id!r}"
                )

        overlap = self.places.keys() & self.transitions.keys()
        if overlap:
            raise DuplicateNodeError(
                sorted(overlap)[0], "id", "used by both a place and a transition"
            )

        for node_id, field_name, place_id in self.dangling_place_refs():
            _report_dangling(strict, node_id, field_name, place_id)

        schema = self.cost_schema
        for transition in self.transitions.values():
            if transition.cost.kind != schema.value:
                raise MalformedCostError(
                    transition.id,
                    "cost",
                    f"uses the {transition.cost.kind} cost schema but the net uses {schema.value}",
                )
        return self

    @property
    def cost_schema(self) -> CostSchema:
        """The schema of the first transition; empty nets count as scalar."""
        for transition in self.transitions.values():
            return CostSchema(transition.cost.kind)
        return CostSchema.SCALAR

    def get_node(self, node_id: str) -> Optional[Node]:
        """Retrieve a place or transition by ID."""
        if node_id in self.transitions:
            return self.transitions[node_id]
        return self.places.get(node_id)

    def node_kind(self, node_id: str) -> Optional[NodeKind]:
        node = self.get_node(node_id)
        return node.kind if node is not None else None

    def iter_nodes(self) -> Iterator[Node]:
        """Places first, then transitions, each in map order."""
        yield from self.places.values()
        yield from self.transitions.values()

    def dangling_place_refs(self) -> List[Tuple[str, str, str]]:
        """``(node_id, field, place_id)`` for every edge/marking key naming a missing place."""
        refs: List[Tuple[str, str, str]] = []
        for transition in self.transitions.values():
            for field_name, edges in (("input", transition.input), ("output", transition.output)):
                for place_id in edges:
                    if place_id not in self.places:
                        refs.append((transition.id, field_name, place_id))

        for place_id in self.initial_marking:
            if place_id not in self.places:
                refs.append((place_id, "initialMarking", place_id))
        return refs

    def dangling_metadata_ids(self) -> List[str]:
        """Metadata ids with no ``name_lookup`` entry, in first-seen order."""
        from ..graph.metadata import unique_referenced_ids

        missing: List[str] = []
        for node in self.iter_nodes():
            for ref in unique_referenced_ids(node.meta_data):
                if ref not in self.name_lookup and ref not in missing:
                    missing.append(ref)
        return missing


def _report_dangling(strict: bool, node_id: str, field_name: str, place_id: str) -> None:
    if strict:
        raise DanglingReferenceError(
            node_id, field_name, f"references unknown place {place_id!r}"
        )
    logger.warning(f"{field_name} of {node_id} references unknown place {place_id!r}")
