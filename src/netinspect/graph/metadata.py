"""
Metadata Aggregator.

Turns a node's metadata list into what the presentation layer draws:
preview chips (one per distinct referenced id) and detail rows (one per
metadata entry, one cell per value).
"""

from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence, Union

from ..core.types import MetaData, Number, Signature
from .colors import FALLBACK_COLOR, Color


@dataclass(frozen=True)
class Chip:
    id: str
    label: str
    color: Color


@dataclass(frozen=True)
class MetaDataCell:
    """One rendered value. Numbers carry no color."""
    value: Union[str, Number]
    label: str
    color: Optional[Color]


@dataclass(frozen=True)
class MetaDataRow:
    type: str
    cells: List[MetaDataCell] = field(default_factory=list)


def unique_referenced_ids(meta_data: Sequence[MetaData]) -> List[str]:
    """
    Entity ids referenced by the metadata, first occurrence first.

    String values and string members of list values are ids; numbers are not.
    """
    seen: List[str] = []
    for entry in meta_data:
        for value in entry.as_list():
            if isinstance(value, str) and value not in seen:
                seen.append(value)
    return seen


def preview_chips(
    meta_data: Sequence[MetaData],
    name_lookup: Mapping[str, str],
    colors: Mapping[str, Color],
    fallback: Color = FALLBACK_COLOR,
) -> List[Chip]:
    return [
        Chip(id=ref, label=name_lookup.get(ref, ref), color=colors.get(ref, fallback))
        for ref in unique_referenced_ids(meta_data)
    ]


def metadata_rows(
    meta_data: Sequence[MetaData],
    name_lookup: Mapping[str, str],
    colors: Mapping[str, Color],
    fallback: Color = FALLBACK_COLOR,
) -> List[MetaDataRow]:
    """Detail view of every entry, keeping duplicates and order."""
    rows = []
    for entry in meta_data:
        cells = []
        for value in entry.as_list():
            if isinstance(value, str):
                cells.append(MetaDataCell(
                    value=value,
                    label=name_lookup.get(value, value),
                    color=colors.get(value, fallback),
                ))
            else:
                cells.append(MetaDataCell(value=value, label=format_number(value), color=None))
        rows.append(MetaDataRow(type=entry.type, cells=cells))
    return rows


def format_number(value: Number) -> str:
    """Integral values print without a trailing ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def signature_label(signature: Signature) -> str:
    """``"5"`` for a fixed quantity, ``"1 - 3"`` for a range."""
    if signature.is_range:
        low, high = signature.bounds
        return f"{format_number(low)} - {format_number(high)}"
    return format_number(signature.value)
