"""Graphviz DOT export of a whole net."""

from typing import List, Mapping

from ..core.types import PetriNet, Place
from .colors import FALLBACK_COLOR, Color
from .metadata import signature_label, unique_referenced_ids


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return '"' + escaped + '"'


def place_color(
    place: Place, colors: Mapping[str, Color], fallback: Color = FALLBACK_COLOR
) -> Color:
    """Color of the first metadata id the place references."""
    for ref in unique_referenced_ids(place.meta_data):
        if ref in colors:
            return colors[ref]
    return fallback


def to_dot(
    net: PetriNet, colors: Mapping[str, Color], fallback: Color = FALLBACK_COLOR
) -> str:
    """
    Render the net as a DOT digraph.

    Places are filled circles labelled with their initial marking,
    transitions are boxes. Input edges point place -> transition and output
    edges transition -> place, each labelled with its signature.
    """
    lines: List[str] = [f"digraph {_quote(net.name)} {{"]
    lines.append("  rankdir=LR;")
    lines.append('  fontname="helvetica";')
    lines.append("")

    for place in net.places.values():
        marking = net.initial_marking.get(place.id, 0)
        label = f"{place.name}\n{marking}"
        if place.tokens:
            label += f" {place.tokens}"
        lines.append(
            f"  {_quote(place.id)} [label={_quote(label)}, shape=circle, "
            f'style=filled, fillcolor="{place_color(place, colors, fallback).hex}"];'
        )

    for transition in net.transitions.values():
        lines.append(
            f"  {_quote(transition.id)} [label={_quote(transition.name)}, shape=box, "
            f'style=filled, fillcolor="#000000", fontcolor=white];'
        )

    lines.append("")

    for transition in net.transitions.values():
        for place_id, signature in transition.input.items():
            lines.append(
                f"  {_quote(place_id)} -> {_quote(transition.id)} "
                f"[label={_quote(signature_label(signature))}];"
            )
        for place_id, signature in transition.output.items():
            lines.append(
                f"  {_quote(transition.id)} -> {_quote(place_id)} "
                f"[label={_quote(signature_label(signature))}];"
            )

    lines.append("  overlap=false;")
    lines.append("}")
    return "\n".join(lines)
