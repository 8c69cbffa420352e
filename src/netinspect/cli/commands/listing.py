"""
List Command - All places and transitions of a net.
"""

import sys
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...core.costs import cost_label, total_cost
from ..utils import build_inspector

console = Console()


@click.command()
@click.option("-n", "--net", "net_file", default=".", help="Net JSON file or directory")
@click.option(
    "--kind",
    type=click.Choice(["place", "transition"]),
    default=None,
    help="Only list one kind of node",
)
@click.pass_context
def list_nodes(ctx: click.Context, net_file: str, kind: Optional[str]):
    """
    List the places and transitions of a net.
    """
    inspector = build_inspector(ctx, net_file)
    if inspector is None:
        sys.exit(1)

    net = inspector.store.net
    console.print(f"[bold]{escape(net.name)}[/bold] [dim]({escape(net.id)})[/dim]")

    if kind in (None, "place"):
        places = Table(title=f"Places ({len(net.places)})")
        places.add_column("ID", style="dim")
        places.add_column("Name", style="cyan")
        places.add_column("Tokens")
        places.add_column("Marking", justify="right")
        for place in net.places.values():
            places.add_row(place.id, place.name, place.tokens, str(inspector.store.marking(place.id)))
        console.print(places)

    if kind in (None, "transition"):
        transitions = Table(title=f"Transitions ({len(net.transitions)})")
        transitions.add_column("ID", style="dim")
        transitions.add_column("Name", style="cyan")
        transitions.add_column("Time", justify="right")
        transitions.add_column("Cost", justify="right")
        for transition in net.transitions.values():
            transitions.add_row(
                transition.id,
                transition.name,
                f"{transition.time:g}",
                cost_label(transition.cost),
            )
        console.print(transitions)

    if kind is None and net.transitions:
        console.print(f"Total cost ({net.cost_schema}): {cost_label(total_cost(net))}")
