"""
Show Command - Detail card for one place or transition.

Prints the node header, its metadata and its incoming/outgoing peers with
edge signatures and metadata chips.
"""

import sys
from typing import List

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ...core.inspector import NodeView, PeerRow
from ...core.types import NodeKind
from ...graph.metadata import Chip, MetaDataRow
from ..utils import build_inspector

console = Console()


@click.command()
@click.argument("node_id")
@click.option("-n", "--net", "net_file", default=".", help="Net JSON file or directory")
@click.pass_context
def show(ctx: click.Context, node_id: str, net_file: str):
    """
    Show a node with its metadata and direct neighbors.

    \b
    Examples:
        netinspect show smelt -n net.json
        netinspect show iron_ore -n ./project
    """
    inspector = build_inspector(ctx, net_file)
    if inspector is None:
        sys.exit(1)

    view = inspector.node_view(node_id)
    if view is None:
        click.echo(click.style("No node found", fg="yellow") + f": {node_id}")
        return

    _print_header(view)
    if view.metadata:
        console.print(_metadata_table(view.metadata))
    console.print(_peer_table("Incoming", view.incoming))
    console.print(_peer_table("Outgoing", view.outgoing))


def _print_header(view: NodeView) -> None:
    kind = "Place" if view.kind is NodeKind.PLACE else "Transition"
    header = Text()
    header.append(f" {kind} ", style="bold white on grey30")
    header.append(f" {view.name} ", style="bold")
    header.append(f"({view.id})", style="dim")

    if view.kind is NodeKind.PLACE:
        tokens = (view.tokens or "").upper()
        header.append(f"  {tokens} ({view.marking})", style="cyan")
    else:
        header.append(f"  COST {view.cost}  TIME {view.time:g}", style="cyan")

    console.print(header)
    console.print()


def _chips(chips: List[Chip]) -> Text:
    text = Text()
    for chip in chips:
        text.append("● ", style=chip.color.hex)
    return text


def _metadata_table(rows: List[MetaDataRow]) -> Table:
    table = Table(title="Metadata", show_header=False)
    table.add_column("Type", style="bold")
    table.add_column("Values")

    for row in rows:
        values = Text()
        for i, cell in enumerate(row.cells):
            if i:
                values.append("  ")
            if cell.color is None:
                values.append(cell.label)
            else:
                values.append(f" {cell.label} ", style=f"black on {cell.color.hex}")
        table.add_row(row.type, values)
    return table


def _peer_table(title: str, peers: List[PeerRow]) -> Table:
    table = Table(title=title)
    table.add_column("Node", style="cyan")
    table.add_column("Kind", style="dim")
    table.add_column("Signature", justify="right")
    table.add_column("Tags")

    if not peers:
        table.add_row("-", "", "", "")
    for peer in peers:
        table.add_row(
            peer.name,
            str(peer.kind) if peer.kind else "missing",
            peer.signature_label,
            _chips(peer.chips),
        )
    return table
