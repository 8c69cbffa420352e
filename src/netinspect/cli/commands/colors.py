"""
Colors Command - The entity color table.

Shows which color every name-lookup id renders with, or emits it as JSON
for editor/plugin integrations.
"""

import json
import sys

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..utils import build_inspector

console = Console()


@click.command()
@click.option("-n", "--net", "net_file", default=".", help="Net JSON file or directory")
@click.option("--json", "json_mode", is_flag=True, help="Output the color table as JSON to stdout")
@click.pass_context
def colors(ctx: click.Context, net_file: str, json_mode: bool):
    """
    Show the display color assigned to every referenced entity.

    Ids sharing a display name share a color.
    """
    inspector = build_inspector(ctx, net_file)
    if inspector is None:
        if json_mode:
            click.echo(json.dumps({
                "meta": {"status": "error"},
                "error": {"message": "Net could not be loaded."},
            }))
        sys.exit(1)

    table = inspector.color_table()

    if json_mode:
        click.echo(json.dumps({
            "meta": {"status": "success", "colormap": inspector.config.colormap},
            "data": {entity_id: color.hex for entity_id, color in table.items()},
        }))
        return

    if not table:
        click.echo(click.style("Name lookup is empty", fg="yellow"))
        return

    out = Table(title=f"Colors ({inspector.config.colormap})")
    out.add_column("ID", style="dim")
    out.add_column("Name")
    out.add_column("Color")
    for entity_id, color in table.items():
        out.add_row(
            entity_id,
            inspector.node_display_name(entity_id),
            Text(f" {color.hex} ", style=f"black on {color.hex}"),
        )
    console.print(out)
