"""
Dot Command - Export the net as Graphviz DOT.
"""

import sys
from pathlib import Path
from typing import Optional

import click

from ...graph.colors import Color
from ...graph.export import to_dot
from ..utils import build_inspector, echo_info, echo_success


@click.command()
@click.option("-n", "--net", "net_file", default=".", help="Net JSON file or directory")
@click.option("-o", "--output", default=None, help="Output .dot file (default: stdout)")
@click.pass_context
def dot(ctx: click.Context, net_file: str, output: Optional[str]):
    """
    Export the net as a Graphviz DOT digraph.
    """
    inspector = build_inspector(ctx, net_file)
    if inspector is None:
        sys.exit(1)

    content = to_dot(
        inspector.store.net,
        inspector.color_table(),
        Color.from_hex(inspector.config.fallback_color),
    )

    if output is None:
        click.echo(content)
        return

    output_path = Path(output)
    output_path.write_text(content)
    echo_success(f"Generated: {output_path}")
    echo_info(f"Render with: dot -Tpng {output_path} -o net.png")
