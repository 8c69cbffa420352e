"""
netinspect CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from ..config import load_config
from ..core.errors import ConfigError
from .commands import colors, dot, listing, show
from .utils import echo_error


@click.group()
@click.version_option(package_name="netinspect")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Config file (default: .netinspect/config.yaml)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: Optional[str], verbose: bool):
    """netinspect: Browse a Petri net from the terminal.

    \b
    Quick Start:
      netinspect list -n net.json
      netinspect show <node-id> -n net.json
      netinspect colors -n net.json
      netinspect dot -n net.json -o net.dot
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(Path(config_path) if config_path else None)
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


# Register commands
main.add_command(show.show)
main.add_command(listing.list_nodes, name="list")
main.add_command(colors.colors)
main.add_command(dot.dot)

if __name__ == "__main__":
    main()
