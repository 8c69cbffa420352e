"""
CLI Utilities - Shared helper functions for command line operations.

Formatted printing, net/config loading and the inspector wiring used by
every command.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from ..config import NET_FILENAMES, InspectorConfig, load_config
from ..core.errors import ConfigError
from ..core.inspector import NetInspector
from ..core.loader import net_from_json
from ..core.store import NetStore
from ..core.types import PetriNet

logger = logging.getLogger(__name__)


def echo_success(message: str) -> None:
    """Print a success message with a green checkmark."""
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """Print a warning to stderr, so JSON on stdout stays parseable."""
    click.echo(click.style(f"⚠️  {message}", fg="yellow"), err=True)


def echo_info(message: str) -> None:
    """Print an informational message, dimmed."""
    click.echo(click.style(f"   {message}", dim=True))


def resolve_net_path(net_file: str) -> Optional[Path]:
    """
    Resolve a file or directory argument to a net document.

    Directories are searched for ``net.json`` then ``.netinspect/net.json``.
    """
    net_path = Path(net_file)

    if net_path.is_dir():
        for name in NET_FILENAMES:
            candidate = net_path / name
            if candidate.exists():
                return candidate
        echo_error(f"No net found in directory: {net_file}")
        click.echo(f"Expected one of: {', '.join(NET_FILENAMES)}")
        return None

    if not net_path.exists():
        echo_error(f"Net file not found: {net_file}")
        return None

    return net_path


def load_net(net_file: str, strict: bool = False) -> Optional[PetriNet]:
    """
    Load and validate a net from a file or directory path.

    Returns:
        Optional[PetriNet]: The net, or None after reporting why it failed.
    """
    net_path = resolve_net_path(net_file)
    if net_path is None:
        return None

    try:
        text = net_path.read_text()
    except OSError as e:
        echo_error(f"Failed to read net: {e}")
        return None

    result = net_from_json(text, strict=strict)
    if result.is_err():
        echo_error(f"Invalid net in {net_path}: {result.error}")
        return None

    net = result.unwrap()
    dangling = net.dangling_place_refs()
    if dangling:
        node_id, field, place_id = dangling[0]
        more = f" (+{len(dangling) - 1} more)" if len(dangling) > 1 else ""
        echo_warning(
            f"{field} of {node_id} references unknown place {place_id!r}{more}; "
            f"shown by raw id"
        )

    logger.debug(f"Loaded {net_path}")
    return net


def get_config(ctx: Optional[click.Context]) -> Optional[InspectorConfig]:
    """
    Configuration from the group context, or discovered from the cwd.

    Returns None (after reporting) when the config file is invalid.
    """
    if ctx is not None and isinstance(ctx.obj, dict) and "config" in ctx.obj:
        return ctx.obj["config"]
    try:
        return load_config()
    except ConfigError as e:
        echo_error(str(e))
        return None


def build_inspector(ctx: Optional[click.Context], net_file: str) -> Optional[NetInspector]:
    """Load config and net, and wire them into an inspector."""
    config = get_config(ctx)
    if config is None:
        return None

    net = load_net(net_file, strict=config.strict_references)
    if net is None:
        return None

    return NetInspector(NetStore(net), config=config)
