"""
Global Configuration and Defaults.

Defaults live here as module constants. A project can override them with a
YAML file at ``.netinspect/config.yaml``:

    colormap: pastel
    strict_references: true
    fallback_color: "#dddddd"
"""

import re
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .core.errors import ConfigError

# --- Rendering ---
DEFAULT_COLORMAP = "rainbow"

# Ids missing from the color table render with this
FALLBACK_COLOR_HEX = "#f0f0f0"

# --- Discovery ---
CONFIG_DIR = ".netinspect"
CONFIG_FILE = "config.yaml"

# Candidate net documents when a directory is given instead of a file
NET_FILENAMES = ("net.json", f"{CONFIG_DIR}/net.json")

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


class InspectorConfig(BaseModel):
    """Settings that shape how a net is loaded and rendered."""
    colormap: str = DEFAULT_COLORMAP
    strict_references: bool = False
    fallback_color: str = FALLBACK_COLOR_HEX

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("colormap")
    @classmethod
    def _known_colormap(cls, value: str) -> str:
        from .graph.colors import COLORMAPS

        if value not in COLORMAPS:
            raise ValueError(f"unknown colormap {value!r}; expected one of {sorted(COLORMAPS)}")
        return value

    @field_validator("fallback_color")
    @classmethod
    def _hex_color(cls, value: str) -> str:
        if not _HEX_COLOR.match(value):
            raise ValueError(f"expected a #rrggbb color, got {value!r}")
        return value.lower()


def default_config_path(root: Path = Path(".")) -> Path:
    return root / CONFIG_DIR / CONFIG_FILE


def load_config(path: Optional[Path] = None) -> InspectorConfig:
    """
    Load configuration from YAML.

    A missing file yields the defaults. An unreadable file or invalid values
    raise ``ConfigError``.
    """
    config_path = path if path is not None else default_config_path()
    if not config_path.exists():
        return InspectorConfig()

    try:
        data = yaml.safe_load(config_path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping")

    try:
        return InspectorConfig.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        where = ".".join(str(p) for p in first["loc"]) or "config"
        raise ConfigError(f"{config_path}: {where}: {first['msg']}") from e
