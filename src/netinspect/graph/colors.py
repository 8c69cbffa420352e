"""
Color Assigner.

Every entity id in the net's name lookup gets a display color. Colors are
assigned per distinct *display name*, not per id, so two ids that resolve to
the same name always share a color. Display names are enumerated in
first-seen order over the lookup's key order, and the i-th of n names takes
the hue at ``i / n`` of a cyclic ramp. The same net therefore always yields
the same table.
"""

import colorsys
from dataclasses import dataclass
from typing import Dict, List, Mapping

from ..config import DEFAULT_COLORMAP, FALLBACK_COLOR_HEX
from ..core.types import PetriNet

# (saturation, value) applied along the full hue circle
COLORMAPS: Dict[str, tuple] = {
    "rainbow": (1.0, 1.0),
    "pastel": (0.45, 0.95),
}


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        digits = value.lstrip("#")
        if len(digits) != 6:
            raise ValueError(f"Expected a #rrggbb color, got {value!r}")
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def __str__(self) -> str:
        return self.hex


FALLBACK_COLOR = Color.from_hex(FALLBACK_COLOR_HEX)


def color_from_fraction(fraction: float, colormap: str = DEFAULT_COLORMAP) -> Color:
    """Sample the cyclic ramp at ``fraction`` (wrapped into [0, 1))."""
    try:
        saturation, value = COLORMAPS[colormap]
    except KeyError:
        raise ValueError(
            f"Unknown colormap {colormap!r}; expected one of {sorted(COLORMAPS)}"
        ) from None

    r, g, b = colorsys.hsv_to_rgb(fraction % 1.0, saturation, value)
    return Color(round(r * 255), round(g * 255), round(b * 255))


def distinct_names(name_lookup: Mapping[str, str]) -> List[str]:
    """Display names in first-seen order over the lookup's keys."""
    return list(dict.fromkeys(name_lookup.values()))


def color_table(net: PetriNet, colormap: str = DEFAULT_COLORMAP) -> Dict[str, Color]:
    """Map every ``name_lookup`` key to the color of its display name."""
    names = distinct_names(net.name_lookup)
    if not names:
        return {}

    count = len(names)
    by_name = {
        name: color_from_fraction(index / count, colormap)
        for index, name in enumerate(names)
    }
    return {key: by_name[name] for key, name in net.name_lookup.items()}
