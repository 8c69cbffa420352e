"""
Derived-View Cache.

Memoizes neighbor resolution per ``(net, node id)`` and the color table per
net. Entries are keyed on net *identity*: the cache pins the net it was
filled from, and the first lookup against any other net object drops every
entry at once. Nothing is evicted individually; the working set is bounded
by the node count of one net.
"""

import logging
from typing import Any, Dict, Optional

from ..config import DEFAULT_COLORMAP
from ..core.types import PetriNet
from .colors import Color, color_table
from .neighbors import DirectedNeighbors, directed_neighbors

logger = logging.getLogger(__name__)


class DerivedViewCache:
    """Identity-keyed memo table for neighbor and color derivations."""

    def __init__(self, colormap: str = DEFAULT_COLORMAP):
        self._colormap = colormap
        self._net: Optional[PetriNet] = None
        self._epoch = 0
        self._neighbors: Dict[str, DirectedNeighbors] = {}
        self._colors: Optional[Dict[str, Color]] = None
        self._hits = 0
        self._misses = 0

    def _bind(self, net: PetriNet) -> None:
        """Switch to ``net``, discarding everything derived from another net."""
        if net is self._net:
            return
        if self._net is not None:
            logger.debug(
                f"Net identity changed ({self._net.id!r} -> {net.id!r}); "
                f"dropping {len(self._neighbors)} neighbor entries"
            )
        self._net = net
        self._epoch += 1
        self._neighbors = {}
        self._colors = None

    def directed_neighbors(self, node_id: str, net: PetriNet) -> DirectedNeighbors:
        self._bind(net)
        cached = self._neighbors.get(node_id)
        if cached is not None:
            self._hits += 1
            return cached

        self._misses += 1
        result = directed_neighbors(node_id, net)
        self._neighbors[node_id] = result
        return result

    def color_table(self, net: PetriNet) -> Dict[str, Color]:
        self._bind(net)
        if self._colors is not None:
            self._hits += 1
            return self._colors

        self._misses += 1
        self._colors = color_table(net, self._colormap)
        logger.debug(f"Computed color table for {len(self._colors)} ids")
        return self._colors

    def clear(self) -> None:
        self._net = None
        self._neighbors = {}
        self._colors = None

    def stats(self) -> Dict[str, Any]:
        return {
            "epoch": self._epoch,
            "neighbor_entries": len(self._neighbors),
            "has_color_table": self._colors is not None,
            "hits": self._hits,
            "misses": self._misses,
        }
