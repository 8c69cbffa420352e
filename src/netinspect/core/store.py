"""
Net Store.

Holds the single live ``PetriNet``. A load swaps the whole value at once and
bumps the epoch, so anything derived from the previous net can tell that it
is stale.
"""

import logging
from typing import Dict, Optional

from .errors import NetNotLoadedError
from .types import Node, NodeKind, PetriNet

logger = logging.getLogger(__name__)


class NetStore:
    """
    Owner of the loaded net.

    Lookups by id never raise, for unknown ids or before the first load;
    they return ``None``, zero or the raw id so navigation code can pass
    transient ids safely. Only ``net`` itself raises ``NetNotLoadedError``.
    """

    def __init__(self, net: Optional[PetriNet] = None):
        self._net: Optional[PetriNet] = None
        self._epoch = 0
        if net is not None:
            self.load(net)

    def load(self, net: PetriNet) -> None:
        """Replace the live net."""
        self._net = net
        self._epoch += 1
        logger.debug(f"Net {net.id!r} loaded (epoch {self._epoch})")

    @property
    def net(self) -> PetriNet:
        if self._net is None:
            raise NetNotLoadedError("No net has been loaded")
        return self._net

    @property
    def epoch(self) -> int:
        """Number of loads so far; 0 means nothing is loaded."""
        return self._epoch

    @property
    def is_loaded(self) -> bool:
        return self._net is not None

    def resolve_node(self, node_id: str) -> Optional[Node]:
        if self._net is None:
            return None
        return self._net.get_node(node_id)

    def node_kind(self, node_id: str) -> Optional[NodeKind]:
        if self._net is None:
            return None
        return self._net.node_kind(node_id)

    def node_display_name(self, node_id: str) -> str:
        """
        Human-readable name for any id.

        Prefers ``name_lookup``, then the node's own name, then the raw id.
        """
        net = self._net
        if net is None:
            return node_id
        if node_id in net.name_lookup:
            return net.name_lookup[node_id]
        node = net.get_node(node_id)
        if node is not None:
            return node.name
        return node_id

    def node_names(self) -> Dict[str, str]:
        """Node id to node name for every place, then every transition."""
        if self._net is None:
            return {}
        return {node.id: node.name for node in self._net.iter_nodes()}

    def marking(self, place_id: str) -> int:
        """Initial token count of a place (absent means zero)."""
        if self._net is None:
            return 0
        return self._net.initial_marking.get(place_id, 0)
