"""
Inspector facade.

The single surface the presentation layer talks to. It binds a ``NetStore``
to a ``DerivedViewCache`` so that every derived view is computed against the
store's current net and served from cache afterwards.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..config import InspectorConfig
from ..graph.cache import DerivedViewCache
from ..graph.colors import Color
from ..graph.metadata import (
    Chip,
    MetaDataRow,
    metadata_rows,
    preview_chips,
    signature_label,
    unique_referenced_ids,
)
from ..graph.neighbors import DirectedNeighbors, NeighborMap
from .costs import cost_label
from .store import NetStore
from .types import MetaData, Node, NodeKind, Place, Signature, Transition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PeerRow:
    """One neighbor as shown in a node's incoming/outgoing columns."""
    id: str
    name: str
    kind: Optional[NodeKind]
    signature: Signature
    signature_label: str
    chips: List[Chip] = field(default_factory=list)


@dataclass(frozen=True)
class NodeView:
    """Everything a detail card shows for one node."""
    id: str
    kind: NodeKind
    name: str
    metadata: List[MetaDataRow]
    incoming: List[PeerRow]
    outgoing: List[PeerRow]
    # Places
    tokens: Optional[str] = None
    marking: Optional[int] = None
    # Transitions
    time: Optional[float] = None
    cost: Optional[str] = None


class NetInspector:
    """
    Read-only queries over the store's current net.

    Every query is total: before the store's first load it answers as for
    an empty net (no neighbors, no colors, raw ids, ``None`` views).
    """

    def __init__(
        self,
        store: NetStore,
        cache: Optional[DerivedViewCache] = None,
        config: Optional[InspectorConfig] = None,
    ):
        self.store = store
        self.config = config or InspectorConfig()
        self.cache = cache or DerivedViewCache(colormap=self.config.colormap)
        self._fallback = Color.from_hex(self.config.fallback_color)

    # =========================================================================
    # Core queries
    # =========================================================================

    def directed_neighbors(self, node_id: str) -> DirectedNeighbors:
        if not self.store.is_loaded:
            return DirectedNeighbors()
        return self.cache.directed_neighbors(node_id, self.store.net)

    def color_table(self) -> Dict[str, Color]:
        if not self.store.is_loaded:
            return {}
        return self.cache.color_table(self.store.net)

    @staticmethod
    def unique_referenced_ids(meta_data: Sequence[MetaData]) -> List[str]:
        return unique_referenced_ids(meta_data)

    def node_display_name(self, node_id: str) -> str:
        return self.store.node_display_name(node_id)

    def resolve_node(self, node_id: str) -> Optional[Node]:
        return self.store.resolve_node(node_id)

    # =========================================================================
    # Rendering models
    # =========================================================================

    def color_for(self, entity_id: str) -> Color:
        return self.color_table().get(entity_id, self._fallback)

    def preview_chips(self, node_id: str) -> List[Chip]:
        node = self.resolve_node(node_id)
        if node is None:
            return []
        return preview_chips(
            node.meta_data, self.store.net.name_lookup, self.color_table(), self._fallback
        )

    def metadata_rows(self, node_id: str) -> List[MetaDataRow]:
        node = self.resolve_node(node_id)
        if node is None:
            return []
        return metadata_rows(
            node.meta_data, self.store.net.name_lookup, self.color_table(), self._fallback
        )

    def node_view(self, node_id: str) -> Optional[NodeView]:
        """Assemble the detail card for a node; ``None`` for unknown ids."""
        node = self.resolve_node(node_id)
        if node is None:
            logger.debug(f"No node {node_id!r} in net {self.store.net.id!r}")
            return None

        neighbors = self.directed_neighbors(node_id)
        common = dict(
            id=node.id,
            kind=node.kind,
            name=node.name,
            metadata=self.metadata_rows(node_id),
            incoming=self._peer_rows(neighbors.incoming),
            outgoing=self._peer_rows(neighbors.outgoing),
        )
        if isinstance(node, Place):
            return NodeView(**common, tokens=node.tokens, marking=self.store.marking(node.id))
        if isinstance(node, Transition):
            return NodeView(**common, time=node.time, cost=cost_label(node.cost))
        return NodeView(**common)

    def _peer_rows(self, neighbor_map: NeighborMap) -> List[PeerRow]:
        rows = []
        for peer_id, (peer, signature) in neighbor_map.items():
            rows.append(PeerRow(
                id=peer_id,
                name=peer.name if peer is not None else self.node_display_name(peer_id),
                kind=peer.kind if peer is not None else None,
                signature=signature,
                signature_label=signature_label(signature),
                chips=self.preview_chips(peer_id) if peer is not None else [],
            ))
        return rows
