"""
Error hierarchy for netinspect.

Only net construction raises. Lookups against an unknown node id return
empty results instead, because the presentation layer routinely asks about
ids that are not (or no longer) part of the loaded net.
"""


class NetInspectError(Exception):
    """Base class for all netinspect errors."""


class NetValidationError(NetInspectError):
    """
    A net failed validation at construction time.

    Attributes:
        node_id: The place/transition (or top-level key) that is invalid.
        field: The offending field, dotted for nested paths.
    """

    def __init__(self, node_id: str, field: str, detail: str):
        self.node_id = node_id
        self.field = field
        self.detail = detail
        super().__init__(f"{field} of {node_id}: {detail}")


class MalformedCostError(NetValidationError):
    """A transition's cost matches neither the scalar nor the vector schema."""


class DanglingReferenceError(NetValidationError):
    """An edge or marking key names a place that does not exist."""


class DuplicateNodeError(NetValidationError):
    """An id is used by both a place and a transition."""


class NetNotLoadedError(NetInspectError):
    """The store was queried before any net was loaded."""


class ConfigError(NetInspectError):
    """The configuration file could not be read or is invalid."""
