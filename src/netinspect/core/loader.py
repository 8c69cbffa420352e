"""
Net construction from the serialized (camelCase JSON) form.

Fetching the document is the caller's business; this module only turns an
already-read payload into a validated ``PetriNet``. Every failure comes back
as an ``Err`` holding a ``NetValidationError`` that names the offending node
and field, whether it was raised by our own checks or by pydantic.
"""

import json
import logging
from typing import Any, Dict

from pydantic import ValidationError

from .errors import NetValidationError
from .result import Err, Ok, Result
from .types import PetriNet

logger = logging.getLogger(__name__)

_NODE_MAPS = ("places", "transitions", "initialMarking", "nameLookup")


def net_from_dict(data: Dict[str, Any], strict: bool = False) -> Result:
    """
    Build a net from a decoded JSON object.

    Args:
        data: The net document.
        strict: When True, edge and marking keys naming a missing place are
            rejected instead of logged.

    Returns:
        Ok(PetriNet) or Err(NetValidationError).
    """
    try:
        net = PetriNet.model_validate(data, context={"strict_references": strict})
    except NetValidationError as e:
        logger.debug(f"Net rejected: {e}")
        return Err(e)
    except ValidationError as e:
        error = _translate(e)
        logger.debug(f"Net rejected: {error}")
        return Err(error)

    missing = net.dangling_metadata_ids()
    if missing:
        logger.debug(
            f"{len(missing)} metadata id(s) have no display name and will show raw: {missing[:5]}"
        )
    logger.debug(
        f"Loaded net {net.id!r}: {len(net.places)} places, "
        f"{len(net.transitions)} transitions, {net.cost_schema} costs"
    )
    return Ok(net)


def net_from_json(text: str, strict: bool = False) -> Result:
    """Build a net from a JSON string."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(NetValidationError("<net>", "json", str(e)))

    if not isinstance(data, dict):
        return Err(
            NetValidationError("<net>", "json", f"expected an object, got {type(data).__name__}")
        )
    return net_from_dict(data, strict=strict)


def _translate(error: ValidationError) -> NetValidationError:
    """Map the first pydantic error onto the node id and field it concerns."""
    first = error.errors()[0]
    loc = [str(part) for part in first["loc"]]

    if len(loc) > 1 and loc[0] in _NODE_MAPS:
        node_id = loc[1]
        field = ".".join(loc[2:]) or loc[0]
    else:
        node_id = "<net>"
        field = ".".join(loc) or "net"

    detail = first["msg"]
    if error.error_count() > 1:
        detail += f" (+{error.error_count() - 1} more)"
    return NetValidationError(node_id, field, detail)
