"""Global ID codec.

A global ID is the base64 encoding of ``"<type name>:<local id>"``.
The format is part of the public wire contract: ``to_global_id("User", 1)``
is ``"VXNlcjox"`` and must stay that way across releases.
"""

from typing import Any

from nodeql.core.entities.resolved_global_id import (
    INVALID_GLOBAL_ID,
    ResolvedGlobalId,
)
from nodeql.utils.encoding import base64, unbase64

SEPARATOR = ":"


def to_global_id(type_name: str, local_id: Any) -> str:
    """Encode a type name and a type-local ID into a global ID.

    Args:
        type_name: The object type name, e.g. ``"User"``.
        local_id: The type-local ID. Any value with a string form;
            ``None`` is encoded as the empty string.

    Returns:
        The opaque global ID.
    """
    if local_id is None:
        local_id = ""
    return base64(f"{type_name}{SEPARATOR}{local_id}")


def from_global_id(global_id: str) -> ResolvedGlobalId:
    """Decode a global ID into its type name and local ID.

    Only the first separator splits: the local ID keeps any further
    separators verbatim. Never raises; input that does not decode to
    ``"<type>:<id>"`` yields :data:`INVALID_GLOBAL_ID`.

    Args:
        global_id: The global ID, usually a client supplied argument.

    Returns:
        The decoded type name and local ID.
    """
    decoded = unbase64(global_id)
    type_name, separator, local_id = decoded.partition(SEPARATOR)
    if not separator:
        return INVALID_GLOBAL_ID
    return ResolvedGlobalId(type=type_name, id=local_id)
