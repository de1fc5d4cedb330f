"""Domain services for nodeql."""

from nodeql.core.services.global_id import SEPARATOR, from_global_id, to_global_id
from nodeql.core.services.global_id_field import global_id_field, global_id_resolver
from nodeql.core.services.node_definitions import (
    NodeDefinitions,
    fetch_node,
    fetch_nodes,
    node_definitions,
    type_resolver_delegate,
)

__all__ = [
    # Codec
    "SEPARATOR",
    "to_global_id",
    "from_global_id",
    # Global ID fields
    "global_id_field",
    "global_id_resolver",
    # Node definitions
    "NodeDefinitions",
    "node_definitions",
    "fetch_node",
    "fetch_nodes",
    "type_resolver_delegate",
]
