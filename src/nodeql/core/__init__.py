"""Core domain layer for nodeql."""

from nodeql.core.entities import INVALID_GLOBAL_ID, NodeConfig, ResolvedGlobalId
from nodeql.core.interfaces import ILocalIdAccessor, IObjectFetcher, ITypeResolver
from nodeql.core.services import (
    NodeDefinitions,
    from_global_id,
    global_id_field,
    node_definitions,
    to_global_id,
)

__all__ = [
    # Entities
    "NodeConfig",
    "ResolvedGlobalId",
    "INVALID_GLOBAL_ID",
    # Interfaces
    "IObjectFetcher",
    "ITypeResolver",
    "ILocalIdAccessor",
    # Services
    "NodeDefinitions",
    "node_definitions",
    "global_id_field",
    "to_global_id",
    "from_global_id",
]
