"""Domain entities for nodeql."""

from nodeql.core.entities.node_config import NodeConfig
from nodeql.core.entities.resolved_global_id import (
    INVALID_GLOBAL_ID,
    ResolvedGlobalId,
)

__all__ = [
    "NodeConfig",
    "ResolvedGlobalId",
    "INVALID_GLOBAL_ID",
]
