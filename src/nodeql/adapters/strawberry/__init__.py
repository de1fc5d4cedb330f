"""Strawberry framework adapter for nodeql."""

from nodeql.adapters.strawberry.node import Node, global_id, node_field, nodes_field

__all__ = [
    "Node",
    "global_id",
    "node_field",
    "nodes_field",
]
