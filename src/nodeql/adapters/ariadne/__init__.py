"""Ariadne framework adapter for nodeql."""

from nodeql.adapters.ariadne.resolvers import (
    NodeInterfaceType,
    make_node_resolver,
    make_nodes_resolver,
)
from nodeql.adapters.ariadne.sdl import NODE_INTERFACE, get_node_interface_sdl
from nodeql.core.services.global_id_field import global_id_resolver

__all__ = [
    # Schema definitions
    "NODE_INTERFACE",
    "get_node_interface_sdl",
    # Bindables and resolvers
    "NodeInterfaceType",
    "make_node_resolver",
    "make_nodes_resolver",
    "global_id_resolver",
]
