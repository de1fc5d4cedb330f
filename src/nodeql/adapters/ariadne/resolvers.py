"""Ariadne bindables and resolvers for global object identification."""

from typing import Any

from ariadne import InterfaceType
from graphql import GraphQLResolveInfo

from nodeql.core.entities.node_config import NodeConfig
from nodeql.core.interfaces.local_id_accessor import ILocalIdAccessor
from nodeql.core.interfaces.object_fetcher import IObjectFetcher
from nodeql.core.interfaces.type_resolver import ITypeResolver
from nodeql.core.services.global_id_field import global_id_resolver
from nodeql.core.services.node_definitions import (
    fetch_node,
    fetch_nodes,
    type_resolver_delegate,
)


class NodeInterfaceType(InterfaceType):
    """Bindable for the Node interface of a schema-first schema.

    Sets the interface's type resolver and binds a global ID resolver to
    ``id`` on every object type implementing the interface. An object
    type binding its own ``id`` resolver keeps it, whichever order the
    bindables are passed in.

    Usage:
        node = NodeInterfaceType(resolve_node_type)

        photo = ObjectType("Photo")
        photo.set_field("id", global_id_resolver(id_accessor=photo_id))

        schema = make_executable_schema(type_defs, query, photo, node)
    """

    def __init__(
        self,
        type_resolver: ITypeResolver | None = None,
        id_accessor: ILocalIdAccessor | None = None,
        config: NodeConfig | None = None,
    ) -> None:
        """Initialize the Node interface bindable.

        Args:
            type_resolver: Callable ``(value, info)`` returning the object
                type or type name of a record.
            id_accessor: Optional callable ``(obj, info)`` returning the
                local ID used by the default ``id`` resolver.
            config: Optional node configuration.
        """
        config = config or NodeConfig()
        super().__init__(
            config.interface_name,
            type_resolver=(
                type_resolver_delegate(type_resolver)
                if type_resolver is not None
                else None
            ),
        )
        self.set_field(
            "id",
            global_id_resolver(id_accessor=id_accessor, id_attribute=config.id_attribute),
        )


def make_node_resolver(id_fetcher: IObjectFetcher):
    """Create a resolver for ``node(id: ID!): Node``.

    Args:
        id_fetcher: Callable ``(type_name, local_id, info)`` loading records.

    Returns:
        An Ariadne resolver.
    """

    def resolve_node(_obj: Any, info: GraphQLResolveInfo, **kwargs: Any) -> Any:
        return fetch_node(id_fetcher, kwargs["id"], info)

    return resolve_node


def make_nodes_resolver(id_fetcher: IObjectFetcher):
    """Create a resolver for ``nodes(ids: [ID!]!): [Node]!``."""

    def resolve_nodes(_obj: Any, info: GraphQLResolveInfo, **kwargs: Any) -> Any:
        return fetch_nodes(id_fetcher, kwargs["ids"], info)

    return resolve_nodes
