"""nodeql - Global object identification for GraphQL APIs.

A Python library implementing the Relay Global Object Identification
contract for graphql-core schemas: opaque global IDs that encode a type
name and a type-local ID, a ``Node`` interface, and ``node``/``nodes``
root fields that refetch any object from its global ID. Adapters are
provided for Ariadne and Strawberry.

Example with graphql-core:
    from graphql import GraphQLField, GraphQLObjectType, GraphQLSchema, GraphQLString
    from nodeql import global_id_field, node_definitions

    users = {"1": {"id": 1, "name": "John Doe"}}

    def fetch(type_name, local_id, info):
        if type_name == "User":
            return users.get(local_id)
        return None

    node_interface, node_field, nodes_field = node_definitions(
        fetch, lambda obj, info: user_type
    )

    user_type = GraphQLObjectType(
        "User",
        interfaces=[node_interface],
        fields=lambda: {
            "id": global_id_field("User"),
            "name": GraphQLField(GraphQLString),
        },
    )

    schema = GraphQLSchema(
        query=GraphQLObjectType("Query", lambda: {"node": node_field}),
        types=[user_type],
    )

    # { node(id: "VXNlcjox") { id ... on User { name } } }

Example with Ariadne:
    from ariadne import QueryType, make_executable_schema
    from nodeql.adapters.ariadne import (
        NodeInterfaceType,
        get_node_interface_sdl,
        make_node_resolver,
    )

    query = QueryType()
    query.set_field("node", make_node_resolver(fetch))
    node = NodeInterfaceType(lambda obj, info: "User")

    schema = make_executable_schema(
        [get_node_interface_sdl(), type_defs], query, node
    )
"""

from nodeql.core.entities import INVALID_GLOBAL_ID, NodeConfig, ResolvedGlobalId
from nodeql.core.interfaces import (
    ILocalIdAccessor,
    IObjectFetcher,
    ITypeResolver,
)
from nodeql.core.services import (
    SEPARATOR,
    NodeDefinitions,
    fetch_node,
    fetch_nodes,
    from_global_id,
    global_id_field,
    global_id_resolver,
    node_definitions,
    to_global_id,
    type_resolver_delegate,
)
from nodeql.utils import base64, unbase64

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "NodeConfig",
    "ResolvedGlobalId",
    "INVALID_GLOBAL_ID",
    # Core interfaces
    "IObjectFetcher",
    "ITypeResolver",
    "ILocalIdAccessor",
    # Global ID codec
    "SEPARATOR",
    "to_global_id",
    "from_global_id",
    "base64",
    "unbase64",
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
