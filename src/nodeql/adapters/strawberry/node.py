"""Strawberry Node interface and root fields."""

from inspect import isawaitable
from typing import Any, Optional

import strawberry
from strawberry.types import Info

from nodeql.core.interfaces.object_fetcher import IObjectFetcher
from nodeql.core.services.global_id import to_global_id
from nodeql.core.services.node_definitions import fetch_node, fetch_nodes


@strawberry.interface(description="An object with an ID")
class Node:
    """Code-first Node interface.

    Concrete types inherit from it and carry their global ID in ``id``;
    Strawberry resolves the concrete type from the returned instance.
    """

    id: strawberry.ID = strawberry.field(description="The id of the object.")


def global_id(type_name: str, local_id: Any) -> strawberry.ID:
    """Build the global ID of a Strawberry node.

    Example::

        User(id=global_id("User", row.id), name=row.name)
    """
    return strawberry.ID(to_global_id(type_name, local_id))


def node_field(
    id_fetcher: IObjectFetcher,
    description: str | None = "Fetches an object given its ID",
) -> Any:
    """Create the ``node(id: ID!): Node`` root field.

    Args:
        id_fetcher: Callable ``(type_name, local_id, info)`` returning a
            Strawberry type implementing :class:`Node`, ``None``, or an
            awaitable of either.
        description: Field description.

    Returns:
        A ``strawberry.field`` to assign on the Query type.
    """

    async def resolve_node(info: Info, id: strawberry.ID) -> Optional[Node]:
        node = fetch_node(id_fetcher, id, info)
        if isawaitable(node):
            node = await node
        return node

    return strawberry.field(resolver=resolve_node, description=description)


def nodes_field(
    id_fetcher: IObjectFetcher,
    description: str | None = "Fetches objects given their IDs",
) -> Any:
    """Create the ``nodes(ids: [ID!]!): [Node]!`` root field."""

    async def resolve_nodes(info: Info, ids: list[strawberry.ID]) -> list[Optional[Node]]:
        nodes = fetch_nodes(id_fetcher, ids, info)
        if isawaitable(nodes):
            nodes = await nodes
        return nodes

    return strawberry.field(resolver=resolve_nodes, description=description)
