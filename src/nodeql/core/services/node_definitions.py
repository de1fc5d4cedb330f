"""Node interface and root fields for global object refetching.

Implements the Relay Global Object Identification contract on top of
graphql-core: a ``Node`` interface with an ``id: ID!`` field, and
``node(id: ID!)`` / ``nodes(ids: [ID!]!)`` root fields that decode the
global ID, hand it to a caller supplied fetcher and let the interface's
type resolver pick the concrete object type.

Example::

    def fetch(type_name, local_id, info):
        if type_name == "User":
            return users.get(local_id)
        return None

    def resolve_type(obj, info):
        return user_type if "name" in obj else None

    node_interface, node_field, nodes_field = node_definitions(fetch, resolve_type)

    query_type = GraphQLObjectType(
        "Query",
        lambda: {"node": node_field, "nodes": nodes_field},
    )
"""

import asyncio
import logging
from collections.abc import Awaitable
from dataclasses import dataclass
from inspect import isawaitable, iscoroutine
from typing import Any

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLID,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLResolveInfo,
)

from nodeql.core.entities.node_config import NodeConfig
from nodeql.core.entities.resolved_global_id import (
    INVALID_GLOBAL_ID,
    ResolvedGlobalId,
)
from nodeql.core.interfaces.object_fetcher import IObjectFetcher
from nodeql.core.interfaces.type_resolver import ITypeResolver, TypeResolution
from nodeql.core.services.global_id import from_global_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NodeDefinitions:
    """The definitions returned by :func:`node_definitions`.

    Unpacks as ``node_interface, node_field, nodes_field``.
    """

    node_interface: GraphQLInterfaceType
    node_field: GraphQLField
    nodes_field: GraphQLField

    def __iter__(self):
        yield self.node_interface
        yield self.node_field
        yield self.nodes_field


def _type_name(resolution: TypeResolution) -> str | None:
    if isinstance(resolution, GraphQLObjectType):
        return resolution.name
    return resolution


def type_resolver_delegate(type_resolver: ITypeResolver):
    """Adapt a caller type resolver to graphql-core's ``resolve_type``.

    graphql-core expects the concrete type's name; the caller may return
    the object type itself, its name, ``None``, or an awaitable of these.
    ``None`` is passed through so the engine reports the record as
    unclassifiable.

    Args:
        type_resolver: Callable ``(value, info)`` classifying a record.

    Returns:
        A ``resolve_type(value, info, abstract_type)`` callable.
    """

    def resolve_type(value: Any, info: GraphQLResolveInfo, _abstract_type: Any):
        resolution = type_resolver(value, info)
        if isawaitable(resolution):

            async def await_type_name() -> str | None:
                return _type_name(await resolution)

            return await_type_name()
        return _type_name(resolution)

    return resolve_type


async def _await_node(node: Awaitable[Any], resolved: ResolvedGlobalId) -> Any:
    result = await node
    if result is None:
        logger.debug("No %s found with id %r", resolved.type, resolved.id)
    return result


def _start_fetch(
    id_fetcher: IObjectFetcher, global_id: str, info: GraphQLResolveInfo
) -> tuple[ResolvedGlobalId, Any]:
    resolved = from_global_id(global_id)
    if resolved == INVALID_GLOBAL_ID:
        logger.debug("Could not decode global ID %r", global_id)
    return resolved, id_fetcher(resolved.type, resolved.id, info)


def _checked_node(resolved: ResolvedGlobalId, node: Any) -> Any:
    if isawaitable(node):
        return _await_node(node, resolved)
    if node is None:
        logger.debug("No %s found with id %r", resolved.type, resolved.id)
    return node


def fetch_node(id_fetcher: IObjectFetcher, global_id: str, info: GraphQLResolveInfo) -> Any:
    """Decode a global ID and fetch its record.

    Args:
        id_fetcher: Callable ``(type_name, local_id, info)`` loading records.
        global_id: The global ID to look up.
        info: The GraphQL resolve info.

    Returns:
        Whatever the fetcher returns: the record, ``None``, or an
        awaitable resolving to either.
    """
    return _checked_node(*_start_fetch(id_fetcher, global_id, info))


async def _gather_nodes(nodes: list[Any]) -> list[Any]:
    tasks = [asyncio.ensure_future(node) if isawaitable(node) else None for node in nodes]
    pending = [task for task in tasks if task is not None]
    try:
        await asyncio.gather(*pending)
    except BaseException:
        # One fetch failed or the request was cancelled: stop the others
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        raise
    return [
        task.result() if task is not None else node for task, node in zip(tasks, nodes)
    ]


def fetch_nodes(
    id_fetcher: IObjectFetcher,
    global_ids: list[str],
    info: GraphQLResolveInfo,
) -> list[Any] | Awaitable[list[Any]]:
    """Fetch the records of several global IDs, preserving their order.

    Asynchronous fetches run concurrently. If any fetch fails, the ones
    still running are cancelled and the first error propagates.

    Args:
        id_fetcher: Callable ``(type_name, local_id, info)`` loading records.
        global_ids: The global IDs to look up.
        info: The GraphQL resolve info.

    Returns:
        The records (``None`` where missing), or an awaitable of them when
        any fetch is asynchronous.
    """
    fetched: list[tuple[ResolvedGlobalId, Any]] = []
    try:
        for global_id in global_ids:
            fetched.append(_start_fetch(id_fetcher, global_id, info))
    except Exception:
        for _resolved, node in fetched:
            if iscoroutine(node):
                node.close()
        raise

    nodes = [_checked_node(resolved, node) for resolved, node in fetched]
    if any(isawaitable(node) for node in nodes):
        return _gather_nodes(nodes)
    return nodes


def node_definitions(
    id_fetcher: IObjectFetcher,
    type_resolver: ITypeResolver | None = None,
    config: NodeConfig | None = None,
) -> NodeDefinitions:
    """Build the Node interface and the ``node``/``nodes`` root fields.

    Args:
        id_fetcher: Callable ``(type_name, local_id, info)`` returning the
            record, ``None`` when it does not exist, or an awaitable.
        type_resolver: Callable ``(value, info)`` returning the concrete
            object type (or its name) of a fetched record. When omitted,
            graphql-core falls back to each object type's ``is_type_of``.
        config: Optional node configuration.

    Returns:
        The node interface, node field and nodes field.
    """
    config = config or NodeConfig()

    node_interface = GraphQLInterfaceType(
        config.interface_name,
        description=config.interface_description,
        fields=lambda: {
            "id": GraphQLField(
                GraphQLNonNull(GraphQLID),
                description=config.id_description,
            )
        },
        resolve_type=(
            type_resolver_delegate(type_resolver) if type_resolver is not None else None
        ),
    )

    def resolve_node(_root: Any, info: GraphQLResolveInfo, **args: Any) -> Any:
        return fetch_node(id_fetcher, args["id"], info)

    def resolve_nodes(_root: Any, info: GraphQLResolveInfo, **args: Any) -> Any:
        return fetch_nodes(id_fetcher, args["ids"], info)

    node_field = GraphQLField(
        node_interface,
        description=config.node_field_description,
        args={
            "id": GraphQLArgument(
                GraphQLNonNull(GraphQLID),
                description=config.node_id_description,
            )
        },
        resolve=resolve_node,
    )

    nodes_field = GraphQLField(
        GraphQLNonNull(GraphQLList(node_interface)),
        description=config.nodes_field_description,
        args={
            "ids": GraphQLArgument(
                GraphQLNonNull(GraphQLList(GraphQLNonNull(GraphQLID))),
                description=config.nodes_ids_description,
            )
        },
        resolve=resolve_nodes,
    )

    return NodeDefinitions(
        node_interface=node_interface,
        node_field=node_field,
        nodes_field=nodes_field,
    )
