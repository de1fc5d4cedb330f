"""Factory for global ``id`` fields on object types."""

from collections.abc import Mapping
from typing import Any

from graphql import GraphQLField, GraphQLID, GraphQLNonNull, GraphQLResolveInfo

from nodeql.core.entities.node_config import NodeConfig
from nodeql.core.interfaces.local_id_accessor import ILocalIdAccessor
from nodeql.core.services.global_id import to_global_id


def _read_attribute(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def global_id_resolver(
    type_name: str | None = None,
    id_accessor: ILocalIdAccessor | None = None,
    id_attribute: str = "id",
):
    """Create a resolver returning the global ID of the parent object.

    Args:
        type_name: Type name to encode. When omitted, the name of the
            object type owning the field is used at resolution time.
        id_accessor: Optional callable ``(obj, info)`` returning the local
            ID. Defaults to reading ``id_attribute`` off the object, as a
            mapping key or an attribute.
        id_attribute: Name read by the default accessor.

    Returns:
        A graphql-core resolver ``(obj, info, **args) -> str``.
    """

    def resolve_global_id(obj: Any, info: GraphQLResolveInfo, **_args: Any) -> str:
        if id_accessor is not None:
            local_id = id_accessor(obj, info)
        else:
            local_id = _read_attribute(obj, id_attribute)
        if type_name is None:
            return to_global_id(info.parent_type.name, local_id)
        return to_global_id(type_name, local_id)

    return resolve_global_id


def global_id_field(
    type_name: str | None = None,
    id_accessor: ILocalIdAccessor | None = None,
    description: str | None = None,
    config: NodeConfig | None = None,
) -> GraphQLField:
    """Create an ``id: ID!`` field resolving to a global ID.

    Example::

        photo_type = GraphQLObjectType(
            "Photo",
            interfaces=[node_interface],
            fields=lambda: {
                "id": global_id_field("Photo", lambda obj, _info: obj["photoId"]),
                "width": GraphQLField(GraphQLInt),
            },
        )

    Args:
        type_name: Type name to encode; defaults to the owning type's name.
        id_accessor: Optional callable ``(obj, info)`` returning the local ID.
        description: Field description; defaults to the configured one.
        config: Optional node configuration.

    Returns:
        The field definition.
    """
    config = config or NodeConfig()
    return GraphQLField(
        GraphQLNonNull(GraphQLID),
        description=description or config.global_id_description,
        resolve=global_id_resolver(type_name, id_accessor, config.id_attribute),
    )
