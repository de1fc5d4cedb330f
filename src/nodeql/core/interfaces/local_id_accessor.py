"""Local ID accessor interface."""

from typing import Any, Protocol

from graphql import GraphQLResolveInfo


class ILocalIdAccessor(Protocol):
    """Contract for reading the type-local ID off a record."""

    def __call__(self, obj: Any, info: GraphQLResolveInfo) -> Any:
        """Return the local ID of ``obj``, as anything convertible to str."""
        ...
