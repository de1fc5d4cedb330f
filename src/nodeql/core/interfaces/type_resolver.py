"""Type resolver interface."""

from collections.abc import Awaitable
from typing import Any, Protocol

from graphql import GraphQLObjectType, GraphQLResolveInfo

TypeResolution = GraphQLObjectType | str | None


class ITypeResolver(Protocol):
    """Contract for classifying a fetched record into its object type."""

    def __call__(
        self,
        value: Any,
        info: GraphQLResolveInfo,
    ) -> TypeResolution | Awaitable[TypeResolution]:
        """Determine the concrete object type of a record.

        Args:
            value: The record returned by the object fetcher.
            info: The GraphQL resolve info.

        Returns:
            The object type, its name, or ``None`` if the record cannot
            be classified (reported as an execution error).
        """
        ...
