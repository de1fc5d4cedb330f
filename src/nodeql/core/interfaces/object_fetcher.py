"""Object fetcher interface."""

from collections.abc import Awaitable
from typing import Any, Protocol

from graphql import GraphQLResolveInfo


class IObjectFetcher(Protocol):
    """Contract for loading a record from its decoded global ID.

    Fetchers own the storage layer: the type name selects where to look
    and the local ID is passed through exactly as it was encoded.
    """

    def __call__(
        self,
        type_name: str,
        local_id: str,
        info: GraphQLResolveInfo,
    ) -> Any | Awaitable[Any]:
        """Fetch the record identified by a type name and local ID.

        Args:
            type_name: The object type name from the global ID. Empty when
                the global ID could not be decoded.
            local_id: The type-local ID from the global ID.
            info: The GraphQL resolve info; ``info.context`` holds the
                request context.

        Returns:
            The record, ``None`` if it does not exist, or an awaitable
            resolving to either.
        """
        ...
