"""Integration tests for the Strawberry adapter."""

from typing import Any

import pytest

strawberry = pytest.importorskip("strawberry")

from nodeql import from_global_id, to_global_id  # noqa: E402
from nodeql.adapters.strawberry import (  # noqa: E402
    Node,
    global_id,
    node_field,
    nodes_field,
)


@strawberry.type
class User(Node):
    name: str


@strawberry.type
class Photo(Node):
    width: int


USERS = {
    "1": User(id=global_id("User", 1), name="John Doe"),
    "2": User(id=global_id("User", 2), name="Jane Smith"),
}
PHOTOS = {"1": Photo(id=global_id("Photo", 1), width=300)}


def fetch(type_name: str, local_id: str, info: Any) -> Any:
    if type_name == "User":
        return USERS.get(local_id)
    if type_name == "Photo":
        return PHOTOS.get(local_id)
    return None


async def fetch_async(type_name: str, local_id: str, info: Any) -> Any:
    return fetch(type_name, local_id, info)


@strawberry.type
class Query:
    node = node_field(fetch)
    nodes = nodes_field(fetch)
    async_node = node_field(fetch_async)


schema = strawberry.Schema(query=Query, types=[User, Photo])


class TestGlobalId:
    """Tests for the global_id helper."""

    def test_encodes(self) -> None:
        assert global_id("User", 1) == "VXNlcjox"
        assert from_global_id(global_id("Photo", 1)) == ("Photo", "1")


class TestStrawberryNodeField:
    """Tests for node and nodes fields."""

    @pytest.mark.asyncio
    async def test_refetches(self) -> None:
        query = """{
            user: node(id: "VXNlcjox") { id ... on User { name } }
            photo: node(id: "UGhvdG86MQ==") { id ... on Photo { width } }
        }"""

        result = await schema.execute(query)

        assert result.errors is None
        assert result.data == {
            "user": {"id": "VXNlcjox", "name": "John Doe"},
            "photo": {"id": "UGhvdG86MQ==", "width": 300},
        }

    @pytest.mark.asyncio
    async def test_missing_record_is_null(self) -> None:
        missing = to_global_id("User", 999)

        result = await schema.execute(f'{{ node(id: "{missing}") {{ id }} }}')

        assert result.errors is None
        assert result.data == {"node": None}

    @pytest.mark.asyncio
    async def test_malformed_id_is_null(self) -> None:
        result = await schema.execute('{ node(id: "not an id") { id } }')

        assert result.errors is None
        assert result.data == {"node": None}

    @pytest.mark.asyncio
    async def test_async_fetcher(self) -> None:
        result = await schema.execute(
            '{ asyncNode(id: "VXNlcjoy") { ... on User { name } } }'
        )

        assert result.errors is None
        assert result.data == {"asyncNode": {"name": "Jane Smith"}}

    @pytest.mark.asyncio
    async def test_nodes(self) -> None:
        result = await schema.execute(
            '{ nodes(ids: ["UGhvdG86MQ==", "VXNlcjo5OTk=", "VXNlcjox"]) { id } }'
        )

        assert result.errors is None
        assert result.data == {
            "nodes": [{"id": "UGhvdG86MQ=="}, None, {"id": "VXNlcjox"}]
        }

    def test_schema_exposes_node_interface(self) -> None:
        sdl = str(schema)

        assert "interface Node" in sdl
        assert "node(id: ID!): Node" in sdl
        assert "nodes(ids: [ID!]!): [Node]!" in sdl
        assert "type User implements Node" in sdl
