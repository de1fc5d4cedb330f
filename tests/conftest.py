"""Pytest configuration for nodeql tests."""

from typing import Any

import pytest
from graphql import (
    GraphQLField,
    GraphQLInt,
    GraphQLList,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
)

from nodeql import global_id_field, node_definitions

USER_DATA = {
    "1": {"id": 1, "name": "John Doe"},
    "2": {"id": 2, "name": "Jane Smith"},
}

PHOTO_DATA = {
    "1": {"photoId": 1, "width": 300},
    "2": {"photoId": 2, "width": 400},
}

POST_DATA = {
    "1": {"id": 1, "text": "lorem"},
    "2": {"id": 2, "text": "ipsum"},
}

DATA_BY_TYPE = {"User": USER_DATA, "Photo": PHOTO_DATA, "Post": POST_DATA}


def fetch_object(type_name: str, local_id: str, info: Any) -> Any:
    """Look up a record in the in-memory tables."""
    return DATA_BY_TYPE.get(type_name, {}).get(local_id)


def build_schema(id_fetcher=fetch_object, type_resolver=None) -> GraphQLSchema:
    """Build a User/Photo/Post schema exposing node, nodes and allObjects.

    Users use the default ``id`` accessor, photos a custom accessor and
    posts infer their type name from the owning object type.
    """

    def resolve_type(obj: Any, info: Any) -> Any:
        if "name" in obj:
            return user_type
        if "photoId" in obj:
            return photo_type
        if "text" in obj:
            return post_type
        return None

    node_interface, node_field, nodes_field = node_definitions(
        id_fetcher, type_resolver or resolve_type
    )

    user_type = GraphQLObjectType(
        "User",
        interfaces=[node_interface],
        fields=lambda: {
            "id": global_id_field("User"),
            "name": GraphQLField(GraphQLString),
        },
    )

    photo_type = GraphQLObjectType(
        "Photo",
        interfaces=[node_interface],
        fields=lambda: {
            "id": global_id_field("Photo", lambda obj, _info: obj["photoId"]),
            "width": GraphQLField(GraphQLInt),
        },
    )

    post_type = GraphQLObjectType(
        "Post",
        interfaces=[node_interface],
        fields=lambda: {
            "id": global_id_field(),
            "text": GraphQLField(GraphQLString),
        },
    )

    query_type = GraphQLObjectType(
        "Query",
        fields=lambda: {
            "node": node_field,
            "nodes": nodes_field,
            "allObjects": GraphQLField(
                GraphQLList(node_interface),
                resolve=lambda _root, _info: [
                    USER_DATA["1"],
                    USER_DATA["2"],
                    PHOTO_DATA["1"],
                    PHOTO_DATA["2"],
                    POST_DATA["1"],
                    POST_DATA["2"],
                ],
            ),
        },
    )

    return GraphQLSchema(query=query_type, types=[user_type, photo_type, post_type])


@pytest.fixture
def schema() -> GraphQLSchema:
    """Schema backed by a synchronous fetcher."""
    return build_schema()


@pytest.fixture
def make_schema():
    """Factory building the schema with a custom fetcher or type resolver."""
    return build_schema
