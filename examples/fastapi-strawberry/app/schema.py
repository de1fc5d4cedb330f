"""Strawberry GraphQL schema with the Node interface."""

from typing import Any

import strawberry
from strawberry.types import Info

from nodeql.adapters.strawberry import Node, global_id, node_field, nodes_field

USERS = {
    "1": {"id": 1, "name": "John Doe"},
    "2": {"id": 2, "name": "Jane Smith"},
}

PHOTOS = {
    "1": {"photo_id": 1, "width": 300},
    "2": {"photo_id": 2, "width": 400},
}


@strawberry.type
class User(Node):
    """A user in the system."""

    name: str

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        """Create User from dictionary."""
        return cls(id=global_id("User", data["id"]), name=data["name"])


@strawberry.type
class Photo(Node):
    """A photo."""

    width: int

    @classmethod
    def from_dict(cls, data: dict) -> "Photo":
        """Create Photo from dictionary."""
        return cls(id=global_id("Photo", data["photo_id"]), width=data["width"])


async def fetch_node(type_name: str, local_id: str, info: Info) -> Any:
    """Load a node from the table owning its type."""
    if type_name == "User" and local_id in USERS:
        return User.from_dict(USERS[local_id])
    if type_name == "Photo" and local_id in PHOTOS:
        return Photo.from_dict(PHOTOS[local_id])
    return None


@strawberry.type
class Query:
    node = node_field(fetch_node)
    nodes = nodes_field(fetch_node)

    @strawberry.field
    def users(self) -> list[User]:
        """Get all users."""
        return [User.from_dict(user) for user in USERS.values()]

    @strawberry.field
    def photos(self) -> list[Photo]:
        """Get all photos."""
        return [Photo.from_dict(photo) for photo in PHOTOS.values()]


schema = strawberry.Schema(query=Query, types=[User, Photo])
