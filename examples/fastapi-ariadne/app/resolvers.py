"""GraphQL resolvers backed by global object identification."""

from typing import Any

from ariadne import ObjectType, QueryType

from app import database as db
from nodeql.adapters.ariadne import (
    NodeInterfaceType,
    make_node_resolver,
    make_nodes_resolver,
)

FETCHERS = {
    "User": db.get_user,
    "Post": db.get_post,
}


async def fetch_node(type_name: str, local_id: str, info: Any) -> Any:
    """Load a record from the table owning its type."""
    fetcher = FETCHERS.get(type_name)
    if fetcher is None:
        return None
    record = await fetcher(local_id)
    if record is not None:
        record["__typename"] = type_name
    return record


def resolve_node_type(obj: dict[str, Any], info: Any) -> str | None:
    return obj.get("__typename")


query = QueryType()
query.set_field("node", make_node_resolver(fetch_node))
query.set_field("nodes", make_nodes_resolver(fetch_node))


@query.field("users")
async def resolve_users(_, info):
    return [{**user, "__typename": "User"} for user in await db.get_users()]


@query.field("posts")
async def resolve_posts(_, info):
    return [{**post, "__typename": "Post"} for post in await db.get_posts()]


user = ObjectType("User")
user.set_alias("createdAt", "created_at")

post = ObjectType("Post")


@post.field("author")
async def resolve_author(obj, info):
    author = await db.get_user(obj["author_id"])
    if author is not None:
        author["__typename"] = "User"
    return author


# Binds a global ID resolver to `id` on User and Post
node = NodeInterfaceType(resolve_node_type)

resolvers = [query, user, post, node]
