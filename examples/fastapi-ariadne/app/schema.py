"""GraphQL schema definitions with the Node interface."""

from nodeql.adapters.ariadne import get_node_interface_sdl

TYPE_DEFS = get_node_interface_sdl() + """
type Query {
    \"\"\"Fetches any object given its global ID.\"\"\"
    node(id: ID!): Node

    \"\"\"Fetches objects given their global IDs.\"\"\"
    nodes(ids: [ID!]!): [Node]!

    users: [User!]!
    posts: [Post!]!
}

\"\"\"A user in the system.\"\"\"
type User implements Node {
    id: ID!
    name: String!
    createdAt: String!
}

\"\"\"A blog post.\"\"\"
type Post implements Node {
    id: ID!
    text: String!
    author: User
}
"""
