"""SDL for the Node interface in schema-first Ariadne projects."""

NODE_INTERFACE = '''
"""An object with an ID"""
interface Node {
  """The id of the object."""
  id: ID!
}
'''


def get_node_interface_sdl(name: str = "Node") -> str:
    """Get the SDL definition of the Node interface.

    Include it in the type definitions passed to
    ``make_executable_schema`` and declare the root fields yourself::

        type Query {
          node(id: ID!): Node
          nodes(ids: [ID!]!): [Node]!
        }

    Args:
        name: The interface name.

    Returns:
        The interface SDL.
    """
    return NODE_INTERFACE.replace("interface Node {", f"interface {name} {{")
