"""Node definitions configuration entity."""

from dataclasses import dataclass


@dataclass
class NodeConfig:
    """Configuration for the Node interface and its root fields.

    Only affects schema construction: names and descriptions of the
    generated definitions, and the attribute the default local ID
    accessor reads from records. The global ID wire format is fixed.
    """

    interface_name: str = "Node"
    interface_description: str | None = "An object with an ID"
    id_description: str | None = "The id of the object."
    global_id_description: str | None = "The ID of an object"

    # Default local ID accessor: mapping key or attribute name
    id_attribute: str = "id"

    # Root fields
    node_field_description: str | None = "Fetches an object given its ID"
    node_id_description: str | None = "The ID of an object"
    nodes_field_description: str | None = "Fetches objects given their IDs"
    nodes_ids_description: str | None = "The IDs of objects"

    def __post_init__(self) -> None:
        """Validate names used to build the schema."""
        if not self.interface_name:
            raise ValueError("interface_name must be a non-empty string")
        if not self.id_attribute:
            raise ValueError("id_attribute must be a non-empty string")
