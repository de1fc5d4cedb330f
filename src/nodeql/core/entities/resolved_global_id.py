"""Decoded global ID value object."""

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedGlobalId:
    """The type name and local ID recovered from a global ID.

    Unpacks and compares like the ``(type, id)`` tuple so callers can
    write ``type_name, local_id = from_global_id(global_id)``.
    """

    type: str
    id: str

    @property
    def is_valid(self) -> bool:
        """Whether the global ID decoded to a type name."""
        return bool(self.type)

    def __bool__(self) -> bool:
        return self.is_valid

    def __iter__(self) -> Iterator[str]:
        yield self.type
        yield self.id

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ResolvedGlobalId):
            return (self.type, self.id) == (other.type, other.id)
        if isinstance(other, tuple):
            return (self.type, self.id) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.type, self.id))


# Result of decoding anything that is not a well-formed global ID
INVALID_GLOBAL_ID = ResolvedGlobalId(type="", id="")
