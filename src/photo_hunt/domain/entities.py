"""Identity semantics shared by all stored records."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class EntityKey:
    """Referenceable identifier of a stored entity, used for batch loads."""

    kind: str
    id: int


class Entity:
    """Base for records whose identity is their persistence id.

    Two records are equal when they are the same entity type with the same
    ``id``; every other field is ignored by equality and hashing.
    """

    KIND: ClassVar[str]
    id: int

    @classmethod
    def key(cls, entity_id: int) -> EntityKey:
        """Return the key for an entity of this type."""
        return EntityKey(kind=cls.KIND, id=entity_id)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(self) is not type(other):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((self.KIND, self.id))
