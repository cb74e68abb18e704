"""Protocol repository (generic over any stored entity that has an integer `id`)."""

from typing import Any, Protocol, TypeVar

EntityT = TypeVar("EntityT")


class Repository(Protocol[EntityT]):
    """Persistence layer orchestration"""

    def get_by_id(self, entity_id: int) -> EntityT | None:
        """Get entity by ID, if record exists."""
        ...

    def get_all(self) -> list[EntityT]:
        """All records, ordered by ID."""
        ...

    def find(self, *criteria: Any) -> list[EntityT]:
        """Records matching every given criterion."""
        ...

    def add(self, entity: EntityT) -> EntityT:
        """Store new entity and return it with its newly assigned ID."""
        ...

    def update(self, entity: EntityT) -> EntityT:
        """Persist the current field values of an existing entity."""
        ...

    def delete(self, entity: EntityT) -> None:
        """Remove an entity's record."""
        ...

    def exists(self, entity_id: int) -> bool:
        """Whether a record with this ID exists."""
        ...
