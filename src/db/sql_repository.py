"""Implementation of Repository using SQLAlchemy"""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.db.schema import Base

EntityT = TypeVar("EntityT", bound=Base)


class SQLRepository(Generic[EntityT]):
    """Data stored using SQL / methods implemented using SQLAlchemy.

    Works for any mapped class with an integer `id` primary key.
    """

    def __init__(self, db_session: Session, entity_type: type[EntityT]) -> None:
        self.db = db_session
        self.entity_type = entity_type

    def get_by_id(self, entity_id: int) -> EntityT | None:
        """Get entity by ID, if record exists."""
        return self.db.get(self.entity_type, entity_id)

    def get_all(self) -> list[EntityT]:
        """All records, ordered by ID."""
        query = select(self.entity_type).order_by(self.entity_type.id)
        return list(self.db.scalars(query))

    def find(self, *criteria: Any) -> list[EntityT]:
        """Records matching every given criterion, e.g. `Game.genre == "Action"`."""
        query = select(self.entity_type).where(*criteria).order_by(self.entity_type.id)
        return list(self.db.scalars(query))

    def add(self, entity: EntityT) -> EntityT:
        """Store new entity and return it with its newly assigned ID."""
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def update(self, entity: EntityT) -> EntityT:
        """Persist the current field values of an existing entity.

        NOTE no existence check here, the caller is expected to have fetched the entity first.
        """
        entity = self.db.merge(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity: EntityT) -> None:
        """Remove an entity's record."""
        self.db.delete(entity)
        self.db.commit()

    def exists(self, entity_id: int) -> bool:
        """Whether a record with this ID exists."""
        query = select(self.entity_type.id).where(self.entity_type.id == entity_id)
        return self.db.scalar(query) is not None
