"""
Generic repository over one ORM model.

Repositories only read and stage writes on the session; committing
is left to the unit of work that owns the session.
"""

from typing import Generic, Iterable, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from bujo.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """CRUD operations shared by every repository."""

    model: Type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        return self.db.get(self.model, entity_id)

    def find_all(self) -> List[ModelT]:
        return list(self.db.scalars(select(self.model).order_by(self.model.id)))

    def find_all_by_id(self, entity_ids: Iterable[int]) -> List[ModelT]:
        """
        Fetch every entity whose id is in entity_ids.

        Ids that do not exist are skipped; the result is in storage
        order, callers needing another order sort it themselves.
        """
        entity_ids = list(entity_ids)
        if not entity_ids:
            return []
        stmt = select(self.model).where(self.model.id.in_(entity_ids))
        return list(self.db.scalars(stmt))

    def save(self, entity: ModelT) -> ModelT:
        self.db.add(entity)
        self.db.flush()
        return entity

    def save_all(self, entities: Iterable[ModelT]) -> List[ModelT]:
        entities = list(entities)
        self.db.add_all(entities)
        self.db.flush()
        return entities

    def delete(self, entity: ModelT) -> None:
        self.db.delete(entity)
        self.db.flush()

