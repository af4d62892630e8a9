"""Label repository."""

from typing import List, Optional

from sqlalchemy import select

from bujo.models.label import Label
from bujo.repositories.base import BaseRepository


class LabelRepository(BaseRepository[Label]):
    """Lookups on the labels table."""

    model = Label

    def find_by_owner(self, owner: str) -> List[Label]:
        stmt = select(Label).where(Label.owner == owner)
        return list(self.db.scalars(stmt))

    def find_by_name_and_owner(self, name: Optional[str], owner: str) -> List[Label]:
        """
        Labels of owner called name.

        Returns a list so callers can test for emptiness; the unique
        constraint keeps it to at most one element.
        """
        if name is None:
            return []
        stmt = select(Label).where(Label.name == name, Label.owner == owner)
        return list(self.db.scalars(stmt))
