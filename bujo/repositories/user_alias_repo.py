"""User alias repository."""

from typing import List

from sqlalchemy import select

from bujo.models.user_alias import UserAlias
from bujo.repositories.base import BaseRepository


class UserAliasRepository(BaseRepository[UserAlias]):
    model = UserAlias

    def find_by_owner(self, owner: str) -> List[UserAlias]:
        stmt = select(UserAlias).where(UserAlias.owner == owner).order_by(UserAlias.username)
        return list(self.db.scalars(stmt))
