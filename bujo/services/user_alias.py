"""User alias lookup."""

from typing import Dict

from sqlalchemy.orm import Session

from bujo.models.user_alias import UserAlias
from bujo.repositories.user_alias_repo import UserAliasRepository


class UserAliasService:
    """Resolves the aliases a user has given to other users."""

    def __init__(self, db: Session, repository: UserAliasRepository = None):
        self.db = db
        self.repository = repository or UserAliasRepository(db)

    def get_aliases(self, user: str) -> Dict[str, str]:
        """
        Aliases ``user`` sees other users by.

        Returns:
            Mapping of username to alias; users without an alias are absent
        """
        return {row.username: row.alias for row in self.repository.find_by_owner(user)}

    def set_alias(self, owner: str, username: str, alias: str):
        """Create or replace the alias owner uses for username."""
        existing = next(
            (row for row in self.repository.find_by_owner(owner) if row.username == username),
            None,
        )
        if existing is None:
            existing = UserAlias(owner=owner, username=username, alias=alias)
        else:
            existing.alias = alias
        return self.repository.save(existing)
