"""User alias model: how one user prefers another user's name rendered."""

from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from bujo.models.base import Base, BaseModel


class UserAlias(BaseModel, Base):
    """
    Alias ``owner`` gave to ``username``.

    Example:
        UserAlias(owner="alice", username="bob92", alias="Bob")
    """

    __tablename__ = "user_aliases"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    owner: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    username: Mapped[str] = mapped_column(String(100), nullable=False)
    alias: Mapped[str] = mapped_column(String(100), nullable=False)

    __table_args__ = (
        UniqueConstraint("owner", "username", name="uq_user_aliases_owner_username"),
    )

    def __repr__(self) -> str:
        return f"<UserAlias(owner='{self.owner}', username='{self.username}', alias='{self.alias}')>"
