"""
Projects, groups and their members.

Every project item lives in one project, every project belongs to
one group, and a group's accepted members are the users allowed to
see the project's items.
"""

from typing import List

from sqlalchemy import String, Integer, Boolean, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bujo.models.base import Base, BaseModel


class User(BaseModel, Base):
    """A registered user, identified by a unique name."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, name='{self.name}')>"


class UserGroup(Base):
    """
    Membership of a user in a group.

    A user is invited first (accepted=False) and becomes an accepted
    member once they join; only accepted members see group content.
    """

    __tablename__ = "user_groups"

    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), primary_key=True)
    group_id: Mapped[int] = mapped_column(ForeignKey("groups.id"), primary_key=True)
    accepted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    user: Mapped[User] = relationship(lazy="joined")
    group: Mapped["Group"] = relationship(back_populates="users")

    def __repr__(self) -> str:
        return (
            f"<UserGroup(user_id={self.user_id}, group_id={self.group_id}, "
            f"accepted={self.accepted})>"
        )


class Group(BaseModel, Base):
    """A set of users sharing projects."""

    __tablename__ = "groups"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    owner: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    users: Mapped[List[UserGroup]] = relationship(
        back_populates="group",
        cascade="all, delete-orphan"
    )

    @property
    def accepted_users(self) -> List[UserGroup]:
        """Memberships that have been accepted."""
        return [member for member in self.users if member.accepted]

    def add_user(self, user: User, accepted: bool = True) -> UserGroup:
        """Add a membership row for user."""
        member = UserGroup(user=user, accepted=accepted)
        self.users.append(member)
        return member

    def __repr__(self) -> str:
        return f"<Group(id={self.id}, name='{self.name}', owner='{self.owner}')>"


class Project(BaseModel, Base):
    """A container of tasks, transactions or notes, shared through its group."""

    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    owner: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    group_id: Mapped[int] = mapped_column(ForeignKey("groups.id"), nullable=False)

    group: Mapped[Group] = relationship()

    def __repr__(self) -> str:
        return f"<Project(id={self.id}, name='{self.name}', group_id={self.group_id})>"
