"""
Label model.

A Label is a user-owned tag ("work", "groceries") that can be attached
to tasks, transactions and notes. Items hold the label ids; the label
itself knows nothing about what references it.
"""

from typing import Optional

from sqlalchemy import String, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from bujo.models.base import Base, BaseModel
from bujo.schemas.label import LabelView


class Label(BaseModel, Base):
    """
    A label owned by exactly one user.

    Attributes:
        id: Auto-incrementing primary key
        name: Display name, unique per owner
        owner: Username of the owner
        icon: Optional presentation hint (icon identifier)
        created_at: When the label was created (from BaseModel)
        updated_at: When the label was last modified (from BaseModel)

    Example:
        label = Label(name="work", owner="alice", icon="BriefcaseOutlined")
        db.add(label)
        db.flush()
    """

    __tablename__ = "labels"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True
    )

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Label name, unique per owner"
    )

    owner: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
        comment="Username of the label owner"
    )

    icon: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
        comment="Presentation hint for the label"
    )

    __table_args__ = (
        UniqueConstraint("name", "owner", name="uq_labels_name_owner"),
        {"comment": "User-owned labels attachable to project items"}
    )

    def to_presentation(self) -> LabelView:
        """Convert to the presentation form handed back to callers."""
        return LabelView(id=self.id, value=self.name, icon=self.icon)

    def __repr__(self) -> str:
        return f"<Label(id={self.id}, name='{self.name}', owner='{self.owner}')>"

    def __str__(self) -> str:
        return self.name
