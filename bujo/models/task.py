"""
Task model.

A task may carry a due date and a list of assignees; tasks without a
due date are still listed when grouping asks for undated items.
"""

import json
from datetime import date
from typing import List, Optional

from sqlalchemy import Date, Text
from sqlalchemy.orm import Mapped, mapped_column

from bujo.models.base import Base, BaseModel, load_json_list
from bujo.models.project_item import ProjectItemMixin
from bujo.schemas.label import LabelView
from bujo.schemas.project_item import TaskView, UserView


class Task(ProjectItemMixin, BaseModel, Base):
    """
    A to-do entry in a project.

    Attributes:
        due_date: Optional calendar due date
        assignees_json: Usernames assigned to the task (JSON array)
        labels: Attached label ids (from ProjectItemMixin)

    Example:
        task = Task(name="File taxes", owner="alice", project=project,
                    due_date=date(2024, 4, 15), labels=[3, 1])
    """

    __tablename__ = "tasks"

    due_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True, index=True)

    assignees_json: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="[]",
        comment="Assigned usernames (JSON array)"
    )

    def __init__(self, **kwargs):
        self._pop_labels(kwargs)
        if "assignees" in kwargs and "assignees_json" not in kwargs:
            kwargs["assignees_json"] = json.dumps(kwargs.pop("assignees"))
        super().__init__(**kwargs)

    @property
    def assignees(self) -> List[str]:
        return load_json_list(self.assignees_json)

    @assignees.setter
    def assignees(self, value: List[str]) -> None:
        self.assignees_json = json.dumps(value)

    def to_presentation(self, aliases: Optional[dict] = None) -> TaskView:
        """
        Convert to a TaskView.

        Args:
            aliases: username -> alias map of the viewer; assignees
                without an alias are shown by username
        """
        aliases = aliases or {}
        return TaskView(
            id=self.id,
            name=self.name,
            owner=self.owner,
            project_id=self.project_id,
            due_date=self.due_date,
            assignees=[
                UserView(name=name, alias=aliases.get(name, name))
                for name in self.assignees
            ],
            labels=[LabelView(id=label_id) for label_id in self.labels],
        )

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, name='{self.name}', due_date={self.due_date})>"
