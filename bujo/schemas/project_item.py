"""Presentation models for project items and their per-date envelope."""

import datetime as dt
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from bujo.schemas.label import LabelView


class UserView(BaseModel):
    """A username together with the alias the viewer uses for it."""

    name: str
    alias: str


class TaskView(BaseModel):
    id: int
    name: str
    owner: str
    project_id: int
    due_date: Optional[dt.date] = None
    assignees: List[UserView] = Field(default_factory=list)
    labels: List[LabelView] = Field(default_factory=list)


class TransactionView(BaseModel):
    id: int
    name: str
    owner: str
    project_id: int
    date: dt.date
    amount: float = 0.0
    labels: List[LabelView] = Field(default_factory=list)


class NoteView(BaseModel):
    id: int
    name: str
    owner: str
    project_id: int
    updated_at: dt.datetime
    labels: List[LabelView] = Field(default_factory=list)


ProjectItemView = Union[TaskView, TransactionView, NoteView]


class ProjectItems(BaseModel):
    """
    Everything that falls on one calendar day.

    Built per query, never persisted.
    """

    date: dt.date
    tasks: List[TaskView] = Field(default_factory=list)
    transactions: List[TransactionView] = Field(default_factory=list)
    notes: List[NoteView] = Field(default_factory=list)

    def items(self) -> List[ProjectItemView]:
        """Tasks, then transactions, then notes."""
        return [*self.tasks, *self.transactions, *self.notes]
