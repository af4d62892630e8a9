"""
Presentation models.

What the label layer hands back to its callers: plain pydantic
objects, detached from the database session.
"""

from bujo.schemas.label import LabelView, UpdateLabelParams
from bujo.schemas.project_item import (
    UserView,
    TaskView,
    TransactionView,
    NoteView,
    ProjectItemView,
    ProjectItems,
)

__all__ = [
    "LabelView",
    "UpdateLabelParams",
    "UserView",
    "TaskView",
    "TransactionView",
    "NoteView",
    "ProjectItemView",
    "ProjectItems",
]
