"""
Database models package.

Contains all SQLAlchemy ORM models.
"""

from bujo.models.base import Base, BaseModel
from bujo.models.label import Label
from bujo.models.project import User, Group, UserGroup, Project
from bujo.models.project_item import ProjectItem, ProjectItemMixin
from bujo.models.task import Task
from bujo.models.transaction import Transaction
from bujo.models.note import Note
from bujo.models.user_alias import UserAlias

__all__ = [
    "Base",
    "BaseModel",
    "Label",
    "User",
    "Group",
    "UserGroup",
    "Project",
    "ProjectItem",
    "ProjectItemMixin",
    "Task",
    "Transaction",
    "Note",
    "UserAlias",
]
