"""
Data access layer (Repository pattern).

Repositories handle all database queries,
isolating business logic from SQL.
"""

from bujo.repositories.base import BaseRepository
from bujo.repositories.label_repo import LabelRepository
from bujo.repositories.project_item_repo import (
    ProjectItemRepository,
    TaskRepository,
    TransactionRepository,
    NoteRepository,
)
from bujo.repositories.user_alias_repo import UserAliasRepository

__all__ = [
    "BaseRepository",
    "LabelRepository",
    "ProjectItemRepository",
    "TaskRepository",
    "TransactionRepository",
    "NoteRepository",
    "UserAliasRepository",
]
