"""
Repositories for tasks, transactions and notes.

Label ids live in a JSON column on each item, so finding the items
carrying a label means scanning the table and filtering in Python.
"""

from typing import Iterable, List, TypeVar

from sqlalchemy import select

from bujo.models.note import Note
from bujo.models.task import Task
from bujo.models.transaction import Transaction
from bujo.repositories.base import BaseRepository

ItemT = TypeVar("ItemT", Task, Transaction, Note)


class ProjectItemRepository(BaseRepository[ItemT]):
    """Label-scoped lookups shared by every project item table."""

    def _scan(self) -> Iterable[ItemT]:
        # Rows with no labels at all can never match
        stmt = (
            select(self.model)
            .where(self.model.labels_json != "[]")
            .order_by(self.model.id)
        )
        return self.db.scalars(stmt)

    def find_by_label_id(self, label_id: int) -> List[ItemT]:
        return [item for item in self._scan() if item.has_label(label_id)]

    def find_by_label_ids(self, label_ids: Iterable[int]) -> List[ItemT]:
        """Items carrying at least one of label_ids."""
        label_ids = set(label_ids)
        if not label_ids:
            return []
        return [item for item in self._scan() if item.has_any_label(label_ids)]

    def find_by_project(self, project_id: int) -> List[ItemT]:
        stmt = select(self.model).where(self.model.project_id == project_id).order_by(self.model.id)
        return list(self.db.scalars(stmt))


class TaskRepository(ProjectItemRepository[Task]):
    model = Task

    def find_tasks_by_label_id(self, label_id: int) -> List[Task]:
        return self.find_by_label_id(label_id)

    def find_tasks_by_label_ids(self, label_ids: Iterable[int]) -> List[Task]:
        return self.find_by_label_ids(label_ids)


class TransactionRepository(ProjectItemRepository[Transaction]):
    model = Transaction

    def find_transactions_by_label_id(self, label_id: int) -> List[Transaction]:
        return self.find_by_label_id(label_id)

    def find_transactions_by_label_ids(self, label_ids: Iterable[int]) -> List[Transaction]:
        return self.find_by_label_ids(label_ids)


class NoteRepository(ProjectItemRepository[Note]):
    model = Note

    def find_notes_by_label_id(self, label_id: int) -> List[Note]:
        return self.find_by_label_id(label_id)

    def find_notes_by_label_ids(self, label_ids: Iterable[int]) -> List[Note]:
        return self.find_by_label_ids(label_ids)
