"""
Project Items Grouper
=====================

Buckets tasks, transactions and notes by calendar day and merges the
per-type buckets into one date-ordered list of ProjectItems.

Each item type is placed by its own date:
- Task: ``due_date``; undated tasks fall on the UTC day of their last
  update when ``include_undated`` is set, and are left out otherwise
- Transaction: ``date``, unmodified
- Note: the day of ``updated_at`` in the viewer's timezone
"""

import logging
from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List, Optional
from zoneinfo import ZoneInfo

from bujo.models.base import as_utc
from bujo.models.note import Note
from bujo.models.task import Task
from bujo.models.transaction import Transaction
from bujo.schemas.project_item import ProjectItems

logger = logging.getLogger(__name__)

ProjectItemsMap = Dict[date, ProjectItems]


class ProjectItemsGrouper:
    """Stateless grouping helpers; an instance exists so callers can swap it."""

    # ========================================
    # Grouping
    # ========================================

    @staticmethod
    def group_tasks_by_date(tasks: Iterable[Task], include_undated: bool) -> Dict[date, List[Task]]:
        grouped: Dict[date, List[Task]] = defaultdict(list)
        for task in tasks:
            if task.due_date is not None:
                grouped[task.due_date].append(task)
            elif include_undated:
                grouped[as_utc(task.updated_at).date()].append(task)
        return dict(grouped)

    @staticmethod
    def group_transactions_by_date(transactions: Iterable[Transaction]) -> Dict[date, List[Transaction]]:
        grouped: Dict[date, List[Transaction]] = defaultdict(list)
        for transaction in transactions:
            grouped[transaction.date].append(transaction)
        return dict(grouped)

    @staticmethod
    def group_notes_by_date(notes: Iterable[Note], timezone: str) -> Dict[date, List[Note]]:
        zone = ZoneInfo(timezone)
        grouped: Dict[date, List[Note]] = defaultdict(list)
        for note in notes:
            grouped[as_utc(note.updated_at).astimezone(zone).date()].append(note)
        return dict(grouped)

    # ========================================
    # Merging
    # ========================================

    @staticmethod
    def _bucket(project_items_map: ProjectItemsMap, day: date) -> ProjectItems:
        if day not in project_items_map:
            project_items_map[day] = ProjectItems(date=day)
        return project_items_map[day]

    def merge_tasks_map(
        self,
        project_items_map: ProjectItemsMap,
        tasks_map: Dict[date, List[Task]],
        aliases: Optional[Dict[str, str]] = None,
    ) -> ProjectItemsMap:
        """Add presented tasks to project_items_map, rendering assignees through aliases."""
        for day, tasks in tasks_map.items():
            self._bucket(project_items_map, day).tasks.extend(
                task.to_presentation(aliases) for task in tasks
            )
        return project_items_map

    def merge_transactions_map(
        self,
        project_items_map: ProjectItemsMap,
        transactions_map: Dict[date, List[Transaction]],
    ) -> ProjectItemsMap:
        for day, transactions in transactions_map.items():
            self._bucket(project_items_map, day).transactions.extend(
                transaction.to_presentation() for transaction in transactions
            )
        return project_items_map

    def merge_notes_map(
        self,
        project_items_map: ProjectItemsMap,
        notes_map: Dict[date, List[Note]],
    ) -> ProjectItemsMap:
        for day, notes in notes_map.items():
            self._bucket(project_items_map, day).notes.extend(
                note.to_presentation() for note in notes
            )
        return project_items_map

    @staticmethod
    def get_sorted_project_items(project_items_map: ProjectItemsMap) -> List[ProjectItems]:
        """Buckets ordered by date, earliest first."""
        return [project_items_map[day] for day in sorted(project_items_map)]
