"""
Label service.

Owns label CRUD for the bullet journal:
- Labels are unique by (name, owner)
- Deleting a label detaches it from every task, transaction and note
- Items carrying any of a set of labels can be listed, restricted to
  what the requester may see and grouped by day

Every public method is one unit of work on the session it was given:
a failure rolls the session back and propagates unchanged. Committing
is left to the caller (see bujo.database.get_db_context).
"""

import logging
from typing import Dict, Iterable, List, Optional, TypeVar

from sqlalchemy.orm import Session

from bujo.config import settings
from bujo.core.constants import ContentType, MissingLabelPolicy, Operation
from bujo.core.exceptions import ResourceAlreadyExistsError, ResourceNotFoundError
from bujo.database.session import transactional
from bujo.models.base import as_utc
from bujo.models.label import Label
from bujo.models.project_item import ProjectItem
from bujo.repositories.label_repo import LabelRepository
from bujo.repositories.project_item_repo import (
    NoteRepository,
    ProjectItemRepository,
    TaskRepository,
    TransactionRepository,
)
from bujo.schemas.label import LabelView, UpdateLabelParams
from bujo.schemas.project_item import ProjectItemView, ProjectItems
from bujo.services.authorization import AuthorizationService
from bujo.services.grouping import ProjectItemsGrouper
from bujo.services.user_alias import UserAliasService

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=ProjectItem)


class LabelService:
    """
    Data-access service for labels and the items they are attached to.

    Example:
        with get_db_context() as db:
            service = LabelService(db)
            label = service.create("work", owner="alice")
            service.partial_update("alice", label.id, UpdateLabelParams(icon="BookOutlined"))
    """

    def __init__(
        self,
        db: Session,
        authorization_service: Optional[AuthorizationService] = None,
        alias_service: Optional[UserAliasService] = None,
        grouper: Optional[ProjectItemsGrouper] = None,
        missing_label_policy: Optional[MissingLabelPolicy] = None,
    ):
        """
        Args:
            db: Database session; the caller controls commit
            authorization_service: Permission gate (default: ownership based)
            alias_service: Alias lookup (default: backed by the same session)
            grouper: Date grouping helper
            missing_label_policy: What to do with label ids that no longer
                resolve (default: settings.missing_label_policy)
        """
        self.db = db
        self.label_repository = LabelRepository(db)
        self.task_repository = TaskRepository(db)
        self.transaction_repository = TransactionRepository(db)
        self.note_repository = NoteRepository(db)
        self.authorization_service = authorization_service or AuthorizationService()
        self.alias_service = alias_service or UserAliasService(db)
        self.grouper = grouper or ProjectItemsGrouper()
        self.missing_label_policy = MissingLabelPolicy(
            missing_label_policy or settings.missing_label_policy
        )

    # ========================================
    # CRUD
    # ========================================

    @transactional
    def create(self, name: str, owner: str, icon: Optional[str] = None) -> Label:
        """
        Create a label.

        Raises:
            ResourceAlreadyExistsError: owner already has a label called name
        """
        if self.label_repository.find_by_name_and_owner(name, owner):
            raise ResourceAlreadyExistsError(f"Label with name {name} already exists")

        label = self.label_repository.save(Label(name=name, owner=owner, icon=icon))
        logger.info("Created label %s (%s) for %s", label.id, name, owner)
        return label

    @transactional
    def partial_update(self, requester: str, label_id: int, params: UpdateLabelParams) -> Label:
        """
        Rename a label and/or change its icon.

        Only the fields explicitly set on params are applied. When the
        requested name equals the current one the label is returned as
        is, icon included.

        Raises:
            ResourceNotFoundError: label_id does not exist
            UnauthorizedError: requester may not update the label
            ResourceAlreadyExistsError: requester already owns a label
                with the requested name
        """
        label = self._get_label_or_raise(label_id)

        self.authorization_service.check_authorized_to_operate_on_content(
            label.owner, requester, ContentType.LABEL, Operation.UPDATE, label_id
        )

        if label.name == params.value:
            return label

        # Uniqueness is checked among the requester's labels, not the owner's
        if requester != label.owner:
            logger.debug(
                "Checking label name %r against requester %s instead of owner %s",
                params.value, requester, label.owner,
            )
        if self.label_repository.find_by_name_and_owner(params.value, requester):
            raise ResourceAlreadyExistsError(f"Label with name {params.value} already exists")

        if params.has_value():
            label.name = params.value
        if params.has_icon():
            label.icon = params.icon

        label = self.label_repository.save(label)
        logger.info("Updated label %s by %s", label_id, requester)
        return label

    @transactional
    def get_label(self, label_id: int) -> Label:
        """
        Raises:
            ResourceNotFoundError: label_id does not exist
        """
        return self._get_label_or_raise(label_id)

    @transactional
    def get_labels(self, owner: str) -> List[Label]:
        """Labels of owner, most recently updated first."""
        return sorted(
            self.label_repository.find_by_owner(owner),
            key=lambda label: (as_utc(label.updated_at), label.id),
            reverse=True,
        )

    @transactional
    def delete(self, requester: str, label_id: int) -> None:
        """
        Delete a label and detach it from every item referencing it.

        Raises:
            ResourceNotFoundError: label_id does not exist
            UnauthorizedError: requester may not delete the label
        """
        label = self._get_label_or_raise(label_id)

        self.authorization_service.check_authorized_to_operate_on_content(
            label.owner, requester, ContentType.LABEL, Operation.DELETE, label_id
        )

        self.label_repository.delete(label)

        detached = sum(
            self._detach_label(repository, label_id)
            for repository in (
                self.task_repository,
                self.transaction_repository,
                self.note_repository,
            )
        )
        logger.info("Deleted label %s by %s, detached from %d items", label_id, requester, detached)

    # ========================================
    # Items by Labels
    # ========================================

    @transactional
    def get_items_by_labels(
        self,
        timezone: Optional[str],
        labels: Iterable[int],
        requester: str,
    ) -> List[ProjectItems]:
        """
        Items carrying any of labels that requester may see, grouped by day.

        Steps:
        1. Fetch tasks, transactions and notes referencing any of labels
        2. Keep those whose project's group has requester as accepted member
        3. Group each type by date and merge into one map per day
        4. Sort the days ascending
        5. Replace each item's label ids with full labels

        Args:
            timezone: Requester's timezone, used to place notes on a day
                (default: settings.default_timezone)
            labels: Label ids; an item matching any one of them qualifies
            requester: Username of the requester

        Returns:
            One ProjectItems per day that has visible items, earliest first
        """
        timezone = timezone or settings.default_timezone
        labels = list(labels)

        tasks = self.task_repository.find_tasks_by_label_ids(labels)
        transactions = self.transaction_repository.find_transactions_by_label_ids(labels)
        notes = self.note_repository.find_notes_by_label_ids(labels)

        # project id -> visible to requester, for this call only
        visibility: Dict[int, bool] = {}
        tasks = self._filter_visible(tasks, requester, visibility)
        transactions = self._filter_visible(transactions, requester, visibility)
        notes = self._filter_visible(notes, requester, visibility)
        logger.debug(
            "Labels %s visible to %s: %d tasks, %d transactions, %d notes over %d projects",
            labels, requester, len(tasks), len(transactions), len(notes), len(visibility),
        )

        project_items_map = {}
        tasks_map = self.grouper.group_tasks_by_date(tasks, True)
        project_items_map = self.grouper.merge_tasks_map(
            project_items_map, tasks_map, self.alias_service.get_aliases(requester)
        )
        transactions_map = self.grouper.group_transactions_by_date(transactions)
        project_items_map = self.grouper.merge_transactions_map(project_items_map, transactions_map)
        notes_map = self.grouper.group_notes_by_date(notes, timezone)
        project_items_map = self.grouper.merge_notes_map(project_items_map, notes_map)

        project_items = self.grouper.get_sorted_project_items(project_items_map)
        return self.get_labels_for_project_items(project_items)

    @staticmethod
    def _filter_visible(items: List[ItemT], requester: str, visibility: Dict[int, bool]) -> List[ItemT]:
        visible = []
        for item in items:
            project_id = item.project_id
            if project_id not in visibility:
                visibility[project_id] = any(
                    member.user.name == requester
                    for member in item.project.group.accepted_users
                )
            if visibility[project_id]:
                visible.append(item)
        return visible

    # ========================================
    # Label Resolution
    # ========================================

    @transactional
    def get_labels_for_project_items(self, project_items: List[ProjectItems]) -> List[ProjectItems]:
        """Resolve labels on every item of every day; returns project_items."""
        items = [item for day in project_items for item in day.items()]
        self.resolve_labels(items)
        return project_items

    @transactional
    def resolve_labels(self, items: List[ProjectItemView]) -> List[ProjectItemView]:
        """
        Replace the id-only labels of items with complete LabelViews.

        Labels are fetched once for all items. Each item keeps its own
        label order. Ids that no longer resolve are handled according
        to self.missing_label_policy.

        Raises:
            ResourceNotFoundError: a label is missing and the policy is FAIL
        """
        label_ids = list(dict.fromkeys(label.id for item in items for label in item.labels))
        views = {view.id: view for view in self.get_label_views(label_ids)}

        for item in items:
            item.labels = self._map_labels(item, views)
        return items

    def _map_labels(self, item: ProjectItemView, views: Dict[int, LabelView]) -> List[LabelView]:
        mapped = []
        for label in item.labels:
            view = views.get(label.id)
            if view is not None:
                mapped.append(view)
            elif self.missing_label_policy == MissingLabelPolicy.FAIL:
                raise ResourceNotFoundError(f"Label {label.id} not found")
            elif self.missing_label_policy == MissingLabelPolicy.PLACEHOLDER:
                mapped.append(LabelView.placeholder(label.id))
            else:
                logger.warning(
                    "Dropping missing label %s from %s %s",
                    label.id, type(item).__name__, item.id,
                )
        return mapped

    @transactional
    def get_label_views(self, label_ids: List[int]) -> List[LabelView]:
        """
        Presentation form of the labels with label_ids.

        Returned in the order the ids were given; unknown ids are skipped.
        """
        if not label_ids:
            return []
        position = {}
        for index, label_id in enumerate(label_ids):
            position.setdefault(label_id, index)
        labels = sorted(
            self.label_repository.find_all_by_id(label_ids),
            key=lambda label: position[label.id],
        )
        return [label.to_presentation() for label in labels]

    # ========================================
    # Helpers
    # ========================================

    def _get_label_or_raise(self, label_id: int) -> Label:
        label = self.label_repository.find_by_id(label_id)
        if label is None:
            raise ResourceNotFoundError(f"Label {label_id} not found")
        return label

    @staticmethod
    def _detach_label(repository: ProjectItemRepository, label_id: int) -> int:
        """Remove label_id from every item of repository carrying it."""
        items = repository.find_by_label_id(label_id)
        for item in items:
            item.remove_label(label_id)
        repository.save_all(items)
        return len(items)


# ========================================
# Convenience Functions
# ========================================

def get_label_service(db: Session) -> LabelService:
    """
    Factory function for creating LabelService with default collaborators.

    Usage:
        from bujo.database import get_db_context
        from bujo.services.labels import get_label_service

        with get_db_context() as db:
            labels = get_label_service(db).get_labels("alice")
    """
    return LabelService(db)
