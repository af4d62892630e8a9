"""
Shared shape of tasks, transactions and notes.

``ProjectItem`` is the capability the label layer relies on: an id,
the owning project and an ordered list of attached label ids.
``ProjectItemMixin`` supplies the columns backing that capability to
each concrete model.
"""

import json
from typing import List, Protocol

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, declared_attr, mapped_column, relationship

from bujo.models.base import load_json_list
from bujo.models.project import Project


class ProjectItem(Protocol):
    """Anything living in a project that can carry labels."""

    id: int
    project_id: int
    project: Project
    labels: List[int]


class ProjectItemMixin:
    """
    Columns common to every project item.

    Label ids are kept in a JSON array column so their order is the
    order the user attached them in.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    owner: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    project_id: Mapped[int] = mapped_column(ForeignKey("projects.id"), nullable=False, index=True)

    labels_json: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="[]",
        comment="Attached label ids (JSON array, attach order)"
    )

    @declared_attr
    def project(cls) -> Mapped[Project]:
        return relationship(Project)

    @property
    def labels(self) -> List[int]:
        """Attached label ids, in attach order."""
        return load_json_list(self.labels_json)

    @labels.setter
    def labels(self, value: List[int]) -> None:
        self.labels_json = json.dumps([int(label_id) for label_id in value])

    def has_label(self, label_id: int) -> bool:
        return label_id in self.labels

    def has_any_label(self, label_ids) -> bool:
        wanted = set(label_ids)
        return any(label_id in wanted for label_id in self.labels)

    def remove_label(self, label_id: int) -> None:
        """Drop every reference to label_id, keeping the others in order."""
        self.labels = [existing for existing in self.labels if existing != label_id]

    @staticmethod
    def _pop_labels(kwargs) -> None:
        # labels=[...] is accepted by the constructors
        if "labels" in kwargs and "labels_json" not in kwargs:
            kwargs["labels_json"] = json.dumps([int(i) for i in kwargs.pop("labels")])
