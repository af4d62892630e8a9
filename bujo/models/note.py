"""Note model."""

from bujo.models.base import Base, BaseModel, as_utc
from bujo.models.project_item import ProjectItemMixin
from bujo.schemas.label import LabelView
from bujo.schemas.project_item import NoteView


class Note(ProjectItemMixin, BaseModel, Base):
    """
    A free-form note.

    Notes have no date of their own; they are placed on the calendar
    day of ``updated_at`` as seen from the viewer's timezone.
    """

    __tablename__ = "notes"

    def __init__(self, **kwargs):
        self._pop_labels(kwargs)
        super().__init__(**kwargs)

    def to_presentation(self) -> NoteView:
        return NoteView(
            id=self.id,
            name=self.name,
            owner=self.owner,
            project_id=self.project_id,
            updated_at=as_utc(self.updated_at),
            labels=[LabelView(id=label_id) for label_id in self.labels],
        )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, name='{self.name}')>"
