"""Transaction model: a dated money movement in a ledger project."""

import datetime as dt

from sqlalchemy import Date, Float
from sqlalchemy.orm import Mapped, mapped_column

from bujo.models.base import Base, BaseModel
from bujo.models.project_item import ProjectItemMixin
from bujo.schemas.label import LabelView
from bujo.schemas.project_item import TransactionView


class Transaction(ProjectItemMixin, BaseModel, Base):
    """A ledger entry; grouped by its own ``date``."""

    __tablename__ = "transactions"

    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    amount: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    def __init__(self, **kwargs):
        self._pop_labels(kwargs)
        super().__init__(**kwargs)

    def to_presentation(self) -> TransactionView:
        return TransactionView(
            id=self.id,
            name=self.name,
            owner=self.owner,
            project_id=self.project_id,
            date=self.date,
            amount=self.amount,
            labels=[LabelView(id=label_id) for label_id in self.labels],
        )

    def __repr__(self) -> str:
        return f"<Transaction(id={self.id}, name='{self.name}', date={self.date})>"
