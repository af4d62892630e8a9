from datetime import date

import pytest

from bujo.core.constants import MissingLabelPolicy
from bujo.core.exceptions import ResourceNotFoundError
from bujo.schemas import LabelView, NoteView, ProjectItems, TaskView
from bujo.services.labels import LabelService


def _task(task_id, label_ids):
    return TaskView(
        id=task_id, name=f"task {task_id}", owner="alice", project_id=1,
        labels=[LabelView(id=label_id) for label_id in label_ids],
    )


@pytest.fixture()
def labels(service, db):
    created = [service.create(name, "alice", f"{name}-icon") for name in ("one", "two", "three")]
    db.commit()
    return created


def test_resolve_keeps_per_item_order(service, labels):
    one, two, three = labels
    items = [_task(1, [three.id, one.id, two.id]), _task(2, [two.id])]

    resolved = service.resolve_labels(items)

    assert resolved is items
    assert [label.value for label in items[0].labels] == ["three", "one", "two"]
    assert [label.icon for label in items[1].labels] == ["two-icon"]


def test_get_label_views_follows_requested_order(service, labels):
    one, two, three = labels

    views = service.get_label_views([two.id, three.id, one.id, two.id])

    assert [view.value for view in views] == ["two", "three", "one"]
    assert service.get_label_views([]) == []


def test_get_labels_for_project_items_covers_every_kind(service, labels):
    one, two, _ = labels
    note = NoteView(
        id=1, name="n", owner="alice", project_id=1,
        updated_at="2024-01-01T00:00:00+00:00", labels=[LabelView(id=two.id)],
    )
    days = [ProjectItems(date=date(2024, 1, 1), tasks=[_task(1, [one.id])], notes=[note])]

    result = service.get_labels_for_project_items(days)

    assert result is days
    assert days[0].tasks[0].labels[0].value == "one"
    assert days[0].notes[0].labels[0].value == "two"


def test_missing_label_dropped_by_default(service, labels):
    one, _, _ = labels
    item = _task(1, [999, one.id])

    service.resolve_labels([item])

    assert [label.id for label in item.labels] == [one.id]


def test_missing_label_placeholder(db, labels):
    one, _, _ = labels
    service = LabelService(db, missing_label_policy=MissingLabelPolicy.PLACEHOLDER)
    item = _task(1, [one.id, 999])

    service.resolve_labels([item])

    assert [label.id for label in item.labels] == [one.id, 999]
    assert item.labels[1].missing is True
    assert item.labels[0].missing is False


def test_missing_label_fail(db, labels):
    service = LabelService(db, missing_label_policy="fail")

    with pytest.raises(ResourceNotFoundError, match="999"):
        service.resolve_labels([_task(1, [999])])
