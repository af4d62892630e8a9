import pytest

from bujo.core.exceptions import ResourceNotFoundError, UnauthorizedError
from bujo.models import Label, Note, Task, Transaction


def test_delete_detaches_label_from_all_items(service, db, world, make_task, make_transaction, make_note):
    doomed = service.create("doomed", "alice")
    kept = service.create("kept", "alice")
    db.commit()

    t1 = make_task(world["chores"], [kept.id, doomed.id])
    t2 = make_task(world["chores"], [doomed.id])
    tx = make_transaction(world["budget"], [doomed.id, kept.id])
    untouched_task = make_task(world["chores"], [kept.id])
    untouched_note = make_note(world["chores"], [kept.id])

    service.delete("alice", doomed.id)
    db.commit()

    assert db.get(Label, doomed.id) is None
    assert db.get(Task, t1.id).labels == [kept.id]
    assert db.get(Task, t2.id).labels == []
    assert db.get(Transaction, tx.id).labels == [kept.id]
    assert db.get(Task, untouched_task.id).labels == [kept.id]
    assert db.get(Note, untouched_note.id).labels == [kept.id]


def test_delete_keeps_order_of_remaining_labels(service, db, world, make_task):
    a, b, c = (service.create(name, "alice") for name in ("a", "b", "c"))
    db.commit()
    task = make_task(world["chores"], [c.id, b.id, a.id])

    service.delete("alice", b.id)
    db.commit()

    assert db.get(Task, task.id).labels == [c.id, a.id]


def test_delete_missing_label(service):
    with pytest.raises(ResourceNotFoundError):
        service.delete("alice", 123)


def test_delete_by_non_owner_changes_nothing(service, db, world, make_task):
    label = service.create("work", "alice")
    db.commit()
    task = make_task(world["chores"], [label.id])

    with pytest.raises(UnauthorizedError):
        service.delete("bob", label.id)

    assert db.get(Label, label.id) is not None
    assert db.get(Task, task.id).labels == [label.id]


def test_admin_may_delete(service, db):
    label = service.create("work", "alice")
    db.commit()

    service.delete("root", label.id)
    db.commit()

    assert service.get_labels("alice") == []


def test_delete_failing_midway_changes_nothing(service, db, world, make_task, monkeypatch):
    label = service.create("work", "alice")
    db.commit()
    task = make_task(world["chores"], [label.id])
    pending = service.create("pending", "alice")

    def broken_save_all(items):
        raise RuntimeError("disk full")

    monkeypatch.setattr(service.note_repository, "save_all", broken_save_all)

    with pytest.raises(RuntimeError, match="disk full"):
        service.delete("alice", label.id)
    db.commit()

    assert db.get(Label, label.id) is not None
    assert db.get(Task, task.id).labels == [label.id]
    assert db.get(Label, pending.id).name == "pending"
