from datetime import date, datetime, UTC

from bujo.models import Group, UserAlias


def _days(result):
    return [items.date for items in result]


def test_result_ordered_by_date(service, db, world, make_task, make_transaction):
    label = service.create("work", "alice")
    db.commit()
    make_task(world["chores"], [label.id], due_date=date(2024, 1, 3))
    make_task(world["chores"], [label.id], due_date=date(2024, 1, 1))
    make_transaction(world["budget"], [label.id], day=date(2024, 1, 2))

    result = service.get_items_by_labels("UTC", [label.id], "alice")

    assert _days(result) == [date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 3)]
    assert [len(day.tasks) for day in result] == [1, 0, 1]
    assert len(result[1].transactions) == 1


def test_items_matching_any_label_qualify(service, db, world, make_task, make_note):
    work = service.create("work", "alice")
    home = service.create("home", "alice")
    other = service.create("other", "alice")
    db.commit()
    make_task(world["chores"], [work.id], due_date=date(2024, 2, 1), name="w")
    make_task(world["chores"], [home.id], due_date=date(2024, 2, 1), name="h")
    make_task(world["chores"], [other.id], due_date=date(2024, 2, 1), name="o")
    make_note(world["chores"], [home.id, work.id])

    result = service.get_items_by_labels("UTC", [work.id, home.id], "alice")

    tasks = [task.name for day in result for task in day.tasks]
    notes = [note for day in result for note in day.notes]
    assert sorted(tasks) == ["h", "w"]
    assert len(notes) == 1


def test_items_of_projects_requester_cannot_see_are_excluded(service, db, world, make_task):
    label = service.create("shared", "alice")
    db.commit()
    make_task(world["chores"], [label.id], due_date=date(2024, 1, 1), name="visible")
    make_task(world["secrets"], [label.id], due_date=date(2024, 1, 1), name="hidden", owner="carol")

    result = service.get_items_by_labels("UTC", [label.id], "alice")

    assert [task.name for day in result for task in day.tasks] == ["visible"]


def test_invited_but_not_accepted_member_sees_nothing(service, db, world, make_task):
    label = service.create("shared", "alice")
    db.commit()
    make_task(world["chores"], [label.id], due_date=date(2024, 1, 1))

    assert service.get_items_by_labels("UTC", [label.id], "carol") == []


def test_visibility_evaluated_once_per_project(service, db, world, make_task, make_transaction, monkeypatch):
    label = service.create("work", "alice")
    db.commit()
    for day in (1, 2, 3):
        make_task(world["chores"], [label.id], due_date=date(2024, 1, day))
        make_transaction(world["budget"], [label.id], day=date(2024, 1, day))

    calls = []
    original = Group.accepted_users

    def counting(group):
        calls.append(group.id)
        return original.fget(group)

    monkeypatch.setattr(Group, "accepted_users", property(counting))

    service.get_items_by_labels("UTC", [label.id], "alice")

    # chores and budget share a group but are separate projects
    assert len(calls) == 2


def test_notes_are_placed_in_requester_timezone(service, db, world, make_note):
    label = service.create("journal", "alice")
    db.commit()
    make_note(world["chores"], [label.id], updated_at=datetime(2024, 1, 1, 23, 30, tzinfo=UTC))

    assert _days(service.get_items_by_labels("UTC", [label.id], "alice")) == [date(2024, 1, 1)]
    assert _days(service.get_items_by_labels("Asia/Tokyo", [label.id], "alice")) == [date(2024, 1, 2)]
    assert _days(service.get_items_by_labels("America/New_York", [label.id], "alice")) == [date(2024, 1, 1)]


def test_undated_tasks_are_included(service, db, world, make_task):
    label = service.create("someday", "alice")
    db.commit()
    make_task(
        world["chores"], [label.id], name="undated",
        updated_at=datetime(2024, 3, 5, 8, 0, tzinfo=UTC),
    )

    result = service.get_items_by_labels("UTC", [label.id], "alice")

    assert _days(result) == [date(2024, 3, 5)]
    assert result[0].tasks[0].name == "undated"
    assert result[0].tasks[0].due_date is None


def test_requester_aliases_applied_to_assignees(service, db, world, make_task):
    label = service.create("work", "alice")
    db.add(UserAlias(owner="alice", username="bob", alias="Bobby"))
    db.commit()
    make_task(world["chores"], [label.id], due_date=date(2024, 1, 1), assignees=["bob", "alice"])

    task = service.get_items_by_labels("UTC", [label.id], "alice")[0].tasks[0]

    assert [(user.name, user.alias) for user in task.assignees] == [("bob", "Bobby"), ("alice", "alice")]


def test_labels_resolved_in_item_order(service, db, world, make_task, make_transaction):
    first = service.create("first", "alice", "OneOutlined")
    second = service.create("second", "alice")
    third = service.create("third", "alice")
    db.commit()
    make_task(world["chores"], [third.id, first.id, second.id], due_date=date(2024, 1, 1))
    make_transaction(world["budget"], [second.id], day=date(2024, 1, 1))

    day = service.get_items_by_labels("UTC", [first.id], "alice")[0]

    task = day.tasks[0]
    assert [label.id for label in task.labels] == [third.id, first.id, second.id]
    assert [label.value for label in task.labels] == ["third", "first", "second"]
    assert task.labels[1].icon == "OneOutlined"
    # the transaction only carries "second", which was not asked for
    assert day.transactions == []


def test_default_timezone_used_when_missing(service, db, world, make_note):
    label = service.create("journal", "alice")
    db.commit()
    make_note(world["chores"], [label.id], updated_at=datetime(2024, 6, 1, 10, 0, tzinfo=UTC))

    assert _days(service.get_items_by_labels(None, [label.id], "alice")) == [date(2024, 6, 1)]


def test_no_labels_gives_empty_result(service, world):
    assert service.get_items_by_labels("UTC", [], "alice") == []
