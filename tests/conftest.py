import os

# Keep the module-level engine off the filesystem
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from datetime import date, datetime, UTC

import pytest
from sqlalchemy.orm import sessionmaker

from bujo.database.session import create_db_engine, create_all_tables
from bujo.models import Group, Note, Project, Task, Transaction, User
from bujo.services.authorization import AuthorizationService
from bujo.services.labels import LabelService


@pytest.fixture()
def engine():
    engine = create_db_engine("sqlite:///:memory:")
    create_all_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def world(db):
    """
    Users, groups and projects.

    "household" has alice and bob accepted and carol only invited;
    "private" belongs to carol alone.
    """
    alice, bob, carol = User(name="alice"), User(name="bob"), User(name="carol")
    household = Group(name="household", owner="alice")
    household.add_user(alice)
    household.add_user(bob)
    household.add_user(carol, accepted=False)
    private = Group(name="private", owner="carol")
    private.add_user(carol)

    chores = Project(name="chores", owner="alice", group=household)
    budget = Project(name="budget", owner="alice", group=household)
    secrets = Project(name="secrets", owner="carol", group=private)

    db.add_all([alice, bob, carol, household, private, chores, budget, secrets])
    db.commit()
    return {
        "chores": chores,
        "budget": budget,
        "secrets": secrets,
        "household": household,
        "private": private,
    }


@pytest.fixture()
def auth():
    return AuthorizationService(admin_users=["root"])


@pytest.fixture()
def service(db, auth):
    return LabelService(db, authorization_service=auth)


@pytest.fixture()
def make_task(db):
    def _make(project, labels, due_date=None, name="task", owner="alice", **kwargs):
        task = Task(name=name, owner=owner, project=project, labels=labels, due_date=due_date, **kwargs)
        db.add(task)
        db.commit()
        return task
    return _make


@pytest.fixture()
def make_transaction(db):
    def _make(project, labels, day=date(2024, 1, 1), name="txn", owner="alice", amount=10.0):
        transaction = Transaction(name=name, owner=owner, project=project, labels=labels, date=day, amount=amount)
        db.add(transaction)
        db.commit()
        return transaction
    return _make


@pytest.fixture()
def make_note(db):
    def _make(project, labels, updated_at=None, name="note", owner="alice"):
        updated_at = updated_at or datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
        note = Note(name=name, owner=owner, project=project, labels=labels, updated_at=updated_at)
        db.add(note)
        db.commit()
        return note
    return _make
