"""
Database initialization and seeding.

This script:
- Creates all database tables
- Optionally adds sample data for development/testing
- Can reset the database (drop and recreate)

Usage:
    # Create tables
    python -m bujo.database.init_db

    # Reset database (drops all tables and recreates)
    python -m bujo.database.init_db --reset

    # Add sample data for testing
    python -m bujo.database.init_db --sample-data
"""

import argparse
from datetime import date, timedelta

from sqlalchemy import func, select

from bujo.database.session import engine, get_db_context, create_all_tables, drop_all_tables
from bujo.models import Group, Label, Note, Project, Task, Transaction, User, UserAlias
from bujo.services.labels import get_label_service


def create_tables(reset: bool = False) -> None:
    """
    Create all database tables.

    Args:
        reset: If True, drop existing tables first
    """
    if reset:
        print("🗑️  Dropping existing tables...")
        drop_all_tables(engine)
        print("✅ Tables dropped")

    print("📊 Creating database tables...")
    create_all_tables(engine)
    print("✅ Tables created")


def seed_sample_data() -> None:
    """
    Seed sample data for development and testing.

    This creates:
    - Two users sharing one group, and a project per item type
    - A few labels for the first user
    - Tasks, transactions and notes carrying those labels
    """
    print("\n🌱 Seeding sample data...")

    with get_db_context() as db:
        if db.scalar(select(func.count()).select_from(User)):
            print("  ⏭️  Users already exist (skipping sample data)")
            return

        alice = User(name="alice")
        bob = User(name="bob")
        group = Group(name="Household", owner="alice")
        group.add_user(alice)
        group.add_user(bob)
        db.add_all([alice, bob, group])

        todo = Project(name="Chores", owner="alice", group=group)
        ledger = Project(name="Budget", owner="alice", group=group)
        journal = Project(name="Journal", owner="alice", group=group)
        db.add_all([todo, ledger, journal])
        db.add(UserAlias(owner="alice", username="bob", alias="Bobby"))
        db.flush()

        print("  🏷️  Creating sample labels...")
        service = get_label_service(db)
        labels = {}
        for name, icon in [("home", "HomeOutlined"), ("money", "DollarOutlined"), ("ideas", None)]:
            labels[name] = service.create(name, "alice", icon)
            print(f"    ✅ {labels[name]!r}")

        print("  📝 Creating sample items...")
        today = date.today()
        db.add_all([
            Task(name="Clean the garage", owner="alice", project=todo,
                 due_date=today + timedelta(days=1), assignees=["bob"],
                 labels=[labels["home"].id]),
            Task(name="Someday: repaint fence", owner="alice", project=todo,
                 labels=[labels["home"].id, labels["ideas"].id]),
            Transaction(name="Hardware store", owner="alice", project=ledger,
                        date=today, amount=-42.5,
                        labels=[labels["money"].id, labels["home"].id]),
            Note(name="Garden plan", owner="alice", project=journal,
                 labels=[labels["ideas"].id]),
        ])

    print("✅ Sample data seeded")


def print_database_status() -> None:
    """Print current database status and counts."""
    print("\n" + "=" * 60)
    print("📊 Database Status")
    print("=" * 60)

    with get_db_context() as db:
        for model in (User, Group, Project, Label, Task, Transaction, Note, UserAlias):
            count = db.scalar(select(func.count()).select_from(model))
            print(f"  {model.__tablename__ + ':':<14}{count}")

    print("=" * 60)


def initialize_database(reset: bool = False, sample_data: bool = False) -> None:
    """
    Initialize the database.

    Args:
        reset: Drop existing tables before creating
        sample_data: Add sample data for testing
    """
    print("=" * 60)
    print("🗄️  Database Initialization")
    print("=" * 60)

    create_tables(reset=reset)

    if sample_data:
        seed_sample_data()

    print_database_status()

    print("\n✅ Database initialization complete!")


def main():
    """Main entry point with CLI argument parsing."""
    parser = argparse.ArgumentParser(
        description="Initialize and seed the bullet journal label database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create the tables
  python -m bujo.database.init_db

  # Reset database (drop all tables and recreate)
  python -m bujo.database.init_db --reset

  # Full reset with sample data
  python -m bujo.database.init_db --reset --sample-data
        """
    )

    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop existing tables before creating (WARNING: deletes all data!)"
    )

    parser.add_argument(
        "--sample-data",
        action="store_true",
        help="Add sample data for development/testing"
    )

    parser.add_argument(
        "--yes",
        action="store_true",
        help="Do not ask for confirmation before --reset"
    )

    args = parser.parse_args()

    if args.reset and not args.yes:
        print("⚠️  WARNING: This will DELETE ALL DATA in the database!")
        response = input("Are you sure? Type 'yes' to continue: ")
        if response.lower() != 'yes':
            print("❌ Aborted")
            return

    initialize_database(reset=args.reset, sample_data=args.sample_data)


if __name__ == "__main__":
    main()
