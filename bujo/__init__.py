"""
Bullet journal label data-access layer.

Label CRUD, cascading label removal across tasks, transactions and notes,
and label-scoped project item queries grouped by date.
"""

__version__ = "0.1.0"
