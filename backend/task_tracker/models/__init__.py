"""ORM Models: SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Models imported here so Base.metadata is populated before create_all
"""

from task_tracker.models.task import Task  # noqa: F401
