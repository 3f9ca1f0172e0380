"""Services Layer: task operations between the HTTP routes and the repository.

Invariants:
    - Services depend on the TaskRepository protocol, not on SQLAlchemy sessions
"""
