"""Infrastructure Layer: database access and cross-cutting concerns.

Invariants:
    - SQLAlchemy errors are mapped to core/errors.py types at this boundary
    - Logging is configured here, once, at startup
"""
