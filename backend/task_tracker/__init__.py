"""Task Tracker: HTTP CRUD API for color-tagged tasks.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
