"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - TaskId wraps the opaque string identifier assigned by the server
    - Every valid color is a TaskColor member; values are the upper-case names
    - TITLE_MAX_LENGTH and TASK_ID_MAX_LENGTH bound user-supplied strings
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

TaskId = NewType("TaskId", str)


# ─── Limits ──────────────────────────────────────────────────────

TITLE_MAX_LENGTH = 255
TASK_ID_MAX_LENGTH = 100


# ─── Enums ───────────────────────────────────────────────────────

class TaskColor(str, Enum):
    """Color tags a task can carry. Maps to DB `color` column."""
    RED = "RED"
    ORANGE = "ORANGE"
    YELLOW = "YELLOW"
    GREEN = "GREEN"
    BLUE = "BLUE"
    INDIGO = "INDIGO"
    PURPLE = "PURPLE"
    PINK = "PINK"
    BROWN = "BROWN"

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]
