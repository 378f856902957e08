from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class TaskEntity:
    id: int | None
    title: str
    description: str | None = None
    due_date: Optional[date] = None
    done: bool = False


@dataclass(frozen=True)
class FieldError:
    field: str
    kind: str
    message: str


# ids are stored in a 32-bit INTEGER column; anything larger can never exist
MAX_TASK_ID = 2**31 - 1


def is_storable_id(task_id: int) -> bool:
    return 0 < task_id <= MAX_TASK_ID
