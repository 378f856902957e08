from __future__ import annotations

from datetime import date

from .entities import FieldError, TaskEntity
from .enums import ViolationKind

TITLE_FIELD = "title"
DUE_DATE_FIELD = "dueDate"
TITLE_MAX_LENGTH = 200

MESSAGES = {
    ViolationKind.REQUIRED: "Title is required",
    ViolationKind.TOO_LONG: f"Title must be at most {TITLE_MAX_LENGTH} characters",
    ViolationKind.PAST_DATE: "Due date cannot be in the past",
    ViolationKind.INVALID_DATE: "Due date must be a valid date (YYYY-MM-DD)",
}


def field_error(field: str, kind: ViolationKind) -> FieldError:
    return FieldError(field=field, kind=kind.value, message=MESSAGES[kind])


def validate_task(task: TaskEntity, today: date | None = None) -> list[FieldError]:
    """Check a submitted task before it reaches storage.

    Rules are independent, so a task can fail several at once. A due date is
    only compared with ``today`` here; tasks already saved are never
    re-validated when their due date passes.
    """
    today = today or date.today()
    errors: list[FieldError] = []

    if not (task.title or "").strip():
        errors.append(field_error(TITLE_FIELD, ViolationKind.REQUIRED))
    elif len(task.title) > TITLE_MAX_LENGTH:
        errors.append(field_error(TITLE_FIELD, ViolationKind.TOO_LONG))

    if task.due_date is not None and task.due_date < today:
        errors.append(field_error(DUE_DATE_FIELD, ViolationKind.PAST_DATE))

    return errors
