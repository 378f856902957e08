from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from werkzeug.datastructures import MultiDict

from tasktracker.domain.entities import FieldError, TaskEntity, is_storable_id
from tasktracker.domain.enums import ViolationKind
from tasktracker.domain.validation import DUE_DATE_FIELD, field_error


@dataclass
class TaskForm:
    """Submitted (or pre-populated) form values, kept as the user typed them."""

    id: int | None = None
    title: str = ""
    description: str = ""
    due_date: str = ""
    done: bool = False
    errors: list[FieldError] = field(default_factory=list)

    @classmethod
    def from_entity(cls, task: TaskEntity) -> TaskForm:
        return cls(
            id=task.id,
            title=task.title,
            description=task.description or "",
            due_date=task.due_date.isoformat() if task.due_date else "",
            done=task.done,
        )

    @classmethod
    def from_request(cls, data: MultiDict) -> TaskForm:
        return cls(
            id=_parse_id(data.get("id")),
            title=data.get("title", ""),
            description=data.get("description", ""),
            due_date=data.get(DUE_DATE_FIELD, "").strip(),
        )

    def to_entity(self) -> TaskEntity:
        """Bind the raw values; an unparseable due date is recorded in ``errors``."""
        due_date = None
        if self.due_date:
            try:
                due_date = date.fromisoformat(self.due_date)
            except ValueError:
                self.errors.append(field_error(DUE_DATE_FIELD, ViolationKind.INVALID_DATE))
        return TaskEntity(
            id=self.id,
            title=self.title,
            description=self.description or None,
            due_date=due_date,
            done=self.done,
        )

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def errors_for(self, name: str) -> list[str]:
        return [error.message for error in self.errors if error.field == name]

    @property
    def field_errors(self) -> dict[str, list[str]]:
        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped


def _parse_id(value: str | None) -> int | None:
    if not value:
        return None
    try:
        task_id = int(value)
    except ValueError:
        return None
    return task_id if is_storable_id(task_id) else None
