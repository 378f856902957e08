from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from tasktracker.domain.entities import TaskEntity, is_storable_id

from .models import TaskModel


def _to_entity(model: TaskModel) -> TaskEntity:
    return TaskEntity(
        id=model.id,
        title=model.title,
        description=model.description,
        due_date=model.due_date,
        done=bool(model.done),
    )


def _apply_fields(model: TaskModel, task: TaskEntity) -> None:
    model.title = task.title
    model.description = task.description
    model.due_date = task.due_date
    model.done = task.done


class TaskRepository:
    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def list_tasks(self) -> list[TaskEntity]:
        with self._session_factory() as session:
            stmt = select(TaskModel).order_by(TaskModel.id.asc())
            return [_to_entity(task) for task in session.scalars(stmt)]

    def search_by_title(self, query: str) -> list[TaskEntity]:
        with self._session_factory() as session:
            stmt = (
                select(TaskModel)
                .where(TaskModel.title.icontains(query, autoescape=True))
                .order_by(TaskModel.id.asc())
            )
            return [_to_entity(task) for task in session.scalars(stmt)]

    def get_task(self, task_id: int) -> Optional[TaskEntity]:
        if not is_storable_id(task_id):
            return None
        with self._session_factory() as session:
            task = session.get(TaskModel, task_id)
            return _to_entity(task) if task else None

    def save_task(self, task: TaskEntity) -> TaskEntity:
        with self._session_factory() as session:
            model = None
            if task.id is not None and is_storable_id(task.id):
                model = session.get(TaskModel, task.id)
            if model is None:
                # unknown ids are not reused; storage assigns a fresh one
                model = TaskModel()
                session.add(model)
            _apply_fields(model, task)
            session.commit()
            session.refresh(model)
            return _to_entity(model)

    def delete_task(self, task_id: int) -> None:
        if not is_storable_id(task_id):
            return
        with self._session_factory() as session:
            task = session.get(TaskModel, task_id)
            if not task:
                return
            session.delete(task)
            session.commit()
