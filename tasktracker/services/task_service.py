from __future__ import annotations

import logging

from tasktracker.domain.entities import TaskEntity
from tasktracker.infra.repository import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, repo: TaskRepository) -> None:
        self._repo = repo

    def find_all(self) -> list[TaskEntity]:
        return self._repo.list_tasks()

    def search_by_title(self, query: str | None) -> list[TaskEntity]:
        return self._repo.search_by_title(query if query is not None else "")

    def find_by_id(self, task_id: int) -> TaskEntity | None:
        return self._repo.get_task(task_id)

    def save(self, task: TaskEntity) -> TaskEntity:
        saved = self._repo.save_task(task)
        logger.info("Saved task %s", saved.id)
        return saved

    def delete_by_id(self, task_id: int) -> None:
        self._repo.delete_task(task_id)
        logger.info("Deleted task %s", task_id)
