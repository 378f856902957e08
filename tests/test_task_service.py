from __future__ import annotations

from dataclasses import replace

from tasktracker.domain.entities import TaskEntity
from tasktracker.services.task_service import TaskService


class FakeRepo:
    def __init__(self) -> None:
        self.tasks: list[TaskEntity] = []
        self.queries: list[str] = []
        self._id = 1

    def list_tasks(self) -> list[TaskEntity]:
        return list(self.tasks)

    def search_by_title(self, query: str) -> list[TaskEntity]:
        self.queries.append(query)
        return [t for t in self.tasks if query.lower() in t.title.lower()]

    def get_task(self, task_id: int) -> TaskEntity | None:
        return next((t for t in self.tasks if t.id == task_id), None)

    def save_task(self, task: TaskEntity) -> TaskEntity:
        if task.id is not None and self.get_task(task.id):
            self.tasks = [task if t.id == task.id else t for t in self.tasks]
            return task
        saved = replace(task, id=self._id)
        self._id += 1
        self.tasks.append(saved)
        return saved

    def delete_task(self, task_id: int) -> None:
        self.tasks = [t for t in self.tasks if t.id != task_id]


def _service_with(*titles: str) -> tuple[TaskService, FakeRepo]:
    repo = FakeRepo()
    service = TaskService(repo)
    for title in titles:
        service.save(TaskEntity(id=None, title=title))
    return service, repo


def test_save_assigns_id_and_defaults_done_to_false() -> None:
    service, repo = _service_with()

    saved = service.save(TaskEntity(id=None, title="Buy milk"))

    assert saved.id == 1
    assert saved.done is False
    assert service.find_by_id(1) == saved


def test_search_with_none_behaves_like_empty_query() -> None:
    service, repo = _service_with("Buy milk", "Walk dog")

    assert service.search_by_title(None) == service.find_all()
    assert repo.queries == [""]


def test_search_delegates_query_unchanged() -> None:
    service, repo = _service_with("Buy milk", "Walk dog")

    result = service.search_by_title("MILK")

    assert [t.title for t in result] == ["Buy milk"]
    assert repo.queries == ["MILK"]


def test_find_by_id_returns_none_for_missing() -> None:
    service, _ = _service_with("Buy milk")

    assert service.find_by_id(42) is None


def test_delete_by_id_twice_is_a_noop() -> None:
    service, repo = _service_with("Buy milk")

    service.delete_by_id(1)
    service.delete_by_id(1)

    assert repo.tasks == []
