from __future__ import annotations

from dataclasses import replace
from datetime import date

from tasktracker.domain.entities import TaskEntity
from tasktracker.infra.repository import TaskRepository


def _add(repo: TaskRepository, title: str, **fields) -> TaskEntity:
    return repo.save_task(TaskEntity(id=None, title=title, **fields))


def test_insert_assigns_ids(repo: TaskRepository) -> None:
    first = _add(repo, "Buy milk", due_date=date(2030, 1, 1))
    second = _add(repo, "Walk dog")

    assert first.id is not None and second.id is not None
    assert first.id != second.id
    assert first.done is False
    assert repo.get_task(first.id) == first
    assert repo.list_tasks() == [first, second]


def test_save_with_existing_id_replaces_all_fields(repo: TaskRepository) -> None:
    task = _add(repo, "Buy milk", description="2 litres", due_date=date(2030, 1, 1))

    updated = repo.save_task(replace(task, title="Buy oat milk", description=None, due_date=None, done=True))

    assert updated == TaskEntity(id=task.id, title="Buy oat milk", description=None, due_date=None, done=True)
    assert repo.list_tasks() == [updated]


def test_save_with_unknown_id_inserts_new_row(repo: TaskRepository) -> None:
    saved = repo.save_task(TaskEntity(id=999, title="Ghost"))

    assert saved.id is not None
    assert len(repo.list_tasks()) == 1


def test_search_is_case_insensitive_substring(repo: TaskRepository) -> None:
    milk = _add(repo, "Buy MILK")
    _add(repo, "Walk dog")
    oat = _add(repo, "oat milk latte")

    assert repo.search_by_title("milk") == [milk, oat]
    assert repo.search_by_title("xyz") == []
    assert repo.search_by_title("") == repo.list_tasks()


def test_search_treats_wildcards_literally(repo: TaskRepository) -> None:
    discount = _add(repo, "Ask for 50% off")
    _add(repo, "Ask for 500 off")

    assert repo.search_by_title("50%") == [discount]
    assert repo.search_by_title("_") == []


def test_get_missing_returns_none(repo: TaskRepository) -> None:
    assert repo.get_task(12345) is None


def test_delete_is_idempotent(repo: TaskRepository) -> None:
    task = _add(repo, "Buy milk")

    repo.delete_task(task.id)
    repo.delete_task(task.id)

    assert repo.get_task(task.id) is None
    assert len(repo.list_tasks()) == 0


def test_out_of_range_ids_are_never_found(repo: TaskRepository) -> None:
    task = _add(repo, "Buy milk")

    assert repo.get_task(2**63) is None
    assert repo.get_task(-1) is None
    repo.delete_task(2**63)
    saved = repo.save_task(TaskEntity(id=2**63, title="Fresh"))

    assert saved.id is not None and saved.id != task.id
    assert [t.title for t in repo.list_tasks()] == ["Buy milk", "Fresh"]
