from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date

from flask import Blueprint, current_app, redirect, render_template, request, url_for

from tasktracker.domain.validation import validate_task
from tasktracker.services.task_service import TaskService

from .forms import TaskForm

logger = logging.getLogger(__name__)

bp = Blueprint("tasks", __name__)

FORM_VIEW = "task_form.html"
LIST_VIEW = "task_list.html"
DETAILS_VIEW = "task_details.html"


def _service() -> TaskService:
    return current_app.extensions["task_service"]


def _to_list():
    return redirect(url_for("tasks.list_tasks"))


def show_create_form():
    return render_template(FORM_VIEW, task=TaskForm())


def save_task():
    form = TaskForm.from_request(request.form)
    task = form.to_entity()
    form.errors.extend(validate_task(task, today=date.today()))
    if form.has_errors:
        logger.debug("Rejected task submission: %s", [e.field for e in form.errors])
        return render_template(FORM_VIEW, task=form)

    service = _service()
    if task.id is not None:
        existing = service.find_by_id(task.id)
        if existing is not None:
            task = replace(task, done=existing.done)
    service.save(task)
    return _to_list()


def list_tasks():
    q = request.args.get("q")
    if q is not None and q.strip():
        tasks = _service().search_by_title(q)
    else:
        tasks = _service().find_all()
    return render_template(LIST_VIEW, tasks=tasks, q=q)


def task_details(task_id: int):
    found = _service().find_by_id(task_id)
    if found is None:
        return _to_list()
    return render_template(DETAILS_VIEW, task=found)


def edit_task(task_id: int):
    found = _service().find_by_id(task_id)
    if found is None:
        return _to_list()
    return render_template(FORM_VIEW, task=TaskForm.from_entity(found))


def toggle_done(task_id: int):
    service = _service()
    found = service.find_by_id(task_id)
    if found is not None:
        service.save(replace(found, done=not found.done))
    return _to_list()


def delete_task(task_id: int):
    _service().delete_by_id(task_id)
    return _to_list()


# (rule, endpoint, view, methods)
ROUTES = [
    ("/tasks/new", "show_create_form", show_create_form, ["GET"]),
    ("/tasks", "save_task", save_task, ["POST"]),
    ("/tasks", "list_tasks", list_tasks, ["GET"]),
    ("/", "index", list_tasks, ["GET"]),
    ("/tasks/<int(signed=True):task_id>", "task_details", task_details, ["GET"]),
    ("/tasks/<int(signed=True):task_id>/edit", "edit_task", edit_task, ["GET"]),
    ("/tasks/<int(signed=True):task_id>/toggle", "toggle_done", toggle_done, ["POST"]),
    ("/tasks/<int(signed=True):task_id>/delete", "delete_task", delete_task, ["POST"]),
]

for rule, endpoint, view, methods in ROUTES:
    bp.add_url_rule(rule, endpoint=endpoint, view_func=view, methods=methods)
