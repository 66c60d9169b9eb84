from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Query, Request
from starlette.responses import HTMLResponse

from ..models import TodoEntity
from ..rendering import render_fragment
from ..repositories import TodoRepository
from ..schemas import TodoCreate, TodoListFilter, TodoUpdate, ToggleAction

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
    default_response_class=HTMLResponse,
)


def _get_repo(request: Request) -> TodoRepository:
    """
    Dependency returning the process-wide repository held on the app state.
    """
    return request.app.state.repository


def _selected_filter(request: Request) -> TodoListFilter:
    return request.app.state.selected_filter


def _list_response(request: Request, repo: TodoRepository) -> HTMLResponse:
    selected = _selected_filter(request)
    return render_fragment(
        request,
        "responses/list_todos.html",
        repo,
        selected,
        todos=repo.list(selected.completed),
    )


def _item_response(request: Request, repo: TodoRepository, todo: TodoEntity) -> HTMLResponse:
    selected = _selected_filter(request)
    return render_fragment(
        request,
        "responses/todo_item.html",
        repo,
        selected,
        todo=todo,
        visible=selected.shows(todo["completed"]),
    )


# PUBLIC_INTERFACE
@router.get(
    "",
    summary="List Todos",
    description="Select a filter and return the list fragment with refreshed counters and controls.",
)
def list_todos(
    request: Request,
    filter: TodoListFilter = Query(TodoListFilter.ALL, description="all, active or completed"),
    repo: TodoRepository = Depends(_get_repo),
) -> HTMLResponse:
    """
    Render the todos visible under `filter` and remember it as the selected view.
    """
    request.app.state.selected_filter = filter
    logger.debug("Selected filter %s", filter.value)
    return _list_response(request, repo)


# PUBLIC_INTERFACE
@router.post(
    "",
    summary="Create Todo",
    description="Append a new todo and return its list item fragment.",
)
def create_todo(
    request: Request,
    payload: Annotated[TodoCreate, Form()],
    repo: TodoRepository = Depends(_get_repo),
) -> HTMLResponse:
    """
    Create a new Todo. The item is omitted from the response while the
    completed filter is selected, since a new todo is never completed.
    """
    created = repo.add(payload.title)
    return _item_response(request, repo, created)


# PUBLIC_INTERFACE
@router.patch(
    "",
    summary="Toggle All Todos",
    description="Mark every todo completed (action=check) or active (action=uncheck).",
)
def toggle_all_todos(
    request: Request,
    action: ToggleAction = Query(..., description="check or uncheck"),
    repo: TodoRepository = Depends(_get_repo),
) -> HTMLResponse:
    repo.toggle_all(action.completed)
    return _list_response(request, repo)


# PUBLIC_INTERFACE
@router.delete(
    "",
    summary="Clear Completed Todos",
    description="Remove every completed todo and return the refreshed list fragment.",
)
def clear_completed_todos(request: Request, repo: TodoRepository = Depends(_get_repo)) -> HTMLResponse:
    repo.clear_completed()
    return _list_response(request, repo)


# PUBLIC_INTERFACE
@router.get(
    "/{todo_id}",
    summary="Edit Todo Form",
    description="Return the inline edit form for a single todo.",
    responses={404: {"description": "Todo not found"}},
)
def edit_todo_form(request: Request, todo_id: int, repo: TodoRepository = Depends(_get_repo)) -> HTMLResponse:
    """
    Render the edit form replacing the todo's title.
    """
    item = repo.get(todo_id)
    return render_fragment(request, "responses/edit_todo.html", repo, _selected_filter(request), todo=item)


# PUBLIC_INTERFACE
@router.patch(
    "/{todo_id}",
    summary="Edit Todo",
    description="Replace the title of a todo and return its list item fragment.",
    responses={404: {"description": "Todo not found"}},
)
def edit_todo(
    request: Request,
    todo_id: int,
    payload: Annotated[TodoUpdate, Form()],
    repo: TodoRepository = Depends(_get_repo),
) -> HTMLResponse:
    updated = repo.edit(todo_id, payload.title)
    return _item_response(request, repo, updated)


# PUBLIC_INTERFACE
@router.post(
    "/{todo_id}/toggle",
    summary="Toggle Todo",
    description="Flip the completed flag of a todo and return its list item fragment.",
    responses={404: {"description": "Todo not found"}},
)
def toggle_todo(request: Request, todo_id: int, repo: TodoRepository = Depends(_get_repo)) -> HTMLResponse:
    """
    Toggle a todo. The item drops out of the response when it no longer
    matches the selected filter.
    """
    toggled = repo.toggle(todo_id)
    return _item_response(request, repo, toggled)


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    summary="Delete Todo",
    description="Delete a todo. The response only carries out-of-band counter and control updates.",
    responses={404: {"description": "Todo not found"}},
)
def delete_todo(request: Request, todo_id: int, repo: TodoRepository = Depends(_get_repo)) -> HTMLResponse:
    repo.delete(todo_id)
    return render_fragment(request, "responses/delete_todo.html", repo, _selected_filter(request))
