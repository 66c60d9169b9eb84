"""
HTML fragment rendering for the todo list.

Every mutation answers with a fragment for the element the request targeted,
plus the counters and list controls marked `hx-swap-oob` so htmx refreshes them
wherever they sit on the page.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import HTMLResponse

from .models import TodoCounts
from .repositories import TodoRepository
from .schemas import TodoListFilter, ToggleAction

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class ListControls:
    """
    State of the counters and bulk-action buttons for one store snapshot.

    Fields:
    - counts: all/active/completed item counts
    - toggle_action: what the mark-all button does when clicked
    - toggle_disabled: mark-all is disabled while the list is empty
    - clear_disabled: clear-completed is disabled while nothing is completed
    """

    counts: TodoCounts
    toggle_action: ToggleAction
    toggle_disabled: bool
    clear_disabled: bool


# PUBLIC_INTERFACE
def toggle_action_for(counts: TodoCounts) -> ToggleAction:
    """Offer 'uncheck' only when there are items and all of them are completed."""
    if counts.all and counts.completed == counts.all:
        return ToggleAction.UNCHECK
    return ToggleAction.CHECK


# PUBLIC_INTERFACE
def list_controls(counts: TodoCounts) -> ListControls:
    """Derive the controls state from a set of counts."""
    return ListControls(
        counts=counts,
        toggle_action=toggle_action_for(counts),
        toggle_disabled=counts.all == 0,
        clear_disabled=counts.completed == 0,
    )


# PUBLIC_INTERFACE
def render_fragment(
    request: Request,
    template_name: str,
    repo: TodoRepository,
    selected_filter: TodoListFilter,
    status_code: int = 200,
    **context: Any,
) -> HTMLResponse:
    """
    Render `template_name` with the current controls state and selected filter
    added to `context`.
    """
    context.setdefault("controls", list_controls(repo.counts()))
    context.setdefault("selected_filter", selected_filter)
    context.setdefault("filters", list(TodoListFilter))
    return templates.TemplateResponse(request, template_name, context, status_code=status_code)
