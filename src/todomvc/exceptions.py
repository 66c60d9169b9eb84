from __future__ import annotations


class TodoError(Exception):
    """Base class for errors raised by the todo store."""


# PUBLIC_INTERFACE
class TodoNotFoundError(TodoError, LookupError):
    """Raised when an operation references a todo id that does not exist."""

    def __init__(self, todo_id: int) -> None:
        super().__init__(f"Todo not found: {todo_id}")
        self.todo_id = todo_id
