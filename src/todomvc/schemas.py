from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

TITLE_MAX_LENGTH = 200


def _normalize_title(value: str) -> str:
    """
    Strip surrounding whitespace and enforce 1..TITLE_MAX_LENGTH characters.
    """
    s = value.strip()
    if not (1 <= len(s) <= TITLE_MAX_LENGTH):
        raise ValueError(f"title length must be between 1 and {TITLE_MAX_LENGTH} characters")
    return s


# PUBLIC_INTERFACE
class TodoListFilter(str, Enum):
    """The list view selected through the tabs."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def completed(self) -> Optional[bool]:
        """Completion state an item must have to be listed, or None for all."""
        if self is TodoListFilter.ACTIVE:
            return False
        if self is TodoListFilter.COMPLETED:
            return True
        return None

    def shows(self, completed: bool) -> bool:
        return self.completed is None or self.completed == completed


# PUBLIC_INTERFACE
class ToggleAction(str, Enum):
    """Bulk action offered by the mark-all button."""

    CHECK = "check"
    UNCHECK = "uncheck"

    @property
    def label(self) -> str:
        return f"{self.value.capitalize()} all"

    @property
    def completed(self) -> bool:
        return self is ToggleAction.CHECK


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Form fields for creating a new Todo item.
    """

    model_config = ConfigDict(json_schema_extra={"example": {"title": "Buy groceries"}})

    title: str = Field(..., description="Short title for the todo item", min_length=1, max_length=TITLE_MAX_LENGTH)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _normalize_title(v)


# PUBLIC_INTERFACE
class TodoUpdate(BaseModel):
    """
    Form fields submitted by the inline edit form.
    """

    model_config = ConfigDict(json_schema_extra={"example": {"title": "Buy groceries and supplies"}})

    title: str = Field(..., description="Replacement title for the todo item", min_length=1, max_length=TITLE_MAX_LENGTH)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _normalize_title(v)
