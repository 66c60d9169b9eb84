from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TypedDict


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A lightweight domain model representing a Todo item held in server memory.

    Fields:
    - id: Unique integer identifier, never reused within a process
    - title: Short title (1..200 chars, trimmed on input via schemas)
    - completed: Boolean completion flag
    - created_at: Local creation timestamp (datetime)
    """

    id: int
    title: str
    completed: bool
    created_at: datetime


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class TodoCounts:
    """Item counts for one snapshot of the store, as shown on the filter tabs."""

    all: int = 0
    active: int = 0
    completed: int = 0
