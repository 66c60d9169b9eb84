from __future__ import annotations

import re

import pytest
from fastapi.testclient import TestClient

from todomvc.main import create_app
from todomvc.repositories import InMemoryTodoRepository

_ITEM_ID = re.compile(r'id="todo-(\d+)"')


def item_ids(html: str) -> list[int]:
    """Ids of the todo items rendered in an HTML fragment, in document order."""
    return [int(i) for i in _ITEM_ID.findall(html)]


@pytest.fixture()
def repo() -> InMemoryTodoRepository:
    return InMemoryTodoRepository()


@pytest.fixture()
def client() -> TestClient:
    # Fresh app per test so the process-wide store starts empty
    return TestClient(create_app())
