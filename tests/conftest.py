# tests/conftest.py

from __future__ import annotations

from collections.abc import Callable

import pytest

from models import Task
from session import Session

from .fakes import FakeStorage


@pytest.fixture()
def store() -> FakeStorage:
    return FakeStorage()


@pytest.fixture()
def make_session(store: FakeStorage) -> Callable[..., Session]:
    """
    Build a Session over the fake store.

    Accepts tasks as (description, completed) pairs to keep scenarios short.
    """

    def _make(*pairs: tuple[str, bool]) -> Session:
        tasks = [Task(description=d, completed=c) for d, c in pairs]
        return Session(tasks, store)

    return _make
