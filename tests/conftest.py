# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from taskboard.adapters.memory.task_repo import InMemoryTaskRepository
from taskboard.api.server import create_app
from taskboard.config import Settings
from taskboard.domain.task import Task, TaskId
from taskboard.services.task_service import TaskService


class FakeIdProvider:
    def __init__(self):
        self.counter = 0
    def new_id(self) -> str:
        self.counter += 1
        return f"id-{self.counter}"


class FakeTaskApi:
    """
    TaskApi bez sieci: ten sam TaskService co serwer, na repo pamięciowym.

    - `calls` zapisuje nazwy wywołań (żeby sprawdzić, że walidacja nie puściła żądania),
    - `error` ustawiony na wyjątek = każde kolejne wywołanie kończy się tym wyjątkiem.
    """
    def __init__(self):
        self.service = TaskService(InMemoryTaskRepository(), FakeIdProvider())
        self.calls: list[str] = []
        self.error: Exception | None = None

    def _call(self, name: str) -> None:
        self.calls.append(name)
        if self.error is not None:
            raise self.error

    def seed(self, title: str, due: date, completed: bool = False, description: str = "desc") -> Task:
        task = self.service.create_task(title, description, due)
        if completed:
            task = self.service.update_task(task.task_id, completed=True)
        return task

    def create(self, title, description, due_date):
        self._call("create")
        return self.service.create_task(title, description, due_date)

    def list(self):
        self._call("list")
        return self.service.list_tasks()

    def update(self, task_id, **fields):
        self._call("update")
        return self.service.update_task(task_id, **fields)

    def delete(self, task_id):
        self._call("delete")
        self.service.remove_task(task_id)


def make_task(task_id: str, title: str = "Test", due: date = date(2024, 6, 1), completed: bool = False) -> Task:
    return Task(
        task_id=TaskId(task_id),
        title=title,
        description="desc",
        due_date=due,
        completed=completed,
    )


@pytest.fixture()
def fake_api() -> FakeTaskApi:
    return FakeTaskApi()


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Ustawienia testowe: SQLite w katalogu tymczasowym, bez czytania env."""
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'tasks.db'}",
        host="127.0.0.1",
        port=8000,
        api_url="http://testserver",
        log_level="INFO",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture()
def client() -> TestClient:
    """API na repozytorium pamięciowym."""
    app = create_app(repository=InMemoryTaskRepository())
    with TestClient(app) as c:
        yield c
