from __future__ import annotations
from datetime import date
from typing import Any
import logging
import httpx
from pydantic import ValidationError
from taskboard.api.schemas import TaskOut
from taskboard.domain.task import Task, TaskId
from taskboard.domain.errors import TaskApiError, TaskNotFoundError
from taskboard.ports.task_api import TaskApi

logger = logging.getLogger(__name__)

TASKS_PATH = "/api/tasks"

# nazwy pól domeny -> nazwy w JSON
_WIRE_NAMES = {"due_date": "dueDate"}


def _to_task(payload: Any) -> Task:
    try:
        out = TaskOut.model_validate(payload)
    except ValidationError as e:
        raise TaskApiError(f"Niepoprawna odpowiedz serwera: {e}") from e
    return Task(
        task_id=TaskId(out.id),
        title=out.title,
        description=out.description,
        due_date=out.due_date,
        completed=out.completed,
    )


def _encode_value(value: Any) -> Any:
    if isinstance(value, date):
        return value.isoformat()
    return value


class HttpTaskApi(TaskApi):
    """Adapter HTTP (httpx) dla portu TaskApi.

    Klienta można wstrzyknąć (np. `fastapi.testclient.TestClient`, który jest `httpx.Client`);
    w przeciwnym razie tworzony jest `httpx.Client(base_url=...)`.
    """

    def __init__(self, base_url: str | None = None, client: httpx.Client | None = None) -> None:
        if client is None:
            if not base_url:
                raise ValueError("base_url or client is required")
            client = httpx.Client(base_url=base_url)
        self.client = client

    def close(self) -> None:
        self.client.close()

    def _request(self, method: str, *, json: Any = None, task_id: str | None = None) -> Any:
        try:
            response = self.client.request(method, TASKS_PATH, json=json)
        except httpx.HTTPError as e:
            raise TaskApiError(f"{method} {TASKS_PATH}: {e}") from e

        if response.status_code == 404 and task_id is not None:
            raise TaskNotFoundError(task_id)
        if response.is_error:
            raise TaskApiError(self._error_message(response), status_code=response.status_code)
        logger.debug("%s %s -> %s", method, TASKS_PATH, response.status_code)
        try:
            return response.json()
        except ValueError as e:
            raise TaskApiError(f"Niepoprawna odpowiedz serwera: {e}", status_code=response.status_code) from e

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or response.reason_phrase
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return response.reason_phrase

    def create(self, title: str, description: str, due_date: date) -> Task:
        body = {"title": title, "description": description, "dueDate": _encode_value(due_date)}
        return _to_task(self._request("POST", json=body))

    def list(self) -> list[Task]:
        payload = self._request("GET")
        if not isinstance(payload, list):
            raise TaskApiError("Niepoprawna odpowiedz serwera: oczekiwano listy")
        return [_to_task(item) for item in payload]

    def update(self, task_id: TaskId, **fields: Any) -> Task:
        body = {"id": str(task_id)}
        for name, value in fields.items():
            body[_WIRE_NAMES.get(name, name)] = _encode_value(value)
        return _to_task(self._request("PUT", json=body, task_id=task_id))

    def delete(self, task_id: TaskId) -> None:
        self._request("DELETE", json={"id": str(task_id)}, task_id=task_id)
