from typing import Protocol, Any
from datetime import date
from taskboard.domain.task import Task, TaskId


class TaskApi(Protocol):
    """Port klienta Repository API (to, co UI widzi jako zdalny zasób `tasks`).

    Każda metoda to jedno wywołanie sieciowe. Porażka (transport lub status != 2xx)
    kończy się wyjątkiem `DomainError`:
    - `TaskNotFoundError` dla nieistniejącego id,
    - `TaskApiError` dla każdej innej porażki.
    """

    def create(self, title: str, description: str, due_date: date) -> Task:
        """Tworzy zadanie; zwraca rekord z nadanym id i completed=False."""

    def list(self) -> list[Task]:
        """Zwraca wszystkie zadania, bez gwarancji kolejności."""

    def update(self, task_id: TaskId, **fields: Any) -> Task:
        """Częściowa aktualizacja (title/description/due_date/completed); zwraca zaktualizowany rekord."""

    def delete(self, task_id: TaskId) -> None:
        """Usuwa zadanie o podanym id."""
