from __future__ import annotations
from typing import Iterable
import logging
from taskboard.domain.task import Task
from taskboard.domain.errors import DomainError
from taskboard.ports.task_api import TaskApi

logger = logging.getLogger(__name__)


### COMMENTS
# ==========================================================
# Stan klienta (ui/store.py): posortowana lista zadań.
# ==========================================================
# - Porządek wyświetlania: nieukończone przed ukończonymi, w grupie rosnąco po due_date.
#   Sortowanie stabilne, remisy zostają w kolejności z API.
# - Toggle i delete: wywołanie API, potem pełny refetch (bez optymistycznych zmian).
# - Create i edit: rekord potwierdzony przez serwer wstawiany lokalnie + ponowne sortowanie.
# - Błąd API: log + stan bez zmian; metody zwracają True/False.


def display_order(tasks: Iterable[Task]) -> list[Task]:
    return sorted(tasks, key=lambda t: (t.completed, t.due_date))


class TaskStore:
    def __init__(self, api: TaskApi) -> None:
        self.api = api
        self._tasks: list[Task] = []

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def find(self, position: int) -> Task | None:
        """Zwraca zadanie z pozycji wyświetlania (numeracja od 1) albo None."""
        if 1 <= position <= len(self._tasks):
            return self._tasks[position - 1]
        return None

    def refresh(self) -> bool:
        try:
            fetched = self.api.list()
        except DomainError as e:
            logger.error("Error fetching tasks: %s", e)
            return False
        self._tasks = display_order(fetched)
        return True

    def add(self, task: Task) -> None:
        self._tasks = display_order([*self._tasks, task])

    def replace(self, task: Task) -> None:
        self._tasks = display_order(
            task if t.task_id == task.task_id else t for t in self._tasks
        )

    def toggle_complete(self, task: Task) -> bool:
        try:
            self.api.update(task.task_id, completed=not task.completed)
        except DomainError as e:
            logger.error("Error toggling task completion: %s", e)
            return False
        return self.refresh()

    def delete(self, task: Task) -> bool:
        try:
            self.api.delete(task.task_id)
        except DomainError as e:
            logger.error("Error deleting task: %s", e)
            return False
        return self.refresh()
