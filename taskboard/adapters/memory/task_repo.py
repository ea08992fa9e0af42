from taskboard.domain.task import Task, TaskId
from taskboard.domain.errors import TaskAlreadyExistsError, TaskNotFoundError
from typing import Iterable, Optional

### COMMENTS
# ==========================================================
# Adapter pamięciowy dla repozytorium zadań (adapters/memory/task_repo.py).
# ==========================================================
# Implementacja portu `TaskRepository` w pamięci.
#
# - Służy do testów i szybkiego uruchomienia serwera (TASKBOARD_DATABASE_URL=memory://).
# - Dane przechowywane są w słowniku `_data: dict[TaskId, Task]`.
# - Zasady zgodne z kontraktem portu:
#     * `add`  → zgłasza `TaskAlreadyExistsError`, jeśli ID istnieje,
#     * `update` → zgłasza `TaskNotFoundError`, jeśli ID nie istnieje,
#     * `remove` → usuwa lub zgłasza `TaskNotFoundError`,
#     * `list_all` → kolejność wstawiania (dict), bez sortowania.


class InMemoryTaskRepository:
    """
        Repozytorium z opcjonalną kolekcją startowych zadań.
        :param initial: Iterable z obiektami Task do wstępnego załadowania.
        Przy duplikatach task_id ostatni wygrywa (to tylko seed, nie API).
    """
    def __init__(self, initial: Iterable[Task] | None = None) -> None:
        self._data: dict[TaskId, Task] = {}
        for t in (initial or []):
            self._data[t.task_id] = t

    def add(self, task: Task) -> None:
        """
            Dodaje nowe zadanie do repozytorium.

            :raises TaskAlreadyExistsError: Jeśli zadanie o tym samym `task_id`
            już istnieje w repozytorium.
        """
        if task.task_id in self._data:
            raise TaskAlreadyExistsError(task.task_id)
        self._data[task.task_id] = task

    def get(self, task_id: TaskId) -> Optional[Task]:
        return self._data.get(task_id)

    def update(self, task: Task) -> None:
        """
            Pełna podmiana istniejącego rekordu o danym `task_id`.

            :raises TaskNotFoundError: Gdy rekord z `task_id` nie istnieje.
        """
        if task.task_id not in self._data:
            raise TaskNotFoundError(task.task_id)
        self._data[task.task_id] = task

    def remove(self, task_id: TaskId) -> None:
        if task_id not in self._data:
            raise TaskNotFoundError(task_id)
        del self._data[task_id]

    def list_all(self) -> list[Task]:
        return list(self._data.values())
