from typing import Protocol, Optional
from taskboard.domain.task import Task, TaskId


### COMMENTS
# ==========================================================
# Kontrakt repozytorium zadań (ports/task_repository.py).
# ==========================================================
# Ten moduł definiuje interfejs (Protocol) dla warstwy trwałości Tasków.
# - Jest niezależny od technologii (pamięć, baza SQL).
# - Adaptery mają obowiązek mapować błędy technologiczne na błędy domenowe
#  (np. UNIQUE → TaskAlreadyExistsError, brak rekordu → TaskNotFoundError).
# - Repozytorium nie zawiera logiki biznesowej (walidacje są w serwisie).
# - Listowanie NIE gwarantuje kolejności — porządek wyświetlania narzuca klient.


class TaskRepository(Protocol):
    """Interfejs repozytorium do zapisu i odczytu obiektów `Task`.

    Adaptery (implementacje) muszą:
    - zapewnić atomowość operacji zapisu,
    - mapować błędy technologiczne na błędy domenowe,
    - nie wykonywać walidacji biznesowych (te należą do warstwy serwisu).
    """

    def add(self, task: Task) -> None:
        """Dodaje nowy rekord `Task`.

        Wyjątki domenowe:
            TaskAlreadyExistsError: Gdy istnieje wpis o tym samym `task_id`.
        """

    def get(self, task_id: TaskId) -> Optional[Task]:
        """Zwraca zadanie o podanym `task_id`.

        Zwraca:
            Optional[Task]: Obiekt `Task`, jeśli istnieje; w przeciwnym razie `None`.

        Wyjątki domenowe:
            Brak — to odczyt, repozytorium nie rzuca tutaj wyjątków domenowych.
        """

    def update(self, task: Task) -> None:
        """Pełna podmiana istniejącego rekordu o danym `task_id`.

        Wyjątki domenowe:
            TaskNotFoundError: Gdy rekord z `task_id` nie istnieje.

        Uwagi:
            Repozytorium nie „skleja” pól — zapisuje kompletny obiekt.
            Częściowe zmiany scala serwis.
        """

    def remove(self, task_id: TaskId) -> None:
        """Usuwa (hard delete) rekord o podanym `task_id`.

        Wyjątki domenowe:
            TaskNotFoundError: Gdy rekord z `task_id` nie istnieje.

        Uwagi:
            Idempotencja nie jest wymagana — brak rekordu to błąd domenowy.
        """

    def list_all(self) -> list[Task]:
        """Zwraca wszystkie zadania (bez paginacji, bez gwarancji kolejności)."""
