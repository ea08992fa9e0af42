

### COMMENTS
# ============================================
# Konwencja użycia błędów w projekcie
# ============================================
# - Repozytoria (adaptery):
#     * wykrywają duplikaty lub brak rekordów
#     * mapują błędy techniczne (np. IntegrityError) na DomainError,
#       a awarie połączenia/sterownika na PersistenceError
#
# - Serwisy:
#     * walidują dane użytkownika i rzucają TaskValidationError
#     * jeśli get() zwraca None, a operacja wymaga istniejącego zadania — TaskNotFoundError
#
# - Klient HTTP (adapters/http):
#     * 404 → TaskNotFoundError, każda inna porażka → TaskApiError
#
# - UI (konsola, serwer HTTP):
#     * łapie DomainError (lub konkretne klasy) i wyświetla/loguje komunikat
#     * PersistenceError i wszystko inne to błąd techniczny (loguje stacktrace, 500)


class DomainError(Exception):
    """Bazowa klasa dla błędów domenowych.
    Umożliwia odróżnienie błędów domeny (logika aplikacji) od błędów technicznych
    (np. problemów z bazą danych).
    Nie powinna być rzucana bezpośrednio — używaj klas pochodnych.
    """

class TaskAlreadyExistsError(DomainError):
    """Rzucany, gdy próba dodania nowego zadania kończy się kolizją identyfikatora.
    Zgłaszany przez adaptery implementujące `TaskRepository.add()`.
    """
    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(self.__str__())
    def __str__(self):
        return f"Zadanie o ID {self.task_id} juz istnieje."

class TaskValidationError(DomainError):
    """Rzucany, gdy dane wejściowe nie spełniają reguł dla zadania.
    Przykłady:
    - tytuł, opis lub termin jest pusty,
    - aktualizacja dotyczy nieznanego pola,
    - `completed` nie jest wartością logiczną.
    Zawiera czytelny komunikat (`message`) oraz nazwę pola (`field`),
    którego dotyczy błąd, co ułatwia prezentację w UI.
    """
    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(self.__str__())
    def __str__(self):
        return f"Błąd walidacji pola '{self.field}': {self.message}"


class TaskNotFoundError(DomainError):
    """Rzucany, gdy żądane zadanie nie istnieje w repozytorium.
    Występuje przy aktualizacji, usunięciu lub pobraniu (`update()`, `remove()`, `get_task()`).
    """
    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(self.__str__())
    def __str__(self):
        return f"Zadanie o ID {self.task_id} nie istnieje."


class TaskNotEditableError(DomainError):
    """Ukończonego zadania nie edytujemy przez formularz (można je tylko cofnąć przez Undo)."""
    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(self.__str__())
    def __str__(self):
        return f"Zadanie o ID {self.task_id} jest ukonczone i nie moze byc edytowane."


class TaskApiError(DomainError):
    """Porażka wywołania Repository API po stronie klienta (transport lub status != 2xx)."""
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.__str__())
    def __str__(self):
        if self.status_code is None:
            return f"Blad API: {self.message}"
        return f"Blad API ({self.status_code}): {self.message}"


class PersistenceError(Exception):
    """Błąd techniczny warstwy trwałości (brak/niepoprawny connection string, baza niedostępna).
    Nie dziedziczy po DomainError.
    """
