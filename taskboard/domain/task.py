from typing import NewType
import datetime
from dataclasses import dataclass

TaskId = NewType("TaskId", str)

# pola, które wolno zmieniać przez update (id jest niezmienne)
EDITABLE_FIELDS = frozenset({"title", "description", "due_date", "completed"})


@dataclass(frozen=True)
class Task():
    """
    Model domenowy pojedynczego zadania; niemutowalny; identyfikator nadaje serwis
    (uuid4), `completed` startuje jako False.
    """
    task_id: TaskId
    title: str
    description: str
    due_date: datetime.date
    completed: bool = False



### COMMENTS
# Ten plik definiuje model domenowy `Task` — czysty, niezmienny obiekt opisujący pojedyncze zadanie.
# Nie zawiera logiki biznesowej ani technicznej — tylko dane.
#
# - frozen=True: każda "zmiana" to nowa instancja (dataclasses.replace) i `repo.update`.
# - TaskId (NewType): w runtime to zwykły string, dla typowania osobny typ.
#   Ten sam identyfikator służy do kluczowania listy, aktualizacji i usuwania.
# - due_date to data kalendarzowa (bez godziny); w JSON jako "dueDate" w formacie YYYY-MM-DD.
# - Pola z wartością domyślną (completed) muszą być na końcu.
