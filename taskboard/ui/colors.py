from enum import Enum

class TaskColor(Enum):
    RED = "[red]"
    GREEN = "[green]"
    YELLOW = "[yellow]"
    DIM = "[dim]"
    STRIKE_DIM = "[dim strike]"
    RESET = "[/]"

    def __str__(self):
        return self.value
