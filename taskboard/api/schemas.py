from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from taskboard.domain.task import Task


# Kształt JSON-a jest wspólny dla serwera i klienta: {id, title, description, dueDate, completed}.
# Identyfikator na drucie to zawsze "id" (w domenie: task_id).


class TaskOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: str
    due_date: date = Field(alias="dueDate")
    completed: bool = False

    @classmethod
    def from_task(cls, task: Task) -> "TaskOut":
        return cls(
            id=str(task.task_id),
            title=task.title,
            description=task.description,
            due_date=task.due_date,
            completed=task.completed,
        )


class TaskCreateIn(BaseModel):
    """Brakujące pola przepuszczamy dalej; obecność sprawdza serwis (400 zamiast 422)."""
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[date] = Field(default=None, alias="dueDate")


class TaskUpdateIn(BaseModel):
    """`id` + dowolny podzbiór pól; liczą się tylko pola faktycznie przysłane (exclude_unset)."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[date] = Field(default=None, alias="dueDate")
    completed: Optional[bool] = None


class TaskDeleteIn(BaseModel):
    id: str
