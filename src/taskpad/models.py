"""Data models for taskpad."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

COMPLETED_MARKER = "[COMPLETED]"


class Priority(Enum):
    """Task priority levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``"High"``."""
        return self.value.capitalize()


class TaskFilter(Enum):
    """Named subsets used when listing tasks."""

    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"
    HIGH_PRIORITY = "high_priority"

    @property
    def label(self) -> str:
        """Menu label, e.g. ``"High Priority Tasks"``."""
        return _FILTER_LABELS[self]

    def matches(self, task: Task) -> bool:
        """Check whether a task belongs to this subset."""
        return _FILTER_PREDICATES[self](task)


class Task(BaseModel):
    """A single task.

    Tasks are immutable. Completing a task produces a new copy via
    :meth:`mark_completed`; the manager swaps it into the original slot.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    description: str = ""
    priority: Priority = Priority.MEDIUM
    is_completed: bool = False
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def display_title(self) -> str:
        """Title prefixed with the completion marker once the task is done."""
        if self.is_completed:
            return f"{COMPLETED_MARKER} {self.title}"
        return self.title

    @property
    def status(self) -> str:
        """Status line; completion always wins over priority."""
        if self.is_completed:
            return "Completed"
        return f"{self.priority.label} Priority"

    def mark_completed(self) -> Task:
        """Return a copy of this task flagged as completed."""
        return self.model_copy(update={"is_completed": True})


class TaskStatistics(BaseModel):
    """Snapshot of aggregate task counts."""

    model_config = ConfigDict(frozen=True)

    total_tasks: int = 0
    completed_tasks: int = 0
    pending_tasks: int = 0
    high_priority_tasks: int = 0

    @property
    def completion_percentage(self) -> float:
        """Completed tasks as a percentage of all tasks, 0.0 when empty."""
        if self.total_tasks > 0:
            return self.completed_tasks / self.total_tasks * 100
        return 0.0


_FILTER_LABELS: dict[TaskFilter, str] = {
    TaskFilter.ALL: "All Tasks",
    TaskFilter.COMPLETED: "Completed Tasks",
    TaskFilter.PENDING: "Pending Tasks",
    TaskFilter.HIGH_PRIORITY: "High Priority Tasks",
}

_FILTER_PREDICATES: dict[TaskFilter, Callable[[Task], bool]] = {
    TaskFilter.ALL: lambda task: True,
    TaskFilter.COMPLETED: lambda task: task.is_completed,
    TaskFilter.PENDING: lambda task: not task.is_completed,
    TaskFilter.HIGH_PRIORITY: lambda task: task.priority is Priority.HIGH,
}
