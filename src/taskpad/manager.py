"""In-memory task collection for taskpad."""

from __future__ import annotations

import logging
from datetime import datetime

from taskpad.models import Priority, Task, TaskFilter, TaskStatistics

logger = logging.getLogger(__name__)


class TaskManager:
    """Owns the task list and hands out task ids.

    Tasks are kept in insertion order. Ids start at 1 and are never reused,
    even after the task holding one is removed.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._tasks)

    def add_task(self, title: str, description: str, priority: Priority) -> Task:
        """Create a task and append it to the list.

        No validation happens here; callers reject empty titles.

        Args:
            title: Task title
            description: Free-form details, may be empty
            priority: Task priority

        Returns:
            The newly created task
        """
        task = Task(
            id=self._next_id,
            title=title,
            description=description,
            priority=priority,
            created_at=datetime.now(),
        )
        self._next_id += 1
        self._tasks.append(task)

        logger.debug("Added task %d (%s)", task.id, task.priority.value)
        return task

    def get_task(self, task_id: int) -> Task | None:
        """Get a task by ID."""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def remove_task(self, task_id: int) -> bool:
        """Remove a task by ID. Returns True if removed."""
        index = self._index_of(task_id)
        if index is None:
            logger.info("Cannot remove task %d: not found", task_id)
            return False

        del self._tasks[index]
        logger.debug("Removed task %d", task_id)
        return True

    def complete_task(self, task_id: int) -> bool:
        """Mark a task as completed. Returns True if the task exists.

        Completing an already completed task is a no-op that still succeeds.
        """
        index = self._index_of(task_id)
        if index is None:
            logger.info("Cannot complete task %d: not found", task_id)
            return False

        self._tasks[index] = self._tasks[index].mark_completed()
        logger.debug("Completed task %d", task_id)
        return True

    def list_tasks(self, task_filter: TaskFilter = TaskFilter.ALL) -> list[Task]:
        """Return tasks matching the filter, in insertion order."""
        return [task for task in self._tasks if task_filter.matches(task)]

    def search_tasks(self, query: str) -> list[Task]:
        """Case-insensitive substring search over titles and descriptions.

        An empty query matches every task.
        """
        needle = query.lower()
        return [
            task
            for task in self._tasks
            if needle in task.title.lower() or needle in task.description.lower()
        ]

    def get_statistics(self) -> TaskStatistics:
        """Compute aggregate counts over all tasks."""
        total = len(self._tasks)
        completed = sum(1 for task in self._tasks if task.is_completed)
        high_priority = sum(1 for task in self._tasks if task.priority is Priority.HIGH)

        return TaskStatistics(
            total_tasks=total,
            completed_tasks=completed,
            pending_tasks=total - completed,
            high_priority_tasks=high_priority,
        )

    def _index_of(self, task_id: int) -> int | None:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None
