from __future__ import annotations

import logging
from typing import Iterable, List

from .models import Task, validate_description
from .repositories import TaskRepository
from .settings import DEFAULT_TASK_LIST_FORMAT

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class AddTaskHandler:
    """Create a task with the next sequential id and store it."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, description: str) -> int:
        """
        Returns:
            The id of the new task.

        Raises:
            InvalidDescription if description is empty.
        """
        # Validate before allocating so a rejected request does not burn an id
        validate_description(description)
        task = Task(self._repository.next_id(), description)
        self._repository.store(task)
        logger.info("Added task %s", task.id)
        return task.id


# PUBLIC_INTERFACE
class UpdateTaskHandler:
    """Replace the description of an existing task."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: int, new_description: str) -> None:
        task = self._repository.retrieve(task_id)
        task.update_description(new_description)
        self._repository.store(task)
        logger.info("Updated description of task %s", task_id)


# PUBLIC_INTERFACE
class MarkTaskCompletedHandler:
    """Mark a task completed; a false flag leaves the task as it is."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: int, completed: bool) -> None:
        task = self._repository.retrieve(task_id)
        if completed:
            task.mark_completed()
        self._repository.store(task)
        logger.info("Task %s completed=%s", task_id, task.completed)


# PUBLIC_INTERFACE
class GetTaskListHandler:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self) -> List[Task]:
        tasks = self._repository.all()
        logger.debug("Listing %d tasks", len(tasks))
        return tasks


# PUBLIC_INTERFACE
class TaskListTransformer:
    """Render tasks as display strings, e.g. '[√] 1. Write a test that fails'."""

    def __init__(self, format: str = DEFAULT_TASK_LIST_FORMAT) -> None:
        self._format = format

    def transform(self, tasks: Iterable[Task]) -> List[str]:
        return [task.represented_as(self._format) for task in tasks]
