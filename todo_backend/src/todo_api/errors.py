from __future__ import annotations


class TodoError(Exception):
    """Base class for domain errors surfaced to API clients."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


# PUBLIC_INTERFACE
class InvalidDescription(TodoError):
    """Raised when a task would end up with an empty description."""

    def __init__(self, message: str = "Task description should not be empty") -> None:
        super().__init__(message)


# PUBLIC_INTERFACE
class NotFound(TodoError):
    """Raised by repositories when no task is stored under the requested id."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id
