from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from threading import RLock
from typing import Dict, List, Optional

from .errors import NotFound
from .models import Task
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class TaskRepository(ABC):
    """Abstract repository contract for task storage backends."""

    @abstractmethod
    def retrieve(self, task_id: int) -> Task:
        """Return the Task stored under task_id. Raise NotFound if absent."""

    @abstractmethod
    def store(self, task: Task) -> None:
        """Insert or overwrite the task at its id."""

    @abstractmethod
    def next_id(self) -> int:
        """Allocate the next sequential task id."""

    @abstractmethod
    def all(self) -> List[Task]:
        """Return every stored task in insertion order."""


class InMemoryTaskRepository(TaskRepository):
    """
    Thread-safe in-memory repository suitable for testing and default runtime.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._items: Dict[int, Task] = {}
        self._next_id = 1

    def next_id(self) -> int:
        with self._lock:
            i = self._next_id
            self._next_id += 1
            return i

    def retrieve(self, task_id: int) -> Task:
        with self._lock:
            item = self._items.get(task_id)
            if item is None:
                raise NotFound(task_id)
            return copy.copy(item)

    def store(self, task: Task) -> None:
        with self._lock:
            # dict assignment keeps the original position of an existing key
            self._items[task.id] = copy.copy(task)
            self._next_id = max(self._next_id, task.id + 1)
        logger.debug("Stored task %s", task.id)

    def all(self) -> List[Task]:
        with self._lock:
            return [copy.copy(t) for t in self._items.values()]


# PUBLIC_INTERFACE
def get_repository(settings: Optional[Settings] = None) -> TaskRepository:
    """
    Factory to return the configured repository based on settings.
    - memory: InMemoryTaskRepository
    - sqlite: SQLiteTaskRepository
    """
    settings = settings or get_settings()
    if settings.persistence_backend == "sqlite":
        from .db import SQLiteTaskRepository

        logger.info("Using sqlite task repository at %s", settings.sqlite_db_path)
        return SQLiteTaskRepository(settings.sqlite_db_path)
    logger.info("Using in-memory task repository")
    return InMemoryTaskRepository()
