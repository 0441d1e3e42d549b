from __future__ import annotations

import logging
import os
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Generator, List

from .errors import NotFound
from .models import Task
from .repositories import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Cols:
    table: str = "tasks"
    id: str = "id"
    description: str = "description"
    completed: str = "completed"
    counter_table: str = "task_counter"
    counter_name: str = "name"
    counter_value: str = "value"


_COLS = _Cols()
_NEXT_ID = "next_id"


class SQLiteTaskRepository(TaskRepository):
    """
    Lightweight SQLite repository implementing the TaskRepository interface.

    Task ids are assigned by the application, so the id column is a plain
    unique integer and the implicit rowid records insertion order. The next id
    lives in a counter table and is only read and advanced inside an immediate
    transaction, so every process sharing the database file draws from the
    same sequence.
    """

    def __init__(self, db_path: str) -> None:
        os.makedirs(os.path.dirname(db_path) or ".", exist_ok=True)
        self._db_path = db_path
        self._init_db()

    @contextmanager
    def _conn(self) -> Generator[sqlite3.Connection, None, None]:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        finally:
            conn.close()

    @contextmanager
    def _transaction(self) -> Generator[sqlite3.Connection, None, None]:
        """Connection holding the database write lock from the first statement."""
        conn = sqlite3.connect(self._db_path, isolation_level=None)
        conn.row_factory = sqlite3.Row
        try:
            conn.execute("BEGIN IMMEDIATE")
            try:
                yield conn
            except BaseException:
                conn.execute("ROLLBACK")
                raise
            conn.execute("COMMIT")
        finally:
            conn.close()

    def _init_db(self) -> None:
        with self._transaction() as conn:
            conn.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {_COLS.table} (
                    {_COLS.id} INTEGER NOT NULL UNIQUE,
                    {_COLS.description} TEXT NOT NULL,
                    {_COLS.completed} INTEGER NOT NULL DEFAULT 0
                )
                """
            )
            conn.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {_COLS.counter_table} (
                    {_COLS.counter_name} TEXT PRIMARY KEY,
                    {_COLS.counter_value} INTEGER NOT NULL
                )
                """
            )
            # Seed from existing rows the first time the counter is created
            conn.execute(
                f"""
                INSERT OR IGNORE INTO {_COLS.counter_table} ({_COLS.counter_name}, {_COLS.counter_value})
                SELECT ?, COALESCE(MAX({_COLS.id}), 0) + 1 FROM {_COLS.table}
                """,
                (_NEXT_ID,),
            )

    def _row_to_task(self, row: sqlite3.Row) -> Task:
        task = Task(int(row[_COLS.id]), str(row[_COLS.description]))
        if row[_COLS.completed]:
            task.mark_completed()
        return task

    def next_id(self) -> int:
        with self._transaction() as conn:
            row = conn.execute(
                f"SELECT {_COLS.counter_value} FROM {_COLS.counter_table} WHERE {_COLS.counter_name} = ?",
                (_NEXT_ID,),
            ).fetchone()
            allocated = int(row[_COLS.counter_value])
            conn.execute(
                f"UPDATE {_COLS.counter_table} SET {_COLS.counter_value} = ? WHERE {_COLS.counter_name} = ?",
                (allocated + 1, _NEXT_ID),
            )
        return allocated

    def retrieve(self, task_id: int) -> Task:
        with self._conn() as conn:
            row = conn.execute(
                f"SELECT * FROM {_COLS.table} WHERE {_COLS.id} = ?", (task_id,)
            ).fetchone()
        if row is None:
            raise NotFound(task_id)
        return self._row_to_task(row)

    def store(self, task: Task) -> None:
        with self._transaction() as conn:
            conn.execute(
                f"""
                INSERT INTO {_COLS.table} ({_COLS.id}, {_COLS.description}, {_COLS.completed})
                VALUES (?, ?, ?)
                ON CONFLICT({_COLS.id}) DO UPDATE SET
                    {_COLS.description} = excluded.{_COLS.description},
                    {_COLS.completed} = excluded.{_COLS.completed}
                """,
                (task.id, task.description, 1 if task.completed else 0),
            )
            conn.execute(
                f"""
                UPDATE {_COLS.counter_table}
                SET {_COLS.counter_value} = MAX({_COLS.counter_value}, ?)
                WHERE {_COLS.counter_name} = ?
                """,
                (task.id + 1, _NEXT_ID),
            )
        logger.debug("Stored task %s in %s", task.id, self._db_path)

    def all(self) -> List[Task]:
        with self._conn() as conn:
            rows = conn.execute(f"SELECT * FROM {_COLS.table} ORDER BY rowid").fetchall()
        return [self._row_to_task(r) for r in rows]
