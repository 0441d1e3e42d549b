from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from ..handlers import (
    AddTaskHandler,
    GetTaskListHandler,
    MarkTaskCompletedHandler,
    TaskListTransformer,
    UpdateTaskHandler,
)
from ..repositories import TaskRepository
from ..schemas import ErrorOut, TaskCompletionIn, TaskCreatedOut, TaskDescriptionIn

router = APIRouter(
    prefix="/api/todo",
    tags=["todo"],
)


def _get_repo(request: Request) -> TaskRepository:
    """
    Dependency returning the repository built once by create_app().
    """
    return request.app.state.repository


def _get_transformer(request: Request) -> TaskListTransformer:
    return TaskListTransformer(request.app.state.settings.task_list_format)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TaskCreatedOut,
    status_code=status.HTTP_201_CREATED,
    summary="Add Task",
    description="Add a task to the list. The task gets the next sequential id.",
    responses={
        201: {"description": "Task created"},
        400: {"model": ErrorOut, "description": "Empty task description"},
    },
)
def add_task(payload: TaskDescriptionIn, repo: TaskRepository = Depends(_get_repo)) -> TaskCreatedOut:
    task_id = AddTaskHandler(repo).execute(payload.task)
    return TaskCreatedOut(id=task_id)


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[str],
    summary="Get Task List",
    description="Return every task, in insertion order, rendered as '[:check] :id. :description'.",
    responses={200: {"description": "List retrieved successfully"}},
)
def get_task_list(
    repo: TaskRepository = Depends(_get_repo),
    transformer: TaskListTransformer = Depends(_get_transformer),
) -> List[str]:
    return transformer.transform(GetTaskListHandler(repo).execute())


# PUBLIC_INTERFACE
@router.patch(
    "/{task_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Mark Task Completed",
    description="Mark a task completed. A false flag leaves the task unchanged.",
    responses={
        200: {"description": "Task updated"},
        404: {"model": ErrorOut, "description": "Task not found"},
    },
)
def mark_task_completed(
    task_id: int, payload: TaskCompletionIn, repo: TaskRepository = Depends(_get_repo)
) -> Response:
    MarkTaskCompletedHandler(repo).execute(task_id, payload.completed)
    return Response(status_code=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@router.put(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update Task",
    description="Replace the description of an existing task. The completion state is kept.",
    responses={
        204: {"description": "Task updated"},
        400: {"model": ErrorOut, "description": "Empty task description"},
        404: {"model": ErrorOut, "description": "Task not found"},
    },
)
def update_task(
    task_id: int, payload: TaskDescriptionIn, repo: TaskRepository = Depends(_get_repo)
) -> Response:
    UpdateTaskHandler(repo).execute(task_id, payload.task)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
