from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# PUBLIC_INTERFACE
class TaskDescriptionIn(BaseModel):
    """
    Request body for POST /api/todo and PUT /api/todo/{id}.

    Emptiness is not checked here: the Task entity owns that rule and the API
    reports it as a 400 rather than a schema validation error.
    """

    model_config = ConfigDict(
        json_schema_extra={"example": {"task": "Write a test that fails"}}
    )

    task: str = Field(..., description="Description of the task")


# PUBLIC_INTERFACE
class TaskCompletionIn(BaseModel):
    """Request body for PATCH /api/todo/{id}."""

    model_config = ConfigDict(json_schema_extra={"example": {"completed": True}})

    completed: bool = Field(..., description="True marks the task completed")


# PUBLIC_INTERFACE
class TaskCreatedOut(BaseModel):
    id: int = Field(..., description="Identifier assigned to the new task")


# PUBLIC_INTERFACE
class ErrorOut(BaseModel):
    """Body returned for domain errors (400/404)."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"error": "Task description should not be empty"}}
    )

    error: str = Field(..., description="Human readable error message")
