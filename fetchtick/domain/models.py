"""
Domain models for fetchtick.

Two renditions of the same record are provided:

- ``TodoPayload`` is a structural shape for ``fetch_json``. It exists for
  static type checkers only; nothing checks it at runtime.
- ``Todo`` is a validated, immutable pydantic model for ``fetch_model``.
"""
from __future__ import annotations

from typing import TypedDict

from pydantic import AliasChoices, BaseModel, Field


class TodoPayload(TypedDict):
    """
    Wire shape of a todo item as served by JSONPlaceholder-style APIs.
    """

    userId: int
    id: int
    title: str
    completed: bool


class Todo(BaseModel):
    """
    A single todo item. Immutable once received.
    """

    owner_id: int = Field(
        ...,
        validation_alias=AliasChoices("userId", "ownerId", "owner_id"),
        serialization_alias="userId",
        description="ID of the user who owns the todo.",
    )
    id: int = Field(..., description="Identifier of the todo item.")
    title: str = Field(..., description="Text content of the todo.")
    completed: bool = Field(..., description="Whether the todo is finished.")

    model_config = {
        "frozen": True,
        "strict": True,
    }


__all__ = ["Todo", "TodoPayload"]
