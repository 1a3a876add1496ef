"""
Task models.

A task is a user-created to-do item. It may carry a category and a due date
and may be shared with another user.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from listify_client.models.base import ListifyInput, ListifyModel


class Task(ListifyModel):
    """A task as returned by the backend."""

    id: int = Field(..., description="Server-assigned identifier")
    title: str
    description: Optional[str] = None
    category: Optional[str] = None
    due_date: Optional[str] = Field(
        default=None,
        description="Due date as sent by the backend (e.g., '2024-01-31')",
    )
    done: bool
    shared: Optional[bool] = None
    shared_with: Optional[str] = Field(
        default=None,
        description="Identifier of the user the task is shared with",
    )


class CreateTaskInput(ListifyInput):
    """Body of POST /tasks."""

    title: str = Field(
        ...,
        description="Task title (e.g., 'Buy milk')",
    )
    description: Optional[str] = None
    category: Optional[str] = None
    due_date: Optional[str] = None
    shared: Optional[bool] = None
    shared_with: Optional[str] = None


class UpdateTaskInput(ListifyInput):
    """Body of PATCH /tasks/{id}. Every field is optional."""

    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    due_date: Optional[str] = None
    done: Optional[bool] = None
    shared: Optional[bool] = None
    shared_with: Optional[str] = None
