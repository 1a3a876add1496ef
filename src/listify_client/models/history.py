"""
History models.

A history entry records the completion (or pending state) of a task. The
title is a copy taken when the entry was written.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from listify_client.models.base import ListifyInput, ListifyModel


class HistoryEntry(ListifyModel):
    """A history entry as returned by the backend."""

    id: int
    task_id: int = Field(..., description="ID of the task this entry refers to")
    title: str
    completed_at: str = Field(..., description="Completion timestamp as text")
    category: Optional[str] = None


class AddToHistoryInput(ListifyInput):
    """Body of POST /history."""

    task_id: int
    title: str
    completed_at: str = Field(
        ...,
        description="Completion timestamp (e.g., '2024-01-15T10:30:00Z')",
    )
    category: Optional[str] = None
