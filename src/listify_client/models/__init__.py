"""
Listify Data Models.

Pydantic models for the JSON records exchanged with the Listify backend.

Models:
    - Task, CreateTaskInput, UpdateTaskInput: to-do items
    - Pet: gamification companion
    - UserProgress: user experience and level
    - HistoryEntry, AddToHistoryInput: task completion history
"""

from listify_client.models.base import ListifyInput, ListifyModel
from listify_client.models.task import Task, CreateTaskInput, UpdateTaskInput
from listify_client.models.pet import Pet
from listify_client.models.progress import UserProgress
from listify_client.models.history import HistoryEntry, AddToHistoryInput

__all__ = [
    "ListifyModel",
    "ListifyInput",
    "Task",
    "CreateTaskInput",
    "UpdateTaskInput",
    "Pet",
    "UserProgress",
    "HistoryEntry",
    "AddToHistoryInput",
]
