"""
Endpoint namespaces.

Each namespace groups the client's flat endpoint methods under shorter names.
They hold no state of their own and add no behaviour.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from listify_client.client.client import ListifyClient
    from listify_client.models import (
        AddToHistoryInput,
        CreateTaskInput,
        HistoryEntry,
        Pet,
        Task,
        UpdateTaskInput,
        UserProgress,
    )


class _Namespace:
    def __init__(self, client: ListifyClient) -> None:
        self._client = client


class TasksAPI(_Namespace):
    """Task operations (/tasks)."""

    async def get_all(self) -> list[Task]:
        return await self._client.get_tasks()

    async def get_one(self, task_id: int) -> Task:
        return await self._client.get_task_by_id(task_id)

    async def create(self, data: CreateTaskInput | Mapping[str, Any]) -> Task:
        return await self._client.create_task(data)

    async def update(
        self,
        task_id: int,
        data: UpdateTaskInput | Mapping[str, Any],
    ) -> Task:
        return await self._client.update_task(task_id, data)

    async def delete(self, task_id: int) -> None:
        await self._client.delete_task(task_id)

    async def mark_as_done(self, task_id: int) -> Task:
        return await self._client.mark_task_as_done(task_id)

    async def get_by_category(self, category: str) -> list[Task]:
        return await self._client.get_tasks_by_category(category)

    async def get_by_date(self, day: Union[str, date]) -> list[Task]:
        return await self._client.get_tasks_by_date(day)

    async def get_by_range(
        self,
        start: Union[str, date],
        end: Union[str, date],
    ) -> list[Task]:
        return await self._client.get_tasks_in_range(start, end)


class PetAPI(_Namespace):
    """Pet operations (/pet)."""

    async def get(self) -> Pet:
        return await self._client.get_pet()

    async def unlock(self) -> Pet:
        return await self._client.unlock_pet()

    async def add_experience(self, points: int) -> Pet:
        return await self._client.add_experience(points)

    async def rename(self, name: str) -> Pet:
        return await self._client.rename_pet(name)


class ProgressAPI(_Namespace):
    """User progress operations (/user-progress)."""

    async def get(self) -> UserProgress:
        return await self._client.get_user_progress()

    async def add_experience(self, points: int) -> UserProgress:
        return await self._client.add_experience_to_user(points)


class HistoryAPI(_Namespace):
    """History operations (/history)."""

    async def get_all(self) -> list[HistoryEntry]:
        return await self._client.get_history()

    async def get_completed(self) -> list[HistoryEntry]:
        return await self._client.get_completed_history()

    async def get_pending(self) -> list[HistoryEntry]:
        return await self._client.get_pending_history()

    async def add(self, data: AddToHistoryInput | Mapping[str, Any]) -> HistoryEntry:
        return await self._client.add_to_history(data)


class SocialAPI(_Namespace):
    """Task sharing operations (/social)."""

    async def get_shared_tasks(self) -> list[Task]:
        return await self._client.get_shared_tasks()

    async def get_shared_with(self, task_id: int) -> list[str]:
        return await self._client.get_shared_with(task_id)

    async def share_task(self, task_id: int, shared_with: str) -> Task:
        return await self._client.share_task(task_id, shared_with)
