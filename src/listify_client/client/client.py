"""
Listify Client.

This module provides the ListifyClient class, the single entry point for
talking to a Listify backend. Every endpoint method builds a path and an
optional JSON body, hands them to the request primitive, and converts the
parsed JSON into the declared model.

The client keeps no state between calls beyond the HTTP connection pool.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from datetime import date, datetime
from types import TracebackType
from typing import Any, TypeVar, Union
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter

from listify_client.client.namespaces import (
    HistoryAPI,
    PetAPI,
    ProgressAPI,
    SocialAPI,
    TasksAPI,
)
from listify_client.constants import DEFAULT_BASE_URL, DEFAULT_HEADERS, Endpoints
from listify_client.exceptions import ListifyAPIError, ListifyConfigurationError
from listify_client.models import (
    AddToHistoryInput,
    CreateTaskInput,
    HistoryEntry,
    ListifyInput,
    Pet,
    Task,
    UpdateTaskInput,
    UserProgress,
)
from listify_client.settings import ListifySettings, get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="ListifyClient")
InputT = TypeVar("InputT", bound=ListifyInput)

DateToken = Union[str, date]

_TASK_LIST = TypeAdapter(list[Task])
_HISTORY_LIST = TypeAdapter(list[HistoryEntry])
_STRING_LIST = TypeAdapter(list[str])


def _segment(value: Any) -> str:
    """
    Render a path parameter as one percent-encoded segment.

    Dates become YYYY-MM-DD. Reserved characters such as "/", "?" and "#"
    are escaped, so the decoded path holds the value unchanged.
    """
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        value = value.isoformat()
    return quote(str(value), safe="")


def _coerce_input(data: InputT | Mapping[str, Any], model: type[InputT]) -> InputT:
    if isinstance(data, model):
        return data
    return model.model_validate(data)


def _dumps(payload: Any) -> str:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


class ListifyClient:
    """
    Async client for the Listify REST backend.

    Endpoints are available as flat methods (``get_tasks``, ``share_task``...)
    and through namespaces that re-export them (``client.tasks.get_all``,
    ``client.social.share_task``...).

    Usage:
        async with ListifyClient("http://localhost:3000") as client:
            task = await client.tasks.create({"title": "Buy milk"})
            await client.tasks.mark_as_done(task.id)
            pet = await client.pet.add_experience(10)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float | None = None,
        headers: Mapping[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        try:
            url = httpx.URL(base_url)
        except httpx.InvalidURL as e:
            raise ListifyConfigurationError(
                f"Invalid base URL {base_url!r}: {e}",
                details={"base_url": base_url},
            ) from e
        if not url.scheme or not url.host:
            raise ListifyConfigurationError(
                f"Invalid base URL {base_url!r}: scheme and host are required",
                details={"base_url": base_url},
            )
        self._base_url = base_url.rstrip("/")
        self._headers = dict(headers or {})

        if http_client is not None:
            self._http = http_client
            self._owns_http = False
        else:
            client_kwargs: dict[str, Any] = {"transport": transport}
            if timeout is not None:
                client_kwargs["timeout"] = timeout
            self._http = httpx.AsyncClient(**client_kwargs)
            self._owns_http = True

        self._closed = False

        # Namespaces
        self.tasks = TasksAPI(self)
        self.pet = PetAPI(self)
        self.progress = ProgressAPI(self)
        self.history = HistoryAPI(self)
        self.social = SocialAPI(self)

        logger.debug("Listify client created for %s", self._base_url)

    @classmethod
    def from_settings(
        cls: type[T],
        settings: ListifySettings | None = None,
        **kwargs: Any,
    ) -> T:
        """Create a client from environment settings."""
        settings = settings or get_settings()
        kwargs.setdefault("timeout", settings.timeout)
        return cls(settings.base_url, **kwargs)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def close(self) -> None:
        """Close the connection pool, unless it was supplied by the caller."""
        if self._closed:
            return
        if self._owns_http:
            await self._http.aclose()
        self._closed = True
        logger.debug("Listify client closed")

    async def __aenter__(self: T) -> T:
        """Enter async context manager."""
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit async context manager."""
        await self.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise ListifyConfigurationError(
                "Client is closed. Create a new ListifyClient to make requests."
            )

    @property
    def base_url(self) -> str:
        """Base origin prepended to every request path."""
        return self._base_url

    @property
    def is_closed(self) -> bool:
        return self._closed

    def __repr__(self) -> str:
        return f"ListifyClient(base_url={self._base_url!r})"

    # =========================================================================
    # Request Primitive
    # =========================================================================

    async def request(
        self,
        path: str,
        *,
        method: str = "GET",
        body: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """
        Perform one HTTP request against the backend.

        Args:
            path: Path beginning with "/", appended to the base origin
            method: HTTP verb
            body: Pre-serialized JSON text, or None for no body
            headers: Extra headers merged over the JSON content-type default

        Returns:
            The parsed JSON body, or None for a 204 No Content response

        Raises:
            ListifyAPIError: The response status is outside 2xx
            json.JSONDecodeError: A 2xx response body is not valid JSON
            httpx.TransportError: The request could not be delivered
        """
        self._ensure_open()

        request_headers = httpx.Headers(DEFAULT_HEADERS)
        request_headers.update(self._headers)
        if headers:
            request_headers.update(headers)

        logger.debug("%s %s", method, path)
        response = await self._http.request(
            method,
            f"{self._base_url}{path}",
            content=body,
            headers=request_headers,
        )
        logger.debug("%s %s -> %d", method, path, response.status_code)

        if not response.is_success:
            text = response.text
            logger.warning(
                "%s %s failed with status %d", method, path, response.status_code
            )
            raise ListifyAPIError(
                path=path,
                body=text,
                status_code=response.status_code,
                method=method,
            )

        if response.status_code == 204:
            return None
        return response.json()

    # =========================================================================
    # Task Operations
    # =========================================================================

    async def get_tasks(self) -> list[Task]:
        """List all tasks."""
        data = await self.request(Endpoints.TASKS)
        return _TASK_LIST.validate_python(data)

    async def get_task_by_id(self, task_id: int) -> Task:
        """Get a single task by ID."""
        data = await self.request(Endpoints.TASK.format(id=_segment(task_id)))
        return Task.model_validate(data)

    async def create_task(
        self,
        data: CreateTaskInput | Mapping[str, Any],
    ) -> Task:
        """
        Create a task.

        Args:
            data: CreateTaskInput, or a mapping with the same fields in
                either snake_case or camelCase

        Returns:
            The created task, with its server-assigned ID
        """
        payload = _coerce_input(data, CreateTaskInput).to_payload()
        result = await self.request(
            Endpoints.TASKS,
            method="POST",
            body=_dumps(payload),
        )
        return Task.model_validate(result)

    async def update_task(
        self,
        task_id: int,
        data: UpdateTaskInput | Mapping[str, Any],
    ) -> Task:
        """
        Partially update a task.

        Only the fields present in ``data`` are sent; the backend merges them
        into the stored task.
        """
        payload = _coerce_input(data, UpdateTaskInput).to_payload()
        result = await self.request(
            Endpoints.TASK.format(id=_segment(task_id)),
            method="PATCH",
            body=_dumps(payload),
        )
        return Task.model_validate(result)

    async def delete_task(self, task_id: int) -> None:
        """Delete a task."""
        await self.request(
            Endpoints.TASK.format(id=_segment(task_id)),
            method="DELETE",
        )

    async def mark_task_as_done(self, task_id: int) -> Task:
        """Mark a task as done. No body is sent."""
        result = await self.request(
            Endpoints.TASK_DONE.format(id=_segment(task_id)),
            method="PATCH",
        )
        return Task.model_validate(result)

    async def get_tasks_by_category(self, category: str) -> list[Task]:
        """List the tasks of one category."""
        data = await self.request(
            Endpoints.TASKS_BY_CATEGORY.format(category=_segment(category))
        )
        return _TASK_LIST.validate_python(data)

    async def get_tasks_by_date(self, day: DateToken) -> list[Task]:
        """
        List the tasks for one date.

        Args:
            day: Date token such as '2024-01-15', or a date object
        """
        data = await self.request(Endpoints.TASKS_BY_DATE.format(date=_segment(day)))
        return _TASK_LIST.validate_python(data)

    async def get_tasks_in_range(self, start: DateToken, end: DateToken) -> list[Task]:
        """List the tasks between two dates, both inclusive."""
        data = await self.request(
            Endpoints.TASKS_IN_RANGE.format(start=_segment(start), end=_segment(end))
        )
        return _TASK_LIST.validate_python(data)

    # =========================================================================
    # Pet Operations
    # =========================================================================

    async def get_pet(self) -> Pet:
        """Get the pet."""
        data = await self.request(Endpoints.PET)
        return Pet.model_validate(data)

    async def unlock_pet(self) -> Pet:
        """Unlock the pet."""
        data = await self.request(Endpoints.PET_UNLOCK, method="POST")
        return Pet.model_validate(data)

    async def add_experience(self, points: int) -> Pet:
        """
        Give experience points to the pet.

        The backend applies any level-up; the returned pet reflects it.
        """
        data = await self.request(
            Endpoints.PET_EXPERIENCE,
            method="POST",
            body=_dumps({"points": points}),
        )
        return Pet.model_validate(data)

    async def rename_pet(self, name: str) -> Pet:
        """Rename the pet."""
        data = await self.request(
            Endpoints.PET_RENAME,
            method="PATCH",
            body=_dumps({"name": name}),
        )
        return Pet.model_validate(data)

    # =========================================================================
    # User Progress Operations
    # =========================================================================

    async def get_user_progress(self) -> UserProgress:
        """Get the user's experience and level."""
        data = await self.request(Endpoints.USER_PROGRESS)
        return UserProgress.model_validate(data)

    async def add_experience_to_user(self, points: int) -> UserProgress:
        """Give experience points to the user."""
        data = await self.request(
            Endpoints.USER_PROGRESS_EXPERIENCE,
            method="POST",
            body=_dumps({"points": points}),
        )
        return UserProgress.model_validate(data)

    # =========================================================================
    # History Operations
    # =========================================================================

    async def get_history(self) -> list[HistoryEntry]:
        """Get the full history."""
        data = await self.request(Endpoints.HISTORY)
        return _HISTORY_LIST.validate_python(data)

    async def get_completed_history(self) -> list[HistoryEntry]:
        """Get the completed history entries."""
        data = await self.request(Endpoints.HISTORY_COMPLETED)
        return _HISTORY_LIST.validate_python(data)

    async def get_pending_history(self) -> list[HistoryEntry]:
        """Get the pending history entries."""
        data = await self.request(Endpoints.HISTORY_PENDING)
        return _HISTORY_LIST.validate_python(data)

    async def add_to_history(
        self,
        data: AddToHistoryInput | Mapping[str, Any],
    ) -> HistoryEntry:
        """Append an entry to the history."""
        payload = _coerce_input(data, AddToHistoryInput).to_payload()
        result = await self.request(
            Endpoints.HISTORY,
            method="POST",
            body=_dumps(payload),
        )
        return HistoryEntry.model_validate(result)

    # =========================================================================
    # Social Operations
    # =========================================================================

    async def get_shared_tasks(self) -> list[Task]:
        """List the tasks that are currently shared."""
        data = await self.request(Endpoints.SOCIAL)
        return _TASK_LIST.validate_python(data)

    async def get_shared_with(self, task_id: int) -> list[str]:
        """List the users a task is shared with."""
        data = await self.request(
            Endpoints.SOCIAL_SHARED_WITH.format(id=_segment(task_id))
        )
        return _STRING_LIST.validate_python(data)

    async def share_task(self, task_id: int, shared_with: str) -> Task:
        """Share a task with a user, replacing any previous sharing target."""
        data = await self.request(
            Endpoints.SOCIAL_SHARE.format(id=_segment(task_id)),
            method="PATCH",
            body=_dumps({"sharedWith": shared_with}),
        )
        return Task.model_validate(data)
