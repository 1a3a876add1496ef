"""Shared constants for the Listify client."""

from __future__ import annotations

DEFAULT_BASE_URL = "http://localhost:3000"

JSON_CONTENT_TYPE = "application/json"

DEFAULT_HEADERS: dict[str, str] = {"Content-Type": JSON_CONTENT_TYPE}


class Endpoints:
    """Path templates of the Listify REST backend."""

    TASKS = "/tasks"
    TASK = "/tasks/{id}"
    TASK_DONE = "/tasks/{id}/done"
    TASKS_BY_CATEGORY = "/tasks/category/{category}"
    TASKS_BY_DATE = "/tasks/date/{date}"
    TASKS_IN_RANGE = "/tasks/range/{start}/{end}"

    PET = "/pet"
    PET_UNLOCK = "/pet/unlock"
    PET_EXPERIENCE = "/pet/experience"
    PET_RENAME = "/pet/rename"

    USER_PROGRESS = "/user-progress"
    USER_PROGRESS_EXPERIENCE = "/user-progress/experience"

    HISTORY = "/history"
    HISTORY_COMPLETED = "/history/completed"
    HISTORY_PENDING = "/history/pending"

    SOCIAL = "/social"
    SOCIAL_SHARED_WITH = "/social/{id}/shared-with"
    SOCIAL_SHARE = "/social/{id}/share"
