"""
Listify Client - Typed async HTTP client for the Listify backend.

The Listify backend manages tasks, a gamified pet companion, user progress,
completion history and task sharing. This package wraps its REST endpoints
behind typed async methods.

Architecture:
    Namespaces (tasks, pet, progress, history, social)
         │
         ▼
    ListifyClient endpoint methods (path + JSON body + model conversion)
         │
         ▼
    ListifyClient.request (fetch, check status, parse JSON)
         │
         ▼
    httpx.AsyncClient
"""

__version__ = "0.1.0"
__author__ = "Listify Contributors"

from listify_client.client import ListifyClient
from listify_client.exceptions import (
    ListifyError,
    ListifyAPIError,
    ListifyConfigurationError,
)
from listify_client.models import (
    Task,
    CreateTaskInput,
    UpdateTaskInput,
    Pet,
    UserProgress,
    HistoryEntry,
    AddToHistoryInput,
)
from listify_client.settings import ListifySettings, get_settings, configure_logging

__all__ = [
    "__version__",
    "ListifyClient",
    "ListifyError",
    "ListifyAPIError",
    "ListifyConfigurationError",
    "Task",
    "CreateTaskInput",
    "UpdateTaskInput",
    "Pet",
    "UserProgress",
    "HistoryEntry",
    "AddToHistoryInput",
    "ListifySettings",
    "get_settings",
    "configure_logging",
]
