"""
Listify Client Package.

Exports the ListifyClient and its endpoint namespaces.
"""

from listify_client.client.client import ListifyClient
from listify_client.client.namespaces import (
    HistoryAPI,
    PetAPI,
    ProgressAPI,
    SocialAPI,
    TasksAPI,
)

__all__ = [
    "ListifyClient",
    "TasksAPI",
    "PetAPI",
    "ProgressAPI",
    "HistoryAPI",
    "SocialAPI",
]
