"""
Listify Client Exceptions.

All errors raised by the client itself derive from ListifyError. Transport
failures (httpx.TransportError) and JSON parse failures (json.JSONDecodeError)
are not wrapped and reach the caller unchanged.

Hierarchy:
    ListifyError
    ├── ListifyAPIError            (non-2xx response)
    └── ListifyConfigurationError  (bad setup or closed client)
"""

from __future__ import annotations

from typing import Any


class ListifyError(Exception):
    """Base exception for the Listify client."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __reduce__(self):
        return (self.__class__, (self.message, self.details))


class ListifyAPIError(ListifyError):
    """
    The backend answered with a status outside 2xx.

    Every failing status collapses into this one type. Inspect status_code
    or the raw body text when finer handling is needed.
    """

    def __init__(
        self,
        path: str,
        body: str,
        status_code: int,
        method: str = "GET",
    ) -> None:
        super().__init__(
            f"Error calling {path}: {body}",
            details={
                "path": path,
                "method": method,
                "status_code": status_code,
            },
        )
        self.path = path
        self.body = body
        self.status_code = status_code
        self.method = method

    def __reduce__(self):
        return (self.__class__, (self.path, self.body, self.status_code, self.method))

    def __repr__(self) -> str:
        return (
            f"ListifyAPIError(method={self.method!r}, path={self.path!r}, "
            f"status_code={self.status_code})"
        )


class ListifyConfigurationError(ListifyError):
    """Invalid client configuration, or an operation on a closed client."""
