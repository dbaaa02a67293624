from __future__ import annotations

from typing import Any


class WebdanticError(Exception):
    """Base exception for webdantic errors."""


class BackendError(WebdanticError):
    """Raised when the backend answers with a status outside the 2xx range.

    Attributes
    ----------
    status:
        Numeric HTTP status returned by the backend.
    body:
        Decoded JSON error payload sent along with the status.
    operation:
        Human readable description of what was being attempted.
    """

    def __init__(self, status: int, body: Any, operation: str | None = None) -> None:
        self.status = status
        self.body = body
        self.operation = operation
        action = f" when {operation}" if operation else ""
        super().__init__(f"Received status {status} from server{action}: {body}")


class NotFoundError(WebdanticError):
    """Raised by ``Document.load`` when the backend has no such document."""

    def __init__(self, id: str) -> None:
        self.id = id
        super().__init__(f"Could not find document '{id}'")
