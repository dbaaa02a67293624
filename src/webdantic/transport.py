from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from . import serialization
from .exceptions import BackendError
from .utils import sanitize_host

logger = logging.getLogger(__name__)

AUTH_HEADER = "authentication"

# Default for requests without a payload; ``None`` is sent as JSON null.
NO_BODY: Any = object()


class RequestExecutor:
    """Send single JSON requests to the backend and normalize the outcome.

    Parameters
    ----------
    host:
        Backend base address. Trailing slashes are stripped.
    transport:
        Optional ``httpx.AsyncBaseTransport``; mainly useful for tests that
        plug in ``httpx.MockTransport``.
    timeout:
        Forwarded to ``httpx.AsyncClient``. When omitted the httpx default
        applies.
    headers:
        Extra static headers merged into every request.

    A fresh ``httpx.AsyncClient`` is opened for every request, so the
    executor holds no connection state between operations.
    """

    def __init__(
        self,
        host: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: httpx.Timeout | float | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.host = sanitize_host(host)
        self._transport = transport
        self._timeout = timeout
        self._headers = dict(headers or {})

    def _client(self) -> httpx.AsyncClient:
        options: dict[str, Any] = {"transport": self._transport}
        if self._timeout is not None:
            options["timeout"] = self._timeout
        return httpx.AsyncClient(**options)

    def url(self, path: str) -> str:
        return self.host + path

    async def send(
        self,
        method: str,
        path: str,
        *,
        auth: str | None = None,
        body: Any = NO_BODY,
    ) -> httpx.Response:
        """Perform exactly one request and return the raw response."""
        headers = {**self._headers, AUTH_HEADER: auth or ""}
        content = None
        if body is not NO_BODY:
            headers["Content-Type"] = "application/json"
            content = serialization.encode(body)

        url = self.url(path)
        logger.debug("%s %s", method, url)
        async with self._client() as client:
            response = await client.request(method, url, headers=headers, content=content)
        logger.debug("%s %s -> %s", method, url, response.status_code)
        return response

    async def call(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        auth: str | None = None,
        body: Any = NO_BODY,
        expect_body: bool = True,
    ) -> Any:
        """Send a request and return the decoded JSON payload.

        Raises :class:`BackendError` for any status outside the 2xx range.
        When ``expect_body`` is false the response content is ignored and
        ``None`` is returned.
        """
        response = await self.send(method, path, auth=auth, body=body)
        if not response.is_success:
            raise error_for(response, operation)
        if not expect_body:
            return None
        return serialization.decode(response.content)


def error_for(response: httpx.Response, operation: str) -> BackendError:
    # A non-JSON error body raises the decode error instead.
    body = serialization.decode(response.content)
    return BackendError(response.status_code, body, operation)
