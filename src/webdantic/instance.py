from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from .database import Database
from .transport import RequestExecutor


class Instance:
    """Entry point bound to a backend address.

    Parameters
    ----------
    host:
        Base address of the backend, e.g. ``"http://localhost:8080"``.
        Trailing slashes are removed.
    transport:
        Optional ``httpx.AsyncBaseTransport`` used for every request.
    timeout:
        Optional httpx timeout; the httpx default applies when omitted.
    headers:
        Extra static headers sent with every request.

    Creating an instance performs no I/O.
    """

    def __init__(
        self,
        host: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: httpx.Timeout | float | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.executor = RequestExecutor(
            host, transport=transport, timeout=timeout, headers=headers
        )

    def __repr__(self) -> str:
        return f"Instance(host={self.host!r})"

    @property
    def host(self) -> str:
        return self.executor.host

    def get_database(self, name: str, *, auth: str | None = None) -> Database:
        return Database(self.executor, name, auth=auth)

    async def add_database(
        self,
        name: str,
        *,
        auth: str | None = None,
        master_password: str | None = None,
    ) -> Database:
        """Provision a database using the master password, then hand it out.

        The returned handle authenticates with ``auth``, not with the master
        password.
        """
        await self.executor.call(
            "POST",
            "/",
            operation="adding a database",
            auth=master_password,
            body={"name": name, "auth": auth or None},
            expect_body=False,
        )
        return Database(self.executor, name, auth=auth)


def get_instance(host: str, **options: Any) -> Instance:
    """Shorthand for :class:`Instance`; keyword options are forwarded."""
    return Instance(host, **options)
